"""Tests for kana to two-touch encoding."""
import types

import pytest
from twotouch.codec import TwoTouchEncoder, UnsupportedCharacter, encode


class TestEncode:
    """Test encoding with the default table."""

    @pytest.mark.parametrize("text, expected", [
        ("こんにちは", ["2503524261"]),
        ("ごくろうさん", ["25042395133103"]),
        ("やきにく", ["81225223"]),
        ("ぱぴぷぺぽ", ["61056205630564056505"]),
        ("がっこう", ["2104432513"]),
        ("らーめん", ["91697403"]),
        ("きゃ", ["2281"]),
        ("わをん", ["010203"]),
    ])
    def test_known_words(self, encoder, text, expected):
        """Test encodings of known words."""
        assert encoder.encode(text) == expected

    def test_empty_input(self, encoder):
        """Test that empty text yields exactly one empty digit string."""
        assert encoder.encode("") == [""]

    def test_katakana_matches_hiragana(self, encoder):
        """Test that katakana encodes like hiragana."""
        assert encoder.encode("ゴクロウサン") == encoder.encode("ごくろうさん")
        assert encoder.encode("ｺﾞｸﾛｳｻﾝ") == encoder.encode("ごくろうさん")

    @pytest.mark.parametrize("text", ["こ゛", "コ゛", "こ\u3099", "ｺﾞ"])
    def test_marks_compose_onto_preceding_kana(self, encoder, text):
        """Test that separate voicing marks compose with the kana before them."""
        assert encoder.encode(text) == ["2504"]

    def test_semi_voiced_mark(self, encoder):
        """Test that ゜ composes like ゛."""
        assert encoder.encode("は゜") == ["6105"]
        assert encoder.encode("ﾊﾟ") == ["6105"]

    def test_module_level_encode(self):
        """Test the default-table convenience function."""
        assert encode("ごくろうさん") == ["25042395133103"]

    def test_determinism(self, encoder, canonical_words):
        """Test that repeated calls give identical, identically ordered output."""
        for word in canonical_words:
            assert encoder.encode(word) == encoder.encode(word)

    def test_iter_encode_is_lazy(self, encoder):
        """Test that iter_encode returns a generator of the same values."""
        results = encoder.iter_encode("か")
        assert isinstance(results, types.GeneratorType)
        assert next(results) == "21"


class TestEncodeErrors:
    """Test rejection of text the keypad cannot express."""

    def test_kanji(self, encoder):
        """Test that kanji is rejected at its position."""
        with pytest.raises(UnsupportedCharacter) as exc_info:
            encoder.encode("漢字")
        assert exc_info.value.character == "漢"
        assert exc_info.value.position == 0

    def test_first_offending_position_is_reported(self, encoder):
        """Test that the earliest bad character is the one cited."""
        with pytest.raises(UnsupportedCharacter) as exc_info:
            encoder.encode("ごくろう漢字A")
        assert exc_info.value.character == "漢"
        assert exc_info.value.position == 4

    @pytest.mark.parametrize("text, position", [
        ("かA", 1),
        ("か!", 1),
        ("か き", 1),
        ("ご苦労さん", 1),
    ])
    def test_non_kana(self, encoder, text, position):
        """Test Latin letters, punctuation, spaces and mixed text."""
        with pytest.raises(UnsupportedCharacter) as exc_info:
            encoder.encode(text)
        assert exc_info.value.position == position

    @pytest.mark.parametrize("text, position", [
        ("゛か", 0),
        ("あ゛", 1),
        ("が゛", 1),
        ("か゜", 1),
        ("かー゛", 2),
    ])
    def test_dangling_marks(self, encoder, text, position):
        """Test that a mark with nothing composable before it is rejected."""
        with pytest.raises(UnsupportedCharacter) as exc_info:
            encoder.encode(text)
        assert exc_info.value.position == position
        assert "mark" in exc_info.value.reason

    def test_leading_long_vowel(self, encoder):
        """Test that ー needs a syllable before it."""
        with pytest.raises(UnsupportedCharacter) as exc_info:
            encoder.encode("ーか")
        assert exc_info.value.position == 0

    def test_no_partial_result(self, encoder):
        """Test that a failing encode returns nothing at all."""
        results = None
        with pytest.raises(UnsupportedCharacter):
            results = encoder.encode("かきく漢")
        assert results is None


class TestEncodeVariants:
    """Test enumeration when the table accepts alternate modifier codes."""

    def test_single_symbol_variants(self, variant_table):
        """Test that each accepted code yields its own digit string, canonical first."""
        encoder = TwoTouchEncoder(variant_table)
        assert encoder.encode("ぱ") == ["6105", "6180"]
        assert encoder.encode("が") == ["2104", "2189"]

    def test_cartesian_order(self, variant_table):
        """Test that the leftmost symbol varies slowest."""
        encoder = TwoTouchEncoder(variant_table)
        assert encoder.encode("がぱ") == [
            "21046105",
            "21046180",
            "21896105",
            "21896180",
        ]

    def test_singletons_do_not_branch(self, variant_table):
        """Test that plain kana contribute no alternatives."""
        encoder = TwoTouchEncoder(variant_table)
        assert encoder.encode("かがか") == ["21210421", "21218921"]

    def test_no_duplicates(self, variant_table):
        """Test that every result is distinct."""
        encoder = TwoTouchEncoder(variant_table)
        results = encoder.encode("ばびぶべぼ")
        assert len(results) == 2 ** 5
        assert len(set(results)) == len(results)


class TestCanonicalize:
    """Test canonical text."""

    @pytest.mark.parametrize("text, expected", [
        ("ガッコウ", "がつこう"),
        ("こ゛ー", "ごー"),
        ("きゃ", "きや"),
        ("ｳﾞｧｲｵﾘﾝ", "ゔあいおりん"),
        ("ごくろうさん", "ごくろうさん"),
        ("", ""),
    ])
    def test_canonicalize(self, encoder, text, expected):
        """Test folding onto canonical hiragana."""
        assert encoder.canonicalize(text) == expected
