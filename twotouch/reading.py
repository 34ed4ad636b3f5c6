"""Kana readings for mixed Japanese text."""

import pykakasi


class KanaReader:
    """Reduce kanji and katakana to a hiragana reading with pykakasi."""

    def __init__(self):
        """Initialize the reader with pykakasi."""
        self._kks = pykakasi.kakasi()

    def to_hiragana(self, text: str) -> str:
        """Return the hiragana reading of *text*.

        Characters pykakasi has no reading for (Latin letters, symbols) are
        passed through unchanged and left for the encoder to reject.
        """
        return "".join(item["hira"] for item in self._kks.convert(text))
