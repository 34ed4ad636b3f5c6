"""Symbol table for the pager two-touch (2タッチ入力) keypad.

Each kana sits on a ten-row by five-column grid.  The first digit keyed is
the row (``1`` = あ row ... ``9`` = ら row, ``0`` = わ row, i.e. row 10) and
the second the column (vowel).  Modified kana are keyed as the base pair
followed by a modifier code: ``04`` (゛) for voicing, ``05`` (゜) for
semi-voicing and ``69`` (the ``-`` key) for a long vowel.  The keypad has no
keys for small kana, so palatalized glides and the geminate っ are sent as
their full-size base.

The :class:`SymbolTable` is the only place this correspondence is defined;
the encoder and the decoder both consult it.
"""

import functools
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from twotouch.codec.base import UnsupportedCharacter
from twotouch.codec.normalizer import fold_character
from twotouch.logger import logger


class ModifierKind(str, Enum):
    none = "none"
    voiced = "voiced"
    semi_voiced = "semi_voiced"
    palatalized = "palatalized"
    geminate = "geminate"
    long_vowel = "long_vowel"
    syllabic_n = "syllabic_n"


@dataclass(frozen=True)
class KanaSymbol:
    """One kana as the keypad sees it.

    ``row``/``column`` are the grid coordinates of the key pair (of the base
    kana for modified symbols).  ``base`` points at the symbol being
    modified; mark components such as ``゛`` carry a modifier but no base and
    no coordinates until they are composed onto a preceding kana.
    """
    char: str
    row: Optional[int] = None
    column: Optional[int] = None
    modifier: ModifierKind = ModifierKind.none
    base: Optional["KanaSymbol"] = None

    @property
    def is_component(self) -> bool:
        """True for a bare ゛/゜ mark that must be composed onto a kana."""
        return self.base is None and self.modifier in (ModifierKind.voiced, ModifierKind.semi_voiced)


# ──────────────────────────────────────────────────────────────────────────────
# TABLE DATA
# ──────────────────────────────────────────────────────────────────────────────

# Row digit -> kana for columns 1..5.  Empty strings are keys with no kana.
GRID: Dict[str, str] = {
    "1": "あいうえお",
    "2": "かきくけこ",
    "3": "さしすせそ",
    "4": "たちつてと",
    "5": "なにぬねの",
    "6": "はひふへほ",
    "7": "まみむめも",
    "8": "や ゆ よ",
    "9": "らりるれろ",
    "0": "わをん",
}

VOICED_FORMS: Dict[str, str] = dict(zip(
    "かきくけこさしすせそたちつてとはひふへほう",
    "がぎぐげござじずぜぞだぢづでどばびぶべぼゔ",
))

SEMI_VOICED_FORMS: Dict[str, str] = dict(zip("はひふへほ", "ぱぴぷぺぽ"))

# Small kana the keypad cannot distinguish from their full-size base.
SMALL_FORMS: Dict[str, Tuple[str, ModifierKind]] = {
    "ぁ": ("あ", ModifierKind.palatalized),
    "ぃ": ("い", ModifierKind.palatalized),
    "ぅ": ("う", ModifierKind.palatalized),
    "ぇ": ("え", ModifierKind.palatalized),
    "ぉ": ("お", ModifierKind.palatalized),
    "ゃ": ("や", ModifierKind.palatalized),
    "ゅ": ("ゆ", ModifierKind.palatalized),
    "ょ": ("よ", ModifierKind.palatalized),
    "ゎ": ("わ", ModifierKind.palatalized),
    "っ": ("つ", ModifierKind.geminate),
}

VOICED_MARK = "゛"
SEMI_VOICED_MARK = "゜"
LONG_VOWEL_MARK = "ー"

# Small-form modifiers; with an empty code they fold onto the full-size base.
SMALL_MODIFIERS = frozenset({ModifierKind.palatalized, ModifierKind.geminate})

# Kinds whose code is fixed by the grid itself.
FIXED_MODIFIERS = frozenset({ModifierKind.none, ModifierKind.syllabic_n})

MODIFIER_CODES: Dict[ModifierKind, Tuple[str, ...]] = {
    ModifierKind.none: ("",),
    ModifierKind.voiced: ("04",),
    ModifierKind.semi_voiced: ("05",),
    ModifierKind.palatalized: ("",),
    ModifierKind.geminate: ("",),
    ModifierKind.long_vowel: ("69",),
    ModifierKind.syllabic_n: ("",),
}


def _row_number(row_digit: str) -> int:
    return 10 if row_digit == "0" else int(row_digit)


class SymbolTable:
    """Immutable bidirectional mapping between kana and keypad digits.

    Args:
        modifier_codes: Accepted codes per modifier kind, canonical first.
            Kinds left out keep the default pager codes.

    Raises:
        ValueError: If a modifier code is not a digit string of even length,
            is shared by two kinds, or starts with a pair assigned to a kana.
    """

    def __init__(self, modifier_codes: Optional[Mapping[ModifierKind, Sequence[str]]] = None):
        self._symbols: Dict[str, KanaSymbol] = {}
        self._pairs: Dict[str, KanaSymbol] = {}
        self._base_codes: Dict[str, Tuple[str, ...]] = {}
        self._voiced: Dict[str, KanaSymbol] = {}
        self._semi_voiced: Dict[str, KanaSymbol] = {}
        self._small: Dict[Tuple[str, ModifierKind], KanaSymbol] = {}

        self._build_grid()
        self._build_modified_forms()
        self._build_marks()

        self._modifier_codes: Dict[ModifierKind, Tuple[str, ...]] = dict(MODIFIER_CODES)
        for kind, codes in (modifier_codes or {}).items():
            kind = ModifierKind(kind)
            if kind in FIXED_MODIFIERS:
                raise ValueError(f"Modifier '{kind.value}' has no code of its own")
            self._modifier_codes[kind] = tuple(dict.fromkeys(codes))
        self._validate_modifier_codes()

        # Decode lookup: every accepted non-empty code, longest first.
        self._decode_modifiers: List[Tuple[str, ModifierKind]] = sorted(
            ((code, kind) for kind, codes in self._modifier_codes.items() for code in codes if code),
            key=lambda item: -len(item[0]),
        )

        self._encoding_table: Dict[str, Tuple[str, ...]] = {
            char: self._compute_codes(symbol) for char, symbol in self._symbols.items()
        }
        logger.debug(
            f"Built two-touch symbol table: {len(self._symbols)} symbols, "
            f"{len(self._pairs)} key pairs, {len(self._decode_modifiers)} modifier codes"
        )

    # ------------------------------------------------------------------
    # construction
    # ------------------------------------------------------------------

    def _build_grid(self) -> None:
        for row_digit, kana in GRID.items():
            for col_index, char in enumerate(kana, start=1):
                if char == " ":
                    continue
                modifier = ModifierKind.syllabic_n if char == "ん" else ModifierKind.none
                symbol = KanaSymbol(char, _row_number(row_digit), col_index, modifier)
                pair = f"{row_digit}{col_index}"
                self._symbols[char] = symbol
                self._pairs[pair] = symbol
                self._base_codes[char] = (pair,)

    def _build_modified_forms(self) -> None:
        for plain, voiced in VOICED_FORMS.items():
            base = self._symbols[plain]
            symbol = KanaSymbol(voiced, base.row, base.column, ModifierKind.voiced, base)
            self._symbols[voiced] = symbol
            self._voiced[plain] = symbol

        for plain, semi_voiced in SEMI_VOICED_FORMS.items():
            base = self._symbols[plain]
            symbol = KanaSymbol(semi_voiced, base.row, base.column, ModifierKind.semi_voiced, base)
            self._symbols[semi_voiced] = symbol
            self._semi_voiced[plain] = symbol

        for small, (plain, kind) in SMALL_FORMS.items():
            base = self._symbols[plain]
            symbol = KanaSymbol(small, base.row, base.column, kind, base)
            self._symbols[small] = symbol
            self._small[(plain, kind)] = symbol

    def _build_marks(self) -> None:
        self._symbols[VOICED_MARK] = KanaSymbol(VOICED_MARK, modifier=ModifierKind.voiced)
        self._symbols[SEMI_VOICED_MARK] = KanaSymbol(SEMI_VOICED_MARK, modifier=ModifierKind.semi_voiced)
        self._symbols[LONG_VOWEL_MARK] = KanaSymbol(LONG_VOWEL_MARK, modifier=ModifierKind.long_vowel)

    def _validate_modifier_codes(self) -> None:
        owner: Dict[str, ModifierKind] = {}
        for kind, codes in self._modifier_codes.items():
            if not codes:
                raise ValueError(f"Modifier '{kind.value}' needs at least one code")
            if "" in codes and len(codes) > 1:
                raise ValueError(f"Modifier '{kind.value}' cannot mix an empty code with keyed codes")
            if codes == ("",) and kind not in FIXED_MODIFIERS | SMALL_MODIFIERS:
                raise ValueError(f"Modifier '{kind.value}' needs a keyed code")
            for code in codes:
                if not code:
                    continue
                if not code.isascii() or not code.isdigit() or len(code) % 2:
                    raise ValueError(f"Modifier code '{code}' for '{kind.value}' must be an even number of digits")
                if code[:2] in self._pairs:
                    raise ValueError(
                        f"Modifier code '{code}' for '{kind.value}' starts with the key pair "
                        f"of '{self._pairs[code[:2]].char}'"
                    )
                if code in owner and owner[code] is not kind:
                    raise ValueError(
                        f"Modifier code '{code}' is shared by '{owner[code].value}' and '{kind.value}'"
                    )
                owner[code] = kind

        # A code that is a proper prefix of another could also be the start of
        # that code; this covers codes equal to two accepted codes in a row.
        for code, kind in owner.items():
            for other, other_kind in owner.items():
                if other != code and other.startswith(code):
                    raise ValueError(
                        f"Modifier code '{code}' for '{kind.value}' is a prefix of "
                        f"'{other}' for '{other_kind.value}'"
                    )

    def _compute_codes(self, symbol: KanaSymbol) -> Tuple[str, ...]:
        if symbol.is_component:
            # composed onto the preceding kana by the encoder, never keyed alone
            return ()
        modifier_codes = self._modifier_codes[symbol.modifier]
        if symbol.row is None:
            return modifier_codes
        codes = (base + code for base in self.base_codes_for(symbol) for code in modifier_codes)
        return tuple(dict.fromkeys(codes))

    # ------------------------------------------------------------------
    # lookups
    # ------------------------------------------------------------------

    def lookup_symbol(self, kana_char: str, position: Optional[int] = None) -> KanaSymbol:
        """Classify one character of input text.

        Katakana, half-width katakana and combining marks are folded first, so
        ``カ`` classifies as the symbol for ``か``.

        Raises:
            UnsupportedCharacter: If the character is not a kana the keypad
                can express (kanji, Latin letters, punctuation, ...).
        """
        symbol = self._symbols.get(fold_character(kana_char)) if len(kana_char) == 1 else None
        if symbol is None:
            raise UnsupportedCharacter(kana_char, position)
        return symbol

    def base_codes_for(self, symbol: KanaSymbol) -> Tuple[str, ...]:
        """Key pairs of the unmodified kana underneath *symbol*."""
        while symbol.base is not None:
            symbol = symbol.base
        return self._base_codes.get(symbol.char, ())

    def modifier_code_for(self, kind: ModifierKind) -> str:
        """The canonical code for *kind*; empty if the keypad has no key for it."""
        return self._modifier_codes[kind][0]

    def modifier_codes_for(self, kind: ModifierKind) -> Tuple[str, ...]:
        """Every accepted code for *kind*, canonical first."""
        return self._modifier_codes[kind]

    def codes_for(self, symbol: KanaSymbol) -> Tuple[str, ...]:
        """Every digit sequence that represents *symbol*, in enumeration order."""
        codes = self._encoding_table.get(symbol.char)
        if codes is None:
            codes = self._compute_codes(symbol)
        return codes

    def canonical_char(self, symbol: KanaSymbol) -> str:
        """The character *symbol* decodes back to.

        Small kana whose modifier has no keyed code come back full-size.
        """
        if symbol.modifier in SMALL_MODIFIERS and symbol.base is not None and not self.modifier_code_for(symbol.modifier):
            return symbol.base.char
        return symbol.char

    def symbol_for_pair(self, pair: str) -> Optional[KanaSymbol]:
        """The unmodified kana keyed by *pair*, or ``None``."""
        return self._pairs.get(pair)

    def match_modifier(self, digits: str, offset: int) -> Optional[Tuple[ModifierKind, str]]:
        """Find the longest accepted modifier code starting at *offset*."""
        for code, kind in self._decode_modifiers:
            if digits.startswith(code, offset):
                return kind, code
        return None

    def apply_modifier(self, symbol: KanaSymbol, kind: ModifierKind) -> Optional[KanaSymbol]:
        """Return *symbol* with modifier *kind* applied, or ``None`` if it cannot be.

        Voicing and semi-voicing replace an unmodified kana with its modified
        form, and so do keyed small-form modifiers.  A long vowel returns a
        ``ー`` symbol whose base is the syllable it lengthens; the syllable
        itself is kept by the caller.
        """
        if symbol.is_component:
            return None
        if kind is ModifierKind.long_vowel:
            return KanaSymbol(LONG_VOWEL_MARK, modifier=ModifierKind.long_vowel, base=symbol)
        if symbol.modifier is not ModifierKind.none:
            return None
        if kind is ModifierKind.voiced:
            return self._voiced.get(symbol.char)
        if kind is ModifierKind.semi_voiced:
            return self._semi_voiced.get(symbol.char)
        if kind in SMALL_MODIFIERS:
            return self._small.get((symbol.char, kind))
        return None

    def symbols(self) -> Iterable[KanaSymbol]:
        """All symbols in table order (grid, modified forms, marks)."""
        return self._symbols.values()

    def __contains__(self, kana_char: str) -> bool:
        return len(kana_char) == 1 and fold_character(kana_char) in self._symbols


@functools.lru_cache(maxsize=None)
def get_symbol_table() -> SymbolTable:
    """The process-wide default table, built on first use."""
    return SymbolTable()
