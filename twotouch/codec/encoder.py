"""Kana to two-touch digit string encoding."""

import itertools
from typing import Iterator, List, Optional

from twotouch.codec.base import BaseEncoder, UnsupportedCharacter
from twotouch.codec.symbols import KanaSymbol, ModifierKind, SymbolTable, get_symbol_table


class TwoTouchEncoder(BaseEncoder):
    """Encode kana text into every digit string the symbol table permits."""

    def __init__(self, table: Optional[SymbolTable] = None):
        self.table = table or get_symbol_table()

    def decompose(self, text: str) -> List[KanaSymbol]:
        """Split *text* into kana symbols, one per keyed syllable.

        A spacing or combining ゛/゜ is composed onto the kana before it, so
        ``こ゛`` becomes the single symbol ``ご``.

        Raises:
            UnsupportedCharacter: For the first character (lowest position)
                that cannot be keyed.
        """
        symbols: List[KanaSymbol] = []
        for position, ch in enumerate(text):
            symbol = self.table.lookup_symbol(ch, position)

            if symbol.is_component:
                composed = self.table.apply_modifier(symbols[-1], symbol.modifier) if symbols else None
                if composed is None:
                    reason = f"{symbol.modifier.value} mark has no kana to attach to"
                    raise UnsupportedCharacter(ch, position, reason)
                symbols[-1] = composed
                continue

            if symbol.modifier is ModifierKind.long_vowel and not symbols:
                raise UnsupportedCharacter(ch, position, "long-vowel mark has no syllable to lengthen")

            symbols.append(symbol)
        return symbols

    def iter_encode(self, text: str) -> Iterator[str]:
        """Yield each distinct digit string for *text* exactly once.

        Order is lexicographic over symbol positions: the leftmost symbol's
        alternatives vary slowest, each in symbol-table order.  Empty text
        yields a single empty string.
        """
        choices = [self.table.codes_for(symbol) for symbol in self.decompose(text)]
        seen = set()
        for combination in itertools.product(*choices):
            digits = "".join(combination)
            if digits in seen:
                continue
            seen.add(digits)
            yield digits

    def canonicalize(self, text: str) -> str:
        """Return the text that decoding any encoding of *text* produces."""
        return "".join(self.table.canonical_char(symbol) for symbol in self.decompose(text))
