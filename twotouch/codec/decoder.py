"""Two-touch digit string to kana decoding."""

import re
from typing import List, Optional

from twotouch.codec.base import BaseDecoder, MalformedDigitSequence
from twotouch.codec.normalizer import fold_digits
from twotouch.codec.symbols import ModifierKind, SymbolTable, get_symbol_table

_NON_DIGIT_RE = re.compile(r"[^0-9]")


class TwoTouchDecoder(BaseDecoder):
    """Decode a digit string into the single canonical kana string it denotes."""

    def __init__(self, table: Optional[SymbolTable] = None):
        self.table = table or get_symbol_table()

    def decode(self, digits: str) -> str:
        """Decode *digits* left to right.

        Each step reads one key pair and then greedily consumes any modifier
        codes that follow it.  Modifier codes never begin with a kana's key
        pair, so no backtracking is needed.

        Raises:
            MalformedDigitSequence: With the offset of the first digit that
                cannot be parsed.
        """
        digits = fold_digits(digits)
        bad = _NON_DIGIT_RE.search(digits)
        if bad:
            raise MalformedDigitSequence(digits, bad.start(), f"'{bad.group(0)}' is not a digit")

        chars: List[str] = []
        offset = 0
        while offset < len(digits):
            pair = digits[offset:offset + 2]
            if len(pair) < 2:
                raise MalformedDigitSequence(digits, offset, "incomplete key pair")

            symbol = self.table.symbol_for_pair(pair)
            if symbol is None:
                if self.table.match_modifier(digits, offset):
                    raise MalformedDigitSequence(digits, offset, f"modifier code '{pair}' has no preceding kana")
                raise MalformedDigitSequence(digits, offset, f"key pair '{pair}' is not a kana")
            offset += 2

            while True:
                match = self.table.match_modifier(digits, offset)
                if match is None:
                    break
                kind, code = match
                modified = self.table.apply_modifier(symbol, kind)
                if modified is None:
                    raise MalformedDigitSequence(
                        digits, offset, f"{kind.value} code '{code}' cannot follow '{symbol.char}'"
                    )
                if kind is ModifierKind.long_vowel:
                    chars.append(self.table.canonical_char(symbol))
                symbol = modified
                offset += len(code)

            chars.append(self.table.canonical_char(symbol))

        return "".join(chars)
