"""Two-touch codec

This module converts between kana text and the digit strings keyed on a
pager with the two-touch input method, in both directions.
"""

from typing import List, Optional

from .base import BaseDecoder, BaseEncoder, MalformedDigitSequence, TwoTouchError, UnsupportedCharacter
from .symbols import KanaSymbol, ModifierKind, SymbolTable, get_symbol_table
from .encoder import TwoTouchEncoder
from .decoder import TwoTouchDecoder


def get_encoder(table: Optional[SymbolTable] = None) -> TwoTouchEncoder:
    """Get an encoder bound to *table*.

    Args:
        table: Symbol table to consult (the process-wide default if omitted)

    Returns:
        Two-touch encoder instance
    """
    return TwoTouchEncoder(table)


def get_decoder(table: Optional[SymbolTable] = None) -> TwoTouchDecoder:
    """Get a decoder bound to *table*.

    Args:
        table: Symbol table to consult (the process-wide default if omitted)

    Returns:
        Two-touch decoder instance
    """
    return TwoTouchDecoder(table)


def encode(text: str) -> List[str]:
    """Encode *text* with the default table.

    Raises:
        UnsupportedCharacter: If *text* contains a character that cannot be keyed
    """
    return get_encoder().encode(text)


def decode(digits: str) -> str:
    """Decode *digits* with the default table.

    Raises:
        MalformedDigitSequence: If *digits* cannot be parsed
    """
    return get_decoder().decode(digits)


def canonicalize(text: str) -> str:
    """Return the canonical kana form of *text* (what decoding gives back).

    Raises:
        UnsupportedCharacter: If *text* contains a character that cannot be keyed
    """
    return get_encoder().canonicalize(text)


__all__ = [
    'BaseEncoder',
    'BaseDecoder',
    'TwoTouchError',
    'UnsupportedCharacter',
    'MalformedDigitSequence',
    'KanaSymbol',
    'ModifierKind',
    'SymbolTable',
    'TwoTouchEncoder',
    'TwoTouchDecoder',
    'get_symbol_table',
    'get_encoder',
    'get_decoder',
    'encode',
    'decode',
    'canonicalize',
]
