"""twotouch: pager two-touch (2タッチ入力) keystroke codec for kana text."""

from twotouch.codec import (
    MalformedDigitSequence,
    TwoTouchError,
    UnsupportedCharacter,
    canonicalize,
    decode,
    encode,
)

__version__ = "0.1.0"

# Environment variables read by the command line (see convert.py)
LOG_LEVEL_ENV = "TWOTOUCH_LOG_LEVEL"
ABBREVIATIONS_ENV = "TWOTOUCH_ABBREVIATIONS"
