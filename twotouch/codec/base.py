from abc import ABC, abstractmethod
from typing import Iterator, List, Optional


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class TwoTouchError(Exception):
    """Base class for every error raised by the two-touch codec."""


class UnsupportedCharacter(TwoTouchError, ValueError):
    """Raised when text contains a character the keypad cannot express."""
    def __init__(self, character: str, position: Optional[int], reason: str = "not a supported kana"):
        where = f" at position {position}" if position is not None else ""
        super().__init__(
            f"Unsupported character '{character}'{where}: {reason}"
        )
        self.character = character
        self.position = position
        self.reason = reason


class MalformedDigitSequence(TwoTouchError, ValueError):
    """Raised when a digit string cannot be split into pairs and modifiers."""
    def __init__(self, digits: str, offset: int, reason: str):
        super().__init__(
            f"Malformed digit sequence '{digits}' at offset {offset}: {reason}"
        )
        self.digits = digits
        self.offset = offset
        self.reason = reason


class BaseEncoder(ABC):
    """Abstract base class for text to keystroke encoders."""

    @abstractmethod
    def iter_encode(self, text: str) -> Iterator[str]:
        """Yield every digit string that represents *text*."""
        pass

    def encode(self, text: str) -> List[str]:
        """Return every digit string for *text* as a list.

        The generator is drained before anything is returned, so a failure
        never leaves the caller with a partial result.
        """
        return list(self.iter_encode(text))


class BaseDecoder(ABC):
    """Abstract base class for keystroke to text decoders."""

    @abstractmethod
    def decode(self, digits: str) -> str:
        """Decode *digits* into text."""
        pass
