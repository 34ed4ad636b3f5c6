"""Call boundary for programs that consume the codec.

The two entry points never raise codec errors.  They return a result object
that carries either the output or the error, and that the caller releases
when done, preferably with a ``with`` block::

    with convert_to_two_touch_string("ごくろうさん") as result:
        for digits in result.data:
            print(digits)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from twotouch.codec import TwoTouchError, UnsupportedCharacter, MalformedDigitSequence, decode, encode
from twotouch.logger import logger


class _Releasable(ABC):
    """Explicit release contract shared by both result types."""

    released: bool = False

    def release(self) -> None:
        """Drop the result's payload; it cannot be read afterwards."""
        self._clear()
        self.released = True

    def _check_released(self) -> None:
        if self.released:
            raise RuntimeError(f"{type(self).__name__} has already been released")

    @abstractmethod
    def _clear(self) -> None:
        """Drop the payload held by the concrete result."""
        pass

    def __enter__(self):
        self._check_released()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


@dataclass
class TwoTouchStringResult(_Releasable):
    """Digit strings for one text: a count plus addressable values."""
    _data: Tuple[str, ...] = ()
    error: Optional[TwoTouchError] = None
    released: bool = field(default=False, init=False)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def data(self) -> Tuple[str, ...]:
        self._check_released()
        return self._data

    @property
    def len(self) -> int:
        return len(self.data)

    def __len__(self) -> int:
        return self.len

    def __getitem__(self, index: int) -> str:
        return self.data[index]

    def _clear(self) -> None:
        self._data = ()


@dataclass
class TwoTouchTextResult(_Releasable):
    """The kana text for one digit string."""
    _value: Optional[str] = None
    error: Optional[TwoTouchError] = None
    released: bool = field(default=False, init=False)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def value(self) -> Optional[str]:
        self._check_released()
        return self._value

    def _clear(self) -> None:
        self._value = None


def _as_text(value: Union[str, bytes]) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value


def _char_index(value: bytes, error: UnicodeDecodeError) -> int:
    """Character index of the first undecodable byte, matching the str path."""
    return len(value[:error.start].decode("utf-8"))


def convert_to_two_touch_string(text: Union[str, bytes]) -> TwoTouchStringResult:
    """Encode *text* (``str`` or UTF-8 ``bytes``) into every two-touch digit string."""
    try:
        results = encode(_as_text(text))
    except UnicodeDecodeError as e:
        error = UnsupportedCharacter(repr(text[e.start:e.end]), _char_index(text, e), "input is not valid UTF-8")
        logger.warning(f"⚠️ Encode failed: {error}")
        return TwoTouchStringResult(error=error)
    except TwoTouchError as e:
        logger.warning(f"⚠️ Encode failed: {e}")
        return TwoTouchStringResult(error=e)

    logger.debug(f"Encoded {text!r} into {len(results)} digit string(s)")
    return TwoTouchStringResult(tuple(results))


def convert_from_two_touch_string(digits: Union[str, bytes]) -> TwoTouchTextResult:
    """Decode *digits* (``str`` or ASCII ``bytes``) into kana text."""
    try:
        value = decode(_as_text(digits))
    except UnicodeDecodeError as e:
        error = MalformedDigitSequence(repr(digits), _char_index(digits, e), "input is not valid UTF-8")
        logger.warning(f"⚠️ Decode failed: {error}")
        return TwoTouchTextResult(error=error)
    except TwoTouchError as e:
        logger.warning(f"⚠️ Decode failed: {e}")
        return TwoTouchTextResult(error=e)

    logger.debug(f"Decoded {digits!r} into {value!r}")
    return TwoTouchTextResult(value)
