"""Tests for codec base classes."""
import pytest
from twotouch.codec.base import BaseDecoder, BaseEncoder


class TestBaseEncoder:
    """Test BaseEncoder abstract class."""

    def test_iter_encode_not_implemented(self):
        """Test that BaseEncoder cannot be instantiated."""
        with pytest.raises(TypeError):
            BaseEncoder()

    def test_concrete_implementation(self):
        """Test that encode drains iter_encode into a list."""
        class ConcreteEncoder(BaseEncoder):
            def iter_encode(self, text: str):
                yield text
                yield text + text

        encoder = ConcreteEncoder()
        assert encoder.encode("1") == ["1", "11"]

    def test_failure_leaves_no_partial_result(self):
        """Test that an error raised mid-iteration propagates from encode."""
        class FailingEncoder(BaseEncoder):
            def iter_encode(self, text: str):
                yield "21"
                raise ValueError("stop")

        with pytest.raises(ValueError):
            FailingEncoder().encode("か")


class TestBaseDecoder:
    """Test BaseDecoder abstract class."""

    def test_decode_not_implemented(self):
        """Test that BaseDecoder cannot be instantiated."""
        with pytest.raises(TypeError):
            BaseDecoder()

    def test_concrete_implementation(self):
        """Test that concrete implementation works."""
        class ConcreteDecoder(BaseDecoder):
            def decode(self, digits: str):
                return digits[::-1]

        assert ConcreteDecoder().decode("12") == "21"
