import pytest

from u8p import BoundaryPolicy, InvalidEncodingError, InvalidLengthError, InvalidOffsetError, truncate


def test_truncate_keeps_whole_characters() -> None:
    assert truncate("Hello, 🌍. Hi!", 13) == "Hello, 🌍.".encode("utf-8")
    assert truncate("こんにちは世界", 10).decode("utf-8") == "こんに"


def test_truncate_returns_buffer_that_already_fits() -> None:
    assert truncate(b"abc", 3) == b"abc"
    assert truncate("abc", 50) == b"abc"


def test_truncate_empty_buffer() -> None:
    assert truncate(b"", 8) == b""
    with pytest.raises(InvalidLengthError):
        truncate(b"", 8, policy=BoundaryPolicy.legacy())


def test_truncate_raises_for_tiny_limit() -> None:
    with pytest.raises(InvalidOffsetError):
        truncate(b"abcdef", 2)


def test_truncate_raises_for_malformed_input() -> None:
    with pytest.raises(InvalidEncodingError):
        truncate(b"\x80" * 10, 6)
