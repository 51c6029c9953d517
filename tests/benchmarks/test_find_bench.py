import random

import pytest

from u8p import find

# ASCII, Cyrillic, Hiragana and emoticons.
_RANGES = ((0x0020, 0x007F), (0x0400, 0x04FF), (0x3040, 0x309F), (0x1F600, 0x1F64F))
_SIZES = (100, 1_000, 10_000, 100_000)


def _generate_text(length: int, seed: int = 0) -> str:
    rng = random.Random(seed)
    chars = []
    for _ in range(length):
        low, high = rng.choice(_RANGES)
        chars.append(chr(rng.randint(low, high)))
    return "".join(chars)


def _prefix_by_decoding(encoded: bytes, limit: int) -> int:
    return len(encoded[:limit].decode("utf-8", errors="ignore").encode("utf-8"))


def _prefix_by_char_slice(text: str, count: int) -> int:
    return len(text[:count].encode("utf-8"))


def _prefix_by_char_scan(text: str, limit: int) -> int:
    position = 0
    for char in text:
        width = len(char.encode("utf-8"))
        if position + width > limit:
            break
        position += width
    return position


@pytest.mark.bench
@pytest.mark.parametrize("size", _SIZES)
def test_find_throughput(benchmark, size: int) -> None:
    encoded = _generate_text(size).encode("utf-8")
    offset = len(encoded) // 4
    result = benchmark(find, encoded, offset)
    assert result.ok


@pytest.mark.bench
@pytest.mark.parametrize("size", _SIZES)
def test_decode_baseline_throughput(benchmark, size: int) -> None:
    encoded = _generate_text(size).encode("utf-8")
    offset = len(encoded) // 4
    expected = find(encoded, offset).index
    assert benchmark(_prefix_by_decoding, encoded, offset) >= expected


@pytest.mark.bench
@pytest.mark.parametrize("size", _SIZES)
def test_char_slice_baseline_throughput(benchmark, size: int) -> None:
    text = _generate_text(size)
    count = size // 10
    assert benchmark(_prefix_by_char_slice, text, count) >= count


@pytest.mark.bench
@pytest.mark.parametrize("size", _SIZES)
def test_char_scan_baseline_throughput(benchmark, size: int) -> None:
    text = _generate_text(size)
    encoded = text.encode("utf-8")
    offset = len(encoded) // 4
    assert benchmark(_prefix_by_char_scan, text, offset) == _prefix_by_decoding(encoded, offset)
