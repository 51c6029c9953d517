"""Input coercion helpers shared across modules."""
from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def to_bytes(data: str | BytesLike) -> bytes | bytearray | memoryview:
    if isinstance(data, str):
        return data.encode("utf-8", errors="surrogatepass")
    if isinstance(data, memoryview):
        if data.format == "B" and data.ndim == 1:
            return data
        if not data.c_contiguous:
            return bytes(data)
        return data.cast("B")
    if isinstance(data, (bytes, bytearray)):
        return data
    raise TypeError(f"expected str or bytes-like object, got {type(data).__name__}")


def to_text(data: str | BytesLike) -> str:
    if isinstance(data, str):
        return data
    return bytes(data).decode("utf-8", errors="surrogatepass")


__all__ = ["BytesLike", "to_bytes", "to_text"]
