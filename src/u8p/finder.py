"""Locate UTF-8 character boundaries near a byte offset."""
from __future__ import annotations

import operator
from typing import Tuple

from .errors import ErrorKind
from .models import DEFAULT_POLICY, BoundaryPolicy, FindResult
from .utils.text import BytesLike, to_bytes

# (mask, value) pairs for 0xxxxxxx, 11110xxx, 1110xxxx and 110xxxxx.
LEAD_PATTERNS: Tuple[Tuple[int, int], ...] = (
    (0b10000000, 0b00000000),
    (0b11111000, 0b11110000),
    (0b11110000, 0b11100000),
    (0b11100000, 0b11000000),
)

MAX_CHAR_WIDTH = 4


def is_lead_byte(byte: int) -> bool:
    """Return ``True`` when ``byte`` starts a UTF-8 character."""

    for mask, value in LEAD_PATTERNS:
        if byte & mask == value:
            return True
    return False


LEAD_BYTE_TABLE: Tuple[bool, ...] = tuple(is_lead_byte(value) for value in range(256))


def find(
    buffer: str | BytesLike,
    offset: int,
    *,
    policy: BoundaryPolicy | None = None,
) -> FindResult:
    """Find the last character boundary at or before ``offset - 1``.

    The returned index is safe to slice at: ``buffer[:index]`` never ends inside
    a multi-byte character. Only the four bytes preceding ``offset`` are
    inspected, so the call is constant time regardless of buffer size.

    Parameters
    ----------
    buffer:
        UTF-8 encoded bytes. ``str`` values are encoded first.
    offset:
        Byte cutoff. Must be greater than ``policy.min_offset`` and strictly
        less than ``len(buffer)``.
    policy:
        Validation policy, :data:`~u8p.models.DEFAULT_POLICY` when omitted.

    Returns
    -------
    FindResult
        ``error`` is ``None`` on success; otherwise ``index`` is ``0`` and
        ``error`` names the failed check.
    """

    data = to_bytes(buffer)
    offset = operator.index(offset)
    rules = policy or DEFAULT_POLICY
    length = len(data)

    if length == 0:
        if rules.empty_is_error:
            return FindResult(0, ErrorKind.INVALID_LENGTH)
        return FindResult(0)
    if rules.empty_is_error and length <= offset:
        return FindResult(0, ErrorKind.INVALID_LENGTH)
    if offset <= rules.min_offset:
        if rules.empty_is_error:
            return FindResult(0, ErrorKind.INVALID_LENGTH)
        return FindResult(0, ErrorKind.INVALID_OFFSET)
    if length <= offset:
        return FindResult(0, ErrorKind.INVALID_OFFSET)

    for index in range(offset - 1, offset - 1 - MAX_CHAR_WIDTH, -1):
        if index < 0:
            break
        if LEAD_BYTE_TABLE[data[index]]:
            return FindResult(index)
    return FindResult(0, ErrorKind.INVALID_ENCODING)


__all__ = ["LEAD_PATTERNS", "LEAD_BYTE_TABLE", "MAX_CHAR_WIDTH", "find", "is_lead_byte"]
