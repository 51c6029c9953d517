"""Byte-budget truncation built on :func:`u8p.finder.find`."""
from __future__ import annotations

from .errors import error_for
from .finder import find
from .models import BoundaryPolicy
from .utils.text import BytesLike, to_bytes


def truncate(data: str | BytesLike, limit: int, *, policy: BoundaryPolicy | None = None) -> bytes:
    """Cut ``data`` at the last character boundary before byte ``limit``.

    A non-empty buffer that already fits is returned whole. Any other failure
    from :func:`find` is raised as the matching
    :class:`~u8p.errors.BoundaryError`.
    """

    raw = bytes(to_bytes(data))
    if raw and limit >= len(raw):
        return raw
    result = find(raw, limit, policy=policy)
    if result.error is not None:
        raise error_for(result.error)
    return raw[: result.index]


__all__ = ["truncate"]
