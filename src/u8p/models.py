"""Value types returned and accepted by the boundary finder."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .errors import ErrorKind, error_for


@dataclass(frozen=True, slots=True)
class BoundaryPolicy:
    """Validation knobs for :func:`u8p.finder.find`.

    ``min_offset`` is the largest offset that is still rejected; the default of 3
    leaves room for a full four byte window. ``empty_is_error`` switches empty
    buffers from a trivial success to ``INVALID_LENGTH`` and reports every
    offset check as ``INVALID_LENGTH`` too, as older releases did.
    """

    min_offset: int = 3
    empty_is_error: bool = False

    @classmethod
    def legacy(cls) -> "BoundaryPolicy":
        return cls(min_offset=4, empty_is_error=True)


DEFAULT_POLICY = BoundaryPolicy()


@dataclass(frozen=True, slots=True)
class FindResult:
    index: int
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> int:
        if self.error is not None:
            raise error_for(self.error)
        return self.index

    def __iter__(self) -> Iterator[object]:
        yield self.index
        yield self.error


__all__ = ["BoundaryPolicy", "DEFAULT_POLICY", "FindResult"]
