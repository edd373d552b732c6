"""Error types raised by span queries, decoding and parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spans.protocol import SpanLike


class ZeroStepError(ValueError):
    """A span was constructed with a step of zero.

    Not a :class:`SpanError`: callers are not expected to recover from it.
    """

    def __init__(self, start: int, stop: int) -> None:
        super().__init__(f"step cannot be zero (start={start}, stop={stop})")
        self.start = start
        self.stop = stop


class SpanError(Exception):
    """Base class for recoverable span failures."""


@dataclass
class SpanIndexError(SpanError, IndexError):
    index: int
    length: int

    def __str__(self) -> str:
        return f"index {self.index} out of range for span of length {self.length}"


@dataclass
class ElementNotFoundError(SpanError, ValueError):
    elem: int
    span: SpanLike

    def __str__(self) -> str:
        span = self.span
        return (
            f"{self.elem} is not in Span({span.start}, {span.stop}, {span.step})"
        )


@dataclass
class InvalidSliceError(SpanError, ValueError):
    lo: int
    hi: int
    length: int

    def __str__(self) -> str:
        return (
            f"invalid slice [{self.lo}:{self.hi}] for span of length {self.length}"
        )


@dataclass
class SpanFormatError(SpanError, ValueError):
    message: str
    source: object = None

    def __str__(self) -> str:
        if self.source is None:
            return self.message
        return f"{self.message}: {self.source!r}"


@dataclass
class SpanSyntaxError(SpanFormatError):
    pos: int = 0

    def __str__(self) -> str:
        if not isinstance(self.source, str):
            return f"{self.message} @ {self.pos}"
        snippet = self.source[self.pos : self.pos + 1]
        return f"{self.message} @ {self.pos}: {snippet!r}"


__all__ = [
    "ElementNotFoundError",
    "InvalidSliceError",
    "SpanError",
    "SpanFormatError",
    "SpanIndexError",
    "SpanSyntaxError",
    "ZeroStepError",
]
