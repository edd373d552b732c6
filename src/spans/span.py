"""Immutable integer arithmetic progressions.

A :class:`Span` describes the half-open progression ``start, start + step,
...`` bounded by ``stop``. Positive steps ascend (``start <= v < stop``),
negative steps descend (``stop < v <= start``). A span whose bound lies
behind its start is empty but still a valid value.

The query functions are free functions over :class:`~spans.protocol.SpanLike`
so that any object carrying ``start``/``stop``/``step`` can be queried; the
dunder methods on :class:`Span` simply delegate to them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from spans.errors import (
    ElementNotFoundError,
    InvalidSliceError,
    SpanIndexError,
    ZeroStepError,
)

if TYPE_CHECKING:
    from spans.protocol import SpanLike


def _check_int(name: str, value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"Span {name} must be an int, got {type(value).__name__}")


@dataclass(frozen=True, repr=False)
class Span:
    """The progression ``(start, stop, step)``; ``step`` is never zero."""

    start: int
    stop: int
    step: int = 1

    def __post_init__(self) -> None:
        _check_int("start", self.start)
        _check_int("stop", self.stop)
        _check_int("step", self.step)
        if self.step == 0:
            raise ZeroStepError(self.start, self.stop)

    def __str__(self) -> str:
        return f"Span({self.start}, {self.stop}, {self.step})"

    __repr__ = __str__

    def __iter__(self) -> Iterator[int]:
        return values(self)

    def __len__(self) -> int:
        return length(self)

    def __contains__(self, elem: object) -> bool:
        return isinstance(elem, int) and contains(self, elem)

    def __getitem__(self, index: int) -> int:
        return at(self, index)

    @property
    def ascending(self) -> bool:
        return self.step > 0

    def is_empty(self) -> bool:
        return _is_empty(self)

    def index(self, elem: int) -> int:
        return find(self, elem)

    def sub(self, lo: int, hi: int) -> Span:
        return slice_(self, lo, hi)

    def as_range(self) -> range:
        """Return the builtin ``range`` enumerating the same integers."""
        return range(self.start, self.stop, self.step)

    def to_json(self) -> str:
        from spans.codec import dumps

        return dumps(self)

    @staticmethod
    def from_json(text: str | bytes) -> Span:
        from spans.codec import loads

        return loads(text)


# ---- construction ----


def to(stop: int) -> Span:
    """``Span(0, stop, 1)``."""
    return Span(0, stop, 1)


def range_(start: int, stop: int) -> Span:
    """``Span(start, stop, 1)``."""
    return Span(start, stop, 1)


span_range = range_


def stride(start: int, stop: int, step: int) -> Span:
    """``Span(start, stop, step)``.

    Raises:
        ZeroStepError: ``step`` is zero.
    """
    return Span(start, stop, step)


def clone(span: SpanLike) -> Span:
    """Return a concrete :class:`Span` field-equal to ``span``."""
    return Span(span.start, span.stop, span.step)


# ---- queries ----


def _checked(span: SpanLike) -> tuple[int, int, int]:
    start, stop, step = span.start, span.stop, span.step
    if step == 0:
        raise ZeroStepError(start, stop)
    return start, stop, step


def _is_empty(span: SpanLike) -> bool:
    start, stop, step = span.start, span.stop, span.step
    return (step > 0 and start >= stop) or (step < 0 and start <= stop)


def values(span: SpanLike) -> Iterator[int]:
    """Lazily yield the elements of ``span`` in traversal order.

    Every call starts a fresh generator; nothing is cached on the span.
    """
    start, stop, step = _checked(span)

    def gen() -> Iterator[int]:
        i = start
        while (step > 0 and i < stop) or (step < 0 and i > stop):
            yield i
            i += step

    return gen()


def length(span: SpanLike) -> int:
    """Number of elements in ``span``.

    Computed as ``ceil(diff / |step|)`` through ``(diff + |step| - 1) //
    |step|``; ``diff`` is positive whenever the span is non-empty, so floor
    and truncating division agree.
    """
    start, stop, step = _checked(span)
    if _is_empty(span):
        return 0
    diff = stop - start if step > 0 else start - stop
    magnitude = abs(step)
    return (diff + magnitude - 1) // magnitude


def contains(span: SpanLike, elem: int) -> bool:
    """Whether ``elem`` is one of the values of ``span``."""
    start, stop, step = _checked(span)
    if step > 0 and (elem < start or elem >= stop):
        return False
    if step < 0 and (elem > start or elem <= stop):
        return False
    diff = elem - start if step > 0 else start - elem
    return diff % abs(step) == 0


def find(span: SpanLike, elem: int) -> int:
    """Index of ``elem`` within ``span``.

    Raises:
        ElementNotFoundError: ``elem`` is not a member of ``span``.
    """
    if not contains(span, elem):
        raise ElementNotFoundError(elem, span)
    if span.step > 0:
        return (elem - span.start) // span.step
    return (span.start - elem) // abs(span.step)


def at(span: SpanLike, index: int) -> int:
    """Element at position ``index``; negative indices are out of range.

    Raises:
        SpanIndexError: ``index`` is outside ``[0, length(span))``.
    """
    n = length(span)
    if index < 0 or index >= n:
        raise SpanIndexError(index, n)
    return span.start + index * span.step


def try_find(span: SpanLike, elem: int) -> int | None:
    if not contains(span, elem):
        return None
    return find(span, elem)


def try_at(span: SpanLike, index: int) -> int | None:
    if index < 0 or index >= length(span):
        return None
    return at(span, index)


def slice_(span: SpanLike, lo: int, hi: int) -> Span:
    """Sub-span covering the indices ``[lo, hi)`` of ``span``.

    The result keeps the step of ``span``. ``lo == hi`` gives an empty span
    and ``hi == length(span)`` runs through the end.

    Raises:
        InvalidSliceError: unless ``0 <= lo <= hi <= length(span)``.
        ZeroStepError: ``span`` has a step of zero.
    """
    n = length(span)
    if lo < 0 or lo > hi or hi > n:
        raise InvalidSliceError(lo, hi, n)
    start, step = span.start, span.step
    return Span(start + lo * step, start + hi * step, step)


__all__ = [
    "Span",
    "at",
    "clone",
    "contains",
    "find",
    "length",
    "range_",
    "slice_",
    "span_range",
    "stride",
    "to",
    "try_at",
    "try_find",
    "values",
]
