"""Structural protocol for anything shaped like a span."""

from __future__ import annotations

from typing import Protocol, TypeGuard, runtime_checkable


@runtime_checkable
class SpanLike(Protocol):
    """Read-only ``start``/``stop``/``step`` triple.

    :class:`spans.Span` is the canonical implementation, but every query in
    :mod:`spans.span` accepts any object exposing these three integers.
    """

    @property
    def start(self) -> int: ...

    @property
    def stop(self) -> int: ...

    @property
    def step(self) -> int: ...


def is_span_like(obj: object) -> TypeGuard[SpanLike]:
    """Return ``True`` when ``obj`` exposes integer ``start``/``stop``/``step``
    with a nonzero ``step``."""

    if not isinstance(obj, SpanLike):
        return False
    if not all(
        isinstance(v, int) and not isinstance(v, bool)
        for v in (obj.start, obj.stop, obj.step)
    ):
        return False
    return obj.step != 0


__all__ = ["SpanLike", "is_span_like"]
