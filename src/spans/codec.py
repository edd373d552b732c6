"""Serialized form of a span: the ordered triple ``[start, stop, step]``.

The triple carries no extra fields and no version tag. Decoding accepts any
pair of integers with a nonzero step; empty spans round-trip unchanged.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Sequence

from spans.errors import SpanFormatError
from spans.span import Span

if TYPE_CHECKING:
    from spans.protocol import SpanLike

logger = logging.getLogger(__name__)


def to_list(span: SpanLike) -> list[int]:
    return [span.start, span.stop, span.step]


def from_list(obj: Sequence[Any]) -> Span:
    """Build a :class:`Span` from a decoded ``[start, stop, step]`` triple.

    Raises:
        SpanFormatError: ``obj`` is not a 3-item list/tuple of ints, or its
            step is zero.
    """
    if not isinstance(obj, (list, tuple)):
        logger.debug("rejecting non-sequence span payload %r", obj)
        raise SpanFormatError("expected a [start, stop, step] array", obj)
    if len(obj) != 3:
        logger.debug("rejecting span payload of length %d", len(obj))
        raise SpanFormatError(f"expected 3 items, got {len(obj)}", obj)
    for item in obj:
        if not isinstance(item, int) or isinstance(item, bool):
            logger.debug("rejecting non-integer span item %r", item)
            raise SpanFormatError("span items must be integers", obj)
    start, stop, step = obj
    if step == 0:
        logger.debug("rejecting zero-step span payload %r", obj)
        raise SpanFormatError("step cannot be zero", obj)
    return Span(start, stop, step)


def dumps(span: SpanLike) -> str:
    return json.dumps(to_list(span), separators=(",", ":"))


def loads(text: str | bytes) -> Span:
    """Decode the JSON text of a span triple.

    Raises:
        SpanFormatError: ``text`` is not valid JSON (including integers too
            long to convert) or not a valid triple.
    """
    try:
        obj = json.loads(text)
    except ValueError as exc:
        logger.debug("invalid span JSON: %s", exc)
        raise SpanFormatError(f"invalid JSON ({exc})", text) from exc
    return from_list(obj)


__all__ = ["dumps", "from_list", "loads", "to_list"]
