"""Immutable integer arithmetic progressions ("spans")."""

import logging

from spans.codec import dumps, from_list, loads, to_list
from spans.errors import (
    ElementNotFoundError,
    InvalidSliceError,
    SpanError,
    SpanFormatError,
    SpanIndexError,
    SpanSyntaxError,
    ZeroStepError,
)
from spans.parse import parse_span
from spans.protocol import SpanLike, is_span_like
from spans.span import (
    Span,
    at,
    clone,
    contains,
    find,
    length,
    range_,
    slice_,
    span_range,
    stride,
    to,
    try_at,
    try_find,
    values,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ElementNotFoundError",
    "InvalidSliceError",
    "Span",
    "SpanError",
    "SpanFormatError",
    "SpanIndexError",
    "SpanLike",
    "SpanSyntaxError",
    "ZeroStepError",
    "at",
    "clone",
    "contains",
    "dumps",
    "find",
    "from_list",
    "is_span_like",
    "length",
    "loads",
    "parse_span",
    "range_",
    "slice_",
    "span_range",
    "stride",
    "to",
    "to_list",
    "try_at",
    "try_find",
    "values",
]
