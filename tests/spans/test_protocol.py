from dataclasses import dataclass

import pytest

from spans import (
    ElementNotFoundError,
    Span,
    SpanLike,
    ZeroStepError,
    at,
    clone,
    contains,
    find,
    is_span_like,
    length,
    slice_,
    stride,
    values,
)
from spans.codec import dumps, to_list


@dataclass
class Countdown:
    start: int
    stop: int = 0
    step: int = -1


def test_span_satisfies_protocol() -> None:
    assert isinstance(stride(0, 5, 1), SpanLike)
    assert is_span_like(stride(0, 5, 1))


def test_duck_typed_progression() -> None:
    c = Countdown(5)
    assert isinstance(c, SpanLike)
    assert is_span_like(c)
    assert list(values(c)) == [5, 4, 3, 2, 1]
    assert length(c) == 5
    assert contains(c, 3)
    assert find(c, 2) == 3
    assert at(c, 4) == 1
    assert to_list(c) == [5, 0, -1]
    assert dumps(c) == "[5,0,-1]"


def test_clone_converts_to_span() -> None:
    s = clone(Countdown(3))
    assert type(s) is Span
    assert s == stride(3, 0, -1)


def test_slice_of_duck_typed_returns_span() -> None:
    assert slice_(Countdown(5), 1, 3) == Span(4, 2, -1)


def test_not_found_reports_duck_typed_source() -> None:
    with pytest.raises(ElementNotFoundError, match="9 is not in Span"):
        find(Countdown(5), 9)


def test_zero_step_duck_typed_cannot_become_span() -> None:
    with pytest.raises(ZeroStepError):
        clone(Countdown(5, 0, 0))


@pytest.mark.parametrize(
    "obj", [object(), (0, 5, 1), Countdown(5, 0, True), Countdown(5, 0.0, -1)]
)
def test_is_span_like_rejects(obj: object) -> None:
    assert not is_span_like(obj)


def test_is_span_like_rejects_zero_step() -> None:
    assert isinstance(Countdown(5, 0, 0), SpanLike)
    assert not is_span_like(Countdown(5, 0, 0))


def test_zero_step_duck_typed_is_rejected_by_queries() -> None:
    flat = Countdown(5, 0, 0)
    with pytest.raises(ZeroStepError):
        slice_(flat, 0, 0)
    with pytest.raises(ZeroStepError):
        contains(flat, 3)
    with pytest.raises(ZeroStepError):
        length(flat)
    with pytest.raises(ZeroStepError):
        find(flat, 5)
    with pytest.raises(ZeroStepError):
        at(flat, 0)
    with pytest.raises(ZeroStepError):
        values(flat)
