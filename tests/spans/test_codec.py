import json

import pytest

from spans import Span, SpanError, SpanFormatError, stride, to
from spans.codec import dumps, from_list, loads, to_list


def test_to_list() -> None:
    assert to_list(stride(5, 0, -1)) == [5, 0, -1]


def test_dumps_is_a_bare_triple() -> None:
    assert dumps(stride(0, 10, 2)) == "[0,10,2]"
    assert json.loads(stride(-3, 3, 3).to_json()) == [-3, 3, 3]


def test_loads() -> None:
    assert loads("[0, 10, 2]") == stride(0, 10, 2)
    assert loads(b"[5,0,-1]") == stride(5, 0, -1)
    assert Span.from_json("[0,5,1]") == to(5)


def test_empty_spans_are_valid_payloads() -> None:
    assert loads("[7, 7, 1]") == Span(7, 7, 1)
    assert loads("[0, 5, -1]") == Span(0, 5, -1)


def test_from_list_accepts_tuples() -> None:
    assert from_list((1, 4, 1)) == Span(1, 4, 1)


def test_zero_step_is_a_format_error() -> None:
    with pytest.raises(SpanFormatError, match="step cannot be zero"):
        loads("[1, 10, 0]")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "[1, 2",
        "{}",
        '"Span(0, 1, 1)"',
        "[1, 2]",
        "[1, 2, 3, 4]",
        "[1, 2, 1.5]",
        '[1, "2", 1]',
        "[true, 2, 1]",
        "null",
    ],
)
def test_malformed_payloads(text: str) -> None:
    with pytest.raises(SpanFormatError) as info:
        loads(text)
    assert isinstance(info.value, SpanError)
    assert isinstance(info.value, ValueError)


def test_format_error_message_includes_source() -> None:
    with pytest.raises(SpanFormatError) as info:
        from_list([1, 2])
    assert str(info.value) == "expected 3 items, got 2: [1, 2]"


def test_oversized_integer_is_a_format_error() -> None:
    with pytest.raises(SpanFormatError, match="invalid JSON"):
        loads("[" + "1" * 5000 + ", 1, 1]")
