"""Parser for the canonical text form ``Span(start, stop, step)``."""

from __future__ import annotations

import logging
import threading
from typing import cast

import ply.lex as lex  # type: ignore[import-untyped]
import ply.yacc as yacc  # type: ignore[import-untyped]

from spans.errors import SpanSyntaxError
from spans.span import Span

logger = logging.getLogger(__name__)

_SOURCE: str = ""

tokens = (
    "SPAN",
    "INT",
    "LPAREN",
    "RPAREN",
    "COMMA",
)

t_SPAN = r"Span"
t_LPAREN = r"\("
t_RPAREN = r"\)"
t_COMMA = r","

t_ignore = " \t\r\n"


def t_INT(t: lex.LexToken) -> lex.LexToken:
    r"-?\d+"
    try:
        t.value = int(t.value)
    except ValueError as exc:
        raise SpanSyntaxError(
            "Integer literal too long", source=_SOURCE, pos=t.lexpos
        ) from exc
    return t


def t_error(t: lex.LexToken) -> None:
    raise SpanSyntaxError(
        f"Unexpected character {t.value[0]!r}", source=_SOURCE, pos=t.lexpos
    )


def p_span(p: yacc.YaccProduction) -> None:
    "span : SPAN LPAREN INT COMMA INT COMMA INT RPAREN"
    if p[7] == 0:
        raise SpanSyntaxError(
            "step cannot be zero", source=_SOURCE, pos=p.lexpos(7)
        )
    p[0] = Span(p[3], p[5], p[7])


def p_error(p: lex.LexToken | None) -> None:
    if p is None:
        raise SpanSyntaxError(
            "Unexpected end of input", source=_SOURCE, pos=len(_SOURCE)
        )
    raise SpanSyntaxError("Unexpected token", source=_SOURCE, pos=p.lexpos)


_PARSER = None
_LOCK = threading.Lock()


def parse_span(source: str) -> Span:
    """Parse ``source`` (as produced by ``str(span)``) back into a span.

    The lexer and parser share module state, so calls are serialised on a
    lock.

    Raises:
        SpanSyntaxError: ``source`` is not a well-formed span, or its step is
            zero.
    """
    global _SOURCE, _PARSER
    with _LOCK:
        _SOURCE = source
        lexer = lex.lex()
        if _PARSER is None:
            _PARSER = yacc.yacc(start="span", debug=False, write_tables=False)
        try:
            span = cast(Span | None, _PARSER.parse(source, lexer=lexer))
        except SpanSyntaxError as exc:
            logger.debug("failed to parse span text %r: %s", source, exc)
            raise
    if span is None:
        raise SpanSyntaxError(
            "Unexpected end of input", source=source, pos=len(source)
        )
    return span


__all__ = ["parse_span"]
