"""Scalar coercion tests."""

from __future__ import annotations

import math

import pytest

from gdconfig.lexing.scalars import (
    INT32_MAX,
    ScalarKind,
    coerce_scalar,
    parse_vector2,
    strip_quotes,
    unquote_text,
)


@pytest.mark.parametrize(
    "token, kind, value",
    [
        ("true", ScalarKind.BOOL, True),
        ("false", ScalarKind.BOOL, False),
        ("-1", ScalarKind.INT, -1),
        ("4194309", ScalarKind.INT, 4194309),
        ("1.0", ScalarKind.FLOAT, 1.0),
        ("2.5e-3", ScalarKind.FLOAT, 0.0025),
        ("Vector2(0, 0)", ScalarKind.VECTOR2, (0.0, 0.0)),
        ("Vector2(1.5, -2)", ScalarKind.VECTOR2, (1.5, -2.0)),
        ('"hello"', ScalarKind.STRING, "hello"),
        ('""', ScalarKind.STRING, ""),
        ("null", ScalarKind.STRING, "null"),
        ("SomethingElse", ScalarKind.RAW, "SomethingElse"),
    ],
)
def test_coercion_priority(token: str, kind: ScalarKind, value) -> None:
    """Each token takes the first rule that matches it."""
    scalar = coerce_scalar(token)
    assert scalar.kind == kind
    assert scalar.value == value


def test_quoted_numeral_stays_string() -> None:
    """Quotes keep a numeral out of the numeric rules."""
    scalar = coerce_scalar('"1"')
    assert scalar.kind == ScalarKind.STRING
    assert scalar.value == "1"


def test_out_of_range_integer_falls_through_to_float() -> None:
    """Integers beyond 32 bits become floats."""
    scalar = coerce_scalar(str(INT32_MAX + 1))
    assert scalar.kind == ScalarKind.FLOAT
    assert scalar.value == float(INT32_MAX + 1)


def test_inf_and_nan_are_floats() -> None:
    """Special float spellings are recognised."""
    assert coerce_scalar("inf").value == math.inf
    assert coerce_scalar("-inf").value == -math.inf
    assert math.isnan(coerce_scalar("nan").value)


def test_malformed_vector_falls_through() -> None:
    """A Vector2 with a bad component is not partially parsed."""
    assert parse_vector2("Vector2(1, x)") is None
    assert parse_vector2("Vector2(1, 2, 3)") is None
    assert coerce_scalar("Vector2(1, x)").kind == ScalarKind.RAW


def test_quoted_text_strip_is_idempotent() -> None:
    """Stripping an already stripped string changes nothing."""
    stripped = coerce_scalar('"text"').value
    assert stripped == "text"
    assert strip_quotes(stripped) == stripped


def test_stray_quotes_are_all_stripped() -> None:
    """Quote runs at either end are trimmed completely."""
    assert coerce_scalar('"""').value == ""
    assert coerce_scalar('"').value == ""
    assert coerce_scalar('""a""').value == "a"
    assert coerce_scalar('"').kind == ScalarKind.STRING


def test_unquote_text_restores_escaped_quotes() -> None:
    """Section values drop one quote pair and unescape inner quotes."""
    assert unquote_text(r'"a \"b\" c"') == 'a "b" c'
    assert unquote_text('""') == ""
    assert unquote_text("plain") == "plain"
    assert unquote_text('"res://x.so') == "res://x.so"
