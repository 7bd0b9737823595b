"""Scalar coercion for untyped descriptor values.

The descriptor format carries no type tags, so the type of a value is decided
purely by what the token looks like. The rules are tried in a fixed order and
the first match wins:

1. ``true`` / ``false``                  -> bool
2. signed 32-bit integer                 -> int
3. floating point number                 -> float
4. ``Vector2(<num>, <num>)``             -> (float, float)
5. ``"..."``                             -> str, outer quotes stripped
6. ``null``                              -> the string ``"null"``
7. anything else                         -> the raw token

Out-of-range integers fall through to the float rule, and a ``Vector2`` whose
components do not both parse falls through to the string rules.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from gdconfig.lexing.splitter import split_top_level, unwrap_call

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"""
    [+-]?
    (?:
        (?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?
        |inf(?:inity)?
        |nan
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)

ScalarValue = Union[bool, int, float, Tuple[float, float], str]


class ScalarKind(str, Enum):
    """Type assigned to a token by :func:`coerce_scalar`."""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    VECTOR2 = "vector2"
    STRING = "string"
    RAW = "raw"


@dataclass(frozen=True)
class Scalar:
    """A coerced token together with the rule that matched it."""

    kind: ScalarKind
    value: ScalarValue


def parse_int(token: str):
    """Parse a signed 32-bit integer, returning None when it does not fit."""
    if not _INT_RE.fullmatch(token):
        return None
    value = int(token)
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return value


def parse_float(token: str):
    """Parse a float literal, returning None for anything else."""
    if not _FLOAT_RE.fullmatch(token):
        return None
    return float(token)


def parse_vector2(token: str):
    """Parse ``Vector2(x, y)`` into a tuple, or None if malformed."""
    inner = unwrap_call(token, "Vector2")
    if inner is None:
        return None
    parts = split_top_level(inner, ",")
    if len(parts) != 2:
        return None
    x = parse_float(parts[0].strip())
    y = parse_float(parts[1].strip())
    if x is None or y is None:
        return None
    return (x, y)


def strip_quotes(value: str) -> str:
    """Strip every leading and trailing double quote from ``value``."""
    return value.strip('"')


def unquote_text(value: str) -> str:
    """Unquote a section value, turning \\" back into a quote.

    A value wrapped in one pair of quotes loses that pair and has its
    escaped quotes restored; any other value goes through strip_quotes.
    """
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1].replace('\\"', '"')
    return strip_quotes(value)


def coerce_scalar(token: str) -> Scalar:
    """Classify and convert a trimmed raw token.

    Args:
        token: Raw value text, already trimmed by the caller.

    Returns:
        Scalar: The converted value and the rule that produced it.
    """
    if token == "true" or token == "false":
        return Scalar(ScalarKind.BOOL, token == "true")

    int_value = parse_int(token)
    if int_value is not None:
        return Scalar(ScalarKind.INT, int_value)

    float_value = parse_float(token)
    if float_value is not None:
        return Scalar(ScalarKind.FLOAT, float_value)

    vector = parse_vector2(token)
    if vector is not None:
        return Scalar(ScalarKind.VECTOR2, vector)

    if token.startswith('"') and token.endswith('"'):
        return Scalar(ScalarKind.STRING, strip_quotes(token))

    if token == "null":
        return Scalar(ScalarKind.STRING, "null")

    return Scalar(ScalarKind.RAW, token)


__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "Scalar",
    "ScalarKind",
    "ScalarValue",
    "coerce_scalar",
    "parse_float",
    "parse_int",
    "parse_vector2",
    "strip_quotes",
    "unquote_text",
]
