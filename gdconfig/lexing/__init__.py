"""Lexical primitives shared by both descriptor dialects."""

from .splitter import (
    find_call_spans,
    find_matching_paren,
    split_first_top_level,
    split_top_level,
    unwrap_call,
)
from .scalars import Scalar, ScalarKind, coerce_scalar, strip_quotes, unquote_text
from .sections import SectionSpan, SplitResult, split_sections

__all__ = [
    "Scalar",
    "ScalarKind",
    "SectionSpan",
    "SplitResult",
    "coerce_scalar",
    "find_call_spans",
    "find_matching_paren",
    "split_first_top_level",
    "split_sections",
    "split_top_level",
    "strip_quotes",
    "unquote_text",
    "unwrap_call",
]
