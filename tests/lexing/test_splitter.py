"""Balanced splitter tests."""

from __future__ import annotations

from gdconfig.lexing.splitter import (
    find_call_spans,
    find_matching_paren,
    split_first_top_level,
    split_top_level,
    unwrap_call,
)


def test_comma_inside_quotes_is_not_a_split_point() -> None:
    """A quoted comma stays inside its segment."""
    assert split_top_level('"a,b",c') == ['"a,b"', "c"]


def test_vector_call_is_one_segment() -> None:
    """Commas inside parentheses do not split."""
    assert split_top_level("Vector2(0, 0)") == ["Vector2(0, 0)"]


def test_trailing_segment_always_included() -> None:
    """The text after the last separator is kept, even when empty."""
    assert split_top_level("a,b,") == ["a", "b", ""]
    assert split_top_level("") == [""]


def test_escaped_quote_does_not_close_quoted_run() -> None:
    """A backslash inside quotes escapes the following quote."""
    assert split_top_level(r'"a\",b",c') == [r'"a\",b"', "c"]


def test_unbalanced_close_paren_is_clamped() -> None:
    """Extra closing parentheses never push depth below zero."""
    assert split_top_level("a),b,(c,d") == ["a)", "b", "(c,d"]


def test_split_first_top_level_splits_once() -> None:
    """Only the first top-level colon separates key and value."""
    assert split_first_top_level('"path":"res://a:b"', ":") == ('"path"', '"res://a:b"')
    assert split_first_top_level("no separator here", ":") is None


def test_find_matching_paren_ignores_quoted_parens() -> None:
    """Parentheses in quotes are not counted."""
    text = 'f("(", g(1))'
    assert find_matching_paren(text, 1) == len(text) - 1
    assert find_matching_paren("f(1", 1) is None


def test_unwrap_call_requires_whole_text() -> None:
    """The wrapper must span the full stripped text."""
    assert unwrap_call(' Object(A,"p":Vector2(1, 2)) ', "Object") == 'A,"p":Vector2(1, 2)'
    assert unwrap_call("Vector2(1, 2) + 3", "Vector2") is None
    assert unwrap_call("Other(1)", "Object") is None


def test_find_call_spans_reports_adjacent_literals() -> None:
    """Each top-level call is located independently of nested calls."""
    text = '[Object(A,"p":Vector2(0, 0)), Object(B,"q":1)]'
    spans = find_call_spans(text, "Object")
    assert [text[s:e] for s, e in spans] == [
        'Object(A,"p":Vector2(0, 0))',
        'Object(B,"q":1)',
    ]


def test_find_call_spans_requires_identifier_boundary() -> None:
    """A name that merely ends in the call name is not matched."""
    assert find_call_spans("MyObject(1), Object(2)", "Object") == [(13, 22)]


def test_find_call_spans_stops_on_unclosed_literal() -> None:
    """An unterminated literal ends the scan without raising."""
    assert find_call_spans("Object(A,1), Object(B,", "Object") == [(0, 11)]
