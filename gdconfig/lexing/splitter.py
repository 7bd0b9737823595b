"""Quote- and parenthesis-aware splitting helpers.

Every helper here walks the text once, left to right, tracking two pieces of
state: whether the cursor is inside a double-quoted run and how many
parentheses are currently open. A separator only counts when it appears
outside quotes with zero open parentheses ("top level").

Unbalanced input is tolerated: a stray ``)`` never drives the depth below
zero, and an unterminated quote simply hides the rest of the text.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple


def _is_identifier_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def iter_top_level(text: str, sep: str) -> Iterator[int]:
    """Yield the index of every top-level occurrence of ``sep`` in ``text``.

    Args:
        text: Text to scan.
        sep: Single separator character.

    Yields:
        int: Offsets of separators outside quotes and parentheses.
    """
    in_quotes = False
    escaped = False
    depth = 0
    for index, ch in enumerate(text):
        if in_quotes:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_quotes = False
            continue

        if ch == '"':
            in_quotes = True
        elif ch == "(":
            depth += 1
        elif ch == ")":
            if depth > 0:
                depth -= 1
        elif ch == sep and depth == 0:
            yield index


def split_top_level(text: str, sep: str = ",") -> List[str]:
    """Split ``text`` on top-level occurrences of ``sep``.

    The trailing segment is always included, so the result is never empty.
    Segments are returned untrimmed.

    Examples:
        >>> split_top_level('"a,b",c')
        ['"a,b"', 'c']
        >>> split_top_level("Vector2(0, 0)")
        ['Vector2(0, 0)']
    """
    parts: List[str] = []
    last = 0
    for index in iter_top_level(text, sep):
        parts.append(text[last:index])
        last = index + 1
    parts.append(text[last:])
    return parts


def split_first_top_level(text: str, sep: str = ":") -> Optional[Tuple[str, str]]:
    """Split ``text`` on its first top-level ``sep``.

    Returns:
        Optional[Tuple[str, str]]: ``(head, tail)`` or None when ``text``
        has no top-level separator.
    """
    index = next(iter_top_level(text, sep), None)
    if index is None:
        return None
    return text[:index], text[index + 1:]


def find_matching_paren(text: str, open_index: int) -> Optional[int]:
    """Return the index of the ``)`` closing the ``(`` at ``open_index``.

    Parentheses inside quoted runs are ignored. Returns None when the
    parenthesis is never closed.
    """
    in_quotes = False
    escaped = False
    depth = 0
    for index in range(open_index, len(text)):
        ch = text[index]
        if in_quotes:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_quotes = False
            continue

        if ch == '"':
            in_quotes = True
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return index
    return None


def unwrap_call(text: str, name: str) -> Optional[str]:
    """Return the argument text of ``name(...)`` when it spans all of ``text``.

    The closing parenthesis is located with a balanced scan so that nested
    calls such as ``Vector2(0, 0)`` inside the arguments do not end the
    wrapper early.

    Examples:
        >>> unwrap_call("Object(InputEventKey,\\"position\\":Vector2(0, 0))", "Object")
        'InputEventKey,"position":Vector2(0, 0)'
        >>> unwrap_call("Vector2(1, 2) + 3", "Vector2") is None
        True
    """
    stripped = text.strip()
    opener = name + "("
    if not stripped.startswith(opener):
        return None
    open_index = len(name)
    close_index = find_matching_paren(stripped, open_index)
    if close_index is None or close_index != len(stripped) - 1:
        return None
    return stripped[open_index + 1:close_index]


def find_call_spans(text: str, name: str = "Object") -> List[Tuple[int, int]]:
    """Locate every top-level ``name(...)`` span in ``text``.

    Adjacent literals separated by ``, `` are reported independently, and
    commas or parentheses inside a literal (for example a nested
    ``Vector2(x, y)``) never split it. A literal whose parenthesis is never
    closed ends the scan.

    Returns:
        List[Tuple[int, int]]: ``(start, end)`` offsets, end exclusive.
    """
    opener = name + "("
    spans: List[Tuple[int, int]] = []
    in_quotes = False
    escaped = False
    depth = 0
    index = 0
    length = len(text)

    while index < length:
        ch = text[index]
        if in_quotes:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_quotes = False
            index += 1
            continue

        if (
            depth == 0
            and text.startswith(opener, index)
            and (index == 0 or not _is_identifier_char(text[index - 1]))
        ):
            close_index = find_matching_paren(text, index + len(name))
            if close_index is None:
                break
            spans.append((index, close_index + 1))
            index = close_index + 1
            continue

        if ch == '"':
            in_quotes = True
        elif ch == "(":
            depth += 1
        elif ch == ")":
            if depth > 0:
                depth -= 1
        index += 1

    return spans


__all__ = [
    "find_call_spans",
    "find_matching_paren",
    "iter_top_level",
    "split_first_top_level",
    "split_top_level",
    "unwrap_call",
]
