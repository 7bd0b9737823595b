"""Parser for ``Object(Type, "prop":val, ...)`` input event literals.

Events are stored inside an action's ``events`` array::

    [Object(InputEventMouseButton,"device":-1,"position":Vector2(0, 0),"button_index":1),
     Object(InputEventKey,"unicode":97)]

Property values may themselves contain commas and parentheses (nested
``Vector2(x, y)`` calls, quoted strings), so every split goes through the
balanced splitter rather than ``str.split``.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from gdconfig.lexing.scalars import Scalar, coerce_scalar, strip_quotes
from gdconfig.lexing.splitter import (
    find_call_spans,
    split_first_top_level,
    split_top_level,
    unwrap_call,
)
from gdconfig.models.events import InputEvent

logger = logging.getLogger("gdconfig.lexing.object_literal")

OBJECT_CALL = "Object"


def split_properties(text: str) -> List[Tuple[str, Scalar]]:
    """Split ``"prop":val, ...`` into coerced ``(name, value)`` pairs.

    Fragments without a top-level colon are skipped. Property names lose
    their surrounding quotes; values are trimmed and coerced.
    """
    props: List[Tuple[str, Scalar]] = []
    for fragment in split_top_level(text, ","):
        if not fragment.strip():
            continue
        pair = split_first_top_level(fragment, ":")
        if pair is None:
            logger.debug("Skipping property fragment without ':' %r", fragment)
            continue
        key, raw_value = pair
        props.append((strip_quotes(key.strip()), coerce_scalar(raw_value.strip())))
    return props


def parse_object_literal(text: str) -> Optional[InputEvent]:
    """Parse one event literal.

    Accepts either the full ``Object(Type, ...)`` form or the bare
    ``Type, ...`` argument list.

    Returns:
        Optional[InputEvent]: The event, or None when no type tag can be
        separated from a property list.
    """
    body = unwrap_call(text, OBJECT_CALL)
    if body is None:
        body = text.strip()

    pair = split_first_top_level(body, ",")
    if pair is None:
        logger.debug("Event literal has no property list: %r", text)
        return None

    event_type, properties = pair
    event_type = event_type.strip()
    if not event_type:
        return None
    return InputEvent.from_scalars(event_type, split_properties(properties))


def split_events_array(text: str) -> List[str]:
    """Return the text of every top-level ``Object(...)`` in an events array.

    Examples:
        >>> split_events_array('[Object(A,"p":Vector2(0, 0)), Object(B,"q":1)]')
        ['Object(A,"p":Vector2(0, 0))', 'Object(B,"q":1)']
    """
    return [text[start:end] for start, end in find_call_spans(text, OBJECT_CALL)]


def parse_events_array(text: str) -> List[InputEvent]:
    """Parse every event literal of an events array, dropping malformed ones."""
    events: List[InputEvent] = []
    for literal in split_events_array(text):
        event = parse_object_literal(literal)
        if event is not None:
            events.append(event)
    return events


__all__ = [
    "OBJECT_CALL",
    "parse_events_array",
    "parse_object_literal",
    "split_events_array",
    "split_properties",
]
