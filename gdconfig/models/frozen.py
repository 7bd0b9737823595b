"""Read-only containers for model fields.

Frozen dataclasses only block attribute assignment, so map and list
fields are wrapped here as well: maps become ``MappingProxyType`` views
over a private copy and lists become tuples.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping


def freeze_map(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only copy of ``mapping``; nested maps are frozen too."""
    return MappingProxyType(
        {
            key: freeze_map(value) if isinstance(value, Mapping) else value
            for key, value in mapping.items()
        }
    )


def thaw(value: Any) -> Any:
    """Convert frozen containers back into plain dicts and lists for JSON."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(item) for item in value]
    return value


__all__ = ["freeze_map", "thaw"]
