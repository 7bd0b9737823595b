"""Input binding models: actions and the events that trigger them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from gdconfig.keys import trigger_string as _trigger_string
from gdconfig.lexing.scalars import Scalar, ScalarKind
from gdconfig.models.frozen import freeze_map

_PROP_FIELDS = ("string_props", "bool_props", "int_props", "float_props", "vec2_props")


@dataclass(frozen=True)
class InputEvent:
    """One ``Object(InputEvent..., prop:val, ...)`` literal.

    Properties are partitioned across five typed maps according to how each
    value coerced; a property name appears in exactly one of them.

    Attributes:
        event_type: Type tag, e.g. ``InputEventKey`` or ``InputEventMouseButton``.
        string_props: Quoted, ``null`` and unrecognised values.
        bool_props: ``true`` / ``false`` values.
        int_props: Signed 32-bit integer values.
        float_props: Floating point values.
        vec2_props: ``Vector2(x, y)`` values.
    """

    event_type: str
    string_props: Mapping[str, str] = field(default_factory=dict)
    bool_props: Mapping[str, bool] = field(default_factory=dict)
    int_props: Mapping[str, int] = field(default_factory=dict)
    float_props: Mapping[str, float] = field(default_factory=dict)
    vec2_props: Mapping[str, Tuple[float, float]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in _PROP_FIELDS:
            object.__setattr__(self, name, freeze_map(getattr(self, name)))

    @classmethod
    def from_scalars(cls, event_type: str, props: List[Tuple[str, Scalar]]) -> "InputEvent":
        """Build an event, filing each coerced value into its typed map.

        A property that recurs keeps only its last value, even when the two
        occurrences coerced to different types.
        """
        maps: Dict[ScalarKind, Dict[str, Any]] = {
            ScalarKind.STRING: {},
            ScalarKind.BOOL: {},
            ScalarKind.INT: {},
            ScalarKind.FLOAT: {},
            ScalarKind.VECTOR2: {},
        }
        for name, scalar in props:
            for bucket in maps.values():
                bucket.pop(name, None)
            kind = ScalarKind.STRING if scalar.kind == ScalarKind.RAW else scalar.kind
            maps[kind][name] = scalar.value

        return cls(
            event_type=event_type,
            string_props=maps[ScalarKind.STRING],
            bool_props=maps[ScalarKind.BOOL],
            int_props=maps[ScalarKind.INT],
            float_props=maps[ScalarKind.FLOAT],
            vec2_props=maps[ScalarKind.VECTOR2],
        )

    def trigger_string(self) -> str:
        """Human-readable trigger such as ``ctrl+A`` or ``double_left_click``."""
        return _trigger_string(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_type": self.event_type,
            "string_props": dict(self.string_props),
            "bool_props": dict(self.bool_props),
            "int_props": dict(self.int_props),
            "float_props": dict(self.float_props),
            "vec2_props": {k: list(v) for k, v in self.vec2_props.items()},
        }


@dataclass(frozen=True)
class Action:
    """A named input action from the ``[input]`` section."""

    name: str
    deadzone: Optional[float] = None
    events: Tuple[InputEvent, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "events", tuple(self.events))

    def trigger_strings(self) -> List[str]:
        return [event.trigger_string() for event in self.events]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "deadzone": self.deadzone,
            "events": [event.to_dict() for event in self.events],
        }


__all__ = ["Action", "InputEvent"]
