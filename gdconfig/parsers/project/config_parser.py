"""Section parsers for the project descriptor (``project.godot``).

Sections handled here: application, autoload, dotnet, rendering,
layer_names and input. The ``config_version`` preamble key is handled by
the document parser.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from gdconfig.lexing.object_literal import parse_events_array
from gdconfig.lexing.scalars import ScalarKind, coerce_scalar, strip_quotes
from gdconfig.lexing.splitter import split_first_top_level, split_top_level, unwrap_call
from gdconfig.models.events import Action, InputEvent
from gdconfig.models.sections import (
    ApplicationSection,
    AutoloadSection,
    Dialect,
    DotnetSection,
    InputSection,
    LayerNamesSection,
    RenderingSection,
    SectionKind,
)
from gdconfig.parsers.base import (
    BlockSectionParser,
    FlatSectionParser,
    MapSectionParser,
    as_text,
)

logger = logging.getLogger("gdconfig.parsers.project.config_parser")


def parse_packed_string_array(value: str) -> List[str]:
    """Parse ``PackedStringArray("a", "b")`` into ``["a", "b"]``.

    A value without the wrapper is treated as a bare comma-separated list.
    An empty array yields an empty list.
    """
    inner = unwrap_call(value, "PackedStringArray")
    if inner is None:
        inner = value
    items = [strip_quotes(item.strip()) for item in split_top_level(inner, ",")]
    return [item for item in items if item]


class ApplicationParser(FlatSectionParser):
    SECTION = SectionKind.APPLICATION
    DIALECT = Dialect.PROJECT

    KEYS = {
        "config/name": ("name", as_text),
        "run/main_scene": ("main_scene", as_text),
        "config/icon": ("icon", as_text),
        "config/features": ("features", parse_packed_string_array),
    }

    def build(self, values: Dict[str, Any]) -> ApplicationSection:
        return ApplicationSection(**values)


class DotnetParser(FlatSectionParser):
    SECTION = SectionKind.DOTNET
    DIALECT = Dialect.PROJECT

    KEYS = {"project/assembly_name": ("assembly_name", as_text)}

    def build(self, values: Dict[str, Any]) -> DotnetSection:
        return DotnetSection(**values)


class RenderingParser(FlatSectionParser):
    SECTION = SectionKind.RENDERING
    DIALECT = Dialect.PROJECT

    KEYS = {
        "renderer/rendering_method": ("rendering_method", as_text),
        "renderer/rendering_method.mobile": ("rendering_method_mobile", as_text),
    }

    def build(self, values: Dict[str, Any]) -> RenderingSection:
        return RenderingSection(**values)


class AutoloadParser(MapSectionParser):
    SECTION = SectionKind.AUTOLOAD
    DIALECT = Dialect.PROJECT

    def build(self, entries: Dict[str, str]) -> AutoloadSection:
        return AutoloadSection(autoloads=entries)


class LayerNamesParser(MapSectionParser):
    SECTION = SectionKind.LAYER_NAMES
    DIALECT = Dialect.PROJECT

    def build(self, entries: Dict[str, str]) -> LayerNamesSection:
        return LayerNamesSection(layers=entries)


class InputParser(BlockSectionParser):
    """Parser for the ``[input]`` section.

    Each action is a block::

        Fire={
        "deadzone": 0.5,
        "events": [Object(InputEventMouseButton,...,"position":Vector2(0, 0),...)
        , Object(InputEventKey,...)
        ]
        }

    The events array may continue over several member lines; lines are
    joined until its brackets balance.
    """

    SECTION = SectionKind.INPUT
    DIALECT = Dialect.PROJECT

    def parse_lines(self, lines: List[str]) -> InputSection:
        actions: Dict[str, Action] = {}
        for name, members in self.iter_blocks(lines):
            actions[name] = self.parse_action(name, members)
        return InputSection(actions=actions)

    def parse_action(self, name: str, members: List[str]) -> Action:
        """Build one action from its block member lines."""
        deadzone: Optional[float] = None
        events: List[InputEvent] = []

        for key, value in self._iter_members(members):
            if key == "deadzone":
                scalar = coerce_scalar(value.rstrip(",").strip())
                if scalar.kind in (ScalarKind.INT, ScalarKind.FLOAT):
                    deadzone = float(scalar.value)
            elif key == "events":
                events = parse_events_array(value)
            else:
                self.report_dropped("action property", key)

        return Action(name=name, deadzone=deadzone, events=tuple(events))

    def _iter_members(self, members: List[str]):
        """Yield ``(key, raw_value)`` pairs, merging multi-line arrays."""
        index = 0
        while index < len(members):
            line = members[index]
            index += 1
            pair = split_first_top_level(line, ":")
            if pair is None:
                logger.debug("Skipping action member without ':' %r", line)
                continue
            key = strip_quotes(pair[0].strip())
            value = pair[1].strip()

            start = index
            depth = _bracket_depth(value)
            while depth > 0 and index < len(members):
                value = f"{value} {members[index]}"
                depth += _bracket_depth(members[index])
                index += 1
            if index > start:
                logger.debug("Merged %d continuation line(s) into '%s'", index - start, key)
            yield key, value


def _bracket_depth(text: str) -> int:
    """Net ``[`` minus ``]`` count outside double quotes."""
    depth = 0
    in_quotes = False
    escaped = False
    for ch in text:
        if in_quotes:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_quotes = False
        elif ch == '"':
            in_quotes = True
        elif ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
    return depth


PROJECT_SECTION_PARSERS = (
    ApplicationParser,
    AutoloadParser,
    DotnetParser,
    InputParser,
    LayerNamesParser,
    RenderingParser,
)


__all__ = [
    "ApplicationParser",
    "AutoloadParser",
    "DotnetParser",
    "InputParser",
    "LayerNamesParser",
    "PROJECT_SECTION_PARSERS",
    "RenderingParser",
    "parse_packed_string_array",
]
