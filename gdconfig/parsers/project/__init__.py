"""Project descriptor (project.godot) section parsers."""

from .config_parser import (
    PROJECT_SECTION_PARSERS,
    ApplicationParser,
    AutoloadParser,
    DotnetParser,
    InputParser,
    LayerNamesParser,
    RenderingParser,
    parse_packed_string_array,
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
