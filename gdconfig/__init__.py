"""gdconfig - parser for Godot project and extension descriptors.

Reads ``project.godot`` and ``*.gdextension`` files into a typed Document
and renders extension sections back to text.
"""

__version__ = "0.1.0"

from gdconfig.config import ParserConfig, load_parser_config
from gdconfig.errors import ConfigurationError, DescriptorReadError, RecoverableError
from gdconfig.models import (
    Action,
    Dialect,
    Document,
    InputEvent,
    SectionKind,
    dump_extension,
)
from gdconfig.parsers import (
    DescriptorParser,
    load_document,
    parse,
    parse_extension,
    parse_project,
)

__all__ = [
    "Action",
    "ConfigurationError",
    "DescriptorParser",
    "DescriptorReadError",
    "Dialect",
    "Document",
    "InputEvent",
    "ParserConfig",
    "RecoverableError",
    "SectionKind",
    "__version__",
    "dump_extension",
    "load_document",
    "load_parser_config",
    "parse",
    "parse_extension",
    "parse_project",
]
