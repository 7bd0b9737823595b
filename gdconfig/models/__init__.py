"""Document model produced by the descriptor parsers."""

from .events import Action, InputEvent
from .sections import (
    ApplicationSection,
    AutoloadSection,
    ConfigurationSection,
    DependenciesSection,
    Dialect,
    DotnetSection,
    IconsSection,
    InputSection,
    LayerNamesSection,
    LibrariesSection,
    RenderingSection,
    SectionKind,
)
from .document import EXTENSION_SECTIONS, Document, Section, dump_extension

__all__ = [
    "Action",
    "ApplicationSection",
    "AutoloadSection",
    "ConfigurationSection",
    "DependenciesSection",
    "Dialect",
    "Document",
    "DotnetSection",
    "EXTENSION_SECTIONS",
    "IconsSection",
    "InputEvent",
    "InputSection",
    "LayerNamesSection",
    "LibrariesSection",
    "RenderingSection",
    "Section",
    "SectionKind",
    "dump_extension",
]
