"""Extension descriptor (.gdextension) section parsers."""

from .config_parser import (
    EXTENSION_SECTION_PARSERS,
    ConfigurationParser,
    DependenciesParser,
    IconsParser,
    LibrariesParser,
)

__all__ = [
    "ConfigurationParser",
    "DependenciesParser",
    "EXTENSION_SECTION_PARSERS",
    "IconsParser",
    "LibrariesParser",
]
