"""Section parsers for the extension descriptor (``*.gdextension``).

Sections handled here: configuration, libraries, icons and dependencies.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from gdconfig.lexing.scalars import unquote_text
from gdconfig.lexing.splitter import split_first_top_level
from gdconfig.models.sections import (
    ConfigurationSection,
    DependenciesSection,
    Dialect,
    IconsSection,
    LibrariesSection,
    SectionKind,
)
from gdconfig.parsers.base import (
    BlockSectionParser,
    FlatSectionParser,
    MapSectionParser,
    as_bool,
    as_text,
)

logger = logging.getLogger("gdconfig.parsers.extension.config_parser")


class ConfigurationParser(FlatSectionParser):
    """Parser for ``[configuration]``.

    ``reloadable`` and ``android.aar_plugin`` are booleans compared
    case-insensitively against ``true``; every other known key is text.
    """

    SECTION = SectionKind.CONFIGURATION
    DIALECT = Dialect.EXTENSION

    KEYS = {
        "entry_symbol": ("entry_symbol", as_text),
        "compatibility.minimum": ("compatibility_minimum", as_text),
        "compatibility.maximum": ("compatibility_maximum", as_text),
        "reloadable": ("reloadable", as_bool),
        "android.aar_plugin": ("android_aar_plugin", as_bool),
    }

    def build(self, values: Dict[str, Any]) -> ConfigurationSection:
        return ConfigurationSection(**values)


class LibrariesParser(MapSectionParser):
    SECTION = SectionKind.LIBRARIES
    DIALECT = Dialect.EXTENSION

    def build(self, entries: Dict[str, str]) -> LibrariesSection:
        return LibrariesSection(libraries=entries)


class IconsParser(MapSectionParser):
    SECTION = SectionKind.ICONS
    DIALECT = Dialect.EXTENSION

    def build(self, entries: Dict[str, str]) -> IconsSection:
        return IconsSection(icons=entries)


class DependenciesParser(BlockSectionParser):
    """Parser for ``[dependencies]``.

    Each platform block holds ``"source" : "install_path"`` members,
    optionally comma-terminated. The colon is found with a quote-aware scan,
    so ``res://`` inside the source path does not split the member.
    """

    SECTION = SectionKind.DEPENDENCIES
    DIALECT = Dialect.EXTENSION

    def parse_lines(self, lines: List[str]) -> DependenciesSection:
        dependencies: Dict[str, Dict[str, str]] = {}
        for platform, members in self.iter_blocks(lines):
            dependencies[platform] = self.parse_members(members)
        return DependenciesSection(dependencies=dependencies)

    def parse_members(self, members: List[str]) -> Dict[str, str]:
        paths: Dict[str, str] = {}
        for line in members:
            pair = split_first_top_level(line, ":")
            if pair is None:
                logger.debug("Skipping dependency line without ':' %r", line)
                continue
            source = unquote_text(pair[0].strip().rstrip(",").strip())
            target = unquote_text(pair[1].strip().rstrip(",").strip())
            if not source:
                continue
            paths[source] = target
        return paths


EXTENSION_SECTION_PARSERS = (
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
