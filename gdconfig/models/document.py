"""Parsed descriptor document."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Iterator, Optional, Union

from gdconfig.models.frozen import thaw
from gdconfig.models.sections import (
    ApplicationSection,
    AutoloadSection,
    ConfigurationSection,
    DependenciesSection,
    DotnetSection,
    IconsSection,
    InputSection,
    LayerNamesSection,
    LibrariesSection,
    RenderingSection,
    SectionKind,
)

Section = Union[
    ConfigurationSection,
    LibrariesSection,
    IconsSection,
    DependenciesSection,
    ApplicationSection,
    AutoloadSection,
    DotnetSection,
    RenderingSection,
    LayerNamesSection,
    InputSection,
]

EXTENSION_SECTIONS = (
    SectionKind.CONFIGURATION,
    SectionKind.LIBRARIES,
    SectionKind.ICONS,
    SectionKind.DEPENDENCIES,
)


@dataclass(frozen=True)
class Document:
    """Result of one parse call.

    Holds at most one instance of each section kind plus the optional
    top-level ``config_version`` found before the first header. Field names
    match :class:`SectionKind` values.
    """

    config_version: Optional[int] = None
    configuration: Optional[ConfigurationSection] = None
    libraries: Optional[LibrariesSection] = None
    icons: Optional[IconsSection] = None
    dependencies: Optional[DependenciesSection] = None
    application: Optional[ApplicationSection] = None
    autoload: Optional[AutoloadSection] = None
    dotnet: Optional[DotnetSection] = None
    rendering: Optional[RenderingSection] = None
    layer_names: Optional[LayerNamesSection] = None
    input: Optional[InputSection] = None

    def section(self, kind: SectionKind) -> Optional[Section]:
        """Return the section of ``kind``, or None when it was absent."""
        return getattr(self, SectionKind(kind).value)

    def sections(self) -> Iterator[Section]:
        """Yield every present section in declaration order."""
        for item in fields(self):
            if item.name == "config_version":
                continue
            value = getattr(self, item.name)
            if value is not None:
                yield value

    def is_empty(self) -> bool:
        return self.config_version is None and next(self.sections(), None) is None

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready mapping of the present sections."""
        data: Dict[str, Any] = {}
        if self.config_version is not None:
            data["config_version"] = self.config_version
        for section in self.sections():
            if isinstance(section, InputSection):
                data[section.KIND.value] = section.to_dict()
            else:
                data[section.KIND.value] = {
                    item.name: thaw(getattr(section, item.name)) for item in fields(section)
                }
        return dict(sorted(data.items()))


def dump_extension(document: Document) -> str:
    """Render the extension descriptor sections of ``document`` as text.

    Sections are separated by a blank line and emitted in the canonical
    order configuration, libraries, icons, dependencies.
    """
    chunks = []
    for kind in EXTENSION_SECTIONS:
        section = document.section(kind)
        if section is not None:
            chunks.append(section.to_text())
    return "\n".join(chunks)


__all__ = ["Document", "EXTENSION_SECTIONS", "Section", "dump_extension"]
