"""Section registry for managing per-dialect section parsers.

Each dialect (project, extension) registers one parser class per section
name here. Dispatch looks the header name up in this table instead of
trying every parser in turn.
"""

import logging
from typing import Dict, List, Optional, Type

from gdconfig.models.sections import Dialect
from gdconfig.parsers.base import BaseSectionParser

logger = logging.getLogger("gdconfig.parsers.registry")


class SectionRegistry:
    """Global registry of section parsers.

    Maps dialect -> section name -> parser class. Section names are unique
    across dialects, which is what lets Dialect.ANY parse a mixed document.
    """

    _instance: Optional["SectionRegistry"] = None

    def __init__(self) -> None:
        """Initialize the registry."""
        # dialect -> {section name -> parser class}
        self._parsers: Dict[Dialect, Dict[str, Type[BaseSectionParser]]] = {}

        logger.debug("Section registry initialized")

    @classmethod
    def get_instance(cls) -> "SectionRegistry":
        """Get singleton instance.

        Returns:
            SectionRegistry: Global registry instance.
        """
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register_section(self, parser_class: Type[BaseSectionParser]) -> None:
        """Register a section parser under its DIALECT and SECTION.

        Args:
            parser_class: Section parser class to register.
        """
        dialect = parser_class.DIALECT
        name = parser_class.SECTION.value
        table = self._parsers.setdefault(dialect, {})
        if name in table:
            logger.warning(
                "Overwriting existing parser for [%s] in dialect '%s': %s -> %s",
                name,
                dialect.value,
                table[name].__name__,
                parser_class.__name__,
            )

        table[name] = parser_class
        logger.debug(
            "Registered parser for [%s] (%s): %s",
            name,
            dialect.value,
            parser_class.__name__,
        )

    def register_dialect(self, parser_classes) -> None:
        """Register all section parsers of a dialect at once."""
        for parser_class in parser_classes:
            self.register_section(parser_class)

    def get_parser(
        self, section: str, dialect: Dialect = Dialect.ANY
    ) -> Optional[Type[BaseSectionParser]]:
        """Get parser class for a section name.

        Args:
            section: Header name without brackets.
            dialect: Restrict the lookup to one dialect; ANY searches all.

        Returns:
            Optional[Type[BaseSectionParser]]: Parser class or None if the
            section is unknown in that dialect.
        """
        if dialect == Dialect.ANY:
            for table in self._parsers.values():
                if section in table:
                    return table[section]
            return None
        return self._parsers.get(dialect, {}).get(section)

    def list_sections(self, dialect: Dialect = Dialect.ANY) -> List[str]:
        """List registered section names, sorted."""
        if dialect == Dialect.ANY:
            names = set()
            for table in self._parsers.values():
                names.update(table.keys())
            return sorted(names)
        return sorted(self._parsers.get(dialect, {}).keys())

    def list_dialects(self) -> List[Dialect]:
        return sorted(self._parsers.keys(), key=lambda d: d.value)


def register_dialect(parser_classes) -> None:
    """Register section parsers with the global registry.

    Convenience wrapper around SectionRegistry.register_dialect().
    """
    SectionRegistry.get_instance().register_dialect(parser_classes)
