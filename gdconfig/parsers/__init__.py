"""Parsers package.

Section parsers of both descriptor dialects are registered from here.
"""

import logging

from gdconfig.parsers.registry import SectionRegistry, register_dialect
from gdconfig.parsers.extension import EXTENSION_SECTION_PARSERS
from gdconfig.parsers.project import PROJECT_SECTION_PARSERS
from gdconfig.parsers.descriptor import (
    DescriptorParser,
    dialect_for_path,
    load_document,
    parse,
    parse_extension,
    parse_project,
)

logger = logging.getLogger("gdconfig.parsers")

register_dialect(EXTENSION_SECTION_PARSERS)
register_dialect(PROJECT_SECTION_PARSERS)

logger.debug(
    "Section registration complete: %s",
    ", ".join(SectionRegistry.get_instance().list_sections()),
)

__all__ = [
    "DescriptorParser",
    "SectionRegistry",
    "dialect_for_path",
    "load_document",
    "parse",
    "parse_extension",
    "parse_project",
    "register_dialect",
]
