"""Descriptor document parser.

Splits the text into section spans, dispatches each span to the parser
registered for its header name and assembles the resulting Document. A
section whose name is not registered for the requested dialect is dropped;
a section that occurs twice keeps its last occurrence.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Type, Union

from gdconfig.config.loader import ConfigSource, load_parser_config
from gdconfig.config.schema import ParserConfig
from gdconfig.errors import DescriptorReadError
from gdconfig.lexing.scalars import parse_int
from gdconfig.lexing.sections import split_sections
from gdconfig.models.document import Document
from gdconfig.models.sections import Dialect
from gdconfig.parsers.base import BaseSectionParser
from gdconfig.parsers.registry import SectionRegistry

logger = logging.getLogger("gdconfig.parsers.descriptor")

CONFIG_VERSION_KEY = "config_version"
EXTENSION_SUFFIX = ".gdextension"
PROJECT_SUFFIX = ".godot"


def dialect_for_path(path: Union[str, Path]) -> Dialect:
    """Guess the dialect from a descriptor's file name."""
    suffix = Path(path).suffix.lower()
    if suffix == EXTENSION_SUFFIX:
        return Dialect.EXTENSION
    if suffix == PROJECT_SUFFIX:
        return Dialect.PROJECT
    return Dialect.ANY


class DescriptorParser:
    """Parser for whole descriptor documents.

    Holds a ParserConfig and one instance of each section parser it has
    needed so far. Parsing itself keeps no state between calls.
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        registry: Optional[SectionRegistry] = None,
    ) -> None:
        """Initialize the document parser.

        Args:
            config: Parser configuration; defaults to ParserConfig().
            registry: Section registry; defaults to the global registry.
        """
        self.config = config or ParserConfig.default()
        self.registry = registry or SectionRegistry.get_instance()
        self._section_parsers: Dict[Type[BaseSectionParser], BaseSectionParser] = {}

    def _section_parser(self, parser_class: Type[BaseSectionParser]) -> BaseSectionParser:
        parser = self._section_parsers.get(parser_class)
        if parser is None:
            parser = parser_class(self.config)
            self._section_parsers[parser_class] = parser
        return parser

    def parse_preamble(self, preamble: Optional[str]) -> Optional[int]:
        """Recover ``config_version`` from the text before the first header.

        The key must hold a non-negative integer; any other value counts as
        absent. When the key recurs the last occurrence wins.
        """
        if not preamble:
            return None
        version: Optional[int] = None
        for raw in preamble.splitlines():
            line = raw.strip()
            if not line or self.config.is_comment(line):
                continue
            key, sep, value = line.partition("=")
            if not sep or key.strip() != CONFIG_VERSION_KEY:
                continue
            parsed = parse_int(value.strip())
            version = parsed if parsed is not None and parsed >= 0 else None
        return version

    def parse(self, text: str, dialect: Dialect = Dialect.ANY) -> Document:
        """Parse descriptor text into a Document.

        Args:
            text: Full descriptor text.
            dialect: Restrict recognised sections to one dialect. ANY accepts
                the sections of both.

        Returns:
            Document: Immutable parse result. Never raises for malformed
            content.
        """
        split = split_sections(text)
        found: Dict[str, Any] = {}

        for span in split.sections:
            parser_class = self.registry.get_parser(span.name, dialect)
            if parser_class is None:
                logger.log(
                    self.config.dropped_level,
                    "Dropping unknown section [%s] at offset %d",
                    span.name,
                    span.start,
                )
                continue
            section = self._section_parser(parser_class).parse(span.text)
            if section is None:
                continue
            if span.name in found:
                logger.debug("Section [%s] occurs again; keeping the later one", span.name)
            found[span.name] = section

        document = Document(config_version=self.parse_preamble(split.preamble), **found)
        logger.debug(
            "Parsed %d section span(s) into %d section(s)",
            len(split.sections),
            len(found),
        )
        return document

    def load(self, path: Union[str, Path], dialect: Optional[Dialect] = None) -> Document:
        """Read and parse a descriptor file.

        Args:
            path: Descriptor path.
            dialect: Dialect to parse with; guessed from the file name when
                omitted.

        Raises:
            DescriptorReadError: If the file cannot be read or decoded.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding=self.config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read %s: %s", path, e)
            raise DescriptorReadError(path, str(e)) from e

        if dialect is None:
            dialect = dialect_for_path(path)
        logger.debug("Parsing %s as %s descriptor", path, dialect.value)
        return self.parse(text, dialect)


def parse(text: str, config: ConfigSource = None) -> Document:
    """Parse text containing sections of either dialect."""
    return DescriptorParser(load_parser_config(config)).parse(text, Dialect.ANY)


def parse_project(text: str, config: ConfigSource = None) -> Document:
    """Parse a project descriptor; extension sections are dropped."""
    return DescriptorParser(load_parser_config(config)).parse(text, Dialect.PROJECT)


def parse_extension(text: str, config: ConfigSource = None) -> Document:
    """Parse an extension descriptor; project sections are dropped."""
    return DescriptorParser(load_parser_config(config)).parse(text, Dialect.EXTENSION)


def load_document(
    path: Union[str, Path],
    dialect: Optional[Dialect] = None,
    config: ConfigSource = None,
) -> Document:
    """Read and parse a descriptor file.

    Raises:
        DescriptorReadError: If the file cannot be read or decoded.
        ConfigurationError: If ``config`` is invalid.
    """
    return DescriptorParser(load_parser_config(config)).load(path, dialect)


__all__ = [
    "CONFIG_VERSION_KEY",
    "DescriptorParser",
    "dialect_for_path",
    "load_document",
    "parse",
    "parse_extension",
    "parse_project",
]
