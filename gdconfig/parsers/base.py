"""Base section parser interfaces.

Each section kind has one parser class. A parser receives the raw text of a
single section occurrence, header line included, and returns the section
model or None when the header names a different section. Parsing is
lenient: malformed lines and unknown keys are dropped, never raised.

Three shapes cover every section:

1. FlatSectionParser - fixed key table mapped onto model fields
2. MapSectionParser - every ``key=value`` pair kept in an open-ended map
3. BlockSectionParser - ``name = { ... }`` blocks of member lines
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Dict, Iterator, List, Optional, Tuple

from gdconfig.config.schema import ParserConfig
from gdconfig.lexing.scalars import unquote_text
from gdconfig.lexing.splitter import split_top_level
from gdconfig.models.sections import Dialect, SectionKind

logger = logging.getLogger("gdconfig.parsers.base")

# Converts a stripped raw value into the model field's value.
ValueConverter = Callable[[str], Any]


def as_text(value: str) -> str:
    return value


def as_bool(value: str) -> bool:
    """Case-insensitive ``true``; anything else is False."""
    return value.lower() == "true"


class BaseSectionParser(ABC):
    """Base class for section parsers.

    Subclasses set SECTION to the header they accept and DIALECT to the
    descriptor dialect the section belongs to.
    """

    SECTION: ClassVar[SectionKind]
    DIALECT: ClassVar[Dialect]

    def __init__(self, config: Optional[ParserConfig] = None) -> None:
        """Initialize parser.

        Args:
            config: Parser configuration; defaults to ParserConfig().
        """
        self.config = config or ParserConfig.default()

    @property
    def header(self) -> str:
        return f"[{self.SECTION.value}]"

    def accepts(self, text: str) -> bool:
        """Whether ``text`` starts with this parser's section header."""
        return text.strip().startswith(self.header)

    def parse(self, text: str):
        """Parse one section occurrence.

        Args:
            text: Section text including its header line.

        Returns:
            The section model, or None when the header does not match.
        """
        if not self.accepts(text):
            return None
        return self.parse_lines(list(self.iter_lines(text)))

    def iter_lines(self, text: str) -> Iterator[str]:
        """Yield trimmed content lines, skipping blanks, comments and headers."""
        for raw in text.splitlines():
            line = raw.strip()
            if not line or self.config.is_comment(line) or line.startswith("["):
                continue
            yield line

    @staticmethod
    def split_assignment(line: str) -> Optional[Tuple[str, str]]:
        """Split ``key=value`` on the first ``=``, trimming both sides.

        The value keeps its quotes; callers strip them when wanted.
        """
        key, sep, value = line.partition("=")
        if not sep:
            return None
        return key.strip(), value.strip()

    def report_dropped(self, what: str, name: str) -> None:
        logger.log(
            self.config.dropped_level,
            "Dropping unknown %s '%s' in [%s]",
            what,
            name,
            self.SECTION.value,
        )

    @abstractmethod
    def parse_lines(self, lines: List[str]):
        """Build the section model from content lines."""
        raise NotImplementedError


class FlatSectionParser(BaseSectionParser):
    """Parser for sections with a fixed set of known keys.

    KEYS maps each recognised raw key to ``(field_name, converter)``. A key
    that recurs keeps its last value; keys missing from the table are
    dropped.
    """

    KEYS: ClassVar[Dict[str, Tuple[str, ValueConverter]]] = {}

    @abstractmethod
    def build(self, values: Dict[str, Any]):
        """Create the section model from collected field values."""
        raise NotImplementedError

    def parse_lines(self, lines: List[str]):
        values: Dict[str, Any] = {}
        for line in lines:
            pair = self.split_assignment(line)
            if pair is None:
                continue
            key, raw_value = pair
            target = self.KEYS.get(key)
            if target is None:
                self.report_dropped("key", key)
                continue
            field_name, convert = target
            values[field_name] = convert(unquote_text(raw_value))
        return self.build(values)


class MapSectionParser(BaseSectionParser):
    """Parser for sections whose every ``key=value`` line is kept."""

    @abstractmethod
    def build(self, entries: Dict[str, str]):
        raise NotImplementedError

    def parse_lines(self, lines: List[str]):
        entries: Dict[str, str] = {}
        for line in lines:
            pair = self.split_assignment(line)
            if pair is None:
                continue
            key, raw_value = pair
            entries[key] = unquote_text(raw_value)
        return self.build(entries)


class BlockSectionParser(BaseSectionParser):
    """Parser for sections made of ``name = { ... }`` blocks.

    A line whose assignment value starts with ``{`` opens a block; the lone
    line ``}`` closes it. Members written on the opening line are split on
    top-level commas, and a line that also ends with ``}`` (``web = {}``,
    ``name = { "a" : "b" }``) closes its block at once. Lines outside a
    block are ignored. A block name that recurs replaces the earlier block.
    """

    @staticmethod
    def block_opener(line: str) -> Optional[Tuple[str, str]]:
        """Return ``(name, text_after_brace)`` when ``line`` opens a block."""
        pair = BaseSectionParser.split_assignment(line)
        if pair is None:
            return None
        name, value = pair
        if not name or '"' in name or not value.startswith("{"):
            return None
        return name, value[1:].strip()

    @staticmethod
    def inline_members(text: str) -> List[str]:
        return [member.strip() for member in split_top_level(text, ",") if member.strip()]

    def iter_blocks(self, lines: List[str]) -> Iterator[Tuple[str, List[str]]]:
        """Yield ``(name, member_lines)`` for every closed block.

        A block left open at the end of the section is still yielded.
        """
        name: Optional[str] = None
        members: List[str] = []
        for line in lines:
            opened = self.block_opener(line)
            if opened is not None:
                if name is not None:
                    yield name, members
                name, rest = opened
                closed = rest.endswith("}")
                if closed:
                    rest = rest[:-1]
                members = self.inline_members(rest)
                if closed:
                    yield name, members
                    name, members = None, []
            elif name is not None:
                if line == "}":
                    yield name, members
                    name, members = None, []
                else:
                    members.append(line)
        if name is not None:
            yield name, members


__all__ = [
    "BaseSectionParser",
    "BlockSectionParser",
    "FlatSectionParser",
    "MapSectionParser",
    "ValueConverter",
    "as_bool",
    "as_text",
]
