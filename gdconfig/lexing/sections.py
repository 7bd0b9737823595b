"""Split a descriptor into ``[section]`` spans."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional

SECTION_HEADER_RE = re.compile(r"^\[(\w+)\][ \t]*\r?$", re.MULTILINE)


@dataclass(frozen=True)
class SectionSpan:
    """One section occurrence, header line included.

    Attributes:
        name: Header name without brackets.
        start: Offset of the ``[`` in the source text.
        end: Offset one past the last character of the section.
        text: ``source[start:end]``.
    """

    name: str
    start: int
    end: int
    text: str


@dataclass(frozen=True)
class SplitResult:
    """Sections in document order plus the text before the first header."""

    preamble: Optional[str] = None
    sections: List[SectionSpan] = field(default_factory=list)


def split_sections(text: str) -> SplitResult:
    """Slice ``text`` into contiguous, non-overlapping section spans.

    A header is a whole line of the form ``[word]``. Each header starts a
    span running to the next header or the end of the text. Text before the
    first header becomes the preamble (None when there is none). When the
    text has no header at all, the whole text is the preamble.

    A section name that occurs twice yields two spans, in order.
    """
    matches = list(SECTION_HEADER_RE.finditer(text))
    if not matches:
        return SplitResult(preamble=text or None, sections=[])

    first = matches[0].start()
    preamble = text[:first] if first > 0 else None

    sections: List[SectionSpan] = []
    for index, match in enumerate(matches):
        start = match.start()
        end = matches[index + 1].start() if index + 1 < len(matches) else len(text)
        sections.append(
            SectionSpan(name=match.group(1), start=start, end=end, text=text[start:end])
        )
    return SplitResult(preamble=preamble, sections=sections)


__all__ = ["SECTION_HEADER_RE", "SectionSpan", "SplitResult", "split_sections"]
