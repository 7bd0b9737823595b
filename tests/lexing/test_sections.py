"""Section splitter tests."""

from __future__ import annotations

from gdconfig.lexing.sections import split_sections


def test_sections_are_contiguous_and_ordered() -> None:
    """Spans run from header to the next header, in document order."""
    text = "[a]\nx=1\n[b]\ny=2\n"
    result = split_sections(text)
    assert result.preamble is None
    assert [s.name for s in result.sections] == ["a", "b"]
    assert result.sections[0].text == "[a]\nx=1\n"
    assert result.sections[1].text == "[b]\ny=2\n"
    assert result.sections[0].end == result.sections[1].start
    assert result.sections[1].end == len(text)


def test_preamble_holds_text_before_first_header() -> None:
    """Global lines before any header are returned separately."""
    text = "; comment\nconfig_version=5\n\n[application]\nconfig/name=\"x\"\n"
    result = split_sections(text)
    assert result.preamble == "; comment\nconfig_version=5\n\n"
    assert result.sections[0].name == "application"


def test_duplicate_headers_yield_two_spans() -> None:
    """A repeated section produces one span per occurrence."""
    result = split_sections("[a]\nx=1\n[a]\nx=2\n")
    assert [s.name for s in result.sections] == ["a", "a"]


def test_header_must_be_whole_line() -> None:
    """Brackets inside a line do not start a section."""
    result = split_sections('[a]\nkey=[b]\n  [c]\n[d] trailing\n')
    assert [s.name for s in result.sections] == ["a"]


def test_crlf_headers_are_recognised() -> None:
    """A carriage return before the newline is tolerated."""
    result = split_sections("[a]\r\nx=1\r\n[b]\r\n")
    assert [s.name for s in result.sections] == ["a", "b"]


def test_text_without_headers_is_all_preamble() -> None:
    """No headers means no sections."""
    assert split_sections("config_version=5\n").sections == []
    assert split_sections("").preamble is None
