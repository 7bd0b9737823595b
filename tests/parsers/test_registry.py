"""Section registry tests."""

from __future__ import annotations

import logging

import pytest

from gdconfig.models import Dialect
from gdconfig.parsers.extension import EXTENSION_SECTION_PARSERS, IconsParser
from gdconfig.parsers.project import PROJECT_SECTION_PARSERS, InputParser
from gdconfig.parsers.registry import SectionRegistry


def test_global_registry_has_both_dialects() -> None:
    """Importing the parsers package registers every section."""
    registry = SectionRegistry.get_instance()
    assert registry.list_dialects() == [Dialect.EXTENSION, Dialect.PROJECT]
    assert registry.list_sections(Dialect.EXTENSION) == [
        "configuration",
        "dependencies",
        "icons",
        "libraries",
    ]
    assert registry.list_sections(Dialect.PROJECT) == [
        "application",
        "autoload",
        "dotnet",
        "input",
        "layer_names",
        "rendering",
    ]
    assert len(registry.list_sections()) == 10


def test_lookup_respects_dialect() -> None:
    """A section is only found in its own dialect or ANY."""
    registry = SectionRegistry.get_instance()
    assert registry.get_parser("input") is InputParser
    assert registry.get_parser("input", Dialect.PROJECT) is InputParser
    assert registry.get_parser("input", Dialect.EXTENSION) is None
    assert registry.get_parser("icons", Dialect.EXTENSION) is IconsParser
    assert registry.get_parser("physics") is None


def test_fresh_registry_and_overwrite_warning(caplog: pytest.LogCaptureFixture) -> None:
    """Registering a section twice warns and keeps the newer class."""
    registry = SectionRegistry()
    registry.register_dialect(EXTENSION_SECTION_PARSERS)
    registry.register_dialect(PROJECT_SECTION_PARSERS)

    class OtherIconsParser(IconsParser):
        pass

    with caplog.at_level(logging.WARNING, logger="gdconfig.parsers.registry"):
        registry.register_section(OtherIconsParser)
    assert registry.get_parser("icons") is OtherIconsParser
    assert "Overwriting existing parser for [icons]" in caplog.text
    assert SectionRegistry.get_instance().get_parser("icons") is IconsParser
