"""Helpers for loading parser configuration from TOML/JSON sources.

This module provides a single entry point `load_parser_config`
that accepts various configuration sources:

* None -> default ParserConfig
* dict -> ParserConfig.from_dict
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings

A TOML or JSON document may either hold the settings at the top level or
nest them under a ``[parser]`` table.
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from gdconfig.config.schema import ParserConfig
from gdconfig.errors import ConfigurationError

logger = logging.getLogger("gdconfig.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], ParserConfig, None]


def _parse_text(text: str, fmt: Optional[str]) -> Dict[str, Any]:
    """Parse configuration text as JSON or TOML.

    When ``fmt`` is None the format is guessed: text starting with ``{`` is
    JSON, anything else TOML.
    """
    if fmt is None:
        fmt = "json" if text.lstrip().startswith("{") else "toml"
    try:
        if fmt == "json":
            data = json.loads(text)
        else:
            data = tomllib.loads(text)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid {fmt.upper()} configuration: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError("Configuration root must be a mapping")
    return data


def _build(data: Dict[str, Any]) -> ParserConfig:
    section = data.get("parser", data)
    if not isinstance(section, dict):
        raise ConfigurationError("[parser] configuration must be a mapping")
    try:
        return ParserConfig.from_dict(section)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid parser configuration: {e}") from e


def load_parser_config(source: ConfigSource) -> ParserConfig:
    """Load ParserConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns ParserConfig.default()
            * ParserConfig: returned unchanged
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        ParserConfig instance.

    Raises:
        ConfigurationError: If the source cannot be read or is invalid.
    """
    if source is None:
        logger.debug("No config source provided; using default ParserConfig")
        return ParserConfig.default()

    if isinstance(source, ParserConfig):
        return source

    if isinstance(source, dict):
        logger.debug("Loading ParserConfig from provided dict")
        return _build(source)

    if isinstance(source, (str, Path)):
        path = Path(source)
        is_file = False
        try:
            is_file = path.is_file()
        except (OSError, ValueError):
            # Inline text that is not a valid path
            is_file = False

        if is_file:
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise ConfigurationError(f"Failed to read config {path}: {e}") from e
            suffix = path.suffix.lower()
            fmt = "json" if suffix == ".json" else "toml" if suffix in {".toml", ".tml"} else None
            logger.debug("Loading ParserConfig from %s", path)
            return _build(_parse_text(text, fmt))

        if isinstance(source, Path):
            raise ConfigurationError(f"Config file not found: {source}")

        logger.debug("Loading ParserConfig from inline text")
        return _build(_parse_text(source, None))

    raise ConfigurationError(f"Unsupported config source type: {type(source).__name__}")


__all__ = ["ConfigSource", "load_parser_config"]
