"""Configuration schema and loading for gdconfig."""

from .schema import ParserConfig
from .loader import ConfigSource, load_parser_config

__all__ = [
    "ConfigSource",
    "ParserConfig",
    "load_parser_config",
]
