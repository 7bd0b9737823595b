"""Parser configuration schema using Pydantic for validation.

The defaults reproduce the lenient behaviour of the descriptor format, so a
default-constructed ParserConfig is what every parse uses unless told
otherwise.
"""

import logging
from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator


class ParserConfig(BaseModel):
    """Configuration for descriptor parsing.

    Attributes:
        comment_prefixes: Line prefixes marking a comment line. The project
            descriptor writes ``;`` comments, extension descriptors use ``#``.
        dropped_log_level: Logging level used when an unknown section or key
            is dropped.
        encoding: Text encoding used when loading descriptors from disk.
    """

    comment_prefixes: List[str] = Field(default_factory=lambda: ["#", ";"])
    dropped_log_level: str = "DEBUG"
    encoding: str = "utf-8"

    model_config = {"extra": "allow", "frozen": True}

    @field_validator("comment_prefixes")
    @classmethod
    def validate_prefixes(cls, v: List[str]) -> List[str]:
        """Validate that every comment prefix is a non-empty string."""
        for prefix in v:
            if not prefix or not isinstance(prefix, str):
                raise ValueError(f"Invalid comment prefix: {prefix!r}")
        return v

    @field_validator("dropped_log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate that the level is a standard logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level '{v}'")
        return level

    @property
    def dropped_level(self) -> int:
        return logging.getLevelName(self.dropped_log_level)

    def is_comment(self, line: str) -> bool:
        return line.startswith(tuple(self.comment_prefixes))

    @classmethod
    def default(cls) -> "ParserConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParserConfig":
        """Create configuration from a dictionary.

        Raises:
            ValidationError: If configuration is invalid.
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
