"""Exception hierarchy for gdconfig.

The parsing engine never raises for malformed descriptor content; bad lines
and unknown sections are dropped. Exceptions are reserved for the loaders
around it: reading a descriptor from disk and building a parser
configuration.
"""


class RecoverableError(Exception):
    """Base class for errors a caller can handle by skipping the input.

    These errors indicate expected failure conditions such as a missing
    file, not programming errors.
    """
    pass


class ConfigurationError(RecoverableError):
    """Parser configuration could not be loaded or failed validation."""
    pass


class DescriptorReadError(RecoverableError):
    """A descriptor file could not be read or decoded."""

    def __init__(self, path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read {path}: {reason}")


__all__ = ["ConfigurationError", "DescriptorReadError", "RecoverableError"]
