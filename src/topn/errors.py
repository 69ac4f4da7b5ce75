"""Error taxonomy for argument, file access and line format failures."""

from __future__ import annotations

from pathlib import Path

NOT_FOUND = "not-found"
NOT_READABLE = "not-readable"


class TopNError(Exception):
    """Base class for all topn errors."""


class ArgumentError(TopNError):
    """Bad command-line arity or a count that is not a positive integer."""


class AccessError(TopNError):
    """The input path is missing or cannot be read."""

    def __init__(self, path: Path, kind: str):
        self.path = path
        self.kind = kind
        if kind == NOT_FOUND:
            message = "Cannot find input file"
        else:
            message = "Cannot read input file"
        super().__init__(message)


class FormatError(TopNError):
    """A malformed input line. Always tagged with its 1-based line number."""

    def __init__(self, reason: str, line_number: int):
        self.reason = reason
        self.line_number = line_number
        super().__init__(f"{reason} at line {line_number}")


class ConfigError(TopNError):
    """The .topn/config.toml file could not be parsed or validated."""
