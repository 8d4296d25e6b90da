"""
Core data structures for the env conversion pipeline.
"""

from dataclasses import dataclass
from enum import Enum


class EnvConverterError(Exception):
    """Base class for errors raised by envconverter."""
    pass


class InvalidFormatError(EnvConverterError, ValueError):
    """Raised when an output format name is not recognized."""

    def __init__(self, format_name: str):
        self.format_name = format_name
        names = " | ".join(f.value for f in OutputFormat)
        super().__init__(f"Invalid format '{format_name}'. Use {names}")


class OutputFormat(Enum):
    """Output encodings supported by the formatter."""
    CSV = "csv"
    TSV = "tsv"
    JSON = "json"
    MD = "md"

    @classmethod
    def from_name(cls, name: str) -> "OutputFormat":
        """
        Look up a format by its command-line name.

        Args:
            name: Format name, e.g. "csv". Case-sensitive.

        Returns:
            The matching OutputFormat member.

        Raises:
            InvalidFormatError: If the name is not one of the known formats.
        """
        try:
            return cls(name)
        except ValueError:
            raise InvalidFormatError(name) from None


@dataclass(frozen=True)
class Pair:
    """A single KEY=value entry read from an env file."""
    key: str
    value: str
