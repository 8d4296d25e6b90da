"""
Delimited text formatters (CSV and TSV).

Rows are written as-is: embedded delimiters, quotes and newlines are not
escaped, so the output pastes cleanly into a spreadsheet for ordinary
values but is not a strict RFC 4180 document.
"""

from ..models import OutputFormat, Pair


class DelimitedFormatter:
    """Renders pairs as a KEY/VALUE header followed by one row per pair."""

    FORMAT: OutputFormat
    DELIMITER = ","
    HEADER = ("KEY", "VALUE")

    @classmethod
    def render(cls, pairs: list[Pair]) -> str:
        lines = [cls.DELIMITER.join(cls.HEADER)]
        lines.extend(f"{p.key}{cls.DELIMITER}{p.value}" for p in pairs)
        return "\n".join(lines)


class CSVFormatter(DelimitedFormatter):
    """Comma-separated output."""

    FORMAT = OutputFormat.CSV
    DELIMITER = ","


class TSVFormatter(DelimitedFormatter):
    """Tab-separated output."""

    FORMAT = OutputFormat.TSV
    DELIMITER = "\t"
