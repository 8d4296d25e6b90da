"""
EnvConverter Core Engine

The orchestrator that reads an env file, parses it into ordered pairs and
routes them to the formatter for the requested output format. Parsing and
formatting are pure; all file access happens here.
"""

from pathlib import Path
from typing import Optional

from .formatters import CSVFormatter, TSVFormatter, JSONFormatter, MarkdownFormatter
from .models import OutputFormat, Pair
from .parser import EnvParser


FORMATTERS = {
    formatter.FORMAT: formatter
    for formatter in (CSVFormatter, TSVFormatter, JSONFormatter, MarkdownFormatter)
}


def format_pairs(pairs: list[Pair], format_name: str) -> str:
    """
    Render pairs in the named output format.

    Args:
        pairs: Ordered pairs to render.
        format_name: One of "csv", "tsv", "json" or "md".

    Returns:
        The rendered text, without a trailing newline.

    Raises:
        InvalidFormatError: If format_name is not a supported format.
    """
    output_format = OutputFormat.from_name(format_name)
    return FORMATTERS[output_format].render(pairs)


class EnvConverter:
    """
    Main conversion engine.

    Accepts env text or an env file path and produces the text of the
    requested tabular format.
    """

    DEFAULT_FORMAT = OutputFormat.CSV.value
    ENCODING = "utf-8"

    def __init__(self, base_path: Optional[Path] = None):
        self.base_path = base_path or Path.cwd()
        self.parser = EnvParser(base_path=self.base_path)

    def convert(self, content: str, format_name: str = DEFAULT_FORMAT) -> str:
        """Convert env text to the requested format."""
        pairs = self.parser.parse_content(content)
        return format_pairs(pairs, format_name)

    def convert_file(
        self,
        input_path: Path | str,
        format_name: str = DEFAULT_FORMAT,
        output_path: Optional[Path | str] = None,
    ) -> str:
        """
        Convert an env file.

        Args:
            input_path: Env file, relative to the base path unless absolute.
            format_name: Output format name.
            output_path: If given, the result is also written to this file.

        Returns:
            The converted text.

        Raises:
            FileNotFoundError: If the input file does not exist.
            InvalidFormatError: If format_name is not supported. Nothing is
                written in that case.
        """
        pairs = self.parser.parse_file(self.resolve_path(input_path))
        result = format_pairs(pairs, format_name)

        if output_path is not None:
            self.write_output(result, output_path)

        return result

    def write_output(self, result: str, output_path: Path | str) -> Path:
        """Write converted text to a file and return the resolved path."""
        out_path = self.resolve_path(output_path)
        out_path.write_text(result, encoding=self.ENCODING, newline="")
        return out_path

    def resolve_path(self, path: Path | str) -> Path:
        """Resolve a path against the engine's base path."""
        return (self.base_path / Path(path)).resolve()

    @staticmethod
    def supported_formats() -> list[str]:
        """Return the names of all supported output formats."""
        return [f.value for f in OutputFormat]
