"""
Parser for reading .env style files into ordered key/value pairs.
"""

from pathlib import Path
from typing import Optional

from .models import Pair


QUOTE_CHARS = ('"', "'")


class EnvParser:
    """
    Parses KEY=value text into a list of Pair objects.

    Parsing is permissive:
    - Blank lines and lines starting with '#' are skipped
    - Lines without '=' are skipped
    - Only the first '=' separates key from value
    - One layer of matching single or double quotes is removed from values
    """

    ENCODING = "utf-8-sig"

    def __init__(self, base_path: Optional[Path] = None):
        """
        Initialize the parser.

        Args:
            base_path: Base path for resolving relative file paths.
        """
        self.base_path = base_path or Path.cwd()

    def parse_file(self, file_path: Path | str) -> list[Pair]:
        """
        Parse an env file and return its pairs.

        Args:
            file_path: Path to the env file.

        Returns:
            Pairs in the order they appear in the file.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        path = Path(file_path)
        if not path.is_absolute():
            path = self.base_path / path

        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")

        content = path.read_text(encoding=self.ENCODING)
        return self.parse_content(content)

    def parse_content(self, content: str) -> list[Pair]:
        """
        Parse env content from a string.

        Args:
            content: The raw text to parse.

        Returns:
            Pairs in source line order. Never raises on malformed lines.
        """
        pairs = []
        for line in _normalize_newlines(content).split("\n"):
            pair = self._parse_line(line)
            if pair is not None:
                pairs.append(pair)
        return pairs

    def _parse_line(self, line: str) -> Optional[Pair]:
        """Parse one line, returning None for lines that carry no pair."""
        line = line.strip()
        if not line or line.startswith("#"):
            return None

        key, sep, value = line.partition("=")
        if not sep:
            return None

        return Pair(key=key.strip(), value=strip_quotes(value.strip()))


def strip_quotes(value: str) -> str:
    """Remove a single layer of matching outer quotes from a value."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in QUOTE_CHARS:
        return value[1:-1]
    return value


def _normalize_newlines(content: str) -> str:
    # CRLF/CR -> LF
    return content.replace("\r\n", "\n").replace("\r", "\n")


def parse_env(content: str) -> list[Pair]:
    """Parse env text into an ordered list of pairs."""
    return EnvParser().parse_content(content)
