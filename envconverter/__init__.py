"""
EnvConverter - .env to Spreadsheet-Friendly Format Converter

Converts .env style KEY=value files into CSV, TSV, JSON or Markdown tables
that paste cleanly into Google Sheets, Excel, or other tools. A single
stateless pass: parse the file into ordered pairs, then render them.
"""

__version__ = "1.0.0"

from .models import Pair, OutputFormat, EnvConverterError, InvalidFormatError
from .parser import EnvParser, parse_env
from .core import EnvConverter, format_pairs

__all__ = [
    "Pair",
    "OutputFormat",
    "EnvConverterError",
    "InvalidFormatError",
    "EnvParser",
    "parse_env",
    "EnvConverter",
    "format_pairs",
]
