from .delimited_formatter import CSVFormatter, TSVFormatter
from .json_formatter import JSONFormatter
from .markdown_formatter import MarkdownFormatter
