"""
Markdown table formatter.
"""

from ..models import OutputFormat, Pair


class MarkdownFormatter:
    """Renders pairs as a two-column Markdown table."""

    FORMAT = OutputFormat.MD
    HEADER = "| KEY | VALUE |"
    DIVIDER = "|-----|-------|"

    @staticmethod
    def render(pairs: list[Pair]) -> str:
        lines = [MarkdownFormatter.HEADER, MarkdownFormatter.DIVIDER]
        for pair in pairs:
            lines.append(f"| {pair.key} | {pair.value} |")
        return "\n".join(lines)
