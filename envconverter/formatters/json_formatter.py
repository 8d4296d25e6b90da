"""
JSON formatter.

Pairs are collected into a single object, so a key that appears more than
once keeps the value of its last occurrence (at the position of its first).
"""

import json

from ..models import OutputFormat, Pair


class JSONFormatter:
    """Renders pairs as a pretty-printed JSON object."""

    FORMAT = OutputFormat.JSON
    INDENT = 2

    @staticmethod
    def render(pairs: list[Pair]) -> str:
        data = {p.key: p.value for p in pairs}
        return json.dumps(data, indent=JSONFormatter.INDENT, ensure_ascii=False)
