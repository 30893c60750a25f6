from __future__ import annotations

from ..core.size_parser import SizeParser
from .format_command import FormatCommand


class ConvertCommand(FormatCommand):
    """Parses a size expression and prints it in the configured units."""

    def run(self) -> int:
        byte_count = self._call(SizeParser.parse_bytes, self._value)
        print(self._render(byte_count))
        return 0
