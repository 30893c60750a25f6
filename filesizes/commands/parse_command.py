from __future__ import annotations

from ..core.size_parser import SizeParser
from .base import Command


class ParseCommand(Command):
    def __init__(self, value: str) -> None:
        self._value = value

    def run(self) -> int:
        print(self._call(SizeParser.parse_bytes, self._value))
        return 0
