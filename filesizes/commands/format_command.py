from __future__ import annotations

from ..core.denomination import UnitSystem
from ..core.format_config import FormatConfig
from ..core.size_formatter import SizeFormatter
from .base import Command


def parse_byte_count(value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise SystemExit(f"Invalid byte count: {value}") from exc


class FormatCommand(Command):
    def __init__(self, value: str, config: FormatConfig) -> None:
        self._value = value
        self._config = config

    def run(self) -> int:
        byte_count = parse_byte_count(self._value)
        print(self._render(byte_count))
        return 0

    def _render(self, byte_count: int) -> str:
        return self._call(
            SizeFormatter.format_for_system,
            self._config.pattern,
            byte_count,
            UnitSystem.from_metric(self._config.use_metric),
            self._config.use_abbreviation,
        )
