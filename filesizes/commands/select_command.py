from __future__ import annotations

from ..core.denomination import UnitSystem
from ..core.format_config import FormatConfig
from ..core.size_selector import SizeSelector
from .base import Command
from .format_command import parse_byte_count


class SelectCommand(Command):
    def __init__(self, value: str, config: FormatConfig) -> None:
        self._value = value
        self._config = config

    def run(self) -> int:
        byte_count = parse_byte_count(self._value)
        system = UnitSystem.from_metric(self._config.use_metric)
        denomination = self._call(SizeSelector.select, byte_count, system)
        print(f"{denomination.name} ({denomination.abbreviation})")
        return 0
