from __future__ import annotations

from .denomination import Denomination, UnitSystem, check_byte_count
from .errors import InvalidPatternError
from .size_selector import SizeSelector

DEFAULT_PATTERN = "%.1f"


class SizeFormatter:
    @classmethod
    def format(
        cls,
        pattern: str,
        byte_count: int,
        denomination: Denomination,
        use_abbreviation: bool = True,
    ) -> str:
        check_byte_count(byte_count)
        number = cls.render_number(pattern, byte_count / denomination.scale_factor)
        if use_abbreviation:
            unit = denomination.abbreviation
        else:
            # Singular only when the rendered text reads "1".
            unit = denomination.name if number == "1" else f"{denomination.name}s"
        return f"{number} {unit}"

    @classmethod
    def format_for_system(
        cls,
        pattern: str,
        byte_count: int,
        system: UnitSystem = UnitSystem.DECIMAL,
        use_abbreviation: bool = True,
    ) -> str:
        denomination = SizeSelector.select(byte_count, system)
        return cls.format(pattern, byte_count, denomination, use_abbreviation)

    @staticmethod
    def render_number(pattern: str, value: float) -> str:
        try:
            rendered = pattern % value
        except (TypeError, ValueError) as exc:
            raise InvalidPatternError(pattern) from exc
        return rendered.strip()
