from __future__ import annotations

import logging

from .denomination import Denomination, UnitSystem, check_byte_count, denominations_for

logger = logging.getLogger(__name__)


class SizeSelector:
    @classmethod
    def select(
        cls,
        byte_count: int,
        system: UnitSystem = UnitSystem.DECIMAL,
    ) -> Denomination:
        """Pick the smallest denomination that keeps the value below the base.

        Counts too large for every unit saturate at the system's largest one.
        """
        check_byte_count(byte_count)
        ladder = denominations_for(system)
        for denomination in ladder:
            if byte_count / denomination.scale_factor < system.base:
                return denomination
        logger.debug("%d bytes saturates at %s", byte_count, ladder[-1].name)
        return ladder[-1]
