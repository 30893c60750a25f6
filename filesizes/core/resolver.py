from __future__ import annotations

import logging

from .denomination import DENOMINATIONS, Denomination
from .errors import DenominationResolutionError

logger = logging.getLogger(__name__)


class DenominationResolver:
    """Maps unit tokens such as "kb", "KiB" or "kilobytes" to a denomination.

    A token matches when it starts with a denomination's abbreviation or full
    name, compared case-insensitively, which lets plural names through.
    """

    @classmethod
    def resolve(cls, token: str) -> Denomination:
        normalized = token.strip().lower()
        for denomination in DENOMINATIONS:
            if normalized.startswith(denomination.abbreviation.lower()):
                return denomination
            if normalized.startswith(denomination.name.lower()):
                return denomination
        logger.debug("No denomination matches token %r", token)
        raise DenominationResolutionError(token)
