from __future__ import annotations

import logging
import math
import re

from .denomination import MAX_BYTE_COUNT
from .errors import SizeParseError
from .resolver import DenominationResolver

logger = logging.getLogger(__name__)


class SizeParser:
    # Longer unit names come before the abbreviations they contain.
    _pattern = re.compile(
        r"(\d*\.\d+|\d+)\s*"
        r"(kilobyte|kibibyte|megabyte|mebibyte|gigabyte|gibibyte|terabyte|tebibyte"
        r"|byte|kb|kib|mb|mib|gb|gib|tb|tib|b)"
    )

    @classmethod
    def parse_bytes(cls, value: str) -> int:
        match = cls._pattern.search(value.lower())
        if not match:
            raise SizeParseError(f"no filesize pattern found in {value!r}")
        number = float(match.group(1))
        denomination = DenominationResolver.resolve(match.group(2))
        logger.debug(
            "Matched %r as %s %s", match.group(0), match.group(1), denomination.name)

        total = number * denomination.scale_factor
        if not math.isfinite(total) or total >= MAX_BYTE_COUNT + 1:
            raise SizeParseError(
                f"{match.group(0)!r} exceeds the 64-bit byte range")
        return int(total)
