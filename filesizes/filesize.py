"""Functional interface to the filesizes library.

    >>> parse_size("2MB")
    2000000
    >>> format_size(92874)
    '92.9 KB'
    >>> format_size(512, pattern="%.1f", denomination=KIBIBYTES)
    '0.5 KiB'
    >>> select_denomination(2048, use_metric=False).name
    'Kibibyte'
"""

from __future__ import annotations

from .core.denomination import (
    BYTES,
    DENOMINATIONS,
    GIBIBYTES,
    GIGABYTES,
    KIBIBYTES,
    KILOBYTES,
    MEBIBYTES,
    MEGABYTES,
    TEBIBYTES,
    TERABYTES,
    Denomination,
    UnitSystem,
)
from .core.errors import (
    ByteCountError,
    DenominationResolutionError,
    FilesizeError,
    FilesizeParseError,
    InvalidPatternError,
    SizeParseError,
)
from .core.resolver import DenominationResolver
from .core.size_formatter import DEFAULT_PATTERN, SizeFormatter
from .core.size_parser import SizeParser
from .core.size_selector import SizeSelector

__all__ = [
    "BYTES",
    "DEFAULT_PATTERN",
    "DENOMINATIONS",
    "GIBIBYTES",
    "GIGABYTES",
    "KIBIBYTES",
    "KILOBYTES",
    "MEBIBYTES",
    "MEGABYTES",
    "TEBIBYTES",
    "TERABYTES",
    "ByteCountError",
    "Denomination",
    "DenominationResolutionError",
    "FilesizeError",
    "FilesizeParseError",
    "InvalidPatternError",
    "SizeParseError",
    "UnitSystem",
    "format_size",
    "parse_size",
    "resolve_denomination",
    "select_denomination",
]


def parse_size(text: str) -> int:
    """Parse a size such as ``"45 gigabytes"`` or ``"2MB"`` into bytes."""
    return SizeParser.parse_bytes(text)


def resolve_denomination(token: str) -> Denomination:
    return DenominationResolver.resolve(token)


def format_size(
    byte_count: int,
    use_abbreviation: bool = True,
    use_metric: bool = True,
    *,
    pattern: str = DEFAULT_PATTERN,
    denomination: Denomination | None = None,
) -> str:
    """Format ``byte_count`` as a human-readable string.

    Args:
        byte_count: Number of bytes, 0 through 2**64 - 1.
        use_abbreviation: "KB" when true, "Kilobytes" when false.
        use_metric: Choose among 1000-based units when true, 1024-based
            units when false. Ignored when ``denomination`` is given.
        pattern: printf-style float format for the number.
        denomination: Unit to express the size in; picked with
            :func:`select_denomination` when omitted.

    Returns:
        The rendered size, e.g. "92.9 KB" or "1 Byte".
    """
    if denomination is None:
        return SizeFormatter.format_for_system(
            pattern, byte_count, UnitSystem.from_metric(use_metric), use_abbreviation)
    return SizeFormatter.format(pattern, byte_count, denomination, use_abbreviation)


def select_denomination(byte_count: int, use_metric: bool = True) -> Denomination:
    return SizeSelector.select(byte_count, UnitSystem.from_metric(use_metric))
