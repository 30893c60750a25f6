from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import ByteCountError

MAX_BYTE_COUNT = 2**64 - 1


@dataclass(frozen=True)
class Denomination:
    """A named file-size unit and the number of bytes in one of it."""

    scale_factor: int
    abbreviation: str
    name: str


class UnitSystem(Enum):
    DECIMAL = 1000
    BINARY = 1024

    @property
    def base(self) -> int:
        return self.value

    @classmethod
    def from_metric(cls, use_metric: bool) -> UnitSystem:
        return cls.DECIMAL if use_metric else cls.BINARY


BYTES = Denomination(1, "B", "Byte")
KILOBYTES = Denomination(1000, "KB", "Kilobyte")
MEGABYTES = Denomination(1000**2, "MB", "Megabyte")
GIGABYTES = Denomination(1000**3, "GB", "Gigabyte")
TERABYTES = Denomination(1000**4, "TB", "Terabyte")

KIBIBYTES = Denomination(1024, "KiB", "Kibibyte")
MEBIBYTES = Denomination(1024**2, "MiB", "Mebibyte")
GIBIBYTES = Denomination(1024**3, "GiB", "Gibibyte")
TEBIBYTES = Denomination(1024**4, "TiB", "Tebibyte")

# Resolution walks this order; the first prefix match wins.
DENOMINATIONS: tuple[Denomination, ...] = (
    BYTES,
    KILOBYTES,
    MEGABYTES,
    GIGABYTES,
    TERABYTES,
    KIBIBYTES,
    MEBIBYTES,
    GIBIBYTES,
    TEBIBYTES,
)

_LADDERS: dict[UnitSystem, tuple[Denomination, ...]] = {
    UnitSystem.DECIMAL: (BYTES, KILOBYTES, MEGABYTES, GIGABYTES, TERABYTES),
    UnitSystem.BINARY: (BYTES, KIBIBYTES, MEBIBYTES, GIBIBYTES, TEBIBYTES),
}


def denominations_for(system: UnitSystem) -> tuple[Denomination, ...]:
    """Return the five denominations of ``system`` in increasing magnitude."""
    return _LADDERS[system]


def check_byte_count(byte_count: int) -> int:
    if isinstance(byte_count, bool) or not isinstance(byte_count, int):
        raise ByteCountError(
            f"Byte count must be an int, got {type(byte_count).__name__}")
    if not 0 <= byte_count <= MAX_BYTE_COUNT:
        raise ByteCountError(f"Byte count out of 64-bit range: {byte_count}")
    return byte_count
