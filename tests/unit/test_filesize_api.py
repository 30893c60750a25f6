from __future__ import annotations

import pytest

from filesizes.filesize import (
    BYTES,
    DENOMINATIONS,
    KIBIBYTES,
    KILOBYTES,
    TERABYTES,
    Denomination,
    DenominationResolutionError,
    FilesizeError,
    SizeParseError,
    format_size,
    parse_size,
    resolve_denomination,
    select_denomination,
)


def test_parse_size() -> None:
    assert parse_size("2MB") == 2_000_000
    assert parse_size("0.125 tib") == 137_438_953_472


@pytest.mark.parametrize("raw", ["", "not a filesize"])
def test_parse_size_errors(raw: str) -> None:
    with pytest.raises(SizeParseError):
        parse_size(raw)


def test_resolve_denomination() -> None:
    assert resolve_denomination("Kibibytes") == KIBIBYTES
    with pytest.raises(DenominationResolutionError):
        resolve_denomination("not a denomination")


def test_errors_share_a_base() -> None:
    with pytest.raises(FilesizeError):
        parse_size("nothing here")
    with pytest.raises(FilesizeError):
        resolve_denomination("")


def test_format_size_defaults() -> None:
    assert format_size(92874) == "92.9 KB"
    assert format_size(92874, use_abbreviation=False) == "92.9 Kilobytes"
    assert format_size(2048, use_metric=False) == "2.0 KiB"


def test_format_size_with_pattern_and_system() -> None:
    assert format_size(3_000_000_000, pattern="%.0f") == "3 GB"
    assert format_size(1, False, pattern="%.0f") == "1 Byte"


def test_format_size_with_explicit_denomination() -> None:
    assert format_size(42, pattern="%.0f", denomination=BYTES) == "42 B"
    assert format_size(512, pattern="%.1f", denomination=KIBIBYTES) == "0.5 KiB"
    assert format_size(2000, False, pattern="%.0f", denomination=KILOBYTES) == "2 Kilobytes"
    # An explicit denomination wins over the unit system flag.
    assert format_size(2000, use_metric=False, pattern="%.0f", denomination=KILOBYTES) == "2 KB"


def test_select_denomination() -> None:
    assert select_denomination(0) == BYTES
    assert select_denomination(2048) == KILOBYTES
    assert select_denomination(2048, use_metric=False) == KIBIBYTES
    assert select_denomination(10**18) == TERABYTES


@pytest.mark.parametrize("denomination", DENOMINATIONS, ids=lambda item: item.name)
@pytest.mark.parametrize("multiple", [1, 7, 250])
def test_formatted_sizes_parse_back_to_the_same_magnitude(
    denomination: Denomination,
    multiple: int,
) -> None:
    byte_count = multiple * denomination.scale_factor
    text = format_size(byte_count, pattern="%.0f", denomination=denomination)

    assert parse_size(text) == byte_count
    assert resolve_denomination(text.split()[1]) == denomination
