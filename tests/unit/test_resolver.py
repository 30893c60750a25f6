from __future__ import annotations

import pytest

from filesizes.core.denomination import (
    BYTES,
    DENOMINATIONS,
    Denomination,
    KIBIBYTES,
    KILOBYTES,
    MEBIBYTES,
)
from filesizes.core.errors import DenominationResolutionError, FilesizeParseError
from filesizes.core.resolver import DenominationResolver


@pytest.mark.parametrize("denomination", DENOMINATIONS, ids=lambda item: item.name)
def test_resolves_abbreviation_name_and_plural(denomination: Denomination) -> None:
    assert DenominationResolver.resolve(denomination.abbreviation) == denomination
    assert DenominationResolver.resolve(denomination.name) == denomination
    assert DenominationResolver.resolve(denomination.name + "s") == denomination


@pytest.mark.parametrize("denomination", DENOMINATIONS, ids=lambda item: item.name)
def test_resolution_ignores_case(denomination: Denomination) -> None:
    assert DenominationResolver.resolve(denomination.abbreviation.upper()) == denomination
    assert DenominationResolver.resolve(denomination.name.lower()) == denomination
    assert DenominationResolver.resolve(denomination.name.upper() + "S") == denomination


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("  kb  ", KILOBYTES),
        ("kib", KIBIBYTES),
        ("bytes", BYTES),
        ("b", BYTES),
        ("mebibytes\t", MEBIBYTES),
    ],
)
def test_resolves_trimmed_tokens(token: str, expected: Denomination) -> None:
    assert DenominationResolver.resolve(token) == expected


@pytest.mark.parametrize("token", ["", "   ", "not a denomination", "x", "k"])
def test_unknown_tokens_raise(token: str) -> None:
    with pytest.raises(DenominationResolutionError, match="unresolvable denomination"):
        DenominationResolver.resolve(token)


def test_resolution_error_is_parse_error() -> None:
    with pytest.raises(FilesizeParseError) as exc:
        DenominationResolver.resolve("furlong")
    assert exc.value.token == "furlong"
    assert isinstance(exc.value, ValueError)
