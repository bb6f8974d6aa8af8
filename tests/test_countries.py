from __future__ import annotations

import pytest

from domain.countries import COUNTRIES_TO_CODE, KNOWN_CODES, get_country_code
from domain.errors import UnrecognizedCountry


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        COUNTRIES_TO_CODE["Atlantis"] = "AX"  # type: ignore[index]


def test_codes_are_unique_two_letter_uppercase() -> None:
    codes = list(COUNTRIES_TO_CODE.values())
    assert len(codes) == len(set(codes)) == len(KNOWN_CODES)
    assert all(len(c) == 2 and c.isupper() for c in codes)


def test_vies_style_codes() -> None:
    assert get_country_code("Greece") == "EL"
    assert get_country_code("United Kingdom") == "UK"


def test_unknown_country() -> None:
    with pytest.raises(UnrecognizedCountry, match="Atlantis"):
        get_country_code("Atlantis")
