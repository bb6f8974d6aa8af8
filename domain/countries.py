# domain/countries.py
from types import MappingProxyType
from typing import Mapping

from domain.errors import UnrecognizedCountry

# Nazwy dokładnie tak, jak w tabeli na stronie KE. Trzymane ręcznie –
# gdy strona doda/zmieni nazwę kraju, trzeba tu dopisać wpis.
COUNTRIES_TO_CODE: Mapping[str, str] = MappingProxyType({
    "Austria": "AT",
    "Belgium": "BE",
    "Bulgaria": "BG",
    "Croatia": "HR",
    "Cyprus": "CY",
    "Czech Republic": "CZ",
    "Denmark": "DK",
    "Estonia": "EE",
    "Finland": "FI",
    "France": "FR",
    "Germany": "DE",
    "Greece": "EL",  # kod VIES, nie ISO (GR)
    "Hungary": "HU",
    "Ireland": "IE",
    "Italy": "IT",
    "Latvia": "LV",
    "Lithuania": "LT",
    "Luxembourg": "LU",
    "Malta": "MT",
    "Netherlands": "NL",
    "Poland": "PL",
    "Portugal": "PT",
    "Romania": "RO",
    "Slovakia": "SK",
    "Slovenia": "SI",
    "Spain": "ES",
    "Sweden": "SE",
    "United Kingdom": "UK",
})

KNOWN_CODES = frozenset(COUNTRIES_TO_CODE.values())


def get_country_code(country_name: str) -> str:
    """Exact lookup (case- and whitespace-sensitive); unknown name is fatal."""
    try:
        return COUNTRIES_TO_CODE[country_name]
    except KeyError:
        raise UnrecognizedCountry(country_name) from None
