# domain/errors.py
"""
Błędy budowania API stawek VAT. Wszystkie są fatalne dla przebiegu:
nic nie zapisujemy, poprzednie pliki w dist/ zostają bez zmian.
"""


class VatRatesError(Exception):
    """Bazowy błąd przebiegu."""


class TransportFailure(VatRatesError):
    """Nie udało się pobrać strony źródłowej (albo przyszła pusta)."""


class StructuralMismatch(VatRatesError):
    """Strona zmieniła kształt – brak tabeli / wierszy."""


class RowCountMismatch(VatRatesError):
    def __init__(self, names_count: int, rates_count: int) -> None:
        self.names_count = names_count
        self.rates_count = rates_count
        super().__init__(
            f"Fetched more/less countries than rates: {names_count} countries, {rates_count} rates."
        )


class UnrecognizedCountry(VatRatesError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Got invalid country {name!r}")


class RateParseFailure(VatRatesError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Could not parse VAT rate {text!r}")
