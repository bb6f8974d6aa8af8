# application/normalizer.py
from __future__ import annotations
import re
from typing import List, Sequence

from domain.countries import get_country_code
from domain.errors import RateParseFailure, RowCountMismatch
from domain.models import CountryRecord, Rate, RawRow

# "19", "5.5", "8,1" – najwyżej dwa miejsca po przecinku, więc "1,000" to nie 1.0
_RATE_RE = re.compile(r"^\d+(?:[.,]\d{1,2})?$", re.ASCII)


def pair_rows(names: Sequence[str], rates: Sequence[str]) -> List[RawRow]:
    """Pair names with rates by position; both selections must have the same length."""
    if len(names) != len(rates):
        raise RowCountMismatch(len(names), len(rates))
    return [RawRow(name_text=n, rate_text=r) for n, r in zip(names, rates)]


def parse_rate(text: str) -> Rate:
    """
    "19" -> 19, "5.5" -> 5.5, "8,1" -> 8.1, "21%" -> 21.
    Wszystko inne (pusty tekst, "1e1", "1_9", "-1", "1,000") to błąd – nigdy nie zamieniamy na 0.
    """
    raw = text.strip()
    if raw.endswith("%"):
        raw = raw[:-1].rstrip()
    if not _RATE_RE.match(raw):
        raise RateParseFailure(text)
    value = float(raw.replace(",", "."))
    # 19.0 -> 19, żeby JSON miał "rate": 19
    return int(value) if value.is_integer() else value


def to_record(row: RawRow) -> CountryRecord:
    return CountryRecord(
        code=get_country_code(row.name_text),
        name=row.name_text,
        rate=parse_rate(row.rate_text),
    )


def normalize_rows(rows: Sequence[RawRow]) -> List[CountryRecord]:
    # kolejność wejścia = kolejność wyjścia (all.json, _redirects)
    return [to_record(row) for row in rows]


def normalize(names: Sequence[str], rates: Sequence[str]) -> List[CountryRecord]:
    return normalize_rows(pair_rows(names, rates))
