# domain/models.py
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Dict, Tuple, Union

Rate = Union[int, float]


@dataclass(frozen=True)
class RawRow:
    name_text: str
    rate_text: str


@dataclass(frozen=True)
class CountryRecord:
    code: str  # 2 litery, np. "DE" (uwaga: Grecja = "EL", UK = "UK")
    name: str
    rate: Rate  # procent, np. 19 albo 5.5

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class Dataset:
    updated_at: datetime
    records: Tuple[CountryRecord, ...]

    @property
    def updated_at_iso(self) -> str:
        """ISO-8601 w UTC z milisekundami, np. 2024-01-31T10:00:00.000Z."""
        ts = self.updated_at
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        ts = ts.astimezone(timezone.utc)
        return ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")
