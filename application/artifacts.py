# application/artifacts.py
from __future__ import annotations
import json
from typing import Dict, Iterable, List, Union

from domain.models import CountryRecord, Dataset

ALL_PATH = "api/all.json"
REDIRECTS_PATH = "_redirects"


def with_timestamp(updated_at: str, data: Union[Dict, List[Dict]]) -> Dict:
    return {"updatedAt": updated_at, "data": data}


def country_path(record: CountryRecord) -> str:
    return f"api/{record.code.lower()}.json"


def country_payload(dataset: Dataset, record: CountryRecord) -> Dict:
    return with_timestamp(dataset.updated_at_iso, record.as_dict())


def all_payload(dataset: Dataset) -> Dict:
    return with_timestamp(dataset.updated_at_iso, [r.as_dict() for r in dataset.records])


def redirect_line(code: str) -> str:
    code = code.lower()
    return f"/api/{code}    /api/{code}.json 200!"


def redirects_text(prefix: str, records: Iterable[CountryRecord]) -> str:
    """Statyczny prefiks (static/_redirects) + jedna reguła na kraj, w kolejności rekordów."""
    return "\n".join([prefix, *(redirect_line(r.code) for r in records)])


def _dumps(payload: Dict) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def build_artifacts(dataset: Dataset, redirects_prefix: str) -> Dict[str, str]:
    """
    Ścieżka względna (od dist/) -> gotowa treść pliku:
      api/all.json, api/<code>.json dla każdego kraju, _redirects.
    """
    artifacts: Dict[str, str] = {ALL_PATH: _dumps(all_payload(dataset))}
    for record in dataset.records:
        artifacts[country_path(record)] = _dumps(country_payload(dataset, record))
    artifacts[REDIRECTS_PATH] = redirects_text(redirects_prefix, dataset.records)
    return artifacts
