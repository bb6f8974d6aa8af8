# application/vat_api_service.py
from __future__ import annotations
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional, Union

from application.artifacts import build_artifacts
from application.extractor import extract_columns
from application.normalizer import normalize
from core.config import Config
from domain.models import Dataset
from integration.static_writer import StaticApiWriter, read_redirects_prefix
from integration.vat_page_adapter import VatRatesPageAdapter

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class VatApiService:
    """
    Primary: strona KE (tabela table-vat-rates) -> Dataset -> dist/api/*.json + dist/_redirects.
    Przebieg jest liniowy: każdy błąd (transport, kształt strony, liczba wierszy,
    nieznany kraj, stawka) przerywa go zanim cokolwiek zostanie zapisane.
    """

    def __init__(self,
                 adapter: Optional[VatRatesPageAdapter] = None,
                 writer: Optional[StaticApiWriter] = None,
                 static_dir: Union[str, Path, None] = None,
                 clock: Callable[[], datetime] = _utcnow) -> None:
        self._adapter = adapter or VatRatesPageAdapter()
        self._writer = writer or StaticApiWriter()
        self._static_dir = static_dir or Config.STATIC_DIR
        self._clock = clock

    def build_dataset(self, html: str, now: Optional[datetime] = None) -> Dataset:
        names, rates = extract_columns(html)
        records = normalize(names, rates)
        return Dataset(updated_at=now or self._clock(), records=tuple(records))

    def run(self) -> Dataset:
        now = self._clock()
        html = self._adapter.fetch_html()
        dataset = self.build_dataset(html, now=now)
        logger.info("Parsed %d countries", len(dataset.records))

        # prefiks czytamy przed zapisem – brak pliku też ma przerwać przebieg bez zmian w dist/
        prefix = read_redirects_prefix(self._static_dir)
        self._writer.write(build_artifacts(dataset, prefix))
        return dataset
