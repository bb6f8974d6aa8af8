# integration/vat_page_adapter.py
from __future__ import annotations
import logging
from typing import Dict, Optional

import requests

from core.config import Config
from domain.errors import TransportFailure

logger = logging.getLogger(__name__)


class VatRatesPageAdapter:
    """
    Adapter do strony KE ze stawkami VAT (telecom/broadcasting/e-services).
      - jedno żądanie GET, bez parametrów i bez autoryzacji,
      - brak retry – każdy błąd transportu = TransportFailure (przebieg przerwany),
      - pusta odpowiedź traktowana jak brak danych.
    """

    def __init__(self,
                 session: Optional[requests.Session] = None,
                 url: Optional[str] = None,
                 timeout: Optional[int] = None) -> None:
        self.s = session or requests.Session()
        self.url = url or Config.VAT_RATES_URL
        self.timeout = timeout or Config.HTTP_TIMEOUT

        # debug/diag
        self.last_request: Optional[str] = None
        self.last_status: Optional[int] = None

    def _headers(self) -> Dict[str, str]:
        return {"Accept": "text/html"}

    def fetch_html(self) -> str:
        self.last_request = self.url
        try:
            r = self.s.get(self.url, headers=self._headers(), timeout=self.timeout)
            self.last_status = r.status_code
            r.raise_for_status()
        except requests.RequestException as e:
            raise TransportFailure(f"Could not fetch {self.url}: {e}") from e

        html = r.text
        if not html or not html.strip():
            raise TransportFailure(f"Empty response body from {self.url}")
        logger.info("Fetched %s (%d chars, HTTP %s)", self.url, len(html), r.status_code)
        return html
