# tools/build_vat_api.py
"""
Buduje statyczne API stawek VAT na podstawie strony KE.

Wejście:
    - https://ec.europa.eu/.../vat-rates_en (Config.VAT_RATES_URL)
    - static/_redirects (prefiks reguł)

Wyjście:
    - dist/api/all.json        {"updatedAt": ..., "data": [{code, name, rate}, ...]}
    - dist/api/<code>.json     {"updatedAt": ..., "data": {code, name, rate}}
    - dist/_redirects          prefiks + "/api/<code>    /api/<code>.json 200!"
"""

from __future__ import annotations

import logging
import sys

from application.vat_api_service import VatApiService
from core.logging_config import configure_logging
from domain.errors import VatRatesError

logger = logging.getLogger("build_vat_api")


def main() -> int:
    configure_logging()

    try:
        dataset = VatApiService().run()
    except (VatRatesError, OSError):
        logger.exception("Could not write files.")
        return 1

    logger.info("Done: %d countries, updatedAt=%s", len(dataset.records), dataset.updated_at_iso)
    return 0


if __name__ == "__main__":
    sys.exit(main())
