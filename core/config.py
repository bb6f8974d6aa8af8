# core/config.py
import os

from dotenv import load_dotenv

# wczytanie .env (dev-friendly); .env.local uzupełnia tylko brakujące wartości
load_dotenv()
load_dotenv(dotenv_path=".env.local", override=False)


class Config:
    # Zmienne środowiskowe poniżej to wyłącznie nadpisania deweloperskie (testy, podgląd lokalny).
    # Produkcyjny przebieg ich nie ustawia: stały URL KE, dist/ i static/.

    # Źródło – strona KE ze stawkami VAT (usługi elektroniczne)
    VAT_RATES_URL = os.environ.get(
        "VAT_RATES_URL",
        "https://ec.europa.eu/taxation_customs/business/vat/"
        "telecommunications-broadcasting-electronic-services/vat-rates_en",
    )
    HTTP_TIMEOUT = int(os.environ.get("HTTP_TIMEOUT", "60"))

    # Wyjście – statyczne API (dist/api/*.json + dist/_redirects)
    DIST_DIR = os.environ.get("VAT_DIST_DIR", "dist")
    # Prefiks pliku _redirects trzymamy w static/
    STATIC_DIR = os.environ.get("VAT_STATIC_DIR", "static")
    WRITER_MAX_WORKERS = int(os.environ.get("WRITER_MAX_WORKERS", "8"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
