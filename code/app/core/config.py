import logging
import os

FRA_DATA_PATH = os.getenv("FRA_DATA_PATH", os.path.join("data", "fra_records.json"))
FRA_LOCALE = os.getenv("FRA_LOCALE", "ko").strip().lower()
FRA_LOG_LEVEL = os.getenv("FRA_LOG_LEVEL", "INFO").upper()
FRA_API_TITLE = os.getenv("FRA_API_TITLE", "FRA Core API")

SUPPORTED_LOCALES = ("ko", "en")

_configured = False


def resolve_locale(value: str | None = None) -> str:
    locale = (value or FRA_LOCALE or "").strip().lower()
    return locale if locale in SUPPORTED_LOCALES else "ko"


def configure_logging(level: str | None = None) -> None:
    global _configured
    if _configured:
        return
    logging.basicConfig(
        level=getattr(logging, (level or FRA_LOG_LEVEL), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _configured = True
