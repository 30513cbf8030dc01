"""Application settings and environment variables."""

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


def _split_csv(raw: str) -> frozenset[str]:
    """Parses a comma separated env value into a set of trimmed, non-empty items."""
    return frozenset(item.strip() for item in raw.split(",") if item.strip())


class Settings:
    # Closed sets supplied by the seller center; offers are validated against them
    OFFER_OPERATOR_CODES: frozenset[str] = _split_csv(os.getenv("OFFER_OPERATOR_CODES", "facl,fape,faco"))
    OFFER_STATUSES: frozenset[str] = _split_csv(os.getenv("OFFER_STATUSES", "active,inactive,deleted"))

    # Timezone applied to naive sale dates read from API responses, e.g. "America/Santiago"
    FEED_TIMEZONE: Optional[str] = os.getenv("FEED_TIMEZONE")

    OFFERS_CONFIG_PATH: str = os.getenv("OFFERS_CONFIG_PATH", "offers.json")

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL


settings = Settings()
