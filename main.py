"""Main application entry point for building channel offer feed attributes."""

import logging
import sys

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import ApplicationError
from src.common.logger_config import setup_logging
from src.offer_domain.application.offer_catalog_service import OfferCatalogApplicationService

logger = logging.getLogger(__name__)


def main(offers_config_path: str | None = None) -> int:
    """Loads the configured offers and logs their feed attributes."""
    setup_logging()
    service = OfferCatalogApplicationService()

    try:
        offers = service.load_offers(offers_config_path or settings.OFFERS_CONFIG_PATH)
    except ApplicationError as e:
        logger.error(f"Failed to load channel offers: {e}")
        return 1

    for attributes in service.collect_feed_attributes(offers):
        logger.info(f"[bold]{attributes['OperatorCode']}[/bold]: {attributes}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
