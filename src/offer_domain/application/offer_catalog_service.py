# src/offer_domain/application/offer_catalog_service.py
"""Application service that turns offer records into channel offers and feed attributes."""

import json
import logging
from typing import Any

from src.common.exceptions.custom_exceptions import ApplicationError, InvalidDomainError
from src.offer_domain.domain.entities.channel_offer import ChannelOffer
from src.offer_domain.domain.entities.channel_offers import ChannelOffers

logger = logging.getLogger(__name__)


class OfferCatalogApplicationService:
    """Loads channel offers for a product and prepares them for the feed builder."""

    def __init__(self, strict: bool = False) -> None:
        """
        Args:
            strict: Propagate the first invalid record instead of logging and skipping it
        """
        self.strict = strict

    def load_offers(self, offers_config_path: str) -> ChannelOffers:
        """Reads offer records from a JSON file and builds the offers collection."""
        logger.info(f"Loading channel offers from {offers_config_path}...")

        try:
            with open(offers_config_path, "r", encoding="utf-8") as f:
                offers_data = json.load(f)
        except FileNotFoundError as e:
            raise ApplicationError(f"Offers file not found at {offers_config_path}", e)
        except json.JSONDecodeError as e:
            raise ApplicationError(f"Error decoding offers from {offers_config_path}", e)

        # Handle different JSON structures
        if isinstance(offers_data, dict) and "offers" in offers_data:
            records = offers_data["offers"]
        elif isinstance(offers_data, list):
            records = offers_data
        else:
            raise ApplicationError("Invalid offers file format")

        if not isinstance(records, list):
            raise ApplicationError(f"Offers must be a list, got {type(records).__name__}")

        return self.build_offers(records)

    def build_offers(self, records: list[dict[str, Any]]) -> ChannelOffers:
        offers = ChannelOffers()
        skipped = 0

        for index, record in enumerate(records):
            try:
                offers.add(ChannelOffer.from_api_response(record))
            except InvalidDomainError as e:
                if self.strict:
                    raise
                skipped += 1
                logger.warning(f"Skipping offer record #{index}: {e}")

        logger.info(f"Built {len(offers)} channel offers ({skipped} skipped).")
        return offers

    def collect_feed_attributes(self, offers: ChannelOffers) -> list[dict[str, Any]]:
        """Returns the feed attribute mapping of every offer, in collection order."""
        return [offer.get_all_attributes() for offer in offers]
