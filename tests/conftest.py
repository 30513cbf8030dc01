# tests/conftest.py
from datetime import datetime

import pytest
import pytz

from src.common.config.settings import settings
from src.offer_domain.application.offer_catalog_service import OfferCatalogApplicationService
from src.offer_domain.domain.entities.channel_offer import ChannelOffer


@pytest.fixture(autouse=True)
def mock_settings_offer_enumerations(mocker) -> None:
    """Mocks the operator code and status sets in settings for consistent testing."""
    mocker.patch.object(settings, "OFFER_OPERATOR_CODES", frozenset({"MP", "facl", "fape", "faco"}))
    mocker.patch.object(settings, "OFFER_STATUSES", frozenset({"active", "inactive", "deleted"}))
    mocker.patch.object(settings, "FEED_TIMEZONE", None)


@pytest.fixture
def sale_start_date() -> datetime:
    return datetime(2024, 5, 1, 8, 0, 0, tzinfo=pytz.utc)


@pytest.fixture
def sale_end_date() -> datetime:
    return datetime(2024, 5, 31, 23, 59, 59, tzinfo=pytz.utc)


@pytest.fixture
def plain_offer() -> ChannelOffer:
    """Offer with required fields only."""
    return ChannelOffer(operator_code="MP", price=100.0, stock=5, status="active")


@pytest.fixture
def sale_offer(sale_start_date, sale_end_date) -> ChannelOffer:
    """Offer with every optional field filled in."""
    return ChannelOffer(
        operator_code="facl",
        price=19990.0,
        stock=12,
        status="active",
        is_published=1,
        business_unit="Falabella",
        sale_price=14990.0,
        sale_start_date=sale_start_date,
        sale_end_date=sale_end_date,
    )


@pytest.fixture
def sample_offer_records() -> list[dict]:
    """Sample offer records as returned by the seller center."""
    return [
        {
            "BusinessUnit": "Falabella",
            "OperatorCode": "facl",
            "Price": "19990.00",
            "SpecialPrice": "14990.00",
            "SpecialFromDate": "2024-05-01 08:00:00",
            "SpecialToDate": "2024-05-31 23:59:59",
            "Stock": "12",
            "Status": "active",
            "IsPublished": "1",
        },
        {
            "BusinessUnit": "Falabella Peru",
            "OperatorCode": "fape",
            "Price": "129.90",
            "SpecialPrice": "",
            "SpecialFromDate": "",
            "SpecialToDate": "",
            "Stock": "0",
            "Status": "inactive",
            "IsPublished": "0",
        },
    ]


@pytest.fixture
def offer_catalog_service() -> OfferCatalogApplicationService:
    return OfferCatalogApplicationService()
