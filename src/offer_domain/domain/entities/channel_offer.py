"""Channel offer entity."""

import logging
import math
from datetime import datetime
from typing import Any, Mapping, Optional

from src.common.config.settings import settings
from src.common.dtos.offer_dtos import ChannelOfferDTO
from src.common.exceptions.custom_exceptions import InvalidDomainError
from src.common.utils.date_utils import format_feed_datetime, parse_feed_datetime

logger = logging.getLogger(__name__)


class ChannelOffer:
    """Price, stock and publication data of a product on a single sales channel (business unit).

    Every write goes through a validating property setter, so an offer never holds a value
    that breaks its invariants. Lowering the price does not re-check an already accepted
    sale price.
    """

    FEED_BUSINESS_UNIT = "BusinessUnit"
    FEED_OPERATOR_CODE = "OperatorCode"
    FEED_PRICE = "Price"
    FEED_SPECIAL_PRICE = "SpecialPrice"
    FEED_SPECIAL_FROM_DATE = "SpecialFromDate"
    FEED_SPECIAL_TO_DATE = "SpecialToDate"
    FEED_STOCK = "Stock"
    FEED_STATUS = "Status"
    FEED_IS_PUBLISHED = "IsPublished"

    def __init__(
        self,
        operator_code: str,
        price: float,
        stock: int,
        status: str,
        is_published: Optional[int] = None,
        business_unit: Optional[str] = None,
        sale_price: Optional[float] = None,
        sale_start_date: Optional[datetime] = None,
        sale_end_date: Optional[datetime] = None,
    ) -> None:
        self.operator_code = operator_code
        # sale_price is checked against price, so price has to be committed first
        self.price = price
        self.stock = stock
        self.status = status
        self.business_unit = business_unit
        self.sale_price = sale_price
        self.sale_start_date = sale_start_date
        self.sale_end_date = sale_end_date
        self.is_published = is_published

    @property
    def business_unit(self) -> Optional[str]:
        return self._business_unit

    @business_unit.setter
    def business_unit(self, value: Optional[str]) -> None:
        self._business_unit = value

    @property
    def operator_code(self) -> str:
        return self._operator_code

    @operator_code.setter
    def operator_code(self, value: str) -> None:
        if value not in settings.OFFER_OPERATOR_CODES:
            raise InvalidDomainError("operatorCode")
        self._operator_code = value

    @property
    def price(self) -> float:
        return self._price

    @price.setter
    def price(self, value: float) -> None:
        if not _is_non_negative(value):
            raise InvalidDomainError("price")
        self._price = value

    @property
    def sale_price(self) -> Optional[float]:
        return self._sale_price

    @sale_price.setter
    def sale_price(self, value: Optional[float]) -> None:
        self._check_sale_price(value, self._price)
        self._sale_price = value

    @staticmethod
    def _check_sale_price(sale_price: Optional[float], price: float) -> None:
        """A present sale price must lie in [0, price]; an absent one always passes."""
        if sale_price is None:
            return
        if not _is_non_negative(sale_price) or sale_price > price:
            raise InvalidDomainError("specialPrice")

    @property
    def sale_start_date(self) -> Optional[datetime]:
        return self._sale_start_date

    @sale_start_date.setter
    def sale_start_date(self, value: Optional[datetime]) -> None:
        self._sale_start_date = value

    @property
    def sale_start_date_string(self) -> Optional[str]:
        return format_feed_datetime(self._sale_start_date)

    @property
    def sale_end_date(self) -> Optional[datetime]:
        return self._sale_end_date

    @sale_end_date.setter
    def sale_end_date(self, value: Optional[datetime]) -> None:
        self._sale_end_date = value

    @property
    def sale_end_date_string(self) -> Optional[str]:
        return format_feed_datetime(self._sale_end_date)

    @property
    def stock(self) -> int:
        return self._stock

    @stock.setter
    def stock(self, value: int) -> None:
        if not _is_non_negative(value):
            raise InvalidDomainError("stock")
        self._stock = value

    @property
    def available(self) -> int:
        """Alias of stock, the name variation products expose."""
        return self._stock

    @property
    def status(self) -> str:
        return self._status

    @status.setter
    def status(self, value: str) -> None:
        if value not in settings.OFFER_STATUSES:
            raise InvalidDomainError("status")
        self._status = value

    @property
    def is_published(self) -> Optional[int]:
        return self._is_published

    @is_published.setter
    def is_published(self, value: Optional[int]) -> None:
        self._is_published = value

    def get_all_attributes(self) -> dict[str, Any]:
        """Returns the feed attributes in the order feed documents list them."""
        attributes: dict[str, Any] = {}

        attributes[self.FEED_OPERATOR_CODE] = self._operator_code
        attributes[self.FEED_PRICE] = self._price
        attributes[self.FEED_SPECIAL_PRICE] = "" if self._sale_price is None else self._sale_price
        attributes[self.FEED_SPECIAL_FROM_DATE] = "" if self._sale_start_date is None else self._sale_start_date
        attributes[self.FEED_SPECIAL_TO_DATE] = "" if self._sale_end_date is None else self._sale_end_date
        attributes[self.FEED_STOCK] = self._stock
        attributes[self.FEED_STATUS] = self._status

        return attributes

    def serialize(self) -> ChannelOfferDTO:
        # isPublished is passed through as is, None included
        return ChannelOfferDTO(
            businessUnit="" if self._business_unit is None else self._business_unit,
            operatorCode=self._operator_code,
            price=self._price,
            specialPrice="" if self._sale_price is None else self._sale_price,
            specialFromDate="" if self._sale_start_date is None else self._sale_start_date,
            specialToDate="" if self._sale_end_date is None else self._sale_end_date,
            stock=self._stock,
            status=self._status,
            isPublished=self._is_published,
        )

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "ChannelOffer":
        """Creates a ChannelOffer from a seller-center response keyed by feed field names."""
        if not isinstance(data, Mapping):
            logger.error(f"Offer record must be a mapping, got {type(data).__name__}")
            raise InvalidDomainError("offer")

        required = {
            cls.FEED_OPERATOR_CODE: "operatorCode",
            cls.FEED_PRICE: "price",
            cls.FEED_STOCK: "stock",
            cls.FEED_STATUS: "status",
        }
        for feed_name, field_name in required.items():
            if data.get(feed_name) in (None, ""):
                logger.error(f"Missing required offer field {feed_name} in {data}")
                raise InvalidDomainError(field_name)

        price = _convert(data[cls.FEED_PRICE], float, "price")
        stock = _convert(data[cls.FEED_STOCK], int, "stock")
        sale_price = _convert(data.get(cls.FEED_SPECIAL_PRICE), float, "specialPrice")
        is_published = _convert(data.get(cls.FEED_IS_PUBLISHED), int, "isPublished")

        return cls(
            operator_code=str(data[cls.FEED_OPERATOR_CODE]),
            price=price,
            stock=stock,
            status=str(data[cls.FEED_STATUS]),
            is_published=is_published,
            business_unit=data.get(cls.FEED_BUSINESS_UNIT) or None,
            sale_price=sale_price,
            sale_start_date=_read_date(data, cls.FEED_SPECIAL_FROM_DATE),
            sale_end_date=_read_date(data, cls.FEED_SPECIAL_TO_DATE),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChannelOffer):
            return NotImplemented
        return self._field_values() == other._field_values()

    def _field_values(self) -> tuple:
        return (
            self._business_unit,
            self._operator_code,
            self._price,
            self._sale_price,
            self._sale_start_date,
            self._sale_end_date,
            self._stock,
            self._status,
            self._is_published,
        )

    # Mutable value object
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"ChannelOffer(operator_code={self._operator_code!r}, price={self._price!r}, "
            f"stock={self._stock!r}, status={self._status!r})"
        )


def _is_non_negative(value: float) -> bool:
    """NaN and infinities are not valid amounts."""
    if isinstance(value, int):
        return value >= 0
    return math.isfinite(value) and value >= 0


def _convert(value: Any, target: type, field_name: str) -> Any:
    if value is None or value == "":
        return None
    if target is int and (isinstance(value, bool) or (isinstance(value, float) and not value.is_integer())):
        logger.error(f"Refusing lossy integer conversion of {value!r} for offer field {field_name}")
        raise InvalidDomainError(field_name)
    try:
        return target(value)
    except (TypeError, ValueError, OverflowError) as e:
        logger.error(f"Cannot convert {value!r} for offer field {field_name}")
        raise InvalidDomainError(field_name, original_exception=e)


def _read_date(data: dict[str, Any], feed_name: str) -> Optional[datetime]:
    raw = data.get(feed_name)
    parsed = parse_feed_datetime(raw, settings.FEED_TIMEZONE)
    if raw and parsed is None:
        logger.warning(f"Ignoring unparseable {feed_name} value {raw!r}")
    return parsed
