"""Data Transfer Objects for channel offer data."""

import dataclasses
import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from src.common.utils.date_utils import format_feed_datetime


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return format_feed_datetime(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


@dataclass
class ChannelOfferDTO:
    """Structured record of a channel offer.

    Absent sale data and business unit are carried as empty strings, while an absent
    publication flag stays None.
    """

    businessUnit: str
    operatorCode: str
    price: float
    specialPrice: float | str
    specialFromDate: datetime | str
    specialToDate: datetime | str
    stock: int
    status: str
    isPublished: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=_json_default)
