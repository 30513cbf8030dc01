"""Collection of the channel offers of one product."""

from typing import Iterable, Iterator, Optional

from src.common.dtos.offer_dtos import ChannelOfferDTO

from .channel_offer import ChannelOffer


class ChannelOffers:
    """Offers keyed by operator code; a product carries at most one offer per channel."""

    def __init__(self, offers: Iterable[ChannelOffer] = ()) -> None:
        self._offers: dict[str, ChannelOffer] = {}
        for offer in offers:
            self.add(offer)

    def add(self, offer: ChannelOffer) -> None:
        """Adds an offer, replacing any earlier offer with the same operator code."""
        self._offers[offer.operator_code] = offer

    def all(self) -> list[ChannelOffer]:
        return list(self._offers.values())

    def find_by_operator_code(self, operator_code: str) -> Optional[ChannelOffer]:
        return self._offers.get(operator_code)

    def serialize(self) -> list[ChannelOfferDTO]:
        return [offer.serialize() for offer in self._offers.values()]

    def __iter__(self) -> Iterator[ChannelOffer]:
        return iter(self._offers.values())

    def __len__(self) -> int:
        return len(self._offers)
