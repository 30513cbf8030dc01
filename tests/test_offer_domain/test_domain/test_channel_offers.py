"""Tests for the ChannelOffers collection."""

from src.offer_domain.domain.entities.channel_offer import ChannelOffer
from src.offer_domain.domain.entities.channel_offers import ChannelOffers


class TestChannelOffers:
    def setup_method(self) -> None:
        """Setup test offers."""
        self.chile = ChannelOffer("facl", 19990.0, 12, "active", business_unit="Falabella")
        self.peru = ChannelOffer("fape", 129.9, 0, "inactive")
        self.offers = ChannelOffers([self.chile, self.peru])

    def test_all_keeps_insertion_order(self) -> None:
        assert self.offers.all() == [self.chile, self.peru]
        assert list(self.offers) == [self.chile, self.peru]
        assert len(self.offers) == 2

    def test_find_by_operator_code(self) -> None:
        assert self.offers.find_by_operator_code("fape") is self.peru
        assert self.offers.find_by_operator_code("faco") is None

    def test_add_replaces_offer_with_same_operator_code(self) -> None:
        replacement = ChannelOffer("facl", 17990.0, 3, "active")

        self.offers.add(replacement)

        assert len(self.offers) == 2
        assert self.offers.find_by_operator_code("facl") is replacement

    def test_serialize_returns_one_record_per_offer(self) -> None:
        records = self.offers.serialize()

        assert [record.operatorCode for record in records] == ["facl", "fape"]
        assert records[0].businessUnit == "Falabella"
        assert records[1].businessUnit == ""

    def test_empty_collection(self) -> None:
        offers = ChannelOffers()

        assert len(offers) == 0
        assert offers.all() == []
        assert offers.serialize() == []
