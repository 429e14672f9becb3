"""
Tests for waste-risk spotlights, the expiry timeline and flash-sale quotes.

Run with: pytest shelflife/waste_match/tests/test_risk_and_sale.py -v
"""

import math
from urllib.parse import unquote

import pytest

from shelflife.waste_match.catalog import build_catalog
from shelflife.waste_match.config import FlashSaleSettings
from shelflife.waste_match.expiry import build_expiry_timeline, urgency_for, urgency_label
from shelflife.waste_match.flash_sale import build_flash_sale, discounted_price
from shelflife.waste_match.models import Urgency
from shelflife.waste_match.risk import assess_waste_risk


class TestAssessWasteRisk:
    """Caller values win; gaps come from the resolved catalog item."""

    def test_everything_inferred(self, catalog):
        risk = assess_waste_risk(catalog, "Amul Milk 500ml")

        assert risk.item.sku == "MLK-500"
        assert risk.sku == "MLK-500"
        assert risk.quantity == 120
        assert risk.unit_price == 72
        assert risk.per_unit_loss == 72
        assert risk.total_loss == 8640
        assert risk.days_until_expiry == 2
        assert risk.location == "Cold Room A"

    def test_caller_values_win(self, catalog):
        risk = assess_waste_risk(
            catalog, "Amul Milk 500ml",
            quantity=10, unit_price=70, days_until_expiry=1, location="Front counter",
        )

        assert risk.total_loss == 700
        assert risk.days_until_expiry == 1
        assert risk.location == "Front counter"

    def test_numeric_strings(self, catalog):
        risk = assess_waste_risk(catalog, "Amul Milk 500ml", quantity="1,200")
        assert risk.quantity == 1200
        assert risk.total_loss == 86400

    def test_sku_preferred_for_lookup(self, catalog):
        risk = assess_waste_risk(catalog, "Those tomatoes by the door", sku="TOM-1KG")

        assert risk.item.sku == "TOM-1KG"
        assert risk.item_name == "Those tomatoes by the door"

    def test_empty_sku_falls_back_to_name(self, catalog):
        risk = assess_waste_risk(catalog, "Amul Paneer 200g", sku="")

        assert risk.item.sku == "PNR-200"
        assert risk.sku == "PNR-200"

    def test_unknown_item_without_numbers(self, catalog):
        risk = assess_waste_risk(catalog, "Mystery Box")

        assert risk.item is None
        assert risk.sku is None
        assert risk.total_loss is None
        assert risk.per_unit_loss is None

    def test_unknown_item_with_numbers(self, catalog):
        risk = assess_waste_risk(catalog, "Mystery Box", quantity=10, unit_price="25.5")
        assert risk.total_loss == 255

    def test_item_without_quantity_at_risk(self, catalog):
        risk = assess_waste_risk(catalog, "Amul Paneer 200g")

        assert risk.quantity is None
        assert risk.unit_price == 95
        assert risk.total_loss is None

    def test_non_finite_quantity_ignored(self, catalog):
        risk = assess_waste_risk(catalog, "Amul Milk 500ml", quantity=math.inf)
        assert risk.quantity == 120

    def test_notes_passed_through(self, catalog):
        risk = assess_waste_risk(catalog, "Amul Milk 500ml", notes=["Move to front", "Call supplier"])
        assert risk.to_dict()["notes"] == ["Move to front", "Call supplier"]


class TestUrgency:

    @pytest.mark.parametrize("days,tier", [
        (-1, Urgency.CRITICAL),
        (3, Urgency.CRITICAL),
        (4, Urgency.HIGH),
        (7, Urgency.HIGH),
        (14, Urgency.MEDIUM),
        (30, Urgency.LOW),
        (31, Urgency.NONE),
    ])
    def test_tiers(self, days, tier):
        assert urgency_for(days) == tier

    @pytest.mark.parametrize("days,label", [
        (-3, "EXPIRED"),
        (0, "EXPIRED"),
        (1, "Tomorrow"),
        (2, "2 days - URGENT"),
        (3, "3 days - URGENT"),
        (5, "5 days"),
    ])
    def test_labels(self, days, label):
        assert urgency_label(days) == label


class TestExpiryTimeline:

    def test_entries_and_total(self, catalog):
        timeline = build_expiry_timeline(catalog, 30)

        assert [e.item.sku for e in timeline.entries] == ["BRD-WW", "MLK-500", "TOM-1KG", "CRD-400"]
        assert [e.loss for e in timeline.entries] == [4000, 8640, 6000, 3300]
        assert timeline.total_at_risk == 21940
        assert timeline.entries[0].label == "Tomorrow"
        assert timeline.entries[3].urgency == Urgency.MEDIUM

    def test_missing_quantity_counts_as_zero(self, item_factory):
        item = item_factory("X", "Thing", unit_price=20.0, days_until_expiry=2)
        timeline = build_expiry_timeline(build_catalog([item]), 7)

        assert timeline.entries[0].quantity == 0
        assert timeline.total_at_risk == 0

    def test_empty(self, catalog):
        timeline = build_expiry_timeline(catalog, 0)

        assert timeline.entries == ()
        assert timeline.total_at_risk == 0
        assert timeline.to_dict()["count"] == 0


class TestFlashSale:

    def test_default_discount(self):
        quote = build_flash_sale("Amul Milk 500ml", 72, 100)

        assert quote.discount_percent == 30
        assert quote.new_price == 50
        assert quote.recovered_revenue == 5000

    def test_message_and_link(self):
        quote = build_flash_sale("Amul Milk 500ml", 72, 100)

        assert quote.message == "Flash sale on Amul Milk 500ml! New price: ₹50. Available stock: 100."
        assert quote.share_url.startswith("https://wa.me/?text=")
        assert " " not in quote.share_url
        assert unquote(quote.share_url.split("text=", 1)[1]) == quote.message

    def test_discount_clamped(self):
        assert build_flash_sale("Milk", 72, 1, discount_percent=95).discount_percent == 90
        assert build_flash_sale("Milk", 72, 1, discount_percent=5).discount_percent == 10

    def test_custom_bounds(self):
        settings = FlashSaleSettings(default_discount_percent=20, min_discount_percent=15, max_discount_percent=40)
        quote = build_flash_sale("Milk", 100, 10, settings=settings)

        assert quote.discount_percent == 20
        assert quote.new_price == 80

    @pytest.mark.parametrize("discount", [math.nan, math.inf])
    def test_non_finite_discount_takes_minimum(self, discount):
        quote = build_flash_sale("Milk", 100, 10, discount_percent=discount)

        assert quote.discount_percent == 10
        assert quote.new_price == 90
        assert quote.recovered_revenue == 900

    def test_share_link_keeps_punctuation(self):
        quote = build_flash_sale("Amul (500ml)", 72, 100)
        text = quote.share_url.split("text=", 1)[1]

        assert "Amul%20(500ml)!%20New" in text
        assert "%21" not in text
        assert "%28" not in text

    def test_negative_stock_recovers_nothing(self):
        assert build_flash_sale("Milk", 72, -3).recovered_revenue == 0

    def test_discounted_price_floors(self):
        assert discounted_price(99, 30) == 69
        assert discounted_price(0, 50) == 0

    def test_discounted_price_non_finite(self):
        assert discounted_price(math.nan, 30) == 0
        assert discounted_price(math.inf, 30) == 0
