"""
Shared fixtures for the waste match test suite.

The in-memory catalog mirrors fixtures/sample_catalog.json (minus the
two malformed rows) so tests can use either.
"""

from pathlib import Path

import pytest

from shelflife.waste_match.catalog import build_catalog
from shelflife.waste_match.models import InventoryItem

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SAMPLE_CATALOG = FIXTURES_DIR / "sample_catalog.json"


def make_item(sku: str, name: str, **overrides) -> InventoryItem:
    """InventoryItem with throwaway defaults for fields a test doesn't care about."""
    fields = {
        "brand": "Generic",
        "category": "Misc",
        "unit_price": 10.0,
        "unit": "pack",
        "location": "Aisle 1",
        "shelf_life_days": 7,
    }
    fields.update(overrides)
    return InventoryItem(sku=sku, name=name, **fields)


@pytest.fixture
def sample_items():
    return [
        InventoryItem(
            sku="MLK-500", name="Amul Milk 500ml", brand="Amul", category="Dairy",
            unit_price=72.0, unit="pack", location="Cold Room A", shelf_life_days=5,
            quantity_at_risk=120.0, days_until_expiry=2,
        ),
        InventoryItem(
            sku="CRD-400", name="Mother Dairy Curd 400g", brand="Mother Dairy", category="Dairy",
            unit_price=55.0, unit="cup", location="Cold Room A", shelf_life_days=10,
            quantity_at_risk=60.0, days_until_expiry=10,
        ),
        InventoryItem(
            sku="PNR-200", name="Amul Paneer 200g", brand="Amul", category="Dairy",
            unit_price=95.0, unit="pack", location="Cold Room B", shelf_life_days=14,
        ),
        InventoryItem(
            sku="BRD-WW", name="Whole Wheat Bread", brand="Harvest Gold", category="Bakery",
            unit_price=50.0, unit="loaf", location="Aisle 3", shelf_life_days=4,
            quantity_at_risk=80.0, days_until_expiry=1,
        ),
        InventoryItem(
            sku="TOM-1KG", name="Fresh Tomatoes 1kg", brand="FarmFresh", category="Produce",
            unit_price=40.0, unit="kg", location="Produce Bay", shelf_life_days=7,
            quantity_at_risk=150.0, days_until_expiry=3,
        ),
    ]


@pytest.fixture
def catalog(sample_items):
    return build_catalog(sample_items)


@pytest.fixture
def item_factory():
    """make_item, for tests that build their own catalogs."""
    return make_item


@pytest.fixture
def sample_catalog_path():
    return SAMPLE_CATALOG
