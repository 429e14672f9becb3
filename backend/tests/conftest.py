"""
Test configuration and fixtures for the Waste Match API test suite.

Provides:
- An in-memory catalog swapped into the router state (isolated per test)
- FastAPI TestClient fixture
"""
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from backend.api.routers import waste_match as waste_match_router
from shelflife.waste_match import Config, build_catalog, InventoryItem

SAMPLE_CATALOG = (
    Path(__file__).resolve().parents[2]
    / "shelflife" / "waste_match" / "tests" / "fixtures" / "sample_catalog.json"
)


def _test_items():
    return [
        InventoryItem(
            sku="MLK-500", name="Amul Milk 500ml", brand="Amul", category="Dairy",
            unit_price=72.0, unit="pack", location="Cold Room A", shelf_life_days=5,
            quantity_at_risk=120.0, days_until_expiry=2,
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
            sku="CRD-400", name="Mother Dairy Curd 400g", brand="Mother Dairy", category="Dairy",
            unit_price=55.0, unit="cup", location="Cold Room A", shelf_life_days=10,
            quantity_at_risk=60.0, days_until_expiry=10,
        ),
    ]


@pytest.fixture()
def router_state():
    """Reset router state around each test."""
    state = waste_match_router._waste_match_state
    saved = dict(state)
    state.update({"config": None, "catalog": None, "initialized": False})
    yield state
    state.clear()
    state.update(saved)


@pytest.fixture()
def test_catalog():
    return build_catalog(_test_items())


@pytest.fixture()
def client(router_state, test_catalog):
    """TestClient with the in-memory catalog already loaded."""
    from backend.api.main import app

    waste_match_router.set_catalog(test_catalog, Config())
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def unloaded_client(router_state):
    """TestClient where the catalog failed to load."""
    from backend.api.main import app

    router_state["initialized"] = True
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def sample_catalog_path():
    return SAMPLE_CATALOG
