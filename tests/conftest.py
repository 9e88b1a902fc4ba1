"""
Shared test fixtures — fresh catalog and config store per test, test client.
"""

import pytest
from fastapi.testclient import TestClient

from shopquote.config_store import LaserConfigStore, get_config_store
from shopquote.main import app
from shopquote.material_catalog import MaterialCatalog, get_catalog
from shopquote.models import LaserQuoteInput, Material


@pytest.fixture
def catalog():
    """Catalog seeded with the default sheets."""
    return MaterialCatalog()


@pytest.fixture
def config_store():
    return LaserConfigStore(cutting_rate_per_minute=8.0, profit_margin=0.50,
                            assembly_cost_per_piece=0.0)


@pytest.fixture
def client(catalog, config_store):
    """FastAPI test client wired to the per-test catalog and config store."""
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_config_store] = lambda: config_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def plywood():
    """122 x 244 cm sheet, 120 x 240 usable, $150 per sheet."""
    return Material(
        id="ply-3",
        name="Triplay 3mm",
        thickness=3.0,
        sheet_width=122.0,
        sheet_height=244.0,
        usable_width=120.0,
        usable_height=240.0,
        price_per_sheet=150.0,
    )


def make_laser_input(**overrides) -> LaserQuoteInput:
    data = {
        "material_id": "ply-3",
        "piece_width": 40.0,
        "piece_height": 30.0,
        "quantity": 2,
        "cutting_minutes": 5.0,
        "requires_assembly": False,
        "assembly_cost_per_piece": None,
    }
    data.update(overrides)
    return LaserQuoteInput(**data)


@pytest.fixture
def laser_input():
    """Factory: scenario input (40 x 30 cm, 2 pieces, 5 min) with overrides."""
    return make_laser_input
