"""
Material catalog, laser config store and calculator registry.
"""

import pytest

from shopquote.calculators.laser_quote import LaserQuoteCalculator
from shopquote.calculators.print_quote import PrintQuoteCalculator
from shopquote.calculators.registry import get_calculator, has_calculator, list_calculators
from shopquote.config_store import LaserConfigStore
from shopquote.errors import NotFoundError, ValidationError
from shopquote.material_catalog import DEFAULT_MATERIALS, MaterialCatalog
from shopquote.models import ConfigKey


def _acrylic(**overrides):
    data = {
        "name": "Acrílico 6mm Negro",
        "thickness": 6.0,
        "sheet_width": 122.0,
        "sheet_height": 244.0,
        "usable_width": 120.0,
        "usable_height": 240.0,
        "price_per_sheet": 900.0,
        "color": "Negro",
    }
    data.update(overrides)
    return data


# ============================================================
# Material catalog
# ============================================================

def test_catalog_seeded_with_defaults(catalog):
    assert len(catalog.list_materials()) == len(DEFAULT_MATERIALS)
    mdf = catalog.get_active_material_by_id("1")
    assert mdf.name == "MDF 3mm Blanco"
    assert mdf.usable_width <= mdf.sheet_width


def test_unknown_material_not_found(catalog):
    with pytest.raises(NotFoundError):
        catalog.get_active_material_by_id("does-not-exist")
    with pytest.raises(NotFoundError):
        catalog.get_material("does-not-exist")


def test_add_material(catalog):
    material = catalog.add_material(**_acrylic())
    assert material.id
    assert material.is_active
    assert catalog.get_active_material_by_id(material.id) == material


def test_add_material_with_duplicate_id(catalog):
    with pytest.raises(ValidationError):
        catalog.add_material(id="1", **_acrylic())


def test_add_material_reports_every_problem(catalog):
    with pytest.raises(ValidationError) as exc:
        catalog.add_material(**_acrylic(thickness=0, sheet_width=-1, price_per_sheet=-5))
    fields = {e.field for e in exc.value.errors}
    assert fields == {"thickness", "sheet_width", "price_per_sheet"}


def test_add_material_missing_fields(catalog):
    with pytest.raises(ValidationError) as exc:
        catalog.add_material(name="Cartón")
    assert "sheet_width" in {e.field for e in exc.value.errors}


def test_usable_area_cannot_exceed_sheet(catalog):
    with pytest.raises(ValidationError) as exc:
        catalog.add_material(**_acrylic(usable_width=130.0, usable_height=250.0))
    assert [e.field for e in exc.value.errors] == ["usable_width", "usable_height"]


@pytest.mark.parametrize("overrides,fields", [
    ({"price_per_sheet": float("nan")}, {"price_per_sheet"}),
    ({"price_per_sheet": float("inf")}, {"price_per_sheet"}),
    ({"thickness": float("nan")}, {"thickness"}),
    ({"sheet_width": float("inf"), "sheet_height": float("inf"),
      "usable_width": float("inf"), "usable_height": float("inf")},
     {"sheet_width", "sheet_height", "usable_width", "usable_height"}),
])
def test_add_material_rejects_non_finite_numbers(catalog, overrides, fields):
    with pytest.raises(ValidationError) as exc:
        catalog.add_material(**_acrylic(**overrides))
    assert {e.field for e in exc.value.errors} == fields


def test_update_material_rejects_nan_price(catalog):
    with pytest.raises(ValidationError):
        catalog.update_material("1", price_per_sheet=float("nan"))
    assert catalog.get_material("1").price_per_sheet == 250.0


def test_update_material_price(catalog):
    updated = catalog.update_material("1", price_per_sheet=275.0)
    assert updated.price_per_sheet == 275.0
    assert catalog.get_active_material_by_id("1").price_per_sheet == 275.0


def test_update_rejects_unknown_field(catalog):
    with pytest.raises(ValidationError):
        catalog.update_material("1", weight=3)


def test_deactivated_material_is_hidden(catalog):
    catalog.deactivate_material("2")
    with pytest.raises(NotFoundError):
        catalog.get_active_material_by_id("2")
    assert catalog.get_material("2").is_active is False
    assert "2" not in [m.id for m in catalog.list_materials()]
    assert "2" in [m.id for m in catalog.list_materials(include_inactive=True)]


# ============================================================
# Laser config store
# ============================================================

def test_config_defaults():
    store = LaserConfigStore()
    assert store.get("cutting_rate_per_minute") == 8.0
    assert store.get(ConfigKey.PROFIT_MARGIN) == 0.50
    assert store.get("assembly_cost_per_piece") == 0.0


def test_config_unknown_key(config_store):
    with pytest.raises(ValueError):
        config_store.get("tax_rate")


def test_config_update(config_store):
    config = config_store.update(cutting_rate_per_minute=10, profit_margin=0.4)
    assert config.cutting_rate_per_minute == 10.0
    assert config.profit_margin == 0.4
    assert config_store.snapshot() == config


@pytest.mark.parametrize("values,field", [
    ({"cutting_rate_per_minute": -1}, "cutting_rate_per_minute"),
    ({"profit_margin": 1.5}, "profit_margin"),
    ({"profit_margin": -0.1}, "profit_margin"),
    ({"assembly_cost_per_piece": -3}, "assembly_cost_per_piece"),
])
def test_config_rejects_out_of_range(config_store, values, field):
    with pytest.raises(ValidationError) as exc:
        config_store.update(**values)
    assert [e.field for e in exc.value.errors] == [field]


def test_config_update_is_all_or_nothing(config_store):
    with pytest.raises(ValidationError):
        config_store.update(cutting_rate_per_minute=12, profit_margin=2)
    assert config_store.get("cutting_rate_per_minute") == 8.0


# ============================================================
# Registry
# ============================================================

def test_registry_lists_both_calculators():
    assert set(list_calculators()) == {"print", "laser"}
    assert has_calculator("laser")
    assert not has_calculator("neon")


def test_registry_returns_instances():
    assert isinstance(get_calculator("print"), PrintQuoteCalculator)
    assert isinstance(get_calculator("laser"), LaserQuoteCalculator)


def test_registry_unknown_kind():
    with pytest.raises(ValueError):
        get_calculator("neon")
