"""
Material estimator tests.

Tests:
1-4.   Framework (base helpers, material lookup)
5-8.   Lumber cut optimizer
9-18.  Deck estimate line items
19-22. Shapes, perimeter approximation, output contract
"""

import math

import pytest

from deckbuilder.estimator import DeckEstimator, estimate
from deckbuilder.estimator.deck_estimator import (
    FLUSH_BEAM_NOTE, STANDARD_NOTES, deck_area, joist_count, railing_perimeter, stair_step_count,
)
from deckbuilder.estimator.lumber import STANDARD_LUMBER_LENGTHS, optimize_lumber_cuts
from deckbuilder.estimator.material_lookup import MaterialLookup, PRICE_PER_FOOT
from deckbuilder.models import (
    BoardPattern, DeckingMaterial, DeckShape, RailingBrand, RailingType, StairLocation,
)


def _item(material_list, name):
    matches = [i for i in material_list["items"] if i["name"] == name]
    assert len(matches) == 1, f"expected exactly one {name!r} line"
    return matches[0]


def _names(material_list):
    return [i["name"] for i in material_list["items"]]


# ============================================================
# Framework tests
# ============================================================

def test_apply_waste_rounds_up():
    """apply_waste always rounds up to the next whole unit."""
    est = DeckEstimator()
    assert est.apply_waste(10, 1.5) == 15
    assert est.apply_waste(10, 1.25) == 13
    assert est.apply_waste(3, 1.15) == 4
    assert est.apply_waste(100, 1.15) == math.ceil(100 * 1.15)


def test_make_material_item_total_is_quantity_times_unit_cost():
    item = DeckEstimator().make_material_item("Joists (2x8)", "desc", 10, "each", 15.0)
    assert item == {
        "name": "Joists (2x8)",
        "description": "desc",
        "quantity": 10,
        "unit": "each",
        "unit_cost": 15.0,
        "total_cost": 150.0,
    }


def test_material_lookup_rates():
    ml = MaterialLookup()
    assert ml.get_decking_rate(DeckingMaterial.PRESSURE_TREATED) == 2.50
    assert ml.get_decking_rate(DeckingMaterial.COMPOSITE_TIMBERTECH) == 9.00
    assert ml.get_railing_rate(RailingType.METAL) == 45.0
    assert ml.get_railing_rate(RailingType.NONE) == 0.0
    assert ml.get_price_per_foot("2x8") == 1.50
    assert ml.get_price_per_foot("nonexistent") == 0.0
    assert ml.get_unit_price("joist_hanger") == 3.50


def test_every_decking_material_has_a_rate():
    ml = MaterialLookup()
    for material in DeckingMaterial:
        assert ml.get_decking_rate(material) > 0


# ============================================================
# Lumber cut optimizer
# ============================================================

def test_lumber_picks_smallest_fitting_stock():
    assert optimize_lumber_cuts(10, 4)["stock_length"] == 10
    assert optimize_lumber_cuts(9.5, 4)["stock_length"] == 10
    assert optimize_lumber_cuts(12, 1)["stock_length"] == 12
    assert optimize_lumber_cuts(6, 1)["stock_length"] == 8


def test_lumber_over_longest_stock_falls_back_to_16_with_shortfall():
    plan = optimize_lumber_cuts(20, 3)
    assert plan["stock_length"] == 16
    assert plan["pieces"] == 3
    assert plan["shortfall_ft"] == 4


def test_lumber_stock_is_always_standard():
    for length in (0.5, 7.9, 8, 8.1, 11, 13, 15.5, 16, 30):
        plan = optimize_lumber_cuts(length, 1)
        assert plan["stock_length"] in STANDARD_LUMBER_LENGTHS
        if length <= 16:
            assert plan["stock_length"] >= length
            assert plan["shortfall_ft"] == 0


def test_lumber_lengths_are_descending_16_to_8():
    assert STANDARD_LUMBER_LENGTHS == [16, 12, 10, 8]


# ============================================================
# Deck estimate line items
# ============================================================

def test_default_deck_line_item_order(default_config):
    result = estimate(default_config)
    assert _names(result) == [
        "Decking boards",
        "Joists (2x8)",
        "Beam boards (2x8)",
        "Support posts (4x4)",
        "Concrete footings",
        "Ledger board (2x8)",
        "Railing",
        "Stair stringers (2x12)",
        "Stair treads",
        "Deck screws (5lb box)",
        "Joist hangers",
    ]


def test_decking_uses_ten_percent_waste(default_config):
    result = estimate(default_config)
    decking = _item(result, "Decking boards")
    assert decking["quantity"] == math.ceil(12 * 10 * 1.10)
    assert decking["unit"] == "sq ft"
    assert decking["unit_cost"] == 2.50


def test_diagonal_decking_uses_fifteen_percent_waste(make_config):
    config = make_config(board_pattern=BoardPattern.DIAGONAL)
    decking = _item(estimate(config), "Decking boards")
    assert decking["quantity"] == math.ceil(12 * 10 * 1.15)


@pytest.mark.parametrize("pattern", list(BoardPattern))
@pytest.mark.parametrize("width,depth", [(8, 6), (12, 10), (16.5, 13), (24, 18)])
def test_rectangle_decking_quantity_property(make_config, pattern, width, depth):
    """Exactly one decking line, quantity = ceil(area × waste)."""
    config = make_config(board_pattern=pattern, dimensions={"width": width, "depth": depth})
    waste = 1.15 if pattern == BoardPattern.DIAGONAL else 1.10
    decking = _item(estimate(config), "Decking boards")
    assert decking["quantity"] == math.ceil(width * depth * waste)


def test_joists_16_on_center(make_config):
    """20' wide deck: ceil(240 / 16) + 1 = 16 joists of 10' stock at $1.50/ft."""
    config = make_config(dimensions={"width": 20, "depth": 10})
    joists = _item(estimate(config), "Joists (2x8)")
    assert joists["quantity"] == 16
    assert joists["unit_cost"] == 10 * PRICE_PER_FOOT["2x8"]
    assert joists["total_cost"] == 240.0


def test_dropped_beams_are_doubled(default_config):
    """10' depth → 3 beam lines, each doubled 2x8 on 12' stock."""
    beams = _item(estimate(default_config), "Beam boards (2x8)")
    assert beams["quantity"] == 6
    assert beams["unit_cost"] == 12 * 1.50


def test_flush_beams_use_lvl_and_hangers(flush_config):
    result = estimate(flush_config)
    names = _names(result)
    assert "Beam boards (2x8)" not in names
    lvl = _item(result, "Engineered beam (LVL)")
    hangers = _item(result, "Beam hangers (flush mount)")
    assert lvl["quantity"] == 3
    assert lvl["unit_cost"] == 12 * 6.00
    assert hangers["quantity"] == 6
    assert hangers["unit_cost"] == 18.00
    assert FLUSH_BEAM_NOTE in result["notes"]


def test_posts_and_footings(default_config):
    """3 posts per beam × 3 beams, 2 bags of concrete each."""
    result = estimate(default_config)
    posts = _item(result, "Support posts (4x4)")
    footings = _item(result, "Concrete footings")
    assert posts["quantity"] == 9
    assert posts["unit_cost"] == (3 + 2) * 2.00
    assert footings["quantity"] == 18
    assert footings["unit"] == "bags"


def test_ledger_only_when_attached(make_config):
    attached = estimate(make_config(ledger_attached=True))
    freestanding = estimate(make_config(ledger_attached=False))
    assert _item(attached, "Ledger board (2x8)")["quantity"] == 1
    assert "Ledger board (2x8)" not in _names(freestanding)


def test_railing_12x10_ledger_metal(default_config):
    """Ledger side is open: 12 + 2 × 10 = 32 lf at $45 = $1,440."""
    railing = _item(estimate(default_config), "Railing")
    assert railing["quantity"] == 32
    assert railing["unit"] == "linear ft"
    assert railing["total_cost"] == 1440.0
    assert "westbury" in railing["description"]


def test_generic_railing_description_has_no_brand(make_config):
    config = make_config(railing=RailingType.WOOD, railing_brand=RailingBrand.GENERIC)
    railing = _item(estimate(config), "Railing")
    assert railing["description"] == "wood railing"


def test_no_railing_line_when_railing_none(plain_config):
    assert "Railing" not in _names(estimate(plain_config))


def test_stairs_items(default_config):
    """3' height → ceil(36 / 7.5) = 5 steps; 4' wide → 4 stringers, 10 tread boards."""
    result = estimate(default_config)
    stringers = _item(result, "Stair stringers (2x12)")
    treads = _item(result, "Stair treads")
    assert stair_step_count(3) == 5
    assert stringers["quantity"] == 4
    assert stringers["unit_cost"] == 25.00
    assert treads["quantity"] == 10
    assert treads["unit_cost"] == 4 * 2.50


def test_no_stair_items_without_stairs(plain_config):
    names = _names(estimate(plain_config))
    assert "Stair stringers (2x12)" not in names
    assert "Stair treads" not in names


def test_hardware(default_config):
    result = estimate(default_config)
    assert _item(result, "Deck screws (5lb box)")["quantity"] == 2
    assert _item(result, "Joist hangers")["quantity"] == joist_count(12)


# ============================================================
# Shapes, perimeter, output contract
# ============================================================

def test_l_shape_area_includes_extension(l_shape_config):
    assert deck_area(l_shape_config) == 16 * 12 + 8 * 6


def test_wrap_around_defaults_to_six_foot_strip(make_config):
    config = make_config(shape=DeckShape.WRAP_AROUND)
    assert config.dimensions.extension_depth == 6
    assert deck_area(config) == 12 * 10 + 6 * 10


def test_non_rectangle_perimeter_is_equivalent_square(l_shape_config, make_config):
    area = 16 * 12 + 8 * 6
    assert railing_perimeter(l_shape_config) == pytest.approx(4 * math.sqrt(area) * 0.75)
    freestanding = make_config(
        shape=DeckShape.T_SHAPE, ledger_attached=False,
        dimensions={"width": 16, "depth": 12, "extension_width": 8, "extension_depth": 6},
    )
    assert railing_perimeter(freestanding) == pytest.approx(4 * math.sqrt(area))


def test_material_list_contract(default_config):
    result = estimate(default_config)
    assert set(result) == {"items", "total_cost", "total_sq_ft", "perimeter_ft", "notes"}
    for item in result["items"]:
        assert set(item) == {"name", "description", "quantity", "unit", "unit_cost", "total_cost"}
        assert item["total_cost"] == round(item["quantity"] * item["unit_cost"], 2)
    assert result["total_cost"] == round(sum(i["total_cost"] for i in result["items"]), 2)
    assert result["total_sq_ft"] == 120
    assert result["perimeter_ft"] == 32
    assert result["notes"][:len(STANDARD_NOTES)] == STANDARD_NOTES


def test_estimate_is_deterministic(default_config):
    assert estimate(default_config) == estimate(default_config)
