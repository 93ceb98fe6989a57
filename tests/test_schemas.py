"""
Deck config schema and brand catalog tests.

Tests:
1-7.  DeckConfig validation and defaults
8-10. Partial config updates
11-14. Brand catalog lookups and rail styles
"""

import pytest
from pydantic import ValidationError

from deckbuilder.brand_catalog import (
    BRAND_CATALOG, get_deck_lines, get_rail_series_colors, rail_style, resolve_rail_series,
)
from deckbuilder.models import (
    BoardWidth, DeckingCategory, DeckingMaterial, DeckShape, RailingType, StairLocation,
)
from deckbuilder.schemas import (
    DEFAULT_DECK_CONFIG, DeckConfig, DeckDimensions, apply_config_patch, board_width_ft,
)


# ============================================================
# Validation
# ============================================================

def test_default_config_values():
    config = DEFAULT_DECK_CONFIG
    assert (config.dimensions.width, config.dimensions.depth, config.dimensions.height) == (12, 10, 3)
    assert config.shape == DeckShape.RECTANGLE
    assert config.stairs.location == StairLocation.FRONT
    assert config.stairs.width == 4
    assert config.ledger_attached is True
    assert config.house_color == "#d5d0c8"


def test_config_is_immutable():
    with pytest.raises(ValidationError):
        DEFAULT_DECK_CONFIG.dimensions.width = 20


@pytest.mark.parametrize("dims", [
    {"width": 0, "depth": 10, "height": 3},
    {"width": 12, "depth": -1, "height": 3},
    {"width": 12, "depth": 10, "height": 0},
])
def test_dimensions_must_be_positive(dims):
    with pytest.raises(ValidationError):
        DeckDimensions(**dims)


@pytest.mark.parametrize("shape", [DeckShape.L_SHAPE, DeckShape.T_SHAPE])
def test_l_and_t_shapes_require_extension(shape):
    with pytest.raises(ValidationError) as exc:
        DeckConfig(shape=shape, dimensions={"width": 16, "depth": 12, "height": 3})
    assert "extension_width" in str(exc.value)


def test_wrap_around_fills_default_strip():
    config = DeckConfig(shape="wrap-around", dimensions={"width": 16, "depth": 12, "height": 3})
    assert config.dimensions.extension_depth == 6
    explicit = DeckConfig(shape=DeckShape.WRAP_AROUND,
                          dimensions={"width": 16, "depth": 12, "height": 3, "extension_depth": 4})
    assert explicit.dimensions.extension_depth == 4


@pytest.mark.parametrize("color", ["d5d0c8", "#d5d0c", "#gggggg", "tan"])
def test_hex_colors_are_validated(color):
    with pytest.raises(ValidationError):
        DeckConfig(dimensions={"width": 12, "depth": 10, "height": 3}, house_color=color)


def test_decking_category_follows_material():
    config = DeckConfig(dimensions={"width": 12, "depth": 10, "height": 3},
                        decking_category=DeckingCategory.COMPOSITE,
                        material=DeckingMaterial.PRESSURE_TREATED)
    assert config.decking_category == DeckingCategory.WOOD
    composite = apply_config_patch(config, {"material": DeckingMaterial.COMPOSITE_TREX})
    assert composite.decking_category == DeckingCategory.COMPOSITE
    assert DEFAULT_DECK_CONFIG.decking_category == DeckingCategory.WOOD


# ============================================================
# Partial updates
# ============================================================

def test_patch_merges_dimensions_one_level():
    config = apply_config_patch(DEFAULT_DECK_CONFIG, {"dimensions": {"width": 14}})
    assert config.dimensions.width == 14
    assert config.dimensions.depth == 10
    assert config.dimensions.height == 3
    assert DEFAULT_DECK_CONFIG.dimensions.width == 12


def test_patch_replaces_top_level_and_merges_stairs():
    config = apply_config_patch(DEFAULT_DECK_CONFIG, {
        "railing": RailingType.GLASS,
        "stairs": {"location": StairLocation.LEFT},
    })
    assert config.railing == RailingType.GLASS
    assert config.stairs.location == StairLocation.LEFT
    assert config.stairs.width == 4


def test_patch_is_validated():
    with pytest.raises(ValidationError):
        apply_config_patch(DEFAULT_DECK_CONFIG, {"shape": DeckShape.T_SHAPE})


# ============================================================
# Catalog and materials
# ============================================================

def test_material_category_and_board_width(make_config):
    assert DeckingMaterial.CEDAR.category == DeckingCategory.WOOD
    assert DeckingMaterial.COMPOSITE_WOLF.category == DeckingCategory.COMPOSITE
    assert board_width_ft(DEFAULT_DECK_CONFIG) == pytest.approx(5.5 / 12)
    assert board_width_ft(make_config(board_width=BoardWidth.NARROW)) == pytest.approx(3.5 / 12)


def test_resolve_rail_series_falls_back_to_first():
    assert resolve_rail_series("VertiCable C80")["type"] == "cable"
    assert resolve_rail_series("Does Not Exist")["name"] == "Tuscany C10"


@pytest.mark.parametrize("railing,series,style", [
    (RailingType.NONE, "Tuscany C10", None),
    (RailingType.GLASS, "Tuscany C10", "glass_panel"),
    (RailingType.METAL, "Riviera C30", "baluster_ornamental"),
    (RailingType.METAL, "Veranda C70", "glass_panel"),
    (RailingType.WOOD, "VertiCable C80", "thick_baluster"),
])
def test_rail_style(make_config, railing, series, style):
    assert rail_style(make_config(railing=railing, active_rail_series=series)) == style


def test_catalog_helpers():
    wolf = next(b for b in BRAND_CATALOG["decking_brands"] if b["brand"] == "Wolf Serenity")
    lines = get_deck_lines(wolf)
    assert lines[0]["name"] == "Wolf Serenity Collection"
    assert lines[0]["colors"][0]["hex"] == "#9c6d4a"

    westbury = BRAND_CATALOG["railing_systems"][0]
    assert get_rail_series_colors(westbury, westbury["series"][0]) == westbury["colors"]
    trex = BRAND_CATALOG["railing_systems"][1]
    assert get_rail_series_colors(trex, trex["series"][0])[0]["name"] == "Charcoal Black"
