"""
View rendering tests against a RecordingSurface.

Tests:
1-4.   View registry and render_view
5-8.   Shared components (feet labels, board fills, colors)
9-14.  Surface view
15-17. Framing view
18-20. Front elevation
21-24. Isometric view
"""

import math

import pytest

from deckbuilder.models import (
    BeamType, BoardPattern, DeckingMaterial, DeckShape, ExteriorFacade,
    RailingType, StairLocation, ViewMode,
)
from deckbuilder.rendering import colors
from deckbuilder.rendering.camera import Camera
from deckbuilder.rendering.components import (
    GLASS_ALPHA, PICKET_MIN_PX, RAIL_STROKE_PX, fill_boards_diagonal, fill_boards_standard,
    format_feet,
)
from deckbuilder.rendering.geometry import stair_layout
from deckbuilder.rendering.projection import fit_isometric
from deckbuilder.rendering.renderer import get_view_renderer, list_view_modes, render_view
from deckbuilder.rendering.surface import RecordingSurface
from deckbuilder.rendering.views.isometric import draw_stairs
from deckbuilder.rendering.views.surface import caption

W, H = 800, 600


def _render(config, view_mode, camera=None):
    return render_view(RecordingSurface(W, H), config, view_mode, W, H, camera)


def _texts(surface):
    return [c["content"] for c in surface.ops("text")]


# ============================================================
# Registry
# ============================================================

def test_registry_lists_all_four_views():
    assert list_view_modes() == ["surface", "framing", "elevation", "isometric"]


def test_unknown_view_raises_value_error():
    with pytest.raises(ValueError) as exc:
        get_view_renderer("blueprint")
    assert "blueprint" in str(exc.value)
    assert "Available" in str(exc.value)


def test_render_view_accepts_string_mode(default_config):
    surface = _render(default_config, "framing")
    assert surface.commands[0] == {"op": "clear", "color": colors.BACKGROUND, "width": W, "height": H}


@pytest.mark.parametrize("view_mode", list(ViewMode))
@pytest.mark.parametrize("patch", [
    {},
    {"shape": DeckShape.L_SHAPE,
     "dimensions": {"width": 16, "depth": 12, "extension_width": 8, "extension_depth": 6}},
    {"shape": DeckShape.T_SHAPE,
     "dimensions": {"width": 16, "depth": 12, "extension_width": 8, "extension_depth": 6}},
    {"shape": DeckShape.WRAP_AROUND, "stairs": {"location": StairLocation.LEFT}},
    {"railing": RailingType.NONE, "stairs": {"location": StairLocation.NONE}, "has_house": False},
    {"ledger_attached": False, "stairs": {"location": StairLocation.BACK}, "patio_door": True},
])
def test_every_view_balances_save_restore(make_config, view_mode, patch):
    surface = _render(make_config(**patch), view_mode, Camera(x=20, y=-10, zoom=1.5))
    assert surface.commands[0]["op"] == "clear"
    assert len(surface.ops("save")) == len(surface.ops("restore")) > 0
    # Camera transform is pushed right after the first save
    assert [c["op"] for c in surface.commands[1:5]] == ["save", "translate", "scale", "translate"]


# ============================================================
# Components
# ============================================================

@pytest.mark.parametrize("value,label", [(12, "12'"), (12.5, "12'6\""), (9.25, "9'3\""), (7.99, "8'")])
def test_format_feet(value, label):
    assert format_feet(value) == label


def test_standard_board_rows_alternate_and_cover_height():
    surface = RecordingSurface(W, H)
    rows = fill_boards_standard(surface, 0, 0, 100, 95, 10, "#646464")
    assert rows == 10
    fills = surface.ops("fill_rect")
    assert fills[0]["color"] == "#646464"
    assert fills[1]["color"] == colors.shade("#646464", -0.08)
    assert fills[-1]["h"] == 5
    assert sum(f["h"] for f in fills) == 95


def test_diagonal_boards_are_clipped_strips():
    surface = RecordingSurface(W, H)
    count = fill_boards_diagonal(surface, 10, 20, 200, 100, 10, "#646464")
    assert count == math.ceil(300 / (10 * math.sqrt(2)))
    assert [c["op"] for c in surface.commands[:2]] == ["save", "clip_rect"]
    assert surface.commands[-1]["op"] == "restore"
    strips = surface.ops("fill_polygon")
    assert len(strips) == count
    assert strips[1]["color"] == colors.shade("#646464", -0.10)


def test_shade_and_rail_color(make_config):
    assert colors.shade("#646464", -0.08) == "#5c5c5c"
    assert colors.shade("#ffffff", 0.5) == "#ffffff"
    assert colors.rail_color(make_config(railing=RailingType.CEDAR)) == "#b9794a"
    assert colors.rail_color(make_config(active_rail_color="#3b312b")) == "#3b312b"


# ============================================================
# Surface view
# ============================================================

def test_surface_draws_handles_and_caption(default_config):
    surface = _render(default_config, ViewMode.SURFACE)
    handles = [c for c in surface.ops("circle") if c["fill"] == colors.HANDLE_FILL]
    assert len(handles) == 2
    texts = _texts(surface)
    assert "W" in texts and "D" in texts
    assert "12'" in texts and "10'" in texts
    assert "5 steps" in texts
    assert "HOUSE" in texts
    assert texts[-1] == "Trex Transcend Lineage | Tuscany C10 railing"


def test_surface_without_railing_has_no_railing_strokes(plain_config):
    surface = _render(plain_config, ViewMode.SURFACE)
    assert surface.ops("line") == []
    assert caption(plain_config) == "Trex Transcend Lineage"


def test_surface_railing_skips_house_edge(default_config):
    surface = _render(default_config, ViewMode.SURFACE)
    rails = [c for c in surface.ops("line") if c["width"] == RAIL_STROKE_PX]
    assert len(rails) == 3


def test_diagonal_pattern_clips_board_strips(make_config):
    diagonal = _render(make_config(board_pattern=BoardPattern.DIAGONAL), ViewMode.SURFACE)
    standard = _render(make_config(board_pattern=BoardPattern.STANDARD), ViewMode.SURFACE)
    assert len(diagonal.ops("clip_rect")) == 1
    assert standard.ops("clip_rect") == []


def test_glass_railing_band_is_translucent(make_config):
    surface = _render(make_config(railing=RailingType.GLASS), ViewMode.SURFACE)
    bands = [c for c in surface.ops("fill_polygon") if c["color"] == colors.GLASS_TINT]
    assert len(bands) == 3
    assert all(b["alpha"] == GLASS_ALPHA for b in bands)


def test_cable_series_draws_three_runs_per_edge(make_config):
    surface = _render(make_config(active_rail_series="VertiCable C80"), ViewMode.SURFACE)
    thin = [c for c in surface.ops("line") if c["width"] == 1]
    assert len(thin) == 3 * 3


# ============================================================
# Framing view
# ============================================================

def test_framing_counts(default_config):
    surface = _render(default_config, ViewMode.FRAMING)
    joists = [c for c in surface.ops("line") if c["color"] == colors.JOIST]
    beams = [c for c in surface.ops("fill_rect") if c["color"] == colors.BEAM]
    footings = [c for c in surface.ops("circle") if c["dash"] == [3, 3]]
    ledger = [c for c in surface.ops("fill_rect") if c["color"] == colors.LEDGER]
    assert len(joists) == 10
    assert len(beams) == 3
    assert len(footings) == 6
    assert len(ledger) == 1


def test_flush_beams_are_dashed(flush_config):
    surface = _render(flush_config, ViewMode.FRAMING)
    dashed = [c for c in surface.ops("stroke_rect") if c["dash"] == [6, 4]]
    assert len(dashed) == 3
    assert not [c for c in surface.ops("fill_rect") if c["color"] == colors.BEAM]
    assert "flush LVL" in _texts(surface)[-1]


def test_freestanding_framing_has_no_ledger(make_config):
    surface = _render(make_config(ledger_attached=False), ViewMode.FRAMING)
    assert not [c for c in surface.ops("fill_rect") if c["color"] == colors.LEDGER]


# ============================================================
# Front elevation
# ============================================================

def test_elevation_house_and_leaders(default_config, make_config):
    surface = _render(default_config, ViewMode.ELEVATION)
    assert [c for c in surface.ops("fill_rect") if c["color"] == default_config.house_color]
    assert "3'" in _texts(surface)
    assert "12'" in _texts(surface)

    stucco = _render(make_config(exterior_facade=ExteriorFacade.STUCCO), ViewMode.ELEVATION)
    assert not [c for c in stucco.ops("line") if c["alpha"] == 0.6]
    no_house = _render(make_config(has_house=False), ViewMode.ELEVATION)
    assert not [c for c in no_house.ops("fill_rect") if c["color"] == default_config.house_color]


def test_elevation_glass_panel(make_config):
    surface = _render(make_config(railing=RailingType.GLASS), ViewMode.ELEVATION)
    glass = [c for c in surface.ops("fill_rect") if c["color"] == colors.GLASS_TINT]
    assert len(glass) == 1
    assert glass[0]["alpha"] == 0.35


def _baluster_xs(surface):
    return sorted(c["x1"] for c in surface.ops("line") if c["x1"] == c["x2"] and c["width"] == 1.5)


def test_elevation_baluster_pitch_never_drops_below_minimum(make_config):
    wide = make_config(dimensions={"width": 48}, stairs={"location": StairLocation.NONE})
    surface = render_view(RecordingSurface(200, 150), wide, ViewMode.ELEVATION, 200, 150)
    xs = _baluster_xs(surface)
    assert len(xs) > 2
    gaps = [b - a for a, b in zip(xs, xs[1:])]
    assert all(g == pytest.approx(PICKET_MIN_PX, abs=0.01) for g in gaps)

    roomy = _baluster_xs(_render(make_config(stairs={"location": StairLocation.NONE}),
                                 ViewMode.ELEVATION))
    assert min(b - a for a, b in zip(roomy, roomy[1:])) > PICKET_MIN_PX


# ============================================================
# Isometric view
# ============================================================

def test_isometric_rotation_changes_the_picture(default_config):
    a = _render(default_config, ViewMode.ISOMETRIC, Camera(rotation_angle=0))
    b = _render(default_config, ViewMode.ISOMETRIC, Camera(rotation_angle=45))
    again = _render(default_config, ViewMode.ISOMETRIC, Camera(rotation_angle=0))
    assert a.commands != b.commands
    assert a.commands == again.commands


def test_isometric_composite_streaks(make_config):
    composite = make_config(material=DeckingMaterial.COMPOSITE_TREX)
    wood = make_config(material=DeckingMaterial.PRESSURE_TREATED)
    streaked = _render(composite, ViewMode.ISOMETRIC)
    plain = _render(wood, ViewMode.ISOMETRIC)
    assert [c for c in streaked.ops("line") if c["alpha"] == 0.25]
    assert not [c for c in plain.ops("line") if c["alpha"] == 0.25]


def test_isometric_ground_and_shadow(default_config, make_config):
    surface = _render(default_config, ViewMode.ISOMETRIC)
    fills = surface.ops("fill_polygon")
    assert fills[0]["color"] == colors.GROUND
    assert fills[1]["color"] == colors.SHADOW and fills[1]["alpha"] == 0.15
    grass = _render(make_config(show_grass=True, beam_type=BeamType.FLUSH), ViewMode.ISOMETRIC)
    assert grass.ops("fill_polygon")[0]["color"] == colors.GRASS


def test_isometric_treads_alternate_shade(default_config):
    stairs = stair_layout(default_config)
    projector = fit_isometric(default_config, W, H, 0.0, 40)
    surface = RecordingSurface(W, H)
    draw_stairs(surface, default_config, projector, stairs)
    # Each tread is four side faces then its top
    tops = [c["color"] for c in surface.ops("fill_polygon")[4::5]]
    assert len(tops) == stairs.step_count
    base = colors.deck_color(default_config)
    assert set(tops) == {base, colors.shade(base, -0.15)}
    assert all(a != b for a, b in zip(tops, tops[1:]))
