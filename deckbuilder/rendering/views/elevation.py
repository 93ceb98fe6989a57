"""
Front elevation: the deck seen from the yard, looking at the house.

Horizontal axis is the deck width, vertical axis is height above grade.
Back to front: ground, house wall, posts, beam, rim joist, deck slab,
railing, stairs, then the height and width leaders.
"""

from ...brand_catalog import rail_style
from ...config import settings
from ...models import BeamType, StairLocation
from .. import colors
from ..camera import Camera, apply_camera
from ..components import (
    PICKET_MIN_PX, PICKET_SPACING_FT, RAIL_POST_FT, RAIL_POST_SPACING_FT, draw_leader, format_feet,
)
from ..geometry import (
    BEAM_DEPTH_FT, DECK_BOARD_THICKNESS_FT, DOOR_HEIGHT_FT, DOOR_WIDTH_FT, HOUSE_STORY_FT,
    JOIST_DEPTH_FT, POST_SIZE_FT, deck_bounds, post_locations, railing_height, spaced_positions,
    stair_layout,
)
from ..projection import HOUSE_OVERHANG_FT, compute_elevation_layout

TOP_RAIL_FT = 0.2
BOTTOM_RAIL_FT = 0.3
TREAD_THICKNESS_FT = 0.15
LEADER_GAP_PX = 24.0


def _bar(surface, layout, x0: float, x1: float, z0: float, z1: float, color: str, **kwargs) -> None:
    """Fill the feet-space box [x0, x1] × [z0, z1]."""
    left, top = layout.to_px(x0, z1)
    right, bottom = layout.to_px(x1, z0)
    surface.fill_rect(left, top, right - left, bottom - top, color, **kwargs)


def draw_ground(surface, config, layout, width: float, height: float) -> None:
    surface.fill_rect(-width, layout.ground_y, width * 3, height * 2,
                      colors.GRASS if config.show_grass else colors.GROUND)
    surface.line(-width, layout.ground_y, width * 2, layout.ground_y, colors.OUTLINE, width=2)


def draw_house(surface, config, layout) -> None:
    bounds = deck_bounds(config)
    x0 = bounds.min_x - HOUSE_OVERHANG_FT
    x1 = bounds.max_x + HOUSE_OVERHANG_FT
    deck_top = config.dimensions.height
    wall_top = deck_top + HOUSE_STORY_FT
    _bar(surface, layout, x0, x1, 0.0, wall_top, config.house_color)

    course = colors.FACADE_COURSE_FT.get(config.exterior_facade)
    if course:
        line_color = colors.shade(config.house_color, -0.15)
        z = course
        while z < wall_top:
            left, y = layout.to_px(x0, z)
            right, _ = layout.to_px(x1, z)
            surface.line(left, y, right, y, line_color, width=1, alpha=0.6)
            z += course

    left, top = layout.to_px(x0, wall_top)
    right, bottom = layout.to_px(x1, 0.0)
    surface.stroke_rect(left, top, right - left, bottom - top, colors.OUTLINE, width=1)

    if config.patio_door:
        cx = config.dimensions.width / 2.0
        _bar(surface, layout, cx - DOOR_WIDTH_FT / 2, cx + DOOR_WIDTH_FT / 2,
             deck_top, deck_top + DOOR_HEIGHT_FT, colors.DOOR_GLASS)
        dl, dt = layout.to_px(cx - DOOR_WIDTH_FT / 2, deck_top + DOOR_HEIGHT_FT)
        dr, db = layout.to_px(cx + DOOR_WIDTH_FT / 2, deck_top)
        surface.stroke_rect(dl, dt, dr - dl, db - dt, colors.DOOR_FRAME, width=3)
        surface.line((dl + dr) / 2, dt, (dl + dr) / 2, db, colors.DOOR_FRAME, width=2)


def post_columns(config) -> list:
    """Distinct x positions of the support posts, left to right."""
    return sorted({round(x, 6) for x, _ in post_locations(config)})


def draw_structure(surface, config, layout) -> None:
    bounds = deck_bounds(config)
    deck_top = config.dimensions.height
    slab_bottom = deck_top - DECK_BOARD_THICKNESS_FT
    joist_bottom = slab_bottom - JOIST_DEPTH_FT
    if config.beam_type == BeamType.FLUSH:
        beam_top, beam_bottom = slab_bottom, slab_bottom - BEAM_DEPTH_FT
    else:
        beam_top, beam_bottom = joist_bottom, joist_bottom - BEAM_DEPTH_FT

    half_post = POST_SIZE_FT / 2
    for x in post_columns(config):
        _bar(surface, layout, x - half_post, x + half_post, 0.0, max(beam_bottom, 0.0), colors.POST)

    _bar(surface, layout, bounds.min_x, bounds.max_x, joist_bottom, slab_bottom, colors.JOIST)
    if config.beam_type == BeamType.FLUSH:
        left, top = layout.to_px(bounds.min_x, beam_top)
        right, bottom = layout.to_px(bounds.max_x, beam_bottom)
        surface.stroke_rect(left, top, right - left, bottom - top, colors.BEAM, width=2, dash=(6, 4))
    else:
        _bar(surface, layout, bounds.min_x, bounds.max_x, beam_bottom, beam_top, colors.BEAM)

    _bar(surface, layout, bounds.min_x, bounds.max_x, slab_bottom, deck_top, colors.deck_color(config))
    left, top = layout.to_px(bounds.min_x, deck_top)
    right, bottom = layout.to_px(bounds.max_x, slab_bottom)
    surface.stroke_rect(left, top, right - left, bottom - top, colors.OUTLINE, width=1)


def draw_railing(surface, config, layout) -> None:
    """Posts every 4', a continuous top rail, and the series infill between them."""
    style = rail_style(config)
    if style is None:
        return
    color = colors.rail_color(config)
    bounds = deck_bounds(config)
    deck_top = config.dimensions.height
    rail_top = deck_top + railing_height(config)
    infill_bottom = deck_top + BOTTOM_RAIL_FT
    infill_top = rail_top - TOP_RAIL_FT

    if style == "glass_panel":
        _bar(surface, layout, bounds.min_x, bounds.max_x, infill_bottom, infill_top,
             colors.GLASS_TINT, alpha=0.35)
    elif style == "cable":
        runs = 6
        for i in range(1, runs + 1):
            z = infill_bottom + (infill_top - infill_bottom) * i / (runs + 1)
            left, y = layout.to_px(bounds.min_x, z)
            right, _ = layout.to_px(bounds.max_x, z)
            surface.line(left, y, right, y, color, width=1)
    else:
        pitch_px = max(PICKET_MIN_PX, layout.length_px(PICKET_SPACING_FT))
        width_px = 3 if style == "thick_baluster" else 1.5
        left, top = layout.to_px(bounds.min_x, infill_top)
        right, bottom = layout.to_px(bounds.max_x, infill_bottom)
        x = left
        while x <= right:
            surface.line(x, top, x, bottom, color, width=width_px)
            x += pitch_px
        if style == "baluster_ornamental":
            mid = (top + bottom) / 2
            surface.line(left, mid, right, mid, color, width=2)

    _bar(surface, layout, bounds.min_x, bounds.max_x, deck_top, infill_bottom, color)
    half_post = RAIL_POST_FT / 2
    for offset in spaced_positions(bounds.width, RAIL_POST_SPACING_FT):
        x = bounds.min_x + offset
        _bar(surface, layout, x - half_post, x + half_post, deck_top, rail_top, color)
    _bar(surface, layout, bounds.min_x, bounds.max_x, infill_top, rail_top, color)


def draw_stairs(surface, config, layout) -> None:
    """Tread ladder: side stairs step down in profile, front/back stairs show tread bars."""
    stairs = stair_layout(config)
    if stairs is None:
        return
    base = colors.deck_color(config)
    if stairs.location in (StairLocation.LEFT, StairLocation.RIGHT):
        for i, tread in enumerate(stairs.treads):
            shade = colors.STAIR if i % 2 == 0 else colors.shade(colors.STAIR, -0.12)
            _bar(surface, layout, tread.rect.x, tread.rect.x1, 0.0, tread.top_z, shade)
            _bar(surface, layout, tread.rect.x, tread.rect.x1,
                 tread.top_z - TREAD_THICKNESS_FT, tread.top_z, base)
        return

    env = stairs.envelope
    for x in (env.x, env.x1):
        left, top = layout.to_px(x, config.dimensions.height)
        _, bottom = layout.to_px(x, 0.0)
        surface.line(left, top, left, bottom, colors.STAIR, width=3)
    for i, tread in enumerate(stairs.treads):
        shade = base if i % 2 == 0 else colors.shade(base, -0.12)
        _bar(surface, layout, env.x, env.x1, max(tread.top_z - TREAD_THICKNESS_FT, 0.0),
             max(tread.top_z, TREAD_THICKNESS_FT), shade)


def draw_leaders(surface, config, layout) -> None:
    bounds = deck_bounds(config)
    deck_top = config.dimensions.height
    left, top = layout.to_px(bounds.min_x, deck_top)
    right, ground = layout.to_px(bounds.max_x, 0.0)
    draw_leader(surface, left - LEADER_GAP_PX, ground, left - LEADER_GAP_PX, top,
                format_feet(deck_top))
    draw_leader(surface, left, ground + LEADER_GAP_PX, right, ground + LEADER_GAP_PX,
                format_feet(bounds.width))


def render(surface, config, width: float, height: float, camera: Camera = None) -> None:
    camera = camera or Camera()
    layout = compute_elevation_layout(config, width, height, settings.CANVAS_PADDING)

    surface.save()
    apply_camera(surface, camera, width, height)
    draw_ground(surface, config, layout, width, height)
    if config.has_house:
        draw_house(surface, config, layout)
    if config.stairs.location == StairLocation.BACK:
        draw_stairs(surface, config, layout)
    draw_structure(surface, config, layout)
    draw_railing(surface, config, layout)
    if config.stairs.location != StairLocation.BACK:
        draw_stairs(surface, config, layout)
    draw_leaders(surface, config, layout)
    surface.restore()
