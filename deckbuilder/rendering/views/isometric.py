"""
Isometric view: a rotatable 3D massing of house, deck, railing and stairs.

Drawn with the painter's algorithm. Ground first, then everything behind
the deck center (house wall, far stairs), the posts and slab, the railing
edges far to near, and finally anything in front of the deck.
"""

import logging

from ...brand_catalog import rail_style
from ...config import settings
from ...schemas import board_width_ft
from .. import colors
from ..camera import Camera, apply_camera
from ..components import RAIL_POST_SPACING_FT
from ..geometry import (
    BEAM_DEPTH_FT, DECK_BOARD_THICKNESS_FT, DOOR_HEIGHT_FT, DOOR_WIDTH_FT, HOUSE_STORY_FT,
    JOIST_DEPTH_FT, POST_SIZE_FT, deck_bounds, deck_outline, deck_sections, plan_bounds,
    post_locations, railing_edges, railing_height, spaced_positions, stair_layout,
)
from ..projection import HOUSE_OVERHANG_FT, fit_isometric

logger = logging.getLogger(__name__)

GRASS_MARGIN_FT = 4.0
COMPOSITE_STREAK_FT = 0.6
SLAB_FT = DECK_BOARD_THICKNESS_FT + JOIST_DEPTH_FT
BALUSTER_PITCH_FT = 4 / 12.0
TREAD_THICKNESS_FT = 0.15


def _box_faces(projector, x0, y0, x1, y1, z0, z1):
    """Side faces of an axis-aligned box, far to near, plus its top face."""
    sides = [
        [(x0, y0, z0), (x1, y0, z0), (x1, y0, z1), (x0, y0, z1)],
        [(x1, y0, z0), (x1, y1, z0), (x1, y1, z1), (x1, y0, z1)],
        [(x0, y1, z0), (x1, y1, z0), (x1, y1, z1), (x0, y1, z1)],
        [(x0, y0, z0), (x0, y1, z0), (x0, y1, z1), (x0, y0, z1)],
    ]
    sides.sort(key=lambda face: sum(projector.depth(x, y) for x, y, _ in face))
    top = [(x0, y0, z1), (x1, y0, z1), (x1, y1, z1), (x0, y1, z1)]
    return sides, top


def _fill_box(surface, projector, box, side_color, top_color, outline=colors.OUTLINE) -> None:
    sides, top = _box_faces(projector, *box)
    for i, side in enumerate(sides):
        # Alternate side shades
        surface.fill_polygon(projector.project_all(side), colors.shade(side_color, -0.05 * (i % 2)))
    surface.fill_polygon(projector.project_all(top), top_color)
    surface.stroke_polygon(projector.project_all(top), outline, width=1)


# ============================================================
# Scene parts
# ============================================================

def draw_ground(surface, config, projector) -> None:
    bounds = plan_bounds(config)
    m = GRASS_MARGIN_FT
    ground = [(bounds.min_x - m, bounds.min_y - m, 0.0), (bounds.max_x + m, bounds.min_y - m, 0.0),
              (bounds.max_x + m, bounds.max_y + m, 0.0), (bounds.min_x - m, bounds.max_y + m, 0.0)]
    color = colors.GRASS if config.show_grass else colors.GROUND
    surface.fill_polygon(projector.project_all(ground), color, alpha=0.6)

    shadow = [(x, y, 0.0) for x, y in deck_outline(config)]
    surface.fill_polygon(projector.project_all(shadow), colors.SHADOW, alpha=0.15)


def draw_house(surface, config, projector) -> None:
    bounds = deck_bounds(config)
    x0 = bounds.min_x - HOUSE_OVERHANG_FT
    x1 = bounds.max_x + HOUSE_OVERHANG_FT
    y = bounds.min_y
    deck_top = config.dimensions.height
    wall_top = deck_top + HOUSE_STORY_FT
    wall = [(x0, y, 0.0), (x1, y, 0.0), (x1, y, wall_top), (x0, y, wall_top)]
    surface.fill_polygon(projector.project_all(wall), config.house_color)

    course = colors.FACADE_COURSE_FT.get(config.exterior_facade)
    if course:
        line_color = colors.shade(config.house_color, -0.15)
        z = course
        while z < wall_top:
            (sx0, sy0), (sx1, sy1) = projector.project_all([(x0, y, z), (x1, y, z)])
            surface.line(sx0, sy0, sx1, sy1, line_color, width=1, alpha=0.6)
            z += course
    surface.stroke_polygon(projector.project_all(wall), colors.OUTLINE, width=1)

    if config.patio_door:
        cx = config.dimensions.width / 2.0
        d0, d1 = cx - DOOR_WIDTH_FT / 2, cx + DOOR_WIDTH_FT / 2
        door = [(d0, y, deck_top), (d1, y, deck_top),
                (d1, y, deck_top + DOOR_HEIGHT_FT), (d0, y, deck_top + DOOR_HEIGHT_FT)]
        surface.fill_polygon(projector.project_all(door), colors.DOOR_GLASS)
        surface.stroke_polygon(projector.project_all(door), colors.DOOR_FRAME, width=3)
        (mx0, my0), (mx1, my1) = projector.project_all(
            [(cx, y, deck_top), (cx, y, deck_top + DOOR_HEIGHT_FT)])
        surface.line(mx0, my0, mx1, my1, colors.DOOR_FRAME, width=2)


def draw_posts(surface, config, projector) -> None:
    beam_bottom = config.dimensions.height - SLAB_FT - BEAM_DEPTH_FT
    half = POST_SIZE_FT / 2
    locations = sorted(post_locations(config), key=lambda p: projector.depth(*p))
    for x, y in locations:
        _fill_box(surface, projector, (x - half, y - half, x + half, y + half, 0.0, max(beam_bottom, 0.0)),
                  colors.POST, colors.POST)


def draw_board_rows(surface, config, projector, section) -> None:
    """Board rows across the section top, alternating shade, with composite streaks."""
    z = config.dimensions.height
    base = colors.deck_color(config)
    seam = colors.shade(base, -0.08)
    pitch = board_width_ft(config)
    row = 0
    y = section.y
    while y < section.y1:
        y1 = min(y + pitch, section.y1)
        quad = [(section.x, y, z), (section.x1, y, z), (section.x1, y1, z), (section.x, y1, z)]
        surface.fill_polygon(projector.project_all(quad), base if row % 2 == 0 else seam)
        y = y1
        row += 1

    if colors.is_composite(config):
        streak = colors.shade(base, -0.2)
        y = section.y + COMPOSITE_STREAK_FT
        while y < section.y1:
            (sx0, sy0), (sx1, sy1) = projector.project_all([(section.x, y, z), (section.x1, y, z)])
            surface.line(sx0, sy0, sx1, sy1, streak, width=1, alpha=0.25)
            y += COMPOSITE_STREAK_FT


def draw_slab(surface, config, projector) -> None:
    top = config.dimensions.height
    base = colors.deck_color(config)
    sections = sorted(deck_sections(config), key=lambda s: projector.depth(s.cx, s.cy))
    for section in sections:
        sides, _ = _box_faces(projector, section.x, section.y, section.x1, section.y1,
                              top - SLAB_FT, top)
        for i, side in enumerate(sides):
            surface.fill_polygon(projector.project_all(side), colors.shade(base, -0.25 - 0.1 * (i % 2)))
            surface.stroke_polygon(projector.project_all(side), colors.OUTLINE, width=0.5)
    for section in sections:
        draw_board_rows(surface, config, projector, section)
    outline = [(x, y, top) for x, y in deck_outline(config)]
    surface.stroke_polygon(projector.project_all(outline), colors.OUTLINE, width=1.5)


def draw_railing(surface, config, projector) -> None:
    style = rail_style(config)
    if style is None:
        return
    color = colors.rail_color(config)
    z0 = config.dimensions.height
    z1 = z0 + railing_height(config)
    edges = sorted(railing_edges(config),
                   key=lambda e: projector.depth((e[0] + e[2]) / 2, (e[1] + e[3]) / 2))

    for x1, y1, x2, y2 in edges:
        length = ((x2 - x1) ** 2 + (y2 - y1) ** 2) ** 0.5

        def at(t, z):
            return (x1 + (x2 - x1) * t / length, y1 + (y2 - y1) * t / length, z)

        if style == "glass_panel":
            panel = [at(0, z0 + 0.3), at(length, z0 + 0.3), at(length, z1 - 0.2), at(0, z1 - 0.2)]
            surface.fill_polygon(projector.project_all(panel), colors.GLASS_TINT, alpha=0.3)
        elif style == "cable":
            for i in range(1, 6):
                z = z0 + (z1 - z0) * i / 6
                (ax, ay), (bx, by) = projector.project_all([at(0, z), at(length, z)])
                surface.line(ax, ay, bx, by, color, width=1)
        else:
            weight = 2 if style == "thick_baluster" else 1
            for t in spaced_positions(length, BALUSTER_PITCH_FT):
                (ax, ay), (bx, by) = projector.project_all([at(t, z0 + 0.3), at(t, z1)])
                surface.line(ax, ay, bx, by, color, width=weight)

        for t in spaced_positions(length, RAIL_POST_SPACING_FT):
            (ax, ay), (bx, by) = projector.project_all([at(t, z0), at(t, z1)])
            surface.line(ax, ay, bx, by, color, width=3)
        for z, weight in ((z1, 3), (z0 + 0.3, 1.5)):
            (ax, ay), (bx, by) = projector.project_all([at(0, z), at(length, z)])
            surface.line(ax, ay, bx, by, color, width=weight)


def draw_stairs(surface, config, projector, stairs) -> None:
    """Treads as thin boxes, alternating shade, drawn far to near."""
    base = colors.deck_color(config)
    rise = config.dimensions.height / stairs.step_count
    ordered = sorted(enumerate(stairs.treads),
                     key=lambda item: projector.depth(item[1].rect.cx, item[1].rect.cy))
    for i, tread in ordered:
        r = tread.rect
        top = max(tread.top_z, TREAD_THICKNESS_FT)
        shade = base if i % 2 == 0 else colors.shade(base, -0.15)
        _fill_box(surface, projector, (r.x, r.y, r.x1, r.y1, max(top - rise, 0.0), top),
                  colors.shade(colors.STAIR, -0.1), shade)


def render(surface, config, width: float, height: float, camera: Camera = None) -> None:
    camera = camera or Camera()
    projector = fit_isometric(config, width, height, camera.rotation_angle, settings.CANVAS_PADDING)
    logger.debug("Isometric fit: rotation=%.1f scale=%.2f", camera.rotation_angle, projector.scale)

    bounds = deck_bounds(config)
    deck_depth = projector.depth(bounds.cx, bounds.cy)
    house_in_front = config.has_house and projector.depth(bounds.cx, bounds.min_y) > deck_depth
    stairs = stair_layout(config)
    stairs_in_front = stairs is not None and \
        projector.depth(stairs.envelope.cx, stairs.envelope.cy) > deck_depth

    surface.save()
    apply_camera(surface, camera, width, height)
    draw_ground(surface, config, projector)
    if config.has_house and not house_in_front:
        draw_house(surface, config, projector)
    if stairs is not None and not stairs_in_front:
        draw_stairs(surface, config, projector, stairs)
    draw_posts(surface, config, projector)
    draw_slab(surface, config, projector)
    draw_railing(surface, config, projector)
    if stairs_in_front:
        draw_stairs(surface, config, projector, stairs)
    if house_in_front:
        draw_house(surface, config, projector)
    surface.restore()
