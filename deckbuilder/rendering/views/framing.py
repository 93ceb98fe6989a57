"""
Framing view: ledger, beams, joists, posts and footings from above.

Dropped beams are solid bars under the joists; flush beams are drawn as a
dashed outline since they sit in the joist plane.
"""

from ...config import settings
from ...constants import JOIST_SPACING_IN, POST_SPACING_FT
from ...models import BeamType
from .. import colors
from ..camera import Camera, apply_camera
from ..components import draw_dimension_labels, format_feet
from ..geometry import (
    BEAM_DEPTH_FT, EPS, POST_SIZE_FT, beam_positions, deck_bounds, deck_outline, deck_sections,
    joist_positions, post_locations, stair_layout,
)
from ..projection import compute_plan_layout

LEDGER_THICKNESS_FT = 0.4
MIN_MEMBER_PX = 4.0
MIN_POST_PX = 6.0
FOOTING_DIAMETER_FT = 1.0
FLUSH_DASH = (6, 4)
FOOTING_DASH = (3, 3)


def draw_ledger(surface, config, layout) -> None:
    thickness = max(MIN_MEMBER_PX, layout.length_px(LEDGER_THICKNESS_FT))
    for section in deck_sections(config):
        if abs(section.y) > EPS:
            continue
        x, y = layout.to_px(section.x, 0.0)
        surface.fill_rect(x, y, layout.length_px(section.w), thickness, colors.LEDGER)


def draw_beams(surface, config, layout) -> int:
    thickness = max(MIN_MEMBER_PX, layout.length_px(BEAM_DEPTH_FT) / 2)
    count = 0
    for section in deck_sections(config):
        for beam_y in beam_positions(section.d):
            x, y = layout.to_px(section.x, section.y + beam_y)
            w = layout.length_px(section.w)
            if config.beam_type == BeamType.FLUSH:
                surface.stroke_rect(x, y - thickness / 2, w, thickness, colors.BEAM,
                                    width=2, dash=FLUSH_DASH)
            else:
                surface.fill_rect(x, y - thickness / 2, w, thickness, colors.BEAM)
            count += 1
    return count


def draw_joists(surface, config, layout) -> int:
    count = 0
    for section in deck_sections(config):
        for joist_x in joist_positions(section.w):
            x, y0 = layout.to_px(section.x + joist_x, section.y)
            _, y1 = layout.to_px(section.x + joist_x, section.y1)
            surface.line(x, y0, x, y1, colors.JOIST, width=2)
            count += 1
    return count


def draw_posts(surface, config, layout) -> int:
    size = max(MIN_POST_PX, layout.length_px(POST_SIZE_FT))
    radius = max(size, layout.length_px(FOOTING_DIAMETER_FT) / 2)
    locations = post_locations(config)
    for px, py in locations:
        x, y = layout.to_px(px, py)
        surface.circle(x, y, radius, stroke=colors.FOOTING, width=1.5, dash=FOOTING_DASH)
        surface.fill_rect(x - size / 2, y - size / 2, size, size, colors.POST)
    return len(locations)


def draw_stair_stringers(surface, config, layout) -> None:
    stairs = stair_layout(config)
    if stairs is None:
        return
    x, y, w, h = layout.rect_px(stairs.envelope)
    surface.stroke_rect(x, y, w, h, colors.STAIR, width=2)
    for tread in stairs.treads[1:]:
        tx, ty, _, _ = layout.rect_px(tread.rect)
        if w >= h:
            surface.line(tx, y, tx, y + h, colors.STAIR, width=1)
        else:
            surface.line(x, ty, x + w, ty, colors.STAIR, width=1)


def render(surface, config, width: float, height: float, camera: Camera = None) -> None:
    camera = camera or Camera()
    layout = compute_plan_layout(config, width, height, settings.CANVAS_PADDING)

    surface.save()
    apply_camera(surface, camera, width, height)

    outline = [layout.to_px(x, y) for x, y in deck_outline(config)]
    surface.fill_polygon(outline, colors.BACKGROUND)
    surface.stroke_polygon(outline, colors.OUTLINE, width=1, dash=(2, 3))

    draw_beams(surface, config, layout)
    draw_joists(surface, config, layout)
    if config.ledger_attached:
        draw_ledger(surface, config, layout)
    draw_posts(surface, config, layout)
    draw_stair_stringers(surface, config, layout)

    bounds = deck_bounds(config)
    left, top = layout.to_px(bounds.min_x, bounds.min_y)
    right, bottom = layout.to_px(bounds.max_x, bounds.max_y)
    draw_dimension_labels(surface, left, top, right, bottom,
                          format_feet(bounds.width), format_feet(bounds.depth))
    surface.restore()

    beam_label = "flush LVL" if config.beam_type == BeamType.FLUSH else "dropped"
    surface.text(12, height - 12,
                 f"Joists {JOIST_SPACING_IN}\" O.C. | Beams {POST_SPACING_FT}' O.C. ({beam_label})",
                 color=colors.LABEL, size=11)
