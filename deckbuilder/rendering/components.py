"""
Drawing sub-routines shared by the views.

Every function draws into a DrawingSurface in pixel space and takes the
layout it needs explicitly, so each one can be exercised on its own with a
RecordingSurface.
"""

import math
from typing import List, Tuple

from ..brand_catalog import rail_style
from ..models import BoardPattern
from ..schemas import board_width_ft
from . import colors
from .geometry import deck_outline, deck_sections, railing_edges, spaced_positions, stair_layout

STANDARD_SEAM_SHADE = -0.08
DIAGONAL_SEAM_SHADE = -0.10

RAIL_STROKE_PX = 3
RAIL_MARKER_SPACING_PX = 48.0
RAIL_MARKER_PX = 6.0
RAIL_POST_SPACING_FT = 4.0
RAIL_POST_FT = 0.3
GLASS_BAND_PX = 8.0
GLASS_ALPHA = 0.2
PICKET_SPACING_FT = 4 / 12.0
PICKET_MIN_PX = 4.0
CABLE_RUNS = 3
CABLE_SPACING_FT = 3 / 12.0
ORNAMENT_OFFSET_FT = 6 / 12.0

LABEL_GAP_PX = 20.0


def format_feet(value: float) -> str:
    """12 -> 12', 12.5 -> 12'6\"."""
    feet = int(value)
    inches = int(round((value - feet) * 12))
    if inches == 12:
        feet, inches = feet + 1, 0
    if inches:
        return f"{feet}'{inches}\""
    return f"{feet}'"


# ============================================================
# Board fills
# ============================================================

def fill_boards_standard(surface, x: float, y: float, w: float, h: float,
                         pitch: float, base: str) -> int:
    """Horizontal board rows of height `pitch`, alternating base and -8%. Returns row count."""
    seam = colors.shade(base, STANDARD_SEAM_SHADE)
    pitch = max(pitch, 1.0)
    rows = 0
    top = 0.0
    while top < h:
        row_h = min(pitch, h - top)
        surface.fill_rect(x, y + top, w, row_h, base if rows % 2 == 0 else seam)
        top += pitch
        rows += 1
    return rows


def fill_boards_diagonal(surface, x: float, y: float, w: float, h: float,
                         pitch: float, base: str) -> int:
    """
    45° board strips clipped to the rect, alternating base and -10%.

    Strips are `pitch` wide measured square to the board, so neighbours are
    pitch·√2 apart along a horizontal line. Returns strip count.
    """
    seam = colors.shade(base, DIAGONAL_SEAM_SHADE)
    step = max(pitch, 1.0) * math.sqrt(2)
    surface.save()
    surface.clip_rect(x, y, w, h)
    count = int(math.ceil((w + h) / step))
    for k in range(count):
        left = x + k * step
        right = left + step
        strip = [(left, y), (right, y), (right - h, y + h), (left - h, y + h)]
        surface.fill_polygon(strip, base if k % 2 == 0 else seam)
    surface.restore()
    return count


def fill_deck_rect(surface, config, x: float, y: float, w: float, h: float, scale: float) -> None:
    pitch = board_width_ft(config) * scale
    base = colors.deck_color(config)
    if config.board_pattern == BoardPattern.DIAGONAL:
        fill_boards_diagonal(surface, x, y, w, h, pitch, base)
    else:
        # Herringbone and picture-frame fall back to straight rows
        fill_boards_standard(surface, x, y, w, h, pitch, base)


def draw_deck_surface(surface, config, layout) -> None:
    """Board-filled deck sections with the outline stroked on top."""
    for section in deck_sections(config):
        x, y, w, h = layout.rect_px(section)
        fill_deck_rect(surface, config, x, y, w, h, layout.scale)
    outline = [layout.to_px(px, py) for px, py in deck_outline(config)]
    surface.stroke_polygon(outline, colors.OUTLINE, width=2)


# ============================================================
# Plan railing
# ============================================================

def _inward_normal(x1: float, y1: float, x2: float, y2: float) -> Tuple[float, float]:
    # Outlines run clockwise on screen, so the deck lies to the right of travel
    length = math.hypot(x2 - x1, y2 - y1)
    return (-(y2 - y1) / length, (x2 - x1) / length)


def _offset_edge(edge, distance: float):
    x1, y1, x2, y2 = edge
    nx, ny = _inward_normal(x1, y1, x2, y2)
    return (x1 + nx * distance, y1 + ny * distance, x2 + nx * distance, y2 + ny * distance)


def _points_along(edge, spacing: float) -> List[Tuple[float, float]]:
    x1, y1, x2, y2 = edge
    length = math.hypot(x2 - x1, y2 - y1)
    return [(x1 + (x2 - x1) * t / length, y1 + (y2 - y1) * t / length)
            for t in spaced_positions(length, spacing)]


def plan_railing_edges_px(config, layout) -> List[Tuple[float, float, float, float]]:
    edges = []
    for x1, y1, x2, y2 in railing_edges(config):
        px1, py1 = layout.to_px(x1, y1)
        px2, py2 = layout.to_px(x2, y2)
        edges.append((px1, py1, px2, py2))
    return edges


def draw_plan_railing(surface, config, layout) -> None:
    """
    Top-down railing: perimeter strokes (house edge skipped when ledgered),
    post markers every 48px, then the series infill.
    """
    style = rail_style(config)
    if style is None:
        return
    color = colors.rail_color(config)
    edges = plan_railing_edges_px(config, layout)

    for edge in edges:
        surface.line(*edge, color=color, width=RAIL_STROKE_PX)

    if style == "glass_panel":
        for edge in edges:
            inner = _offset_edge(edge, GLASS_BAND_PX)
            band = [(edge[0], edge[1]), (edge[2], edge[3]), (inner[2], inner[3]), (inner[0], inner[1])]
            surface.fill_polygon(band, colors.GLASS_TINT, alpha=GLASS_ALPHA)
    elif style == "cable":
        for edge in edges:
            for run in range(1, CABLE_RUNS + 1):
                cable = _offset_edge(edge, run * CABLE_SPACING_FT * layout.scale)
                surface.line(*cable, color=color, width=1)
    else:
        picket_px = max(PICKET_MIN_PX, PICKET_SPACING_FT * layout.scale)
        dot = 4.0 if style == "thick_baluster" else 2.0
        for edge in edges:
            for px, py in _points_along(edge, picket_px):
                surface.fill_rect(px - dot / 2, py - dot / 2, dot, dot, color)
        if style == "baluster_ornamental":
            for edge in edges:
                scroll = _offset_edge(edge, ORNAMENT_OFFSET_FT * layout.scale)
                surface.line(*scroll, color=color, width=2)

    half = RAIL_MARKER_PX / 2
    for edge in edges:
        for px, py in _points_along(edge, RAIL_MARKER_SPACING_PX):
            surface.fill_rect(px - half, py - half, RAIL_MARKER_PX, RAIL_MARKER_PX, color)


# ============================================================
# Plan stairs
# ============================================================

def draw_plan_stairs(surface, config, layout) -> None:
    stairs = stair_layout(config)
    if stairs is None:
        return
    base = colors.deck_color(config)
    for i, tread in enumerate(stairs.treads):
        x, y, w, h = layout.rect_px(tread.rect)
        surface.fill_rect(x, y, w, h, base if i % 2 == 0 else colors.shade(base, -0.12))
        surface.stroke_rect(x, y, w, h, colors.OUTLINE, width=1)

    ex, ey, ew, eh = layout.rect_px(stairs.envelope)
    surface.stroke_rect(ex, ey, ew, eh, colors.OUTLINE, width=2)
    surface.text(ex + ew / 2, ey + eh / 2 + 4, f"{stairs.step_count} steps",
                 color=colors.LABEL, size=10, align="center")


# ============================================================
# Dimension labels
# ============================================================

def draw_dimension_labels(surface, left: float, top: float, right: float, bottom: float,
                          width_label: str, depth_label: str) -> None:
    """Width centered under the footprint, depth rotated 90° left of it."""
    surface.text((left + right) / 2, bottom + LABEL_GAP_PX, width_label,
                 color=colors.DIMENSION, size=12, align="center", bold=True)
    surface.text(left - LABEL_GAP_PX, (top + bottom) / 2, depth_label,
                 color=colors.DIMENSION, size=12, align="center", angle=-90, bold=True)


def draw_leader(surface, x1: float, y1: float, x2: float, y2: float,
                label: str, tick: float = 5.0) -> None:
    """Dimension leader: a line with end ticks and the label at its midpoint."""
    surface.line(x1, y1, x2, y2, colors.DIMENSION, width=1)
    length = math.hypot(x2 - x1, y2 - y1) or 1.0
    nx, ny = -(y2 - y1) / length * tick, (x2 - x1) / length * tick
    for px, py in ((x1, y1), (x2, y2)):
        surface.line(px - nx, py - ny, px + nx, py + ny, colors.DIMENSION, width=1)
    angle = -90 if abs(x2 - x1) < abs(y2 - y1) else 0
    surface.text((x1 + x2) / 2 + (nx * 2 if angle else 0), (y1 + y2) / 2 - (0 if angle else 6),
                 label, color=colors.DIMENSION, size=11, align="center", angle=angle)
