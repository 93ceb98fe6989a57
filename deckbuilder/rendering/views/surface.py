"""
Surface view: top-down deck boards, railing and stairs.

Also draws the W/D resize handles on the main deck and a caption with the
selected deck line and rail series.
"""

from ...config import settings
from ...models import RailingType
from .. import colors
from ..camera import HANDLE_RADIUS, Camera, apply_camera, dimension_handles
from ..components import (
    draw_deck_surface, draw_dimension_labels, draw_plan_railing, draw_plan_stairs, format_feet,
)
from ..geometry import deck_bounds
from ..projection import compute_plan_layout

HOUSE_BAND_PX = 10.0


def draw_house_edge(surface, config, layout) -> None:
    """House wall band along the ledger edge (y = 0)."""
    bounds = deck_bounds(config)
    x0, y0 = layout.to_px(bounds.min_x, 0.0)
    x1, _ = layout.to_px(bounds.max_x, 0.0)
    surface.fill_rect(x0, y0 - HOUSE_BAND_PX, x1 - x0, HOUSE_BAND_PX, config.house_color)
    surface.stroke_rect(x0, y0 - HOUSE_BAND_PX, x1 - x0, HOUSE_BAND_PX, colors.OUTLINE, width=1)
    surface.text((x0 + x1) / 2, y0 - HOUSE_BAND_PX - 4, "HOUSE", color=colors.LABEL,
                 size=10, align="center", bold=True)


def draw_handles(surface, config, layout) -> None:
    for edge, (hx, hy) in dimension_handles(layout, config).items():
        surface.circle(hx, hy, HANDLE_RADIUS, fill=colors.HANDLE_FILL,
                       stroke=colors.HANDLE_STROKE, width=2)
        surface.text(hx, hy + 3, "W" if edge == "right" else "D",
                     color=colors.HANDLE_TEXT, size=10, align="center")


def caption(config) -> str:
    parts = [f"{config.active_deck_brand} {config.active_deck_line}"]
    if config.railing != RailingType.NONE:
        parts.append(f"{config.active_rail_series} railing")
    return " | ".join(parts)


def render(surface, config, width: float, height: float, camera: Camera = None) -> None:
    camera = camera or Camera()
    layout = compute_plan_layout(config, width, height, settings.CANVAS_PADDING)

    surface.save()
    apply_camera(surface, camera, width, height)

    if config.has_house and config.ledger_attached:
        draw_house_edge(surface, config, layout)
    draw_plan_stairs(surface, config, layout)
    draw_deck_surface(surface, config, layout)
    draw_plan_railing(surface, config, layout)

    bounds = deck_bounds(config)
    left, top = layout.to_px(bounds.min_x, bounds.min_y)
    right, bottom = layout.to_px(bounds.max_x, bounds.max_y)
    draw_dimension_labels(surface, left, top, right, bottom,
                          format_feet(bounds.width), format_feet(bounds.depth))
    draw_handles(surface, config, layout)
    surface.restore()

    surface.text(12, height - 12, caption(config), color=colors.LABEL, size=11)
