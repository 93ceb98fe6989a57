"""
Projection engine: feet-space deck geometry to pixel-space canvas coordinates.

Two families:

- Orthographic (surface, framing, elevation): one uniform scale that fits
  the deck, its stairs and railing inside the padded canvas, centered.
- Isometric: rotate about the vertical axis through the deck center, then
  the classic 30° projection. Scale and offset come from projecting the
  scene's bounding volume at unit scale and fitting it; the result is
  centered horizontally and anchored to the bottom margin.

Precondition: deck width and depth are strictly positive.
"""

import math
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .geometry import (
    GRADE_CLEARANCE_FT, HOUSE_STORY_FT, Bounds, Rect, deck_bounds, plan_bounds,
    railing_height, stair_layout,
)
from ..models import StairLocation

ISO_ANGLE = math.radians(30)
COS_30 = math.cos(ISO_ANGLE)
SIN_30 = math.sin(ISO_ANGLE)

# House wall extends past the deck on both sides, feet
HOUSE_OVERHANG_FT = 2.0


def fit_scale(available_w: float, available_h: float, feet_w: float, feet_h: float) -> float:
    """Largest pixels-per-foot that fits feet_w × feet_h into the available box."""
    return min(available_w / feet_w, available_h / feet_h)


# ============================================================
# Orthographic: plan (surface, framing)
# ============================================================

@dataclass(frozen=True)
class PlanLayout:
    scale: float
    offset_x: float
    offset_y: float
    bounds: Bounds

    def to_px(self, x: float, y: float) -> Tuple[float, float]:
        return (self.offset_x + (x - self.bounds.min_x) * self.scale,
                self.offset_y + (y - self.bounds.min_y) * self.scale)

    def rect_px(self, rect: Rect) -> Tuple[float, float, float, float]:
        x, y = self.to_px(rect.x, rect.y)
        return (x, y, rect.w * self.scale, rect.d * self.scale)

    def length_px(self, feet: float) -> float:
        return feet * self.scale


def compute_plan_layout(config, width: float, height: float, padding: float) -> PlanLayout:
    """Top-down layout: deck plus stair envelope, centered in the padded canvas."""
    bounds = plan_bounds(config)
    scale = fit_scale(width - 2 * padding, height - 2 * padding, bounds.width, bounds.depth)
    offset_x = (width - bounds.width * scale) / 2.0
    offset_y = (height - bounds.depth * scale) / 2.0
    return PlanLayout(scale, offset_x, offset_y, bounds)


# ============================================================
# Orthographic: front elevation
# ============================================================

@dataclass(frozen=True)
class ElevationLayout:
    scale: float
    offset_x: float
    ground_y: float
    min_x: float
    max_x: float
    top_z: float

    def to_px(self, x: float, z: float) -> Tuple[float, float]:
        return (self.offset_x + (x - self.min_x) * self.scale, self.ground_y - z * self.scale)

    def length_px(self, feet: float) -> float:
        return feet * self.scale


def elevation_extent(config) -> Tuple[float, float, float]:
    """
    (min_x, max_x, top_z) in feet for the front elevation.

    Horizontal extent is the deck plus side stairs; vertical extent reserves
    the railing above the deck surface and the house wall when shown.
    """
    bounds = deck_bounds(config)
    min_x, max_x = bounds.min_x, bounds.max_x
    stairs = stair_layout(config)
    if stairs is not None and stairs.location in (StairLocation.LEFT, StairLocation.RIGHT):
        min_x = min(min_x, stairs.envelope.x)
        max_x = max(max_x, stairs.envelope.x1)

    deck_height = config.dimensions.height
    top_z = deck_height + railing_height(config)
    if config.has_house:
        top_z = max(top_z, deck_height + HOUSE_STORY_FT)
    return min_x, max_x, top_z


def compute_elevation_layout(config, width: float, height: float, padding: float) -> ElevationLayout:
    min_x, max_x, top_z = elevation_extent(config)
    feet_w = max_x - min_x
    feet_h = top_z + GRADE_CLEARANCE_FT
    scale = fit_scale(width - 2 * padding, height - 2 * padding, feet_w, feet_h)
    offset_x = (width - feet_w * scale) / 2.0
    top_px = (height - feet_h * scale) / 2.0
    ground_y = top_px + top_z * scale
    return ElevationLayout(scale, offset_x, ground_y, min_x, max_x, top_z)


# ============================================================
# Isometric
# ============================================================

class IsometricProjector:
    """
    Rotating 30° isometric projection.

    (x, y, z) feet → rotate (x, y) by `rotation_deg` about the vertical axis
    through `center` → screen:
        sx = (x' − y')·cos30·scale + offset_x
        sy = (x' + y')·sin30·scale − z·scale + offset_y
    """

    def __init__(self, rotation_deg: float = 0.0, center: Tuple[float, float] = (0.0, 0.0),
                 scale: float = 1.0, offset: Tuple[float, float] = (0.0, 0.0)):
        self.rotation_deg = rotation_deg
        self.center = center
        self.scale = scale
        self.offset = offset
        radians = math.radians(rotation_deg)
        self._cos = math.cos(radians)
        self._sin = math.sin(radians)

    def rotate(self, x: float, y: float) -> Tuple[float, float]:
        cx, cy = self.center
        dx, dy = x - cx, y - cy
        return (dx * self._cos - dy * self._sin, dx * self._sin + dy * self._cos)

    def depth(self, x: float, y: float, z: float = 0.0) -> float:
        """Painter's-order key: larger is nearer the viewer."""
        rx, ry = self.rotate(x, y)
        return rx + ry + z * 0.001

    def project(self, x: float, y: float, z: float) -> Tuple[float, float]:
        rx, ry = self.rotate(x, y)
        sx = (rx - ry) * COS_30 * self.scale + self.offset[0]
        sy = (rx + ry) * SIN_30 * self.scale - z * self.scale + self.offset[1]
        return (sx, sy)

    def project_all(self, points: Iterable[Tuple[float, float, float]]) -> List[Tuple[float, float]]:
        return [self.project(x, y, z) for x, y, z in points]


def isometric_volume(config) -> List[Tuple[float, float, float]]:
    """
    Points whose projection must stay on screen: the 8 corners of the deck +
    railing volume, the stair envelope, and the house wall from grade to its top.
    """
    bounds = deck_bounds(config)
    top = config.dimensions.height + railing_height(config)
    points = []
    for z in (0.0, top):
        for x in (bounds.min_x, bounds.max_x):
            for y in (bounds.min_y, bounds.max_y):
                points.append((x, y, z))

    stairs = stair_layout(config)
    if stairs is not None:
        env = stairs.envelope
        for x, y in env.corners():
            points.append((x, y, 0.0))
            points.append((x, y, config.dimensions.height))

    if config.has_house:
        wall_top = config.dimensions.height + HOUSE_STORY_FT
        for x in (bounds.min_x - HOUSE_OVERHANG_FT, bounds.max_x + HOUSE_OVERHANG_FT):
            points.append((x, bounds.min_y, 0.0))
            points.append((x, bounds.min_y, wall_top))
    return points


def fit_isometric(config, width: float, height: float, rotation_deg: float,
                  padding: float) -> IsometricProjector:
    """
    Solve scale and offset for the isometric view.

    The bounding volume is projected at unit scale, the fitting scale is
    solved from its screen extent, then the box is centered horizontally and
    its bottom edge is anchored to the bottom padding.
    """
    center = (plan_bounds(config).cx, plan_bounds(config).cy)
    unit = IsometricProjector(rotation_deg, center)
    projected = unit.project_all(isometric_volume(config))
    xs = [p[0] for p in projected]
    ys = [p[1] for p in projected]
    extent_w = max(xs) - min(xs)
    extent_h = max(ys) - min(ys)

    scale = fit_scale(width - 2 * padding, height - 2 * padding, extent_w, extent_h)
    offset_x = width / 2.0 - (min(xs) + max(xs)) / 2.0 * scale
    offset_y = (height - padding) - max(ys) * scale
    return IsometricProjector(rotation_deg, center, scale, (offset_x, offset_y))
