"""
Plan geometry for the deck model, in feet.

Coordinate system: x runs along the deck width, y along the depth with
y = 0 on the house/ledger edge (y grows away from the house), z is height
above grade. Everything here is pure and derived from a DeckConfig.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..constants import JOIST_SPACING_IN, POST_SPACING_FT, RAILING_HEIGHT_FT, RISE_PER_STEP_IN, TREAD_RUN_IN
from ..models import DeckShape, RailingType, StairLocation
from ..schemas import WRAP_AROUND_DEFAULT_DEPTH

EPS = 1e-6

JOIST_SPACING_FT = JOIST_SPACING_IN / 12.0
BEAM_SPACING_FT = float(POST_SPACING_FT)
TREAD_RUN_FT = TREAD_RUN_IN / 12.0
HOUSE_STORY_FT = 9.0        # house wall above the deck surface
GRADE_CLEARANCE_FT = 1.0

# Sliding patio door, centered on the main deck
DOOR_WIDTH_FT = 6.0
DOOR_HEIGHT_FT = 6.75

# Framing member sizes, feet
DECK_BOARD_THICKNESS_FT = 0.1
JOIST_DEPTH_FT = 0.6
BEAM_DEPTH_FT = 0.6
POST_SIZE_FT = 0.3


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    d: float

    @property
    def x1(self) -> float:
        return self.x + self.w

    @property
    def y1(self) -> float:
        return self.y + self.d

    @property
    def cx(self) -> float:
        return self.x + self.w / 2.0

    @property
    def cy(self) -> float:
        return self.y + self.d / 2.0

    def corners(self) -> List[Tuple[float, float]]:
        return [(self.x, self.y), (self.x1, self.y), (self.x1, self.y1), (self.x, self.y1)]


@dataclass(frozen=True)
class Bounds:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def depth(self) -> float:
        return self.max_y - self.min_y

    @property
    def cx(self) -> float:
        return (self.min_x + self.max_x) / 2.0

    @property
    def cy(self) -> float:
        return (self.min_y + self.max_y) / 2.0

    def union(self, other: "Bounds") -> "Bounds":
        return Bounds(min(self.min_x, other.min_x), min(self.min_y, other.min_y),
                      max(self.max_x, other.max_x), max(self.max_y, other.max_y))

    @staticmethod
    def of_rects(rects) -> "Bounds":
        rects = list(rects)
        return Bounds(min(r.x for r in rects), min(r.y for r in rects),
                      max(r.x1 for r in rects), max(r.y1 for r in rects))


@dataclass(frozen=True)
class Tread:
    rect: Rect
    top_z: float


@dataclass(frozen=True)
class StairLayout:
    location: StairLocation
    step_count: int
    width: float
    run: float
    treads: Tuple[Tread, ...]
    envelope: Rect


# ============================================================
# Deck footprint
# ============================================================

def deck_sections(config) -> List[Rect]:
    """Rectangles making up the deck surface; the first one is the main deck."""
    dims = config.dimensions
    main = Rect(0.0, 0.0, dims.width, dims.depth)
    if config.shape == DeckShape.L_SHAPE:
        return [main, Rect(0.0, dims.depth, dims.extension_width, dims.extension_depth)]
    if config.shape == DeckShape.T_SHAPE:
        offset = (dims.width - dims.extension_width) / 2.0
        return [main, Rect(offset, dims.depth, dims.extension_width, dims.extension_depth)]
    if config.shape == DeckShape.WRAP_AROUND:
        strip = dims.extension_depth or WRAP_AROUND_DEFAULT_DEPTH
        return [main, Rect(dims.width, 0.0, strip, dims.depth)]
    return [main]


def deck_bounds(config) -> Bounds:
    return Bounds.of_rects(deck_sections(config))


def deck_outline(config) -> List[Tuple[float, float]]:
    """Outline polygon of the whole deck, clockwise on screen starting at the house-left corner."""
    dims = config.dimensions
    w, d = dims.width, dims.depth
    if config.shape == DeckShape.L_SHAPE:
        ew, ed = dims.extension_width, dims.extension_depth
        return [(0.0, 0.0), (w, 0.0), (w, d), (ew, d), (ew, d + ed), (0.0, d + ed)]
    if config.shape == DeckShape.T_SHAPE:
        ew, ed = dims.extension_width, dims.extension_depth
        ox = (w - ew) / 2.0
        return [(0.0, 0.0), (w, 0.0), (w, d), (ox + ew, d), (ox + ew, d + ed),
                (ox, d + ed), (ox, d), (0.0, d)]
    if config.shape == DeckShape.WRAP_AROUND:
        strip = dims.extension_depth or WRAP_AROUND_DEFAULT_DEPTH
        return [(0.0, 0.0), (w + strip, 0.0), (w + strip, d), (0.0, d)]
    return [(0.0, 0.0), (w, 0.0), (w, d), (0.0, d)]


def railing_edges(config) -> List[Tuple[float, float, float, float]]:
    """
    Railed edges as (x1, y1, x2, y2).

    Empty when there is no railing. The house edge (y = 0) is skipped when
    the deck is ledger-attached.
    """
    if config.railing == RailingType.NONE:
        return []
    outline = deck_outline(config)
    edges = []
    for i, (x1, y1) in enumerate(outline):
        x2, y2 = outline[(i + 1) % len(outline)]
        if math.hypot(x2 - x1, y2 - y1) < EPS:
            continue
        if config.ledger_attached and abs(y1) < EPS and abs(y2) < EPS:
            continue
        edges.append((x1, y1, x2, y2))
    return edges


# ============================================================
# Framing layout
# ============================================================

def spaced_positions(length: float, spacing: float) -> List[float]:
    """Positions every `spacing` from 0, plus a forced final one at `length`."""
    positions = []
    k = 0
    while k * spacing < length - EPS:
        positions.append(k * spacing)
        k += 1
    positions.append(length)
    return positions


def beam_positions(depth: float) -> List[float]:
    return spaced_positions(depth, BEAM_SPACING_FT)


def joist_positions(width: float) -> List[float]:
    return spaced_positions(width, JOIST_SPACING_FT)


def post_positions(width: float) -> List[float]:
    return spaced_positions(width, float(POST_SPACING_FT))


def post_locations(config) -> List[Tuple[float, float]]:
    """
    Plan (x, y) of every support post.

    One post per post-spacing station on every beam line, except the beam on
    the house edge when a ledger carries that side.
    """
    locations = []
    for section in deck_sections(config):
        for beam_y in beam_positions(section.d):
            y = section.y + beam_y
            if config.ledger_attached and abs(y) < EPS:
                continue
            for px in post_positions(section.w):
                locations.append((section.x + px, y))
    return locations


# ============================================================
# Stairs
# ============================================================

def step_count(height_ft: float) -> int:
    return max(1, math.ceil(height_ft * 12 / RISE_PER_STEP_IN))


def _edge_section(sections: List[Rect], location: StairLocation, bounds: Bounds) -> Rect:
    """The widest section touching the deck edge the stairs come off."""
    if location == StairLocation.FRONT:
        touching = [s for s in sections if abs(s.y1 - bounds.max_y) < EPS]
        return max(touching, key=lambda s: s.w)
    if location == StairLocation.BACK:
        touching = [s for s in sections if abs(s.y - bounds.min_y) < EPS]
        return max(touching, key=lambda s: s.w)
    if location == StairLocation.LEFT:
        touching = [s for s in sections if abs(s.x - bounds.min_x) < EPS]
        return max(touching, key=lambda s: s.d)
    touching = [s for s in sections if abs(s.x1 - bounds.max_x) < EPS]
    return max(touching, key=lambda s: s.d)


def stair_layout(config) -> Optional[StairLayout]:
    """
    Tread-by-tread stair layout running away from the deck edge.

    Tread i advances run/step_count in plan and sits height/step_count lower
    than tread i-1; the last tread lands on grade.
    """
    location = config.stairs.location
    if location == StairLocation.NONE:
        return None

    height = config.dimensions.height
    steps = step_count(height)
    run_step = TREAD_RUN_FT
    run = steps * run_step
    sw = config.stairs.width
    sections = deck_sections(config)
    bounds = Bounds.of_rects(sections)
    section = _edge_section(sections, location, bounds)

    treads = []
    for i in range(steps):
        if location == StairLocation.FRONT:
            rect = Rect(section.cx - sw / 2.0, bounds.max_y + i * run_step, sw, run_step)
        elif location == StairLocation.BACK:
            rect = Rect(section.cx - sw / 2.0, bounds.min_y - (i + 1) * run_step, sw, run_step)
        elif location == StairLocation.LEFT:
            rect = Rect(bounds.min_x - (i + 1) * run_step, section.cy - sw / 2.0, run_step, sw)
        else:
            rect = Rect(bounds.max_x + i * run_step, section.cy - sw / 2.0, run_step, sw)
        top_z = height * (steps - 1 - i) / steps
        treads.append(Tread(rect, top_z))

    envelope = Bounds.of_rects(t.rect for t in treads)
    return StairLayout(
        location=location,
        step_count=steps,
        width=sw,
        run=run,
        treads=tuple(treads),
        envelope=Rect(envelope.min_x, envelope.min_y, envelope.width, envelope.depth),
    )


def plan_bounds(config) -> Bounds:
    """Deck bounds grown to include the stair envelope."""
    bounds = deck_bounds(config)
    stairs = stair_layout(config)
    if stairs is not None:
        bounds = bounds.union(Bounds.of_rects([stairs.envelope]))
    return bounds


def railing_height(config) -> float:
    return 0.0 if config.railing == RailingType.NONE else RAILING_HEIGHT_FT
