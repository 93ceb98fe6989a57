"""
Deck material estimator.

Input: DeckConfig (shape, dimensions, decking material, pattern, beam type,
railing, stairs, ledger).
Output: MaterialList with decking, joists, beams, posts, footings, ledger,
railing, stairs and hardware line items.

Framing follows the same on-center spacing the framing view draws: joists
16" O.C. across the width, beams and posts 6' O.C.
"""

import logging
import math

from ..constants import JOIST_SPACING_IN, POST_SPACING_FT, RISE_PER_STEP_IN
from ..models import BeamType, BoardPattern, DeckShape, RailingBrand, RailingType, StairLocation
from ..schemas import WRAP_AROUND_DEFAULT_DEPTH
from .base import BaseEstimator
from .lumber import optimize_lumber_cuts
from .material_lookup import MaterialLookup

logger = logging.getLogger(__name__)

lookup = MaterialLookup()

POST_BURY_FT = 2            # length below grade / in the footing
FOOTING_BAGS_PER_POST = 2
STRINGER_SPACING_FT = 1.5
TREAD_BOARDS_PER_STEP = 2
SQFT_PER_SCREW_BOX = 100

WASTE_STANDARD = 1.10
WASTE_DIAGONAL = 1.15

STANDARD_NOTES = [
    "Estimates include ~10-15% waste factor for cuts.",
    "Cut plans snap to standard lumber lengths (8', 10', 12', 16').",
    "Actual costs vary by region and supplier.",
    "Permit costs and labor are not included.",
    "Foundation requirements may vary by local code; consult a professional.",
]

FLUSH_BEAM_NOTE = (
    "Flush/engineered beams (LVL) eliminate the dropped beam below the deck surface. "
    "Requires concealed beam hangers."
)


def deck_area(config) -> float:
    """Deck surface area in sq ft, including any extension or wrap-around strip."""
    dims = config.dimensions
    primary = dims.width * dims.depth
    if config.shape in (DeckShape.L_SHAPE, DeckShape.T_SHAPE):
        if dims.extension_width and dims.extension_depth:
            return primary + dims.extension_width * dims.extension_depth
        return primary
    if config.shape == DeckShape.WRAP_AROUND:
        strip = dims.extension_depth or WRAP_AROUND_DEFAULT_DEPTH
        return primary + strip * dims.depth
    return primary


def railing_perimeter(config) -> float:
    """
    Railed perimeter in linear feet.

    Rectangles are exact (one width edge dropped when ledger-attached).
    Other shapes use the perimeter of a square with the same area, × 0.75
    when ledger-attached. This is an approximation, not polygon geometry.
    """
    w = config.dimensions.width
    d = config.dimensions.depth
    if config.shape == DeckShape.RECTANGLE:
        return w + 2 * d if config.ledger_attached else 2 * w + 2 * d

    equivalent_side = math.sqrt(deck_area(config))
    perimeter = equivalent_side * 4
    return perimeter * 0.75 if config.ledger_attached else perimeter


def joist_count(width_ft: float) -> int:
    return math.ceil(width_ft * 12 / JOIST_SPACING_IN) + 1


def beam_count(depth_ft: float) -> int:
    return math.ceil(depth_ft / POST_SPACING_FT) + 1


def posts_per_beam(width_ft: float) -> int:
    return math.ceil(width_ft / POST_SPACING_FT) + 1


def stair_step_count(height_ft: float) -> int:
    return math.ceil(height_ft * 12 / RISE_PER_STEP_IN)


def _fmt_ft(value: float) -> str:
    """12.0 -> 12, 12.5 -> 12.5"""
    return f"{value:g}"


class DeckEstimator(BaseEstimator):

    def calculate(self, config) -> dict:
        items = []
        notes = list(STANDARD_NOTES)

        dims = config.dimensions
        width = dims.width
        depth = dims.depth
        area = deck_area(config)
        perimeter = railing_perimeter(config)
        decking_rate = lookup.get_decking_rate(config.material)
        lumber_rate = lookup.get_price_per_foot("2x8")

        # --- 1. Decking boards ---
        waste = WASTE_DIAGONAL if config.board_pattern == BoardPattern.DIAGONAL else WASTE_STANDARD
        decking_sqft = self.apply_waste(area, waste)
        items.append(self.make_material_item(
            name="Decking boards",
            description=f"{config.material.value} {config.board_width.value}\" wide",
            quantity=decking_sqft,
            unit="sq ft",
            unit_cost=decking_rate,
        ))

        # --- 2. Joists ---
        joists = joist_count(width)
        joist_plan = optimize_lumber_cuts(depth, joists)
        items.append(self.make_material_item(
            name="Joists (2x8)",
            description=(f"{_fmt_ft(depth)}' long, {JOIST_SPACING_IN}\" on center "
                         f"(optimized from {joist_plan['stock_length']}' stock)"),
            quantity=joists,
            unit="each",
            unit_cost=joist_plan["stock_length"] * lumber_rate,
        ))

        # --- 3. Beams ---
        beams = beam_count(depth)
        beam_plan = optimize_lumber_cuts(width, beams)
        if config.beam_type == BeamType.FLUSH:
            items.append(self.make_material_item(
                name="Engineered beam (LVL)",
                description=(f"Flush mount, {_fmt_ft(width)}' span "
                             f"({beam_plan['stock_length']}' stock)"),
                quantity=beams,
                unit="each",
                unit_cost=beam_plan["stock_length"] * lookup.get_price_per_foot("lvl_beam"),
            ))
            items.append(self.make_material_item(
                name="Beam hangers (flush mount)",
                description="Simpson or equivalent concealed hanger",
                quantity=beams * 2,
                unit="each",
                unit_cost=lookup.get_unit_price("concealed_beam_hanger"),
            ))
            notes.append(FLUSH_BEAM_NOTE)
        else:
            # Dropped beam is doubled dimensional lumber
            items.append(self.make_material_item(
                name="Beam boards (2x8)",
                description=(f"Doubled, {_fmt_ft(width)}' span "
                             f"({beam_plan['stock_length']}' stock)"),
                quantity=beams * 2,
                unit="each",
                unit_cost=beam_plan["stock_length"] * lumber_rate,
            ))

        # --- 4. Posts ---
        total_posts = posts_per_beam(width) * beams
        post_length = dims.height + POST_BURY_FT
        items.append(self.make_material_item(
            name="Support posts (4x4)",
            description=f"{_fmt_ft(post_length)}' long",
            quantity=total_posts,
            unit="each",
            unit_cost=post_length * lookup.get_price_per_foot("4x4_post"),
        ))

        # --- 5. Concrete footings ---
        items.append(self.make_material_item(
            name="Concrete footings",
            description=f"Pre-mixed 60lb bags ({FOOTING_BAGS_PER_POST} per post)",
            quantity=total_posts * FOOTING_BAGS_PER_POST,
            unit="bags",
            unit_cost=lookup.get_unit_price("concrete_bag_60lb"),
        ))

        # --- 6. Ledger board ---
        if config.ledger_attached:
            ledger_plan = optimize_lumber_cuts(width, 1)
            items.append(self.make_material_item(
                name="Ledger board (2x8)",
                description=(f"{_fmt_ft(width)}' long, lag bolted to house "
                             f"({ledger_plan['stock_length']}' stock)"),
                quantity=1,
                unit="each",
                unit_cost=ledger_plan["stock_length"] * lumber_rate,
            ))

        # --- 7. Railing ---
        if config.railing != RailingType.NONE:
            railing_lf = math.ceil(perimeter)
            brand_label = ""
            if config.railing_brand != RailingBrand.GENERIC:
                brand_label = f" ({config.railing_brand.value})"
            items.append(self.make_material_item(
                name="Railing",
                description=f"{config.railing.value}{brand_label} railing",
                quantity=railing_lf,
                unit="linear ft",
                unit_cost=lookup.get_railing_rate(config.railing),
            ))

        # --- 8. Stairs ---
        if config.stairs.location != StairLocation.NONE:
            step_count = stair_step_count(dims.height)
            stair_width = config.stairs.width
            stringer_count = math.ceil(stair_width / STRINGER_SPACING_FT) + 1
            items.append(self.make_material_item(
                name="Stair stringers (2x12)",
                description=f"{step_count} steps",
                quantity=stringer_count,
                unit="each",
                unit_cost=lookup.get_unit_price("stair_stringer_2x12"),
            ))
            items.append(self.make_material_item(
                name="Stair treads",
                description=f"{_fmt_ft(stair_width)}' wide",
                quantity=step_count * TREAD_BOARDS_PER_STEP,
                unit="each",
                unit_cost=stair_width * decking_rate,
            ))

        # --- 9. Hardware ---
        screw_boxes = math.ceil(area / SQFT_PER_SCREW_BOX)
        items.append(self.make_material_item(
            name="Deck screws (5lb box)",
            description="Coated deck screws",
            quantity=screw_boxes,
            unit="boxes",
            unit_cost=lookup.get_unit_price("deck_screws_5lb"),
        ))
        items.append(self.make_material_item(
            name="Joist hangers",
            description="Simpson Strong-Tie or equivalent",
            quantity=joists,
            unit="each",
            unit_cost=lookup.get_unit_price("joist_hanger"),
        ))

        logger.info("Estimated %s deck %sx%s: %d line items",
                    config.shape.value, _fmt_ft(width), _fmt_ft(depth), len(items))

        return self.make_material_list(
            items=items,
            total_sq_ft=area,
            perimeter_ft=perimeter,
            notes=notes,
        )


def estimate(config) -> dict:
    """Estimate the bill of materials for a deck config."""
    return DeckEstimator().calculate(config)
