"""
Deck material pricing tables.

Approximate retail rates. Decking is priced per square foot, railing per
linear foot, dimensional lumber per linear foot of stock.
"""

from ..models import DeckingMaterial, RailingType

# Decking boards, $ per sq ft
DECKING_COST_PER_SQFT = {
    DeckingMaterial.PRESSURE_TREATED: 2.50,
    DeckingMaterial.CEDAR: 5.00,
    DeckingMaterial.COMPOSITE_TREX: 8.00,
    DeckingMaterial.COMPOSITE_TIMBERTECH: 9.00,
    DeckingMaterial.COMPOSITE_DECKORATORS: 7.50,
    DeckingMaterial.COMPOSITE_WOLF: 7.00,
    DeckingMaterial.COMPOSITE_MOISTURESHIELD: 8.50,
}

# Railing systems, $ per linear ft installed run
RAILING_COST_PER_LF = {
    RailingType.NONE: 0.0,
    RailingType.WOOD: 15.0,
    RailingType.CEDAR: 18.0,
    RailingType.METAL: 45.0,
    RailingType.GLASS: 75.0,
}

# Lumber and hardware
PRICE_PER_FOOT = {
    "2x8": 1.50,        # joists, dropped beams, ledger
    "lvl_beam": 6.00,   # engineered flush beam
    "4x4_post": 2.00,
}

PRICE_PER_UNIT = {
    "concrete_bag_60lb": 6.00,
    "concealed_beam_hanger": 18.00,
    "stair_stringer_2x12": 25.00,
    "deck_screws_5lb": 45.00,
    "joist_hanger": 3.50,
}


class MaterialLookup:
    """Rate lookups with zero fallback for unknown keys."""

    def get_decking_rate(self, material: DeckingMaterial) -> float:
        return DECKING_COST_PER_SQFT.get(material, 0.0)

    def get_railing_rate(self, railing: RailingType) -> float:
        return RAILING_COST_PER_LF.get(railing, 0.0)

    def get_price_per_foot(self, key: str) -> float:
        return PRICE_PER_FOOT.get(key, 0.0)

    def get_unit_price(self, key: str) -> float:
        return PRICE_PER_UNIT.get(key, 0.0)
