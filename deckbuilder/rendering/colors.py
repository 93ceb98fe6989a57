"""
Color tables and helpers for the deck renderer.

All tables are read-only module constants keyed by model enums.
"""

from ..models import DeckingCategory, DeckingMaterial, ExteriorFacade, RailingType

BACKGROUND = "#f8fafc"
OUTLINE = "#4f3f2e"
LABEL = "#334155"
DIMENSION = "#475569"
HANDLE_FILL = "#ffffff"
HANDLE_STROKE = "#2563eb"
HANDLE_TEXT = "#1d4ed8"

# Framing members
JOIST = "#a0825c"
BEAM = "#6b4f32"
LEDGER = "#5a4632"
POST = "#7a5c3c"
FOOTING = "#94a3b8"

# Scene dressing
GROUND = "#b8a98f"
GRASS = "#7fa65a"
SHADOW = "#1f2937"
DOOR_GLASS = "#cbd5e1"
DOOR_FRAME = "#f8fafc"
GLASS_TINT = "#80b0d6"
STAIR = "#8b6d4c"

# Wood decking board colors; composites use the selected brand color
MATERIAL_COLORS = {
    DeckingMaterial.PRESSURE_TREATED: "#9b7b53",
    DeckingMaterial.CEDAR: "#b9794a",
    DeckingMaterial.COMPOSITE_TREX: "#a59784",
    DeckingMaterial.COMPOSITE_TIMBERTECH: "#9c9c9c",
    DeckingMaterial.COMPOSITE_DECKORATORS: "#8c7a66",
    DeckingMaterial.COMPOSITE_WOLF: "#9c6d4a",
    DeckingMaterial.COMPOSITE_MOISTURESHIELD: "#7a7b7d",
}

# Facade siding/course spacing in feet; None means a flat finish
FACADE_COURSE_FT = {
    ExteriorFacade.VINYL: 0.6,
    ExteriorFacade.WOOD: 0.5,
    ExteriorFacade.BRICK: 0.25,
    ExteriorFacade.STONE: 0.8,
    ExteriorFacade.STUCCO: None,
}


def hex_to_rgb(hex_color: str) -> tuple:
    clean = hex_color.lstrip("#")
    value = int(clean, 16)
    return ((value >> 16) & 255, (value >> 8) & 255, value & 255)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    def clamp(channel):
        return max(0, min(255, int(round(channel))))
    return "#%02x%02x%02x" % (clamp(r), clamp(g), clamp(b))


def shade(hex_color: str, amount: float) -> str:
    """Scale every channel by (1 + amount); -0.08 darkens by 8%."""
    r, g, b = hex_to_rgb(hex_color)
    factor = 1.0 + amount
    return rgb_to_hex(r * factor, g * factor, b * factor)


def deck_color(config) -> str:
    """Board base color: brand swatch for composites, material table for wood."""
    if config.material.category == DeckingCategory.COMPOSITE:
        return config.active_deck_color
    return MATERIAL_COLORS.get(config.material, MATERIAL_COLORS[DeckingMaterial.PRESSURE_TREATED])


def is_composite(config) -> bool:
    return config.material.category == DeckingCategory.COMPOSITE


# Wood railings keep their lumber color; metal and glass use the series color
WOOD_RAIL_COLORS = {
    RailingType.WOOD: "#8b6d4c",
    RailingType.CEDAR: "#b9794a",
}


def rail_color(config) -> str:
    return WOOD_RAIL_COLORS.get(config.railing, config.active_rail_color)
