"""
Decking and railing brand catalog.

Read-only reference data: decking brand lines with their color swatches and
railing systems with their series. Series `type` drives how railing infill
is drawn (balusters, glass panels, cable runs, ornamental, thick balusters).
"""

from typing import Optional

from .models import RailingType


BRAND_CATALOG = {
    "decking_brands": [
        {
            "brand": "Trex",
            "lines": [
                {
                    "name": "Transcend Lineage",
                    "colors": [
                        {"name": "Hatteras", "hex": "#a59784", "finish": "Refined Grain"},
                        {"name": "Jasper", "hex": "#4e3b31", "finish": "Refined Grain"},
                        {"name": "Biscayne", "hex": "#b39c7d", "finish": "Refined Grain"},
                        {"name": "Rainier", "hex": "#8c8d8f", "finish": "Refined Grain"},
                    ],
                },
                {
                    "name": "Transcend",
                    "colors": [
                        {"name": "Island Mist", "hex": "#909291", "finish": "Deep Streak"},
                        {"name": "Tiki Torch", "hex": "#a36e4a", "finish": "Deep Streak"},
                        {"name": "Havana Gold", "hex": "#b38b5d", "finish": "Deep Streak"},
                        {"name": "Spiced Rum", "hex": "#634333", "finish": "Deep Streak"},
                    ],
                },
                {
                    "name": "Enhance",
                    "colors": [
                        {"name": "Foggy Wharf", "hex": "#9ea0a1", "finish": "Wood Grain"},
                        {"name": "Rocky Harbor", "hex": "#8c8378", "finish": "Wood Grain"},
                        {"name": "Toasted Sand", "hex": "#bca38b", "finish": "Wood Grain"},
                    ],
                },
            ],
        },
        {
            "brand": "TimberTech (AZEK)",
            "lines": [
                {
                    "name": "Vintage Collection",
                    "colors": [
                        {"name": "Coastline", "hex": "#9c9c9c", "finish": "Wire Brushed"},
                        {"name": "Weathered Teak", "hex": "#b08d57", "finish": "Wire Brushed"},
                        {"name": "Mahogany", "hex": "#7d4a34", "finish": "Wire Brushed"},
                        {"name": "Dark Hickory", "hex": "#4a3c32", "finish": "Wire Brushed"},
                    ],
                },
                {
                    "name": "Landmark Collection",
                    "colors": [
                        {"name": "Castle Gate", "hex": "#7a7a7a", "finish": "Cross Cut"},
                        {"name": "French White Oak", "hex": "#c4b5a3", "finish": "Cross Cut"},
                    ],
                },
            ],
        },
        {
            "brand": "MoistureShield",
            "lines": [
                {
                    "name": "Vision",
                    "colors": [
                        {"name": "Smokey Gray", "hex": "#7a7b7d"},
                        {"name": "Spanish Leather", "hex": "#5e4a3b"},
                        {"name": "Sandstone", "hex": "#bda68e"},
                        {"name": "Cold Brew", "hex": "#3d3029"},
                    ],
                },
            ],
        },
        {
            # No product lines, colors sit directly on the brand
            "brand": "Wolf Serenity",
            "colors": [
                {"name": "Amberwood", "hex": "#9c6d4a"},
                {"name": "Black Walnut", "hex": "#3d2b21"},
                {"name": "Driftwood Grey", "hex": "#8c8c8c"},
            ],
        },
    ],
    "railing_systems": [
        {
            "brand": "Westbury Aluminum",
            "series": [
                {"name": "Tuscany C10", "type": "baluster"},
                {"name": "Veranda C70", "type": "glass_panel"},
                {"name": "Riviera C30", "type": "baluster_ornamental"},
                {"name": "VertiCable C80", "type": "cable"},
            ],
            "colors": [
                {"name": "Black Fine Texture", "hex": "#1a1a1a"},
                {"name": "Bronze Fine Texture", "hex": "#3b312b"},
                {"name": "White Fine Texture", "hex": "#f2f2f2"},
            ],
        },
        {
            "brand": "Trex Railing",
            "series": [
                {
                    "name": "Signature Aluminum",
                    "type": "baluster",
                    "colors": [
                        {"name": "Charcoal Black", "hex": "#232323"},
                        {"name": "Bronze", "hex": "#3d3630"},
                    ],
                },
                {
                    "name": "Transcend Composite",
                    "type": "thick_baluster",
                    "colors": [
                        {"name": "Classic White", "hex": "#f7f7f7"},
                        {"name": "Vintage Lantern", "hex": "#403129"},
                    ],
                },
            ],
        },
    ],
}


def get_deck_lines(brand: dict) -> list:
    """Product lines for a decking brand; line-less brands get one synthetic line."""
    if brand.get("lines"):
        return brand["lines"]
    return [{"name": f"{brand['brand']} Collection", "colors": brand.get("colors", [])}]


def get_rail_series_colors(system: dict, series: dict) -> list:
    """Series colors win over the system-wide palette."""
    if series.get("colors"):
        return series["colors"]
    return system.get("colors", [])


def catalog_for_pickers() -> dict:
    """
    The catalog with every choice spelled out: each decking brand lists its
    lines and each railing series carries its own color list.
    """
    return {
        "decking_brands": [
            {"brand": brand["brand"], "lines": get_deck_lines(brand)}
            for brand in BRAND_CATALOG["decking_brands"]
        ],
        "railing_systems": [
            {
                "brand": system["brand"],
                "series": [
                    {**series, "colors": get_rail_series_colors(system, series)}
                    for series in system["series"]
                ],
            }
            for system in BRAND_CATALOG["railing_systems"]
        ],
    }


def resolve_rail_series(name: str) -> dict:
    """Find a railing series by name, falling back to the first catalog series."""
    for system in BRAND_CATALOG["railing_systems"]:
        for series in system["series"]:
            if series["name"] == name:
                return series
    return BRAND_CATALOG["railing_systems"][0]["series"][0]


def rail_style(config) -> Optional[str]:
    """
    How the railing infill is drawn for a config.

    Glass railing is always panels, metal railing follows the selected
    aluminum series, wood and cedar use chunky balusters.
    """
    if config.railing == RailingType.NONE:
        return None
    if config.railing == RailingType.GLASS:
        return "glass_panel"
    if config.railing == RailingType.METAL:
        return resolve_rail_series(config.active_rail_series)["type"]
    return "thick_baluster"
