"""
Base class for material estimators.

Input: a DeckConfig
Output: MaterialList dict (items, total_cost, total_sq_ft, perimeter_ft, notes)
"""

import logging
import math
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class BaseEstimator(ABC):
    """Shared helpers for building MaterialList dicts."""

    @abstractmethod
    def calculate(self, config) -> dict:
        """Takes a DeckConfig, returns a MaterialList dict."""
        pass

    # --- Helper methods ---

    def apply_waste(self, quantity: float, waste_multiplier: float) -> int:
        """Apply a waste multiplier (1.10 = 10% extra). Always round UP."""
        return math.ceil(quantity * waste_multiplier)

    def make_material_item(self, name: str, description: str, quantity: float,
                           unit: str, unit_cost: float) -> dict:
        """Build a MaterialItem dict. total_cost is always quantity × unit_cost."""
        return {
            "name": name,
            "description": description,
            "quantity": quantity,
            "unit": unit,
            "unit_cost": round(unit_cost, 2),
            "total_cost": round(quantity * unit_cost, 2),
        }

    def make_material_list(self, items: list, total_sq_ft: float,
                           perimeter_ft: float, notes: list = None) -> dict:
        """Build the MaterialList output dict."""
        total_cost = round(sum(item["total_cost"] for item in items), 2)
        logger.debug("Material list: %d items, total $%.2f", len(items), total_cost)
        return {
            "items": items,
            "total_cost": total_cost,
            "total_sq_ft": round(total_sq_ft, 2),
            "perimeter_ft": round(perimeter_ft, 2),
            "notes": notes or [],
        }
