from pydantic import BaseModel, Field, model_validator
from typing import Optional, List

from .models import (
    BeamType, BoardPattern, BoardWidth, DeckingCategory, DeckingMaterial, DeckShape,
    ExteriorFacade, RailingBrand, RailingType, StairLocation, ViewMode,
)

HEX_COLOR = r"^#[0-9a-fA-F]{6}$"

# Wrap-around decks without an explicit strip depth get a 6' strip
WRAP_AROUND_DEFAULT_DEPTH = 6.0


class DeckDimensions(BaseModel):
    width: float = Field(gt=0)
    depth: float = Field(gt=0)
    height: float = Field(gt=0)
    extension_width: Optional[float] = Field(default=None, gt=0)
    extension_depth: Optional[float] = Field(default=None, gt=0)

    class Config:
        frozen = True


class StairConfig(BaseModel):
    location: StairLocation = StairLocation.NONE
    width: float = Field(default=4.0, gt=0)

    class Config:
        frozen = True


class DeckConfig(BaseModel):
    shape: DeckShape = DeckShape.RECTANGLE
    dimensions: DeckDimensions
    decking_category: DeckingCategory = DeckingCategory.WOOD
    material: DeckingMaterial = DeckingMaterial.PRESSURE_TREATED
    board_width: BoardWidth = BoardWidth.WIDE
    board_pattern: BoardPattern = BoardPattern.STANDARD
    railing: RailingType = RailingType.METAL
    railing_brand: RailingBrand = RailingBrand.GENERIC
    beam_type: BeamType = BeamType.DROPPED
    stairs: StairConfig = StairConfig()
    ledger_attached: bool = True
    quote_name: str = ""
    quote_notes: str = ""
    quote_number: Optional[str] = None
    has_house: bool = True
    exterior_facade: ExteriorFacade = ExteriorFacade.VINYL
    house_color: str = Field(default="#d5d0c8", pattern=HEX_COLOR)
    patio_door: bool = False
    show_grass: bool = False
    active_deck_brand: str = "Trex"
    active_deck_line: str = "Transcend Lineage"
    active_deck_color: str = Field(default="#a59784", pattern=HEX_COLOR)
    active_rail_series: str = "Tuscany C10"
    active_rail_color: str = Field(default="#1a1a1a", pattern=HEX_COLOR)

    class Config:
        frozen = True

    @model_validator(mode="before")
    @classmethod
    def _fill_wrap_around_strip(cls, data):
        """Wrap-around decks default to a 6' strip when none was given."""
        if not isinstance(data, dict):
            return data
        if str(_enum_value(data.get("shape"))) != DeckShape.WRAP_AROUND.value:
            return data
        dims = data.get("dimensions")
        if isinstance(dims, dict) and not dims.get("extension_depth"):
            data = dict(data)
            data["dimensions"] = {**dims, "extension_depth": WRAP_AROUND_DEFAULT_DEPTH}
        return data

    @model_validator(mode="before")
    @classmethod
    def _derive_decking_category(cls, data):
        """decking_category always follows the selected material."""
        if not isinstance(data, dict):
            return data
        try:
            material = DeckingMaterial(
                _enum_value(data.get("material", DeckingMaterial.PRESSURE_TREATED)))
        except ValueError:
            return data
        return {**data, "decking_category": material.category}

    @model_validator(mode="after")
    def _check_extensions(self):
        if self.shape in (DeckShape.L_SHAPE, DeckShape.T_SHAPE):
            dims = self.dimensions
            if not dims.extension_width or not dims.extension_depth:
                raise ValueError(
                    f"{self.shape.value} decks require extension_width and extension_depth"
                )
        return self


def _enum_value(value):
    return value.value if hasattr(value, "value") else value


DEFAULT_DECK_CONFIG = DeckConfig(
    shape=DeckShape.RECTANGLE,
    dimensions=DeckDimensions(width=12, depth=10, height=3),
    decking_category=DeckingCategory.WOOD,
    material=DeckingMaterial.PRESSURE_TREATED,
    board_width=BoardWidth.WIDE,
    board_pattern=BoardPattern.STANDARD,
    railing=RailingType.METAL,
    railing_brand=RailingBrand.WESTBURY,
    beam_type=BeamType.DROPPED,
    stairs=StairConfig(location=StairLocation.FRONT, width=4),
    ledger_attached=True,
    has_house=True,
    exterior_facade=ExteriorFacade.VINYL,
    house_color="#d5d0c8",
)


def apply_config_patch(config: DeckConfig, patch: dict) -> DeckConfig:
    """
    Return a new DeckConfig with a partial update applied.

    Top-level keys replace; `dimensions` and `stairs` merge one level deep so
    a patch like {"dimensions": {"width": 14}} keeps depth and height.
    """
    data = config.model_dump()
    for key, value in patch.items():
        if key in ("dimensions", "stairs") and isinstance(value, dict):
            data[key] = {**data[key], **value}
        else:
            data[key] = value
    return DeckConfig(**data)


def board_width_ft(config: DeckConfig) -> float:
    """Actual board width in feet."""
    return float(config.board_width.value) / 12.0


# --- API request / response schemas ---

class CameraState(BaseModel):
    x: float = 0.0
    y: float = 0.0
    zoom: float = Field(default=1.0, ge=0.3, le=5.0)
    rotation_angle: float = 0.0


class RenderRequest(BaseModel):
    config: DeckConfig
    # Checked against the view registry by the router
    view_mode: str = ViewMode.SURFACE.value
    width: int = Field(default=800, gt=0)
    height: int = Field(default=600, gt=0)
    camera: CameraState = CameraState()


class RenderResponse(BaseModel):
    view_mode: str
    width: int
    height: int
    commands: List[dict]


class MaterialItem(BaseModel):
    name: str
    description: str
    quantity: float
    unit: str
    unit_cost: float
    total_cost: float


class MaterialList(BaseModel):
    items: List[MaterialItem]
    total_cost: float
    total_sq_ft: float
    perimeter_ft: float
    notes: List[str] = []
