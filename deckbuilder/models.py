import enum


# --- Deck model enums ---

class DeckShape(str, enum.Enum):
    RECTANGLE = "rectangle"
    L_SHAPE = "l-shape"
    T_SHAPE = "t-shape"
    WRAP_AROUND = "wrap-around"


class DeckingCategory(str, enum.Enum):
    WOOD = "wood"
    COMPOSITE = "composite"


class DeckingMaterial(str, enum.Enum):
    PRESSURE_TREATED = "pressure-treated"
    CEDAR = "cedar"
    COMPOSITE_TREX = "composite-trex"
    COMPOSITE_TIMBERTECH = "composite-timbertech"
    COMPOSITE_DECKORATORS = "composite-deckorators"
    COMPOSITE_WOLF = "composite-wolf"
    COMPOSITE_MOISTURESHIELD = "composite-moistureshield"

    @property
    def category(self) -> DeckingCategory:
        if self.value.startswith("composite"):
            return DeckingCategory.COMPOSITE
        return DeckingCategory.WOOD


class BoardWidth(str, enum.Enum):
    # Nominal 6" and 4" boards, actual width in inches
    WIDE = "5.5"
    NARROW = "3.5"


class BoardPattern(str, enum.Enum):
    STANDARD = "standard"
    DIAGONAL = "diagonal"
    HERRINGBONE = "herringbone"
    PICTURE_FRAME = "picture-frame"


class RailingType(str, enum.Enum):
    NONE = "none"
    WOOD = "wood"
    CEDAR = "cedar"
    METAL = "metal"
    GLASS = "glass"


class RailingBrand(str, enum.Enum):
    GENERIC = "generic"
    WESTBURY = "westbury"
    DECKORATORS = "deckorators"
    TREX = "trex"
    TIMBERTECH = "timbertech"
    WOLF = "wolf"
    DEKPRO = "dekpro"


class BeamType(str, enum.Enum):
    DROPPED = "dropped"
    FLUSH = "flush"


class StairLocation(str, enum.Enum):
    NONE = "none"
    FRONT = "front"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"


class ExteriorFacade(str, enum.Enum):
    VINYL = "vinyl"
    BRICK = "brick"
    STONE = "stone"
    STUCCO = "stucco"
    WOOD = "wood"


# --- Rendering ---

class ViewMode(str, enum.Enum):
    SURFACE = "surface"
    FRAMING = "framing"
    ELEVATION = "elevation"
    ISOMETRIC = "isometric"
