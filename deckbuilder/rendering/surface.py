"""
Abstract 2D immediate-mode drawing surface.

Views issue primitives against a DrawingSurface: filled/stroked rects and
polygons, lines, circles, text, rectangular clips and an affine transform
stack (save/restore/translate/scale/rotate). Any backend that implements
these is enough to render every view.

Colors are "#rrggbb" strings, opacity is a separate `alpha` in [0, 1].
Dash patterns are (dash, gap) in pixels.
"""

import math
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

Point = Tuple[float, float]


class Affine:
    """2D affine matrix [a c e; b d f; 0 0 1] in canvas order."""

    __slots__ = ("a", "b", "c", "d", "e", "f")

    def __init__(self, a=1.0, b=0.0, c=0.0, d=1.0, e=0.0, f=0.0):
        self.a, self.b, self.c, self.d, self.e, self.f = a, b, c, d, e, f

    def multiply(self, other: "Affine") -> "Affine":
        """self × other: `other` is applied to points first."""
        return Affine(
            self.a * other.a + self.c * other.b,
            self.b * other.a + self.d * other.b,
            self.a * other.c + self.c * other.d,
            self.b * other.c + self.d * other.d,
            self.a * other.e + self.c * other.f + self.e,
            self.b * other.e + self.d * other.f + self.f,
        )

    def apply(self, x: float, y: float) -> Point:
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)

    def scale_factor(self) -> float:
        """Mean axis scale, used for line widths, radii and font sizes."""
        sx = math.hypot(self.a, self.b)
        sy = math.hypot(self.c, self.d)
        return (sx + sy) / 2.0

    def rotation_degrees(self) -> float:
        return math.degrees(math.atan2(self.b, self.a))

    @staticmethod
    def translation(dx: float, dy: float) -> "Affine":
        return Affine(e=dx, f=dy)

    @staticmethod
    def scaling(sx: float, sy: float) -> "Affine":
        return Affine(a=sx, d=sy)

    @staticmethod
    def rotation(radians: float) -> "Affine":
        cos_r, sin_r = math.cos(radians), math.sin(radians)
        return Affine(a=cos_r, b=sin_r, c=-sin_r, d=cos_r)

    def copy(self) -> "Affine":
        return Affine(self.a, self.b, self.c, self.d, self.e, self.f)


class DrawingSurface(ABC):
    """Primitive set every rendering backend must provide."""

    @abstractmethod
    def clear(self, color: str) -> None:
        """Paint the whole surface with a background color."""

    @abstractmethod
    def save(self) -> None:
        pass

    @abstractmethod
    def restore(self) -> None:
        pass

    @abstractmethod
    def translate(self, dx: float, dy: float) -> None:
        pass

    @abstractmethod
    def scale(self, sx: float, sy: float) -> None:
        pass

    @abstractmethod
    def rotate(self, radians: float) -> None:
        pass

    @abstractmethod
    def clip_rect(self, x: float, y: float, w: float, h: float) -> None:
        """Restrict drawing to a rectangle until the matching restore()."""

    @abstractmethod
    def fill_rect(self, x: float, y: float, w: float, h: float,
                  color: str, alpha: float = 1.0) -> None:
        pass

    @abstractmethod
    def stroke_rect(self, x: float, y: float, w: float, h: float, color: str,
                    width: float = 1.0, dash: Optional[Tuple[float, float]] = None,
                    alpha: float = 1.0) -> None:
        pass

    @abstractmethod
    def fill_polygon(self, points: Sequence[Point], color: str, alpha: float = 1.0) -> None:
        pass

    @abstractmethod
    def stroke_polygon(self, points: Sequence[Point], color: str, width: float = 1.0,
                       closed: bool = True, dash: Optional[Tuple[float, float]] = None,
                       alpha: float = 1.0) -> None:
        pass

    @abstractmethod
    def line(self, x1: float, y1: float, x2: float, y2: float, color: str,
             width: float = 1.0, dash: Optional[Tuple[float, float]] = None,
             alpha: float = 1.0) -> None:
        pass

    @abstractmethod
    def circle(self, cx: float, cy: float, radius: float, fill: Optional[str] = None,
               stroke: Optional[str] = None, width: float = 1.0,
               dash: Optional[Tuple[float, float]] = None, alpha: float = 1.0) -> None:
        pass

    @abstractmethod
    def text(self, x: float, y: float, content: str, color: str = "#334155",
             size: float = 12.0, align: str = "left", angle: float = 0.0,
             bold: bool = False) -> None:
        """
        Draw text with its baseline anchored at (x, y).

        `align` is left/center/right relative to x; `angle` rotates the text
        around the anchor in degrees, clockwise on screen.
        """


def _pt(point: Point) -> List[float]:
    return [round(point[0], 3), round(point[1], 3)]


def _r(value: float) -> float:
    return round(value, 3)


class RecordingSurface(DrawingSurface):
    """
    Records every primitive as a JSON-ready command dict.

    The browser host replays the list onto a <canvas>; tests inspect it
    directly. Coordinates are recorded as issued (pre-transform); transform
    ops are recorded in order so a replay reproduces the same picture.
    """

    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height
        self.commands: List[dict] = []
        self._depth = 0

    def _emit(self, op: str, **args) -> None:
        cmd = {"op": op}
        cmd.update(args)
        self.commands.append(cmd)

    def clear(self, color: str) -> None:
        self._emit("clear", color=color, width=self.width, height=self.height)

    def save(self) -> None:
        self._depth += 1
        self._emit("save")

    def restore(self) -> None:
        if self._depth == 0:
            raise RuntimeError("restore() without matching save()")
        self._depth -= 1
        self._emit("restore")

    def translate(self, dx, dy):
        self._emit("translate", dx=_r(dx), dy=_r(dy))

    def scale(self, sx, sy):
        self._emit("scale", sx=_r(sx), sy=_r(sy))

    def rotate(self, radians):
        self._emit("rotate", radians=_r(radians))

    def clip_rect(self, x, y, w, h):
        self._emit("clip_rect", x=_r(x), y=_r(y), w=_r(w), h=_r(h))

    def fill_rect(self, x, y, w, h, color, alpha=1.0):
        self._emit("fill_rect", x=_r(x), y=_r(y), w=_r(w), h=_r(h), color=color, alpha=alpha)

    def stroke_rect(self, x, y, w, h, color, width=1.0, dash=None, alpha=1.0):
        self._emit("stroke_rect", x=_r(x), y=_r(y), w=_r(w), h=_r(h), color=color,
                   width=width, dash=list(dash) if dash else None, alpha=alpha)

    def fill_polygon(self, points, color, alpha=1.0):
        self._emit("fill_polygon", points=[_pt(p) for p in points], color=color, alpha=alpha)

    def stroke_polygon(self, points, color, width=1.0, closed=True, dash=None, alpha=1.0):
        self._emit("stroke_polygon", points=[_pt(p) for p in points], color=color,
                   width=width, closed=closed, dash=list(dash) if dash else None, alpha=alpha)

    def line(self, x1, y1, x2, y2, color, width=1.0, dash=None, alpha=1.0):
        self._emit("line", x1=_r(x1), y1=_r(y1), x2=_r(x2), y2=_r(y2), color=color,
                   width=width, dash=list(dash) if dash else None, alpha=alpha)

    def circle(self, cx, cy, radius, fill=None, stroke=None, width=1.0, dash=None, alpha=1.0):
        self._emit("circle", cx=_r(cx), cy=_r(cy), radius=_r(radius), fill=fill, stroke=stroke,
                   width=width, dash=list(dash) if dash else None, alpha=alpha)

    def text(self, x, y, content, color="#334155", size=12.0, align="left", angle=0.0, bold=False):
        self._emit("text", x=_r(x), y=_r(y), content=content, color=color, size=size,
                   align=align, angle=angle, bold=bold)

    # --- Inspection helpers ---

    def ops(self, op: str) -> List[dict]:
        """All recorded commands of one kind."""
        return [c for c in self.commands if c["op"] == op]
