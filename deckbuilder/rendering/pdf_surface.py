"""
DrawingSurface backed by an fpdf2 page.

A view is drawn in canvas pixels; PDFSurface maps that canvas into a box
on the current page (millimetres), keeping its own affine stack since fpdf2
has no general transform API. Use it as a context manager so the box clip
and any open clips are closed:

    with PDFSurface(pdf, x=10, y=40, w=90, h=68, canvas_width=800, canvas_height=600) as surface:
        render_view(surface, config, ViewMode.FRAMING, 800, 600)
"""

from contextlib import ExitStack
from typing import List, Optional, Sequence, Tuple

from fpdf import FPDF

from .colors import hex_to_rgb
from .surface import Affine, DrawingSurface, Point

MM_TO_PT = 72 / 25.4
FONT_FAMILY = "Helvetica"


def _safe(text: str) -> str:
    """Built-in PDF fonts are latin-1 only."""
    return (text or "").encode("latin-1", errors="replace").decode("latin-1")


class PDFSurface(DrawingSurface):

    def __init__(self, pdf: FPDF, x: float, y: float, w: float, h: float,
                 canvas_width: float, canvas_height: float):
        self.pdf = pdf
        self.box = (x, y, w, h)
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        fit = min(w / canvas_width, h / canvas_height)
        # Center the canvas inside the box
        ox = x + (w - canvas_width * fit) / 2.0
        oy = y + (h - canvas_height * fit) / 2.0
        self.matrix = Affine.translation(ox, oy).multiply(Affine.scaling(fit, fit))
        self._stack: List[Tuple[Affine, ExitStack]] = []
        self._clips = ExitStack()

    # --- Context management ---

    def __enter__(self) -> "PDFSurface":
        x, y, w, h = self.box
        self._clips.enter_context(self.pdf.rect_clip(x, y, w, h))
        return self

    def __exit__(self, exc_type, exc, tb):
        while self._stack:
            _, clips = self._stack.pop()
            clips.close()
        self._clips.close()
        return False

    # --- Helpers ---

    def _pts(self, points: Sequence[Point]) -> List[Point]:
        return [self.matrix.apply(px, py) for px, py in points]

    def _mm(self, pixels: float) -> float:
        return pixels * self.matrix.scale_factor()

    def _set_stroke(self, color: str, width: float, dash: Optional[Sequence[float]]) -> None:
        self.pdf.set_draw_color(*hex_to_rgb(color))
        self.pdf.set_line_width(max(self._mm(width), 0.05))
        if dash:
            self.pdf.set_dash_pattern(dash=self._mm(dash[0]), gap=self._mm(dash[1]))
        else:
            self.pdf.set_dash_pattern()

    def _rect_points(self, x, y, w, h) -> List[Point]:
        return [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]

    # --- DrawingSurface ---

    def clear(self, color: str) -> None:
        x, y, w, h = self.box
        self.pdf.set_fill_color(*hex_to_rgb(color))
        self.pdf.rect(x, y, w, h, style="F")

    def save(self) -> None:
        self._stack.append((self.matrix.copy(), ExitStack()))

    def restore(self) -> None:
        if not self._stack:
            raise RuntimeError("restore() without matching save()")
        self.matrix, clips = self._stack.pop()
        clips.close()

    def translate(self, dx, dy):
        self.matrix = self.matrix.multiply(Affine.translation(dx, dy))

    def scale(self, sx, sy):
        self.matrix = self.matrix.multiply(Affine.scaling(sx, sy))

    def rotate(self, radians):
        self.matrix = self.matrix.multiply(Affine.rotation(radians))

    def clip_rect(self, x, y, w, h):
        # Axis-aligned clip of the transformed rect's bounding box
        corners = self._pts(self._rect_points(x, y, w, h))
        xs = [c[0] for c in corners]
        ys = [c[1] for c in corners]
        clip = self.pdf.rect_clip(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))
        if self._stack:
            self._stack[-1][1].enter_context(clip)
        else:
            self._clips.enter_context(clip)

    def fill_rect(self, x, y, w, h, color, alpha=1.0):
        self.fill_polygon(self._rect_points(x, y, w, h), color, alpha)

    def stroke_rect(self, x, y, w, h, color, width=1.0, dash=None, alpha=1.0):
        self.stroke_polygon(self._rect_points(x, y, w, h), color, width, True, dash, alpha)

    def fill_polygon(self, points, color, alpha=1.0):
        if len(points) < 3:
            return
        with self.pdf.local_context(fill_opacity=alpha):
            self.pdf.set_fill_color(*hex_to_rgb(color))
            self.pdf.polygon(self._pts(points), style="F")

    def stroke_polygon(self, points, color, width=1.0, closed=True, dash=None, alpha=1.0):
        if len(points) < 2:
            return
        with self.pdf.local_context(stroke_opacity=alpha):
            self._set_stroke(color, width, dash)
            if closed:
                self.pdf.polygon(self._pts(points), style="D")
            else:
                self.pdf.polyline(self._pts(points), style="D")
            self.pdf.set_dash_pattern()

    def line(self, x1, y1, x2, y2, color, width=1.0, dash=None, alpha=1.0):
        (ax, ay), (bx, by) = self._pts([(x1, y1), (x2, y2)])
        with self.pdf.local_context(stroke_opacity=alpha):
            self._set_stroke(color, width, dash)
            self.pdf.line(ax, ay, bx, by)
            self.pdf.set_dash_pattern()

    def circle(self, cx, cy, radius, fill=None, stroke=None, width=1.0, dash=None, alpha=1.0):
        px, py = self.matrix.apply(cx, cy)
        r = self._mm(radius)
        style = ("F" if fill else "") + ("D" if stroke else "")
        if not style:
            return
        with self.pdf.local_context(fill_opacity=alpha, stroke_opacity=alpha):
            if fill:
                self.pdf.set_fill_color(*hex_to_rgb(fill))
            if stroke:
                self._set_stroke(stroke, width, dash)
            self.pdf.ellipse(px - r, py - r, 2 * r, 2 * r, style=style)
            self.pdf.set_dash_pattern()

    def text(self, x, y, content, color="#334155", size=12.0, align="left", angle=0.0, bold=False):
        content = _safe(content)
        if not content:
            return
        px, py = self.matrix.apply(x, y)
        self.pdf.set_font(FONT_FAMILY, "B" if bold else "", self._mm(size) * MM_TO_PT)
        self.pdf.set_text_color(*hex_to_rgb(color))
        text_w = self.pdf.get_string_width(content)
        shift = {"center": text_w / 2.0, "right": text_w}.get(align, 0.0)
        # fpdf2 rotates counter-clockwise; canvas angles are clockwise
        total_angle = angle + self.matrix.rotation_degrees()
        if abs(total_angle) > 1e-6:
            with self.pdf.rotation(-total_angle, px, py):
                self.pdf.text(px - shift, py, content)
        else:
            self.pdf.text(px - shift, py, content)
        self.pdf.set_text_color(0, 0, 0)
