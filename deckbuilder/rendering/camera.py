"""
Camera state and pointer/wheel interaction.

The Camera is a value object passed into the views. Only the
InteractionController produces new cameras: it turns pointer drags into
pan or (isometric only) rotation, wheel events into clamped zoom, and in
the surface view lets the user drag the W/D handles to resize the deck.

Pan and zoom reset to identity whenever the view mode or the deck config
changes. The rotation angle survives both. During a W/D handle drag a
config change keeps the current drag and camera until pointer up.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from ..config import settings
from ..models import ViewMode
from .projection import compute_plan_layout

logger = logging.getLogger(__name__)

ZOOM_MIN = 0.3
ZOOM_MAX = 5.0
ZOOM_IN_FACTOR = 1.1
ZOOM_OUT_FACTOR = 0.9

PRIMARY_BUTTON = 0

# Resize handles (surface view)
DIMENSION_MIN = 6.0
DIMENSION_MAX = 48.0
SNAP_STEP = 0.5
HANDLE_RADIUS = 8.0
HANDLE_HIT_SLOP = 4.0


@dataclass(frozen=True)
class Camera:
    x: float = 0.0
    y: float = 0.0
    zoom: float = 1.0
    rotation_angle: float = 0.0

    def reset_view(self) -> "Camera":
        """Identity pan/zoom, same rotation."""
        return Camera(rotation_angle=self.rotation_angle)


@dataclass(frozen=True)
class PointerEvent:
    x: float
    y: float
    pointer_id: int = 1
    button: int = PRIMARY_BUTTON
    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    meta: bool = False

    @property
    def has_modifier(self) -> bool:
        return self.shift or self.ctrl or self.alt or self.meta


@dataclass(frozen=True)
class WheelEvent:
    x: float
    y: float
    delta_y: float


def clamp_zoom(zoom: float) -> float:
    return min(ZOOM_MAX, max(ZOOM_MIN, zoom))


def snap_dimension(value: float) -> float:
    """Snap a dragged dimension to the 0.5' grid within [6', 48']."""
    snapped = round(value / SNAP_STEP) * SNAP_STEP
    return min(DIMENSION_MAX, max(DIMENSION_MIN, snapped))


# ============================================================
# Camera affine (translate → scale → translate)
# ============================================================

def apply_camera(surface, camera: Camera, width: float, height: float) -> None:
    """Push the pan/zoom transform; the caller owns the surrounding save/restore."""
    cx, cy = width / 2.0, height / 2.0
    surface.translate(cx, cy)
    surface.scale(camera.zoom, camera.zoom)
    surface.translate(-cx + camera.x, -cy + camera.y)


def world_to_screen(camera: Camera, width: float, height: float,
                    x: float, y: float) -> Tuple[float, float]:
    cx, cy = width / 2.0, height / 2.0
    return (cx + camera.zoom * (x - cx + camera.x), cy + camera.zoom * (y - cy + camera.y))


def screen_to_world(camera: Camera, width: float, height: float,
                    x: float, y: float) -> Tuple[float, float]:
    cx, cy = width / 2.0, height / 2.0
    return ((x - cx) / camera.zoom + cx - camera.x, (y - cy) / camera.zoom + cy - camera.y)


def dimension_handles(layout, config) -> dict:
    """Pixel centers of the width (right edge) and depth (bottom edge) handles."""
    x, y, w, d = main_rect_px(layout, config)
    return {
        "right": (x + w, y + d / 2.0),
        "bottom": (x + w / 2.0, y + d),
    }


def main_rect_px(layout, config):
    # Main deck section always starts at the plan origin
    x0, y0 = layout.to_px(0.0, 0.0)
    dims = config.dimensions
    return x0, y0, layout.length_px(dims.width), layout.length_px(dims.depth)


# ============================================================
# Interaction controller
# ============================================================

class InteractionController:
    """
    Owns the current Camera and translates input events into camera updates.

    Drag modes: "pan", "rotate" (isometric, primary button, no modifier) and
    "resize-right" / "resize-bottom" (surface view, on a W/D handle).
    """

    def __init__(self, view_mode: ViewMode = ViewMode.SURFACE, config=None,
                 width: float = None, height: float = None,
                 rotation_sensitivity: float = None, padding: float = None):
        self.view_mode = view_mode
        self.config = config
        self.width = width or settings.DEFAULT_CANVAS_WIDTH
        self.height = height or settings.DEFAULT_CANVAS_HEIGHT
        self.rotation_sensitivity = (settings.ROTATION_SENSITIVITY
                                     if rotation_sensitivity is None else rotation_sensitivity)
        self.padding = settings.CANVAS_PADDING if padding is None else padding
        self.camera = Camera()
        self.drag_mode: Optional[str] = None
        self.captured_pointer: Optional[int] = None
        self._last: Optional[Tuple[float, float]] = None

    # --- Host notifications ---

    def set_view_mode(self, view_mode: ViewMode) -> None:
        if view_mode != self.view_mode:
            self.view_mode = view_mode
            self.camera = self.camera.reset_view()
            self._end_drag()

    def set_config(self, config) -> None:
        if config is self.config:
            return
        self.config = config
        if self.resizing:
            return
        self.camera = self.camera.reset_view()
        self._end_drag()

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    # --- Pointer events ---

    def pointer_down(self, event: PointerEvent) -> bool:
        """Start a drag. Returns True when the host should capture the pointer."""
        if self.captured_pointer is not None:
            return False

        mode = None
        if self.view_mode == ViewMode.SURFACE and self.config is not None:
            edge = self.hit_test_handle(event.x, event.y)
            if edge:
                mode = f"resize-{edge}"
        if mode is None:
            if (self.view_mode == ViewMode.ISOMETRIC and event.button == PRIMARY_BUTTON
                    and not event.has_modifier):
                mode = "rotate"
            else:
                mode = "pan"

        self.drag_mode = mode
        self.captured_pointer = event.pointer_id
        self._last = (event.x, event.y)
        logger.debug("Drag start: %s (pointer %s)", mode, event.pointer_id)
        return True

    def pointer_move(self, event: PointerEvent) -> Optional[dict]:
        """
        Continue a drag.

        Returns a config patch while resizing (the host applies it and hands
        the new config back through set_config), otherwise None.
        """
        if self.drag_mode is None or event.pointer_id != self.captured_pointer:
            return None

        dx = event.x - self._last[0]
        dy = event.y - self._last[1]
        self._last = (event.x, event.y)

        if self.drag_mode == "rotate":
            self.camera = replace(
                self.camera,
                rotation_angle=self.camera.rotation_angle + dx * self.rotation_sensitivity,
            )
            return None
        if self.drag_mode == "pan":
            zoom = self.camera.zoom
            self.camera = replace(self.camera, x=self.camera.x + dx / zoom,
                                  y=self.camera.y + dy / zoom)
            return None
        return self._resize_patch(event)

    def pointer_up(self, event: PointerEvent) -> None:
        if event.pointer_id == self.captured_pointer:
            self._end_drag()

    def pointer_cancel(self, event: PointerEvent) -> None:
        self.pointer_up(event)

    def pointer_leave(self, event: PointerEvent) -> None:
        self.pointer_up(event)

    @property
    def dragging(self) -> bool:
        return self.drag_mode is not None

    @property
    def resizing(self) -> bool:
        return self.drag_mode is not None and self.drag_mode.startswith("resize-")

    # --- Wheel ---

    def wheel(self, event: WheelEvent) -> Camera:
        if event.delta_y < 0:
            factor = ZOOM_IN_FACTOR
        elif event.delta_y > 0:
            factor = ZOOM_OUT_FACTOR
        else:
            return self.camera
        self.camera = replace(self.camera, zoom=clamp_zoom(self.camera.zoom * factor))
        return self.camera

    # --- Resize handles ---

    def hit_test_handle(self, x: float, y: float) -> Optional[str]:
        """Which W/D handle (if any) is under a screen point."""
        layout = compute_plan_layout(self.config, self.width, self.height, self.padding)
        for edge, (hx, hy) in dimension_handles(layout, self.config).items():
            sx, sy = world_to_screen(self.camera, self.width, self.height, hx, hy)
            if ((x - sx) ** 2 + (y - sy) ** 2) ** 0.5 <= HANDLE_RADIUS + HANDLE_HIT_SLOP:
                return edge
        return None

    def _resize_patch(self, event: PointerEvent) -> Optional[dict]:
        layout = compute_plan_layout(self.config, self.width, self.height, self.padding)
        wx, wy = screen_to_world(self.camera, self.width, self.height, event.x, event.y)
        x0, y0, _, _ = main_rect_px(layout, self.config)
        dims = self.config.dimensions
        if self.drag_mode == "resize-right":
            new_width = snap_dimension((wx - x0) / layout.scale)
            if new_width != dims.width:
                return {"dimensions": {"width": new_width}}
        else:
            new_depth = snap_dimension((wy - y0) / layout.scale)
            if new_depth != dims.depth:
                return {"dimensions": {"depth": new_depth}}
        return None

    def _end_drag(self) -> None:
        self.drag_mode = None
        self.captured_pointer = None
        self._last = None
