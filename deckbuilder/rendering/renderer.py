"""
View registry: maps ViewMode to the view's render function.
"""

import logging

from ..models import ViewMode
from . import colors
from .camera import Camera
from .views import elevation, framing, isometric, surface

logger = logging.getLogger(__name__)

VIEW_RENDERERS = {
    ViewMode.SURFACE: surface.render,
    ViewMode.FRAMING: framing.render,
    ViewMode.ELEVATION: elevation.render,
    ViewMode.ISOMETRIC: isometric.render,
}


def get_view_renderer(view_mode):
    """Returns the render function for a view mode, or raises ValueError."""
    try:
        mode = ViewMode(view_mode)
    except ValueError:
        mode = None
    if mode not in VIEW_RENDERERS:
        raise ValueError(
            f"No renderer registered for view mode: {view_mode}. "
            f"Available: {list_view_modes()}"
        )
    return VIEW_RENDERERS[mode]


def list_view_modes() -> list:
    return [mode.value for mode in VIEW_RENDERERS]


def render_view(surface, config, view_mode, width: float, height: float, camera: Camera = None):
    """Clear the surface and draw one view of the deck. Returns the surface."""
    renderer = get_view_renderer(view_mode)
    surface.clear(colors.BACKGROUND)
    renderer(surface, config, width, height, camera or Camera())
    logger.debug("Rendered %s view at %sx%s", ViewMode(view_mode).value, width, height)
    return surface
