"""
Deck scene rendering: plan geometry, projections, camera and views.

Views draw into any DrawingSurface. The HTTP API uses RecordingSurface to
ship command lists to the browser; the PDF plan uses PDFSurface.
"""

from .camera import Camera, InteractionController
from .renderer import get_view_renderer, list_view_modes, render_view
from .surface import DrawingSurface, RecordingSurface
