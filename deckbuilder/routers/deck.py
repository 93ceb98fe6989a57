"""
Deck builder endpoints.

GET  /api/deck/defaults   starting DeckConfig for a new design
GET  /api/deck/catalog    decking brands and railing systems
POST /api/deck/estimate   bill of materials for a DeckConfig
POST /api/deck/render     draw one view, returned as canvas commands
POST /api/deck/pdf        printable deck plan
"""

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from .. import schemas
from ..brand_catalog import catalog_for_pickers
from ..config import settings
from ..estimator import estimate
from ..pdf_generator import generate_deck_pdf
from ..rendering.camera import Camera
from ..rendering.renderer import get_view_renderer, render_view
from ..rendering.surface import RecordingSurface

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/deck", tags=["deck"])


@router.get("/defaults", response_model=schemas.DeckConfig)
def get_defaults():
    return schemas.DEFAULT_DECK_CONFIG


@router.get("/catalog")
def get_catalog():
    return catalog_for_pickers()


@router.post("/estimate", response_model=schemas.MaterialList)
def estimate_deck(config: schemas.DeckConfig):
    material_list = estimate(config)
    logger.info("Estimate: %d items, total %.2f",
                len(material_list["items"]), material_list["total_cost"])
    return material_list


@router.post("/render", response_model=schemas.RenderResponse)
def render_deck(request: schemas.RenderRequest):
    """
    Render one view of the deck into a list of drawing commands.

    The browser replays the commands onto a <canvas> of the same size.
    """
    try:
        get_view_renderer(request.view_mode)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    max_size = settings.MAX_CANVAS_SIZE
    if request.width > max_size or request.height > max_size:
        raise HTTPException(
            status_code=400,
            detail=f"Canvas too large: {request.width}x{request.height} (max {max_size}px per side)",
        )

    camera = Camera(**request.camera.model_dump())
    surface = RecordingSurface(request.width, request.height)
    render_view(surface, request.config, request.view_mode, request.width, request.height, camera)
    logger.debug("Render %s: %d commands", request.view_mode, len(surface.commands))
    return {
        "view_mode": request.view_mode,
        "width": request.width,
        "height": request.height,
        "commands": surface.commands,
    }


@router.post("/pdf")
def download_pdf(config: schemas.DeckConfig):
    """
    Generate and download a PDF deck plan.

    Returns: application/pdf
    """
    material_list = estimate(config)
    pdf_bytes = generate_deck_pdf(config, material_list)

    name = config.quote_number or "DeckPlan"
    filename = f"Deck-{name}.pdf"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
        },
    )
