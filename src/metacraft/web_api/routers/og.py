"""
OG Image Router
===============
Renders the 1200x630 preview image from title/bg/fg query parameters.
"""
import logging

from fastapi import APIRouter, Query, Response

from metacraft.model.meta_config import DEFAULT_OG_BG, DEFAULT_OG_FG, DEFAULT_OG_TEXT
from metacraft.render.og_image import render_og_image
from metacraft.web_api.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()

# Output depends only on the query string
CACHE_CONTROL = "public, immutable, no-transform, max-age=31536000"


@router.get("/og", response_class=Response)
def og_image(
    title: str = Query(default=DEFAULT_OG_TEXT, description="Text painted on the image"),
    bg: str = Query(default=DEFAULT_OG_BG, description="Background hex colour"),
    fg: str = Query(default=DEFAULT_OG_FG, description="Foreground hex colour"),
):
    """
    Render the Open Graph preview image.

    - **title**: text to center on the image (default: MetaCraft)
    - **bg**: background colour, 3- or 6-digit hex (default: #0ea5e9)
    - **fg**: text colour, 3- or 6-digit hex (default: #020617)

    Unusable colours fall back to the defaults.
    """
    png = render_og_image(
        title or DEFAULT_OG_TEXT,
        bg or DEFAULT_OG_BG,
        fg or DEFAULT_OG_FG,
        font_path=settings.OG_FONT_PATH,
    )
    logger.debug(f"Rendered OG image ({len(png)} bytes) for title={title!r}")
    return Response(
        content=png,
        media_type="image/png",
        headers={"Cache-Control": CACHE_CONTROL},
    )
