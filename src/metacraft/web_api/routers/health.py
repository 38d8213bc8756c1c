"""
Health Check Router
==================
Endpoints for health checks and readiness probes.
"""
from fastapi import APIRouter

from metacraft import __version__
from metacraft.render.og_image import load_font

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns OK if the service is running.
    """
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def readiness_check():
    """
    Readiness check endpoint.
    Reports which font the image endpoint will paint with.
    """
    font = load_font(72)
    family = " ".join(font.getname()) if hasattr(font, "getname") else "default"
    return {"status": "ready", "font": family}
