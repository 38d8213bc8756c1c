"""
MetaCraft Web App
=================
FastAPI app serving the generator page, the live preview API and the
OG image endpoint.

Quick Start:
    uvicorn metacraft.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
