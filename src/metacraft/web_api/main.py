"""
FastAPI Application
==================
Main entry point for the MetaCraft web app.

Run with:
    uvicorn metacraft.web_api.main:app --reload
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from metacraft import __version__
from metacraft.web_api.config import settings
from metacraft.web_api.routers import health, og, page, preview

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)

# Create application
app = FastAPI(
    title="MetaCraft",
    description="SEO / Open Graph / Twitter meta tags, OG image and JSON-LD generator",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(og.router, prefix="/api", tags=["OG Image"])
app.include_router(preview.router, prefix="/api", tags=["Preview"])
app.include_router(page.router, tags=["Page"])


# For running directly: python -m metacraft.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
