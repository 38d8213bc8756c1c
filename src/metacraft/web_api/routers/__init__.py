"""
API Routers
===========
Each router handles one surface of the app.
"""
from . import health, og, page, preview

__all__ = ["health", "og", "page", "preview"]
