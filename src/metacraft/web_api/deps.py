"""Request-scoped helpers shared by the routers."""
from fastapi import Request

from metacraft.web_api.config import settings


def public_base_url(request: Request) -> str:
    """Configured public origin, or the origin the request came in on."""
    if settings.BASE_URL:
        return settings.BASE_URL.rstrip("/")
    return str(request.base_url).rstrip("/")
