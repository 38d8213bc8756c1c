"""
Page Router
===========
Server-rendered generator page. The query string is parsed once into a
MetaConfig; head metadata, JSON-LD and the pre-filled form all come from it.
"""
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from metacraft.color import expand_hex, is_hex_color
from metacraft.derive import derive, jsonld_script, page_metadata
from metacraft.form import FormState
from metacraft.model import DEFAULTS, ContentType, JsonLdType, TwitterCard
from metacraft.validation import error_message
from metacraft.web_api.config import settings
from metacraft.web_api.deps import public_base_url

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[1] / "templates"))


def _options(enum) -> list:
    return [m.value for m in enum]


def _swatch(value: str, fallback: str) -> str:
    """<input type=color> only accepts #rrggbb."""
    return expand_hex(value) if is_hex_color(value) else fallback


# (key, label, widget, options, span)
FORM_FIELDS = [
    ("title", "Título", "text", None, 1),
    ("siteName", "Site Name", "text", None, 1),
    ("description", "Descrição", "textarea", None, 2),
    ("canonical", "Canonical", "text", None, 2),
    ("type", "Tipo", "select", _options(ContentType), 1),
    ("twitterCard", "Twitter Card", "select", _options(TwitterCard), 1),
    ("author", "Autor (opcional)", "text", None, 1),
    ("ogImageText", "OG Texto", "text", None, 1),
    ("ogBg", "OG BG", "color", None, 1),
    ("ogFg", "OG FG", "color", None, 1),
    ("jsonldType", "JSON‑LD @type", "select", _options(JsonLdType), 1),
]


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """
    Render the generator page for the current query string.
    """
    params = request.query_params
    form = FormState({key: params.getlist(key) for key in params.keys()})
    config = form.values
    base_url = public_base_url(request)

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "meta": page_metadata(config, base_url),
            "jsonld": jsonld_script(config),
            "values": config.to_dict(),
            "errors": {
                key: error_message(kind, settings.LOCALE)
                for key, kind in form.errors.items()
            },
            "derived": derive(config, base_url, locale=settings.LOCALE),
            "swatches": {
                key: _swatch(config.get(key), DEFAULTS[key]) for key in ("ogBg", "ogFg")
            },
            "fields": FORM_FIELDS,
            "sync_delay_ms": settings.SYNC_DELAY_MS,
        },
    )
