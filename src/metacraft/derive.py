"""
metacraft.derive
================

Pure functions of a ``MetaConfig``: preview image URL, ``<head>`` snippet,
contrast verdict, page metadata and JSON-LD.

The server-rendered page and the live preview both call into this module, so
the initial response and every later update are built by the same code.

Usage::

    from metacraft.derive import derive

    d = derive(config, base_url="https://metacraft.example")
    d.preview_url, d.snippet, d.contrast.message, d.jsonld
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlencode

from metacraft.color import contrast_ratio, is_hex_color
from metacraft.model import (
    ContentType,
    ContrastLevel,
    JsonLdType,
    MetaConfig,
    TwitterCard,
)
from metacraft.model.meta_config import DEFAULT_OG_BG, DEFAULT_OG_FG, DEFAULT_OG_TEXT
from metacraft.policy.contrast import (
    DEFAULT_LOCALE,
    invalid_color_message,
    level_from_ratio,
    message_for,
)
from metacraft.utils.json_norm import script_safe_json_dumps

OG_ENDPOINT = "/api/og"
SCHEMA_ORG = "https://schema.org"


# ── preview URL ─────────────────────────────────────────────────────


def og_image_params(config: MetaConfig) -> dict[str, str]:
    """Query parameters for the image endpoint, with fallbacks applied."""
    return {
        "title": config.og_image_text or config.title or DEFAULT_OG_TEXT,
        "bg": config.og_bg or DEFAULT_OG_BG,
        "fg": config.og_fg or DEFAULT_OG_FG,
    }


def preview_url(config: MetaConfig, base_url: str) -> str:
    return f"{base_url.rstrip('/')}{OG_ENDPOINT}?{urlencode(og_image_params(config))}"


# ── head snippet ────────────────────────────────────────────────────


def head_snippet(config: MetaConfig, base_url: str, *, escape: bool = False) -> str:
    """Copy-pasteable ``<head>`` tags, one per line, in a fixed order.

    Field values are interpolated verbatim unless ``escape`` is set; a title
    containing ``"`` or ``<`` produces broken markup in the default mode.
    """
    e = (lambda s: html.escape(s, quote=True)) if escape else (lambda s: s)
    og = e(preview_url(config, base_url))
    title = e(config.title)
    description = e(config.description)
    lines = [
        f"<title>{title}</title>",
        f'<meta name="description" content="{description}" />',
        f'<link rel="canonical" href="{e(config.canonical)}" />',
        "<!-- Open Graph -->",
        f'<meta property="og:type" content="{e(config.type)}" />',
        f'<meta property="og:site_name" content="{e(config.site_name)}" />',
        f'<meta property="og:title" content="{title}" />',
        f'<meta property="og:description" content="{description}" />',
        f'<meta property="og:image" content="{og}" />',
        "<!-- Twitter -->",
        f'<meta name="twitter:card" content="{e(config.twitter_card)}" />',
        f'<meta name="twitter:title" content="{title}" />',
        f'<meta name="twitter:description" content="{description}" />',
        f'<meta name="twitter:image" content="{og}" />',
    ]
    return "\n".join(lines)


# ── contrast ────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ContrastReport:
    ratio: float
    level: ContrastLevel
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "ratio": round(self.ratio, 2),
            "level": self.level.value,
            "message": self.message,
        }


def contrast_report(config: MetaConfig, *, locale: str = DEFAULT_LOCALE) -> ContrastReport:
    params = og_image_params(config)
    ratio = contrast_ratio(params["bg"], params["fg"])
    level = level_from_ratio(ratio)
    if not (is_hex_color(params["bg"]) and is_hex_color(params["fg"])):
        return ContrastReport(ratio=ratio, level=level, message=invalid_color_message(locale))
    return ContrastReport(ratio=ratio, level=level, message=message_for(level, locale))


# ── page metadata + JSON-LD ─────────────────────────────────────────


def _choice(value: str, enum: type, fallback: str) -> str:
    """Server-emitted metadata only carries known enum members."""
    return value if value in {m.value for m in enum} else fallback


@dataclass(frozen=True, slots=True)
class OpenGraph:
    title: str
    description: str
    type: str
    site_name: str
    url: str
    images: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class TwitterMeta:
    card: str
    title: str
    description: str
    images: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class PageMetadata:
    """Everything the server puts in ``<head>`` for one request."""

    title: str
    description: str
    canonical: str
    open_graph: OpenGraph
    twitter: TwitterMeta


def page_metadata(config: MetaConfig, base_url: str) -> PageMetadata:
    image = preview_url(config, base_url)
    return PageMetadata(
        title=config.title,
        description=config.description,
        canonical=config.canonical,
        open_graph=OpenGraph(
            title=config.title,
            description=config.description,
            type=_choice(config.type, ContentType, ContentType.WEBSITE.value),
            site_name=config.site_name,
            url=config.canonical,
            images=(image,),
        ),
        twitter=TwitterMeta(
            card=_choice(
                config.twitter_card, TwitterCard, TwitterCard.SUMMARY_LARGE_IMAGE.value
            ),
            title=config.title,
            description=config.description,
            images=(image,),
        ),
    )


def build_jsonld(config: MetaConfig) -> dict[str, Any]:
    """Schema.org JSON-LD; ``author`` is omitted when empty."""
    doc: dict[str, Any] = {
        "@context": SCHEMA_ORG,
        "@type": _choice(config.jsonld_type, JsonLdType, JsonLdType.WEBSITE.value),
        "name": config.title,
        "url": config.canonical,
    }
    if config.author:
        doc["author"] = {"@type": "Person", "name": config.author}
    return doc


def jsonld_script(config: MetaConfig) -> str:
    """JSON-LD body ready for ``<script type="application/ld+json">``."""
    return script_safe_json_dumps(build_jsonld(config))


# ── bundle ──────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Derived:
    preview_url: str
    snippet: str
    contrast: ContrastReport
    jsonld: dict[str, Any] = field(default_factory=dict)


def derive(
    config: MetaConfig,
    base_url: str,
    *,
    locale: str = DEFAULT_LOCALE,
    escape: bool = False,
) -> Derived:
    return Derived(
        preview_url=preview_url(config, base_url),
        snippet=head_snippet(config, base_url, escape=escape),
        contrast=contrast_report(config, locale=locale),
        jsonld=build_jsonld(config),
    )
