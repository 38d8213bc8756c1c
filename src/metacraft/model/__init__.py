"""Enums shared across the form, derive and web layers."""

from __future__ import annotations

from enum import Enum


class ContentType(str, Enum):
    """Open Graph ``og:type`` values offered by the form."""

    WEBSITE = "website"
    ARTICLE = "article"


class TwitterCard(str, Enum):
    """Twitter card variants."""

    SUMMARY = "summary"
    SUMMARY_LARGE_IMAGE = "summary_large_image"


class JsonLdType(str, Enum):
    """Schema.org ``@type`` values for the JSON-LD block."""

    WEBSITE = "WebSite"
    ARTICLE = "Article"
    PERSON = "Person"


class ErrorKind(str, Enum):
    """Field-local validation outcome. Advisory only, never raised."""

    REQUIRED = "required"
    INVALID_URL = "invalid_url"
    INVALID_HEX = "invalid_hex"
    INVALID_CHOICE = "invalid_choice"


class ContrastLevel(str, Enum):
    """WCAG contrast tier for the OG image colours."""

    GOOD = "good"
    LARGE_TEXT = "large_text"
    LOW = "low"


from metacraft.model.meta_config import (  # noqa: E402
    DEFAULTS,
    FIELD_KEYS,
    MetaConfig,
)

__all__ = [
    "ContentType",
    "TwitterCard",
    "JsonLdType",
    "ErrorKind",
    "ContrastLevel",
    "DEFAULTS",
    "FIELD_KEYS",
    "MetaConfig",
]
