"""MetaConfig — the flat value set behind the form, the page and the preview."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

from metacraft.errors import UnknownFieldError

from . import ContentType, JsonLdType, TwitterCard

# query-string key -> dataclass attribute, in canonical field order
_KEY_TO_ATTR: dict[str, str] = {
    "title": "title",
    "description": "description",
    "siteName": "site_name",
    "canonical": "canonical",
    "type": "type",
    "twitterCard": "twitter_card",
    "author": "author",
    "ogImageText": "og_image_text",
    "ogBg": "og_bg",
    "ogFg": "og_fg",
    "jsonldType": "jsonld_type",
}

FIELD_KEYS: tuple[str, ...] = tuple(_KEY_TO_ATTR)

DEFAULT_TITLE = "MetaCraft — Gerador de SEO/OG/Schema"
DEFAULT_DESCRIPTION = (
    "Gera <meta> OG/Twitter e JSON‑LD com preview ao vivo e imagem OG dinâmica."
)
DEFAULT_OG_TEXT = "MetaCraft"
DEFAULT_OG_BG = "#0ea5e9"
DEFAULT_OG_FG = "#020617"

DEFAULTS: dict[str, str] = {
    "title": DEFAULT_TITLE,
    "description": DEFAULT_DESCRIPTION,
    "siteName": "MetaCraft",
    "canonical": "http://localhost:3000/",
    "type": ContentType.WEBSITE.value,
    "twitterCard": TwitterCard.SUMMARY_LARGE_IMAGE.value,
    "author": "Você",
    "ogImageText": DEFAULT_OG_TEXT,
    "ogBg": DEFAULT_OG_BG,
    "ogFg": DEFAULT_OG_FG,
    "jsonldType": JsonLdType.WEBSITE.value,
}


def _first(value: Any) -> str | None:
    """Collapse a repeated query parameter to its first value."""
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None:
        return None
    return str(value)


def _attr_for(key: str) -> str:
    try:
        return _KEY_TO_ATTR[key]
    except KeyError:
        raise UnknownFieldError(key) from None


@dataclass(frozen=True, slots=True)
class MetaConfig:
    """Immutable snapshot of every form field.

    Values are kept as plain strings, exactly as typed or received, so that
    validation can report bad enum members or malformed colours instead of
    losing them at parse time.
    """

    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION
    site_name: str = DEFAULTS["siteName"]
    canonical: str = DEFAULTS["canonical"]
    type: str = DEFAULTS["type"]
    twitter_card: str = DEFAULTS["twitterCard"]
    author: str = DEFAULTS["author"]
    og_image_text: str = DEFAULT_OG_TEXT
    og_bg: str = DEFAULT_OG_BG
    og_fg: str = DEFAULT_OG_FG
    jsonld_type: str = DEFAULTS["jsonldType"]

    @classmethod
    def defaults(cls) -> "MetaConfig":
        return cls()

    @classmethod
    def from_query(cls, params: Mapping[str, Any]) -> "MetaConfig":
        """Build a config from query parameters.

        Absent or empty keys keep their default; unknown keys are ignored.
        Repeated keys (``?title=a&title=b``) use the first value.
        """
        overrides: dict[str, str] = {}
        for key, attr in _KEY_TO_ATTR.items():
            value = _first(params.get(key))
            if value:
                overrides[attr] = value
        return cls(**overrides)

    def get(self, key: str) -> str:
        """Return a field value by its query-string key."""
        return getattr(self, _attr_for(key))

    def with_field(self, key: str, value: str) -> "MetaConfig":
        """Return a copy with one field (query-string key) replaced."""
        return replace(self, **{_attr_for(key): "" if value is None else str(value)})

    def to_dict(self) -> dict[str, str]:
        """All fields keyed by query-string key, in field order."""
        return {key: getattr(self, attr) for key, attr in _KEY_TO_ATTR.items()}

    def to_query(self) -> dict[str, str]:
        """Non-empty fields only, keyed by query-string key."""
        return {k: v for k, v in self.to_dict().items() if v != ""}


# keep the table and the dataclass in lock-step
assert tuple(f.name for f in fields(MetaConfig)) == tuple(_KEY_TO_ATTR.values())
