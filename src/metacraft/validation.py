"""Field validation as a pure function table.

Each rule takes the raw string value and returns ``None`` when the value is
acceptable or an ``ErrorKind`` otherwise. Nothing here raises for bad input:
validation is advisory and never blocks editing or preview generation.

Usage::

    from metacraft.validation import validate, validate_config

    validate("canonical", "not-a-url")     # ErrorKind.INVALID_URL
    validate_config(config)                # {"title": ErrorKind.REQUIRED, ...}
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional
from urllib.parse import urlsplit

from metacraft.color import is_hex_color
from metacraft.errors import UnknownFieldError
from metacraft.model import (
    FIELD_KEYS,
    ContentType,
    ErrorKind,
    JsonLdType,
    MetaConfig,
    TwitterCard,
)

Rule = Callable[[str], Optional[ErrorKind]]

ERROR_MESSAGES: dict[str, dict[ErrorKind, str]] = {
    "pt-BR": {
        ErrorKind.REQUIRED: "Obrigatório",
        ErrorKind.INVALID_URL: "URL inválida",
        ErrorKind.INVALID_HEX: "Cor inválida",
        ErrorKind.INVALID_CHOICE: "Opção inválida",
    },
    "en": {
        ErrorKind.REQUIRED: "Required",
        ErrorKind.INVALID_URL: "Invalid URL",
        ErrorKind.INVALID_HEX: "Invalid colour",
        ErrorKind.INVALID_CHOICE: "Invalid option",
    },
}


def required(value: str) -> Optional[ErrorKind]:
    if not value:
        return ErrorKind.REQUIRED
    return None


def url(value: str) -> Optional[ErrorKind]:
    """Absolute URL: a scheme and a network location are both required."""
    try:
        parts = urlsplit(value)
    except ValueError:
        return ErrorKind.INVALID_URL
    if not parts.scheme or not parts.netloc or " " in value:
        return ErrorKind.INVALID_URL
    return None


def hex_color(value: str) -> Optional[ErrorKind]:
    if not is_hex_color(value):
        return ErrorKind.INVALID_HEX
    return None


def optional(value: str) -> Optional[ErrorKind]:
    return None


def one_of(enum: type[Enum]) -> Rule:
    choices = frozenset(member.value for member in enum)

    def rule(value: str) -> Optional[ErrorKind]:
        if value not in choices:
            return ErrorKind.INVALID_CHOICE
        return None

    return rule


RULES: dict[str, Rule] = {
    "title": required,
    "description": required,
    "siteName": required,
    "canonical": url,
    "type": one_of(ContentType),
    "twitterCard": one_of(TwitterCard),
    "author": optional,
    "ogImageText": optional,
    "ogBg": hex_color,
    "ogFg": hex_color,
    "jsonldType": one_of(JsonLdType),
}

assert set(RULES) == set(FIELD_KEYS)


def validate(field: str, value: str | None) -> Optional[ErrorKind]:
    """Validate one field value by its query-string key.

    Raises ``UnknownFieldError`` for keys outside the schema.
    """
    try:
        rule = RULES[field]
    except KeyError:
        raise UnknownFieldError(field) from None
    return rule("" if value is None else value)


def validate_config(config: MetaConfig) -> dict[str, ErrorKind]:
    """Errors for every invalid field; valid fields are omitted."""
    errors: dict[str, ErrorKind] = {}
    for key, value in config.to_dict().items():
        kind = validate(key, value)
        if kind is not None:
            errors[key] = kind
    return errors


def error_message(kind: ErrorKind, locale: str = "pt-BR") -> str:
    catalog = ERROR_MESSAGES.get(locale) or ERROR_MESSAGES["pt-BR"]
    return catalog[kind]
