"""Contrast ratio → level → message / exit-code policy — single source of truth.

The live preview, the server page and the CLI all derive the contrast verdict
from this module instead of comparing ratios locally.
"""

from __future__ import annotations

from dataclasses import dataclass

from metacraft.model import ContrastLevel
from metacraft.utils.exit_codes import ExitCode

DEFAULT_LOCALE = "pt-BR"

MESSAGES: dict[str, dict[ContrastLevel, str]] = {
    "pt-BR": {
        ContrastLevel.GOOD: "Bom contraste",
        ContrastLevel.LARGE_TEXT: "OK para texto grande",
        ContrastLevel.LOW: "Baixo contraste",
    },
    "en": {
        ContrastLevel.GOOD: "Good contrast",
        ContrastLevel.LARGE_TEXT: "OK for large text",
        ContrastLevel.LOW: "Low contrast",
    },
}

# Ratio is 0 for an unparsable colour, but /api/og paints the default instead
INVALID_COLOR_MESSAGES: dict[str, str] = {
    "pt-BR": "Cor inválida; a prévia usa a cor padrão",
    "en": "Invalid colour; the preview uses the default",
}


@dataclass(frozen=True, slots=True)
class ContrastThresholds:
    """WCAG AA thresholds for normal and large text."""

    good_min: float = 4.5
    large_text_min: float = 3.0


DEFAULT_THRESHOLDS = ContrastThresholds()


def level_from_ratio(
    ratio: float,
    *,
    thresholds: ContrastThresholds = DEFAULT_THRESHOLDS,
) -> ContrastLevel:
    """Map a contrast ratio to a ``ContrastLevel``.

    Policy: ≥4.5 good, ≥3 large text only, below that low.
    """
    if ratio >= thresholds.good_min:
        return ContrastLevel.GOOD
    if ratio >= thresholds.large_text_min:
        return ContrastLevel.LARGE_TEXT
    return ContrastLevel.LOW


def message_for(level: ContrastLevel, locale: str = DEFAULT_LOCALE) -> str:
    """Localized message; unknown locales fall back to ``pt-BR``."""
    catalog = MESSAGES.get(locale) or MESSAGES[DEFAULT_LOCALE]
    return catalog[level]


def invalid_color_message(locale: str = DEFAULT_LOCALE) -> str:
    return INVALID_COLOR_MESSAGES.get(locale) or INVALID_COLOR_MESSAGES[DEFAULT_LOCALE]


def exit_code_from_level(level: ContrastLevel) -> int:
    """Policy: good → 0, large text → 1, low → 2."""
    if level == ContrastLevel.GOOD:
        return ExitCode.SUCCESS
    if level == ContrastLevel.LARGE_TEXT:
        return ExitCode.VIOLATION
    return ExitCode.ERROR
