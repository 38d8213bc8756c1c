"""Hex colour parsing and WCAG 2.x contrast computation.

Formula (WCAG relative luminance):
  - channel c in [0, 1]: c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4
  - L = 0.2126 R + 0.7152 G + 0.0722 B
  - ratio = (max(L1, L2) + 0.05) / (min(L1, L2) + 0.05), in [1, 21]
"""

from __future__ import annotations

import re

from metacraft.errors import InvalidColorError

HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

_LINEAR_THRESHOLD = 0.03928
_WEIGHTS = (0.2126, 0.7152, 0.0722)


def is_hex_color(value: str) -> bool:
    return bool(value) and HEX_RE.match(value) is not None


def expand_hex(value: str) -> str:
    """Expand ``#abc`` to ``#aabbcc``; 6-digit values are returned unchanged."""
    if not is_hex_color(value):
        raise InvalidColorError(value)
    digits = value[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return "#" + digits


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Parse a 3- or 6-digit hex colour into 0-255 channels."""
    h = expand_hex(value)[1:]
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _linearize(channel: int) -> float:
    c = channel / 255.0
    if c <= _LINEAR_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(value: str) -> float:
    r, g, b = (_linearize(c) for c in hex_to_rgb(value))
    wr, wg, wb = _WEIGHTS
    return wr * r + wg * g + wb * b


def contrast_ratio(bg: str, fg: str) -> float:
    """WCAG contrast ratio between two hex colours.

    Returns ``0.0`` when either colour cannot be parsed, so callers can render
    a "low contrast" state without handling exceptions.
    """
    try:
        l1 = relative_luminance(bg)
        l2 = relative_luminance(fg)
    except InvalidColorError:
        return 0.0
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)
