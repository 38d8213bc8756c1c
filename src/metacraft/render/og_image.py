"""Render the Open Graph preview image (1200×630 PNG).

Solid background, title centered in the foreground colour. Long titles are
wrapped and the font shrinks until the block fits inside the margins; titles
are capped at ``MAX_TITLE_CHARS`` and whatever still overflows at the smallest
size is cut with an ellipsis.
"""

from __future__ import annotations

import io
import logging
import os
from functools import lru_cache
from typing import Optional, Union

from PIL import Image, ImageDraw, ImageFont

from metacraft.color import hex_to_rgb
from metacraft.errors import InvalidColorError
from metacraft.model.meta_config import DEFAULT_OG_BG, DEFAULT_OG_FG, DEFAULT_OG_TEXT

logger = logging.getLogger(__name__)

WIDTH, HEIGHT = 1200, 630
MARGIN = 80
FONT_SIZE = 72
MIN_FONT_SIZE = 32
LINE_SPACING = 1.15
MAX_TITLE_CHARS = 200
ELLIPSIS = "\u2026"

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]

_FONT_CANDIDATES = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
    "/Library/Fonts/Arial Bold.ttf",
    "/System/Library/Fonts/Supplemental/Arial Bold.ttf",
    "C:\\Windows\\Fonts\\arialbd.ttf",
    "DejaVuSans-Bold.ttf",
)


@lru_cache(maxsize=64)
def load_font(size: int, font_path: Optional[str] = None) -> Font:
    """Bold TrueType font at *size*; Pillow's built-in font as last resort."""
    candidates = ((font_path,) if font_path else ()) + _FONT_CANDIDATES
    for path in candidates:
        if os.path.isabs(path) and not os.path.exists(path):
            continue
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            continue
    logger.warning("No TrueType font found; using Pillow's default font")
    return ImageFont.load_default(size=size)


def _rgb(value: str, fallback: str, name: str) -> tuple[int, int, int]:
    try:
        return hex_to_rgb(value)
    except InvalidColorError:
        logger.warning(f"Unusable {name} colour {value!r}; using {fallback}")
        return hex_to_rgb(fallback)


def _text_width(draw: ImageDraw.ImageDraw, text: str, font: Font) -> float:
    left, _, right, _ = draw.textbbox((0, 0), text, font=font)
    return right - left


def clamp_title(title: str, limit: int = MAX_TITLE_CHARS) -> str:
    """Collapse whitespace and cut *title* to *limit* characters."""
    title = " ".join(title.split())
    if len(title) <= limit:
        return title
    return title[: limit - 1].rstrip() + ELLIPSIS


def wrap_title(
    draw: ImageDraw.ImageDraw,
    title: str,
    font: Font,
    max_width: float,
    max_lines: Optional[int] = None,
) -> list[str]:
    """Greedy word wrap; a single over-long word stays on its own line.

    With *max_lines*, wrapping stops as soon as one line more than that has
    been produced, so callers can tell the text overflowed.
    """
    lines: list[str] = []
    current = ""
    for word in title.split():
        candidate = f"{current} {word}".strip()
        if current and _text_width(draw, candidate, font) > max_width:
            lines.append(current)
            if max_lines is not None and len(lines) > max_lines:
                return lines
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines or [""]


def _with_ellipsis(draw: ImageDraw.ImageDraw, line: str, font: Font, max_width: float) -> str:
    words = line.split()
    while words:
        candidate = " ".join(words) + ELLIPSIS
        if _text_width(draw, candidate, font) <= max_width:
            return candidate
        words.pop()
    return ELLIPSIS


def layout_title(
    draw: ImageDraw.ImageDraw, title: str, font_path: Optional[str] = None
) -> tuple[Font, list[str], int]:
    """Pick the largest font size that fits *title* inside the margins.

    At the smallest size, lines below the canvas are dropped and the last
    kept line ends with an ellipsis.
    """
    max_w = WIDTH - 2 * MARGIN
    max_h = HEIGHT - 2 * MARGIN
    size = FONT_SIZE
    while True:
        font = load_font(size, font_path)
        line_h = int(size * LINE_SPACING)
        max_lines = max(1, max_h // line_h)
        lines = wrap_title(draw, title, font, max_w, max_lines)
        fits = len(lines) <= max_lines and all(
            _text_width(draw, line, font) <= max_w for line in lines
        )
        if fits:
            return font, lines, line_h
        if size <= MIN_FONT_SIZE:
            if len(lines) > max_lines:
                lines = lines[: max_lines - 1] + [
                    _with_ellipsis(draw, lines[max_lines - 1], font, max_w)
                ]
            return font, lines, line_h
        size -= 4


def render_og_image(
    title: str = DEFAULT_OG_TEXT,
    bg: str = DEFAULT_OG_BG,
    fg: str = DEFAULT_OG_FG,
    *,
    font_path: Optional[str] = None,
) -> bytes:
    """Paint *title* over a solid *bg* and return PNG bytes."""
    img = Image.new("RGB", (WIDTH, HEIGHT), _rgb(bg, DEFAULT_OG_BG, "background"))
    draw = ImageDraw.Draw(img)
    fill = _rgb(fg, DEFAULT_OG_FG, "foreground")

    font, lines, line_h = layout_title(draw, clamp_title(title), font_path)
    y = (HEIGHT - line_h * len(lines)) // 2
    for line in lines:
        left, top, right, bottom = draw.textbbox((0, 0), line, font=font)
        x = (WIDTH - (right - left)) / 2 - left
        draw.text((x, y + (line_h - (bottom - top)) / 2 - top), line, font=font, fill=fill)
        y += line_h

    buf = io.BytesIO()
    img.save(buf, "PNG")
    return buf.getvalue()
