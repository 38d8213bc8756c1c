"""Tests for the OG image renderer."""

from __future__ import annotations

import io
import time

from PIL import Image, ImageDraw

from metacraft.render.og_image import (
    ELLIPSIS,
    HEIGHT,
    MARGIN,
    MAX_TITLE_CHARS,
    WIDTH,
    clamp_title,
    layout_title,
    load_font,
    render_og_image,
    wrap_title,
)


def _open(png: bytes) -> Image.Image:
    img = Image.open(io.BytesIO(png))
    img.load()
    return img


class TestRenderOgImage:
    def test_png_1200x630(self) -> None:
        img = _open(render_og_image("MetaCraft", "#0ea5e9", "#020617"))
        assert img.format == "PNG"
        assert img.size == (WIDTH, HEIGHT) == (1200, 630)

    def test_background_fills_corners(self) -> None:
        img = _open(render_og_image("Hi", "#102030", "#ffffff")).convert("RGB")
        assert img.getpixel((0, 0)) == (16, 32, 48)
        assert img.getpixel((WIDTH - 1, HEIGHT - 1)) == (16, 32, 48)

    def test_short_hex_is_expanded(self) -> None:
        img = _open(render_og_image("Hi", "#f00", "#fff")).convert("RGB")
        assert img.getpixel((0, 0)) == (255, 0, 0)

    def test_text_is_painted(self) -> None:
        img = _open(render_og_image("Hello", "#000000", "#ffffff")).convert("RGB")
        colors = img.getcolors(maxcolors=WIDTH * HEIGHT)
        assert len(colors) > 1

    def test_invalid_colors_fall_back_to_defaults(self) -> None:
        img = _open(render_og_image("Hi", "not-a-colour", "??")).convert("RGB")
        assert img.getpixel((0, 0)) == (14, 165, 233)

    def test_empty_title_still_renders(self) -> None:
        img = _open(render_og_image("", "#000000", "#ffffff"))
        assert img.size == (WIDTH, HEIGHT)

    def test_long_title_renders(self) -> None:
        title = "A very long Open Graph title " * 10
        img = _open(render_og_image(title, "#000000", "#ffffff"))
        assert img.size == (WIDTH, HEIGHT)

    def test_huge_title_renders_quickly(self) -> None:
        start = time.perf_counter()
        img = _open(render_og_image("word " * 3000, "#000000", "#ffffff"))
        assert time.perf_counter() - start < 2.0
        assert img.size == (WIDTH, HEIGHT)


class TestWrapTitle:
    def test_wraps_long_text(self) -> None:
        draw = ImageDraw.Draw(Image.new("RGB", (10, 10)))
        lines = wrap_title(draw, "word " * 40, load_font(72), 400)
        assert len(lines) > 1
        assert " ".join(lines) == ("word " * 40).strip()

    def test_short_text_is_one_line(self) -> None:
        draw = ImageDraw.Draw(Image.new("RGB", (10, 10)))
        assert wrap_title(draw, "Hi", load_font(72), 1040) == ["Hi"]

    def test_blank_text(self) -> None:
        draw = ImageDraw.Draw(Image.new("RGB", (10, 10)))
        assert wrap_title(draw, "   ", load_font(72), 1040) == [""]

    def test_stops_after_max_lines(self) -> None:
        draw = ImageDraw.Draw(Image.new("RGB", (10, 10)))
        lines = wrap_title(draw, "word " * 500, load_font(72), 400, max_lines=3)
        assert len(lines) == 4


class TestClampTitle:
    def test_short_title_unchanged(self) -> None:
        assert clamp_title("Hello  world") == "Hello world"

    def test_long_title_cut_with_ellipsis(self) -> None:
        clamped = clamp_title("x" * 1000)
        assert len(clamped) == MAX_TITLE_CHARS
        assert clamped.endswith(ELLIPSIS)


class TestLayoutTitle:
    def test_short_title_uses_largest_size(self) -> None:
        draw = ImageDraw.Draw(Image.new("RGB", (10, 10)))
        font, lines, line_h = layout_title(draw, "MetaCraft")
        assert lines == ["MetaCraft"]
        assert font.size == 72

    def test_overflow_is_dropped_and_marked(self) -> None:
        draw = ImageDraw.Draw(Image.new("RGB", (10, 10)))
        _, lines, line_h = layout_title(draw, clamp_title("word " * 3000))
        assert line_h * len(lines) <= HEIGHT - 2 * MARGIN
        assert lines[-1].endswith(ELLIPSIS)
