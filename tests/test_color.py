"""Tests for metacraft.color — hex parsing and WCAG contrast."""

from __future__ import annotations

import pytest

from metacraft.color import (
    contrast_ratio,
    expand_hex,
    hex_to_rgb,
    is_hex_color,
    relative_luminance,
)
from metacraft.errors import InvalidColorError


class TestExpandHex:
    def test_three_digits_are_doubled(self) -> None:
        assert expand_hex("#abc") == "#aabbcc"

    def test_six_digits_are_identity(self) -> None:
        assert expand_hex("#aabbcc") == "#aabbcc"

    def test_case_is_preserved(self) -> None:
        assert expand_hex("#ABC") == "#AABBCC"

    @pytest.mark.parametrize("bad", ["", "abc", "#abcd", "#gggggg", "#12345", "rgb(0,0,0)"])
    def test_rejects_non_hex(self, bad: str) -> None:
        with pytest.raises(InvalidColorError):
            expand_hex(bad)

    def test_invalid_color_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="not a hex colour"):
            expand_hex("nope")


class TestHexToRgb:
    def test_short_form(self) -> None:
        assert hex_to_rgb("#fff") == (255, 255, 255)

    def test_long_form(self) -> None:
        assert hex_to_rgb("#0ea5e9") == (14, 165, 233)


class TestIsHexColor:
    def test_accepts_both_lengths(self) -> None:
        assert is_hex_color("#000")
        assert is_hex_color("#000000")

    def test_requires_hash(self) -> None:
        assert not is_hex_color("000000")


class TestRelativeLuminance:
    def test_black_is_zero(self) -> None:
        assert relative_luminance("#000000") == 0.0

    def test_white_is_one(self) -> None:
        assert relative_luminance("#ffffff") == pytest.approx(1.0)

    def test_dark_channel_uses_linear_segment(self) -> None:
        # 2/255 is below the 0.03928 threshold: c / 12.92
        expected = 0.2126 * (2 / 255 / 12.92)
        assert relative_luminance("#020000") == pytest.approx(expected)


class TestContrastRatio:
    def test_black_on_white_is_21(self) -> None:
        assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)

    @pytest.mark.parametrize(
        "bg,fg",
        [("#0ea5e9", "#020617"), ("#123456", "#fedcba"), ("#ff0000", "#00ff00")],
    )
    def test_symmetric(self, bg: str, fg: str) -> None:
        assert contrast_ratio(bg, fg) == contrast_ratio(fg, bg)

    @pytest.mark.parametrize("color", ["#000000", "#0ea5e9", "#abc", "#ffffff"])
    def test_same_color_is_one(self, color: str) -> None:
        assert contrast_ratio(color, color) == 1.0

    def test_short_and_long_forms_agree(self) -> None:
        assert contrast_ratio("#fff", "#000") == contrast_ratio("#ffffff", "#000000")

    def test_parse_failure_is_zero(self) -> None:
        assert contrast_ratio("red", "#ffffff") == 0.0
        assert contrast_ratio("#ffffff", "") == 0.0

    def test_default_og_colors_pass_aa(self) -> None:
        assert contrast_ratio("#0ea5e9", "#020617") > 4.5
