"""Tests for style resolution and render configuration building."""

import math

import pytest

from models import (
    PLACEHOLDER_URL,
    CornerDotType,
    CornerSquareType,
    DotType,
    FillMode,
    ModuleShape,
    QRSettings,
)
from qr_rendering import build_color_options, build_render_config, resolve_style


class TestResolveStyle:
    @pytest.mark.parametrize(
        "shape,expected",
        [
            (ModuleShape.SQUARES, (DotType.SQUARE, CornerSquareType.SQUARE, CornerDotType.SQUARE)),
            (ModuleShape.DOTS, (DotType.DOTS, CornerSquareType.DOT, CornerDotType.DOT)),
            (ModuleShape.ROUNDED, (DotType.ROUNDED, CornerSquareType.EXTRA_ROUNDED, CornerDotType.DOT)),
        ],
    )
    def test_every_shape_resolves(self, shape, expected):
        config = resolve_style(shape)
        assert (config.dots_type, config.corners_square_type, config.corners_dot_type) == expected

    def test_accepts_string_values(self):
        assert resolve_style("dots") == resolve_style(ModuleShape.DOTS)

    @pytest.mark.parametrize("value", ["hexagons", "", None])
    def test_unknown_resolves_to_squares(self, value):
        assert resolve_style(value) == resolve_style(ModuleShape.SQUARES)


class TestBuildColorOptions:
    def test_solid_uses_foreground(self):
        fill = build_color_options(QRSettings(fg_color="#112233"))
        assert fill.color == "#112233"
        assert fill.gradient is None

    def test_linear_rotation_in_radians(self):
        settings = QRSettings(fill_mode=FillMode.LINEAR, gradient_rotation=180)
        gradient = build_color_options(settings).gradient

        assert gradient.type is FillMode.LINEAR
        assert gradient.rotation == pytest.approx(math.pi)

    def test_radial_ignores_rotation(self):
        settings = QRSettings(fill_mode=FillMode.RADIAL, gradient_rotation=270)
        assert build_color_options(settings).gradient.rotation == 0.0

    def test_stops_run_from_first_to_second_color(self):
        settings = QRSettings(
            fill_mode=FillMode.LINEAR, fg_color="#000000", fg_color2="#ffffff"
        )
        stops = build_color_options(settings).gradient.color_stops

        assert [(s.offset, s.color) for s in stops] == [(0.0, "#000000"), (1.0, "#ffffff")]


class TestBuildRenderConfig:
    @pytest.mark.parametrize("content", ["", "   ", "\n"])
    def test_blank_content_uses_placeholder(self, content):
        assert build_render_config(QRSettings(content=content)).data == PLACEHOLDER_URL

    def test_content_passed_through(self):
        assert build_render_config(QRSettings(content="hello")).data == "hello"

    def test_default_size_is_preview(self):
        config = build_render_config(QRSettings())
        assert (config.width, config.height) == (280, 280)

    def test_size_only_changes_dimensions(self):
        settings = QRSettings(style=ModuleShape.DOTS, fill_mode=FillMode.RADIAL)
        small = build_render_config(settings)
        large = build_render_config(settings, size=1024)

        assert (large.width, large.height) == (1024, 1024)
        assert large.dots == small.dots
        assert large.corners_square == small.corners_square
        assert large.corners_dot == small.corners_dot
        assert large.background == small.background

    def test_all_regions_share_fill(self):
        config = build_render_config(QRSettings(fill_mode=FillMode.LINEAR))
        assert config.dots.fill == config.corners_square.fill == config.corners_dot.fill

    def test_background_and_error_correction(self):
        config = build_render_config(QRSettings(bg_color="#fafafa"))
        assert config.background == "#fafafa"
        assert config.error_correction == "H"

    def test_logo_options(self):
        config = build_render_config(QRSettings(logo=b"\x89PNG..."))

        assert config.logo.image == b"\x89PNG..."
        assert config.logo.margin == 8
        assert config.logo.image_size == pytest.approx(0.4)

    def test_no_logo(self):
        assert build_render_config(QRSettings()).logo is None
