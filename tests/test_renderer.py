"""Tests for raster and vector symbol rendering."""

import pytest
from PIL import Image, ImageDraw

from models import ExportFormat, FillMode, ModuleShape, QRSettings
from qr_rendering import QRRenderer, build_render_config, render_image, render_svg
from qr_rendering.renderer import (
    _draw_rounded_module,
    encode_matrix,
    gradient_weights,
    layout_symbol,
)


def corner_pixel(image, layout):
    """A pixel inside the top-left locator outline."""
    x = int(layout.offset_x + layout.dot / 2)
    y = int(layout.offset_y + layout.dot / 2)
    return image.getpixel((x, y))


class TestEncode:
    def test_matrix_is_square_without_quiet_zone(self):
        matrix = encode_matrix("hello")
        assert len(matrix) == len(matrix[0])
        # top-left locator starts at the very first module
        assert matrix[0][:7] == [True] * 7

    def test_high_error_correction_grows_symbol(self):
        assert len(encode_matrix("hello", "H")) >= len(encode_matrix("hello", "L"))


class TestRenderImage:
    @pytest.mark.parametrize("size", [280, 1024])
    def test_output_size(self, size):
        config = build_render_config(QRSettings(), size=size)
        image = render_image(config)

        assert image.size == (size, size)
        assert image.mode == "RGBA"

    @pytest.mark.parametrize("style", list(ModuleShape))
    def test_locator_uses_foreground(self, style):
        settings = QRSettings(fg_color="#000000", bg_color="#FFFFFF", style=style)
        config = build_render_config(settings)
        layout = layout_symbol(config)
        image = render_image(config)

        assert image.getpixel((0, 0))[:3] == (255, 255, 255)
        # dots style draws circular rings, so sample the middle of the top edge
        x = int(layout.offset_x + 3.5 * layout.dot)
        y = int(layout.offset_y + layout.dot / 2)
        assert image.getpixel((x, y))[:3] == (0, 0, 0)

    def test_gradient_varies_across_symbol(self):
        settings = QRSettings(
            fill_mode=FillMode.LINEAR,
            fg_color="#000000",
            fg_color2="#0000FF",
            gradient_rotation=0,
        )
        config = build_render_config(settings, size=512)
        layout = layout_symbol(config)
        image = render_image(config)

        left = corner_pixel(image, layout)
        right_x = int(layout.offset_x + (layout.count - 0.5) * layout.dot)
        right = image.getpixel((right_x, int(layout.offset_y + layout.dot / 2)))
        assert right[2] > left[2]

    def test_logo_is_centered(self, red_logo_bytes):
        config = build_render_config(QRSettings(logo=red_logo_bytes), size=400)
        image = render_image(config)

        assert image.getpixel((200, 200))[:3] == (224, 0, 0)

    def test_logo_clears_modules_around_it(self, red_logo_bytes):
        config = build_render_config(QRSettings(logo=red_logo_bytes), size=400)
        layout = layout_symbol(config)

        x0, y0, x1, y1 = layout.logo_box
        assert x1 - x0 <= 0.4 * layout.count * layout.dot + 1
        hidden = layout.hidden
        assert hidden[0] == x0 - 8 and hidden[2] == x1 + 8

    def test_bad_logo_is_skipped(self):
        config = build_render_config(QRSettings(logo=b"garbage"))
        assert layout_symbol(config).logo is None
        assert render_image(config).size == (280, 280)

    def test_invalid_background_falls_back_to_white(self):
        config = build_render_config(QRSettings(bg_color="#zzzzzz"))
        assert render_image(config).getpixel((0, 0))[:3] == (255, 255, 255)


class TestRoundedModules:
    @pytest.mark.parametrize("size", [280, 512, 1024])
    def test_rounded_style_renders(self, size):
        config = build_render_config(QRSettings(style=ModuleShape.ROUNDED), size=size)
        assert render_image(config).size == (size, size)

    def test_rounded_style_with_gradient_and_logo(self, red_logo_bytes):
        settings = QRSettings(
            style=ModuleShape.ROUNDED, fill_mode=FillMode.RADIAL, logo=red_logo_bytes
        )
        assert render_image(build_render_config(settings, size=333)).size == (333, 333)

    def test_three_rounded_corners_keep_one_square(self):
        mask = Image.new("L", (100, 100), 0)
        draw = ImageDraw.Draw(mask)

        _draw_rounded_module(draw, (80.0, 80.0, 87.0, 87.0), (True, True, True, False))

        assert mask.getpixel((80, 87)) == 255  # bottom-left stays square
        assert mask.getpixel((80, 80)) == 0  # top-left is cut off
        assert mask.getpixel((83, 83)) == 255

    def test_no_rounded_corners_is_a_square(self):
        mask = Image.new("L", (20, 20), 0)
        _draw_rounded_module(ImageDraw.Draw(mask), (2, 2, 9, 9), (False,) * 4)

        assert mask.getpixel((2, 2)) == 255
        assert mask.getpixel((9, 9)) == 255


class TestGradientWeights:
    def test_linear_spans_zero_to_one(self):
        fill = build_render_config(QRSettings(fill_mode=FillMode.LINEAR)).dots.fill
        weights = gradient_weights(100, 100, fill)

        assert weights.shape == (100, 100)
        assert weights[50, 0] < 0.05
        assert weights[50, 99] > 0.95

    def test_radial_grows_from_center(self):
        fill = build_render_config(QRSettings(fill_mode=FillMode.RADIAL)).dots.fill
        weights = gradient_weights(100, 100, fill)

        assert weights[50, 50] < weights[0, 0]
        assert weights.max() <= 1.0


class TestRenderSvg:
    def test_document_dimensions(self):
        document = render_svg(build_render_config(QRSettings(), size=512))

        assert document.startswith("<svg")
        assert 'width="512"' in document
        assert 'viewBox="0 0 512 512"' in document

    def test_solid_has_no_gradient(self):
        document = render_svg(build_render_config(QRSettings()))
        assert "Gradient" not in document

    def test_linear_gradient(self):
        settings = QRSettings(fill_mode=FillMode.LINEAR, gradient_rotation=90)
        document = render_svg(build_render_config(settings))

        assert "<linearGradient" in document
        assert "url(#fill-gradient-0)" in document

    def test_radial_gradient(self):
        settings = QRSettings(fill_mode=FillMode.RADIAL)
        assert "<radialGradient" in render_svg(build_render_config(settings))

    def test_logo_is_embedded(self, red_logo_bytes):
        document = render_svg(build_render_config(QRSettings(logo=red_logo_bytes)))
        assert "data:image/png;base64," in document


class TestQRRenderer:
    def test_attach_pushes_current_render(self):
        renderer = QRRenderer(build_render_config(QRSettings()))
        received = []

        renderer.attach(received.append)

        assert len(received) == 1
        assert received[0].size == (280, 280)

    def test_update_notifies_listeners(self):
        renderer = QRRenderer(build_render_config(QRSettings()))
        received = []
        renderer.attach(received.append)

        renderer.update(build_render_config(QRSettings(content="changed")))

        assert len(received) == 2
        assert renderer.config.data == "changed"

    def test_render_is_cached(self):
        renderer = QRRenderer(build_render_config(QRSettings()))
        assert renderer.render() is renderer.render()

    def test_export_png(self, tmp_path):
        renderer = QRRenderer(build_render_config(QRSettings(), size=300))
        path = renderer.export(tmp_path / "code.png")

        assert path.exists()
        assert path.read_bytes().startswith(b"\x89PNG")

    def test_export_svg_replaces_suffix(self, tmp_path):
        renderer = QRRenderer(build_render_config(QRSettings()))
        path = renderer.export(tmp_path / "code.png", ExportFormat.SVG)

        assert path.suffix == ".svg"
        assert path.read_text(encoding="utf-8").startswith("<svg")
