"""Raster renderer for styled QR symbols.

AIDEV-NOTE: Encoding is delegated to the qrcode library; this module only
lays out the module grid and paints it. Data modules, locator outlines and
locator cores are drawn into one "L" mask each; each mask is then colored
with its region fill (solid or gradient) over the background.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

import numpy as np
import qrcode
from PIL import Image, ImageDraw

from image_processing.utils import load_image_bytes, parse_color
from models import (
    CornerDotType,
    CornerSquareType,
    DotType,
    ExportFormat,
    FillMode,
    FillSpec,
    RenderConfiguration,
)

ERROR_LEVELS = {
    "L": qrcode.constants.ERROR_CORRECT_L,  # ~7%
    "M": qrcode.constants.ERROR_CORRECT_M,  # ~15%
    "Q": qrcode.constants.ERROR_CORRECT_Q,  # ~25%
    "H": qrcode.constants.ERROR_CORRECT_H,  # ~30%
}

LOCATOR_SIZE = 7  # modules
LOCATOR_CORE = 3  # modules


@dataclass
class SymbolLayout:
    """Module grid placed on the output canvas.

    AIDEV-NOTE: Shared by the raster and SVG paths so both agree on
    geometry. hidden is the pixel box cleared for the logo (or None).
    """

    matrix: "list[list[bool]]"
    count: int
    dot: float  # px per module
    offset_x: float
    offset_y: float
    logo: "Image.Image | None" = None
    logo_box: "tuple[int, int, int, int] | None" = None  # x0, y0, x1, y1
    hidden: "tuple[float, float, float, float] | None" = None

    def locator_origins(self) -> "list[tuple[int, int]]":
        """(row, col) of the top-left module of each locator pattern."""
        far = self.count - LOCATOR_SIZE
        return [(0, 0), (0, far), (far, 0)]

    def in_locator(self, row: int, col: int) -> bool:
        for top, left in self.locator_origins():
            if top <= row < top + LOCATOR_SIZE and left <= col < left + LOCATOR_SIZE:
                return True
        return False

    def cell_box(self, row: int, col: int) -> "tuple[float, float, float, float]":
        x = self.offset_x + col * self.dot
        y = self.offset_y + row * self.dot
        return (x, y, x + self.dot, y + self.dot)

    def is_hidden(self, row: int, col: int) -> bool:
        if self.hidden is None:
            return False
        x0, y0, x1, y1 = self.cell_box(row, col)
        hx0, hy0, hx1, hy1 = self.hidden
        return x0 < hx1 and x1 > hx0 and y0 < hy1 and y1 > hy0

    def is_dark(self, row: int, col: int) -> bool:
        if row < 0 or col < 0 or row >= self.count or col >= self.count:
            return False
        return self.matrix[row][col]

    def data_modules(self) -> "list[tuple[int, int]]":
        """Dark modules outside the locators and the logo area."""
        return [
            (row, col)
            for row in range(self.count)
            for col in range(self.count)
            if self.matrix[row][col]
            and not self.in_locator(row, col)
            and not self.is_hidden(row, col)
        ]


def encode_matrix(data: str, error_correction: str = "H") -> "list[list[bool]]":
    """Encode data into a module grid without quiet zone."""
    qr = qrcode.QRCode(
        version=None,
        error_correction=ERROR_LEVELS.get(error_correction, ERROR_LEVELS["H"]),
        border=0,
    )
    qr.add_data(data)
    qr.make(fit=True)
    return qr.get_matrix()


def layout_symbol(config: RenderConfiguration) -> SymbolLayout:
    """Place the encoded grid and the optional logo on the canvas."""
    matrix = encode_matrix(config.data, config.error_correction)
    count = len(matrix)
    size = min(config.width, config.height)

    # Whole-pixel modules when possible, centered on the canvas
    dot = float(size // count) or size / count
    offset_x = (config.width - count * dot) / 2
    offset_y = (config.height - count * dot) / 2

    layout = SymbolLayout(
        matrix=matrix,
        count=count,
        dot=dot,
        offset_x=offset_x,
        offset_y=offset_y,
    )

    if config.logo is not None:
        _place_logo(layout, config)

    return layout


def _place_logo(layout: SymbolLayout, config: RenderConfiguration) -> None:
    try:
        logo = load_image_bytes(config.logo.image)
    except ValueError as e:
        print(f"Skipping logo: {e}")
        return

    # Fit inside image_size of the symbol width, keeping aspect ratio
    symbol_px = layout.count * layout.dot
    max_side = symbol_px * config.logo.image_size
    scale = min(max_side / logo.width, max_side / logo.height)
    logo_w = max(1, int(logo.width * scale))
    logo_h = max(1, int(logo.height * scale))

    x0 = int(config.width / 2 - logo_w / 2)
    y0 = int(config.height / 2 - logo_h / 2)
    margin = config.logo.margin

    layout.logo = logo.resize((logo_w, logo_h), Image.Resampling.LANCZOS)
    layout.logo_box = (x0, y0, x0 + logo_w, y0 + logo_h)
    layout.hidden = (x0 - margin, y0 - margin, x0 + logo_w + margin, y0 + logo_h + margin)


# --- Shape drawing ---


def _draw_rounded_module(
    draw: ImageDraw.ImageDraw,
    box: "tuple[float, float, float, float]",
    corners: "tuple[bool, bool, bool, bool]",
) -> None:
    """Circle unioned with a square quadrant for every corner kept sharp.

    corners is (tl, tr, br, bl); True means rounded.
    """
    if not any(corners):
        draw.rectangle(box, fill=255)
        return

    x0, y0, x1, y1 = box
    mx = (x0 + x1) / 2
    my = (y0 + y1) / 2
    quadrants = (
        (x0, y0, mx, my),
        (mx, y0, x1, my),
        (mx, my, x1, y1),
        (x0, my, mx, y1),
    )

    draw.ellipse(box, fill=255)
    for rounded, quadrant in zip(corners, quadrants):
        if not rounded:
            draw.rectangle(quadrant, fill=255)


def _draw_data_module(
    draw: ImageDraw.ImageDraw,
    layout: SymbolLayout,
    row: int,
    col: int,
    shape: DotType,
) -> None:
    x0, y0, x1, y1 = layout.cell_box(row, col)
    box = (x0, y0, x1 - 1, y1 - 1) if layout.dot >= 2 else (x0, y0, x1, y1)

    if shape is DotType.DOTS:
        draw.ellipse(box, fill=255)
    elif shape is DotType.ROUNDED:
        # A corner is rounded only where both adjacent sides are open
        up = layout.is_dark(row - 1, col)
        down = layout.is_dark(row + 1, col)
        left = layout.is_dark(row, col - 1)
        right = layout.is_dark(row, col + 1)
        corners = (
            not (up or left),
            not (up or right),
            not (down or right),
            not (down or left),
        )
        _draw_rounded_module(draw, box, corners)
    else:
        draw.rectangle(box, fill=255)


def _draw_locator(
    outline_draw: ImageDraw.ImageDraw,
    core_draw: ImageDraw.ImageDraw,
    layout: SymbolLayout,
    top: int,
    left: int,
    outline: CornerSquareType,
    core: CornerDotType,
) -> None:
    dot = layout.dot
    x0, y0, _, _ = layout.cell_box(top, left)
    outer = (x0, y0, x0 + LOCATOR_SIZE * dot - 1, y0 + LOCATOR_SIZE * dot - 1)
    inner = (x0 + dot, y0 + dot, x0 + 6 * dot - 1, y0 + 6 * dot - 1)

    if outline is CornerSquareType.DOT:
        outline_draw.ellipse(outer, fill=255)
        outline_draw.ellipse(inner, fill=0)
    elif outline is CornerSquareType.EXTRA_ROUNDED:
        outline_draw.rounded_rectangle(outer, radius=2.5 * dot, fill=255)
        outline_draw.rounded_rectangle(inner, radius=1.5 * dot, fill=0)
    else:
        outline_draw.rectangle(outer, fill=255)
        outline_draw.rectangle(inner, fill=0)

    core_box = (
        x0 + 2 * dot,
        y0 + 2 * dot,
        x0 + (2 + LOCATOR_CORE) * dot - 1,
        y0 + (2 + LOCATOR_CORE) * dot - 1,
    )
    if core is CornerDotType.DOT:
        core_draw.ellipse(core_box, fill=255)
    else:
        core_draw.rectangle(core_box, fill=255)


def build_masks(
    layout: SymbolLayout, config: RenderConfiguration
) -> "tuple[Image.Image, Image.Image, Image.Image]":
    """Paint data modules, locator outlines and locator cores into "L" masks."""
    size = (config.width, config.height)
    data_mask = Image.new("L", size, 0)
    outline_mask = Image.new("L", size, 0)
    core_mask = Image.new("L", size, 0)

    draw = ImageDraw.Draw(data_mask)
    for row, col in layout.data_modules():
        _draw_data_module(draw, layout, row, col, config.dots.shape)

    outline_draw = ImageDraw.Draw(outline_mask)
    core_draw = ImageDraw.Draw(core_mask)
    for top, left in layout.locator_origins():
        _draw_locator(
            outline_draw,
            core_draw,
            layout,
            top,
            left,
            config.corners_square.shape,
            config.corners_dot.shape,
        )

    return data_mask, outline_mask, core_mask


# --- Fill ---


def gradient_weights(width: int, height: int, fill: FillSpec) -> np.ndarray:
    """Per-pixel position (0-1) along the gradient.

    AIDEV-NOTE: Linear gradients run through the canvas center along the
    rotation angle and are stretched so the canvas corners land on 0 and
    1. Radial gradients grow from the center out to half the width.
    """
    gradient = fill.gradient
    ys, xs = np.mgrid[0:height, 0:width].astype(np.float64)
    cx = width / 2
    cy = height / 2

    if gradient.type is FillMode.RADIAL:
        radius = max(width, height) / 2
        t = np.hypot(xs + 0.5 - cx, ys + 0.5 - cy) / radius
    else:
        cos_r = np.cos(gradient.rotation)
        sin_r = np.sin(gradient.rotation)
        extent = (abs(cos_r) * width + abs(sin_r) * height) / 2 or 1.0
        projection = (xs + 0.5 - cx) * cos_r + (ys + 0.5 - cy) * sin_r
        t = (projection + extent) / (2 * extent)

    return np.clip(t, 0.0, 1.0)


def fill_layer(width: int, height: int, fill: FillSpec) -> Image.Image:
    """Build an RGB layer colored by the fill spec."""
    if fill.gradient is None:
        return Image.new("RGB", (width, height), parse_color(fill.color or "#000000"))

    stops = fill.gradient.color_stops
    start = np.array(parse_color(stops[0].color), dtype=np.float64)
    end = np.array(parse_color(stops[-1].color), dtype=np.float64)
    t = gradient_weights(width, height, fill)[..., np.newaxis]
    pixels = start * (1 - t) + end * t
    return Image.fromarray(np.rint(pixels).astype(np.uint8))


def render_image(config: RenderConfiguration) -> Image.Image:
    """Render a configuration to an RGBA image."""
    layout = layout_symbol(config)
    size = (config.width, config.height)
    background = parse_color(config.background, (255, 255, 255))

    image = Image.new("RGBA", size, background + (255,))
    masks = build_masks(layout, config)
    regions = (config.dots, config.corners_square, config.corners_dot)

    # Regions normally share one fill; build each distinct layer once
    layers: "dict[FillSpec, Image.Image]" = {}
    for region, mask in zip(regions, masks):
        if region.fill not in layers:
            layers[region.fill] = fill_layer(*size, region.fill)
        image.paste(layers[region.fill], (0, 0), mask)

    if layout.logo is not None and layout.logo_box is not None:
        image.alpha_composite(layout.logo, layout.logo_box[:2])

    return image


class QRRenderer:
    """Symbol renderer with attach/update/export semantics.

    Listeners receive a fresh PIL image after every update; the preview
    panel attaches one to refresh its pixmap.
    """

    def __init__(self, config: RenderConfiguration):
        self.config = config
        self._listeners: "list[Callable[[Image.Image], None]]" = []
        self._image: "Image.Image | None" = None

    def attach(self, listener: "Callable[[Image.Image], None]"):
        """Attach a display callback and push the current render to it."""
        self._listeners.append(listener)
        listener(self.render())

    def update(self, config: RenderConfiguration):
        """Replace the configuration and redraw every attached display."""
        self.config = config
        self._image = None
        image = self.render()
        for listener in self._listeners:
            listener(image)

    def render(self) -> Image.Image:
        """Render (cached until the next update)."""
        if self._image is None:
            self._image = render_image(self.config)
        return self._image

    def export(
        self,
        path: "str | Path",
        fmt: ExportFormat = ExportFormat.PNG,
    ) -> Path:
        """Write the current configuration to a file.

        Args:
            path: Target path; the suffix is replaced to match fmt
            fmt: PNG (raster) or SVG (vector)

        Returns:
            Path of the written file
        """
        target = Path(path).with_suffix(f".{fmt.value}")

        if fmt is ExportFormat.SVG:
            from .svg_export import render_svg

            target.write_text(render_svg(self.config), encoding="utf-8")
        else:
            self.render().save(target, format="PNG")

        print(f"Exported {self.config.width}x{self.config.height} {fmt.value} to {target}")
        return target
