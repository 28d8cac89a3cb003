"""Vector export of a render configuration.

AIDEV-NOTE: Shares SymbolLayout with the raster renderer so both outputs
place modules identically. Gradients are emitted once in <defs> with
userSpaceOnUse units so they span the whole canvas, not each module.
"""

import base64
import io
import math

import svg

from models import (
    CornerDotType,
    CornerSquareType,
    DotType,
    FillMode,
    FillSpec,
    RenderConfiguration,
)

from .renderer import LOCATOR_CORE, LOCATOR_SIZE, SymbolLayout, layout_symbol


def _gradient_element(gradient_id: str, fill: FillSpec, width: int, height: int):
    gradient = fill.gradient
    stops: list[svg.Element] = [
        svg.Stop(offset=stop.offset, stop_color=stop.color)
        for stop in gradient.color_stops
    ]
    cx = width / 2
    cy = height / 2

    if gradient.type is FillMode.RADIAL:
        return svg.RadialGradient(
            id=gradient_id,
            cx=cx,
            cy=cy,
            r=max(width, height) / 2,
            gradientUnits="userSpaceOnUse",
            elements=stops,
        )

    # Same axis as the raster fill: through the center, corners at 0 and 1
    cos_r = math.cos(gradient.rotation)
    sin_r = math.sin(gradient.rotation)
    extent = (abs(cos_r) * width + abs(sin_r) * height) / 2
    return svg.LinearGradient(
        id=gradient_id,
        x1=cx - cos_r * extent,
        y1=cy - sin_r * extent,
        x2=cx + cos_r * extent,
        y2=cy + sin_r * extent,
        gradientUnits="userSpaceOnUse",
        elements=stops,
    )


def _rounded_module(
    x: float, y: float, size: float, corners: "tuple[bool, bool, bool, bool]"
) -> svg.Path:
    """Square module with selected corners rounded (tl, tr, br, bl)."""
    r = size / 2
    tl, tr, br, bl = corners
    d: list[svg.PathData] = [svg.M(x + (r if tl else 0), y)]

    d.append(svg.L(x + size - (r if tr else 0), y))
    if tr:
        d.append(svg.A(r, r, 0, False, True, x + size, y + r))
    d.append(svg.L(x + size, y + size - (r if br else 0)))
    if br:
        d.append(svg.A(r, r, 0, False, True, x + size - r, y + size))
    d.append(svg.L(x + (r if bl else 0), y + size))
    if bl:
        d.append(svg.A(r, r, 0, False, True, x, y + size - r))
    d.append(svg.L(x, y + (r if tl else 0)))
    if tl:
        d.append(svg.A(r, r, 0, False, True, x + r, y))
    d.append(svg.Z())
    return svg.Path(d=d)


def _data_elements(layout: SymbolLayout, shape: DotType, paint: str) -> "list[svg.Element]":
    elements: list[svg.Element] = []
    dot = layout.dot

    for row, col in layout.data_modules():
        x, y, _, _ = layout.cell_box(row, col)
        if shape is DotType.DOTS:
            elements.append(svg.Circle(cx=x + dot / 2, cy=y + dot / 2, r=dot / 2))
        elif shape is DotType.ROUNDED:
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
            elements.append(_rounded_module(x, y, dot, corners))
        else:
            elements.append(svg.Rect(x=x, y=y, width=dot, height=dot))

    return [svg.G(fill=paint, elements=elements)]


def _locator_elements(
    layout: SymbolLayout,
    outline: CornerSquareType,
    core: CornerDotType,
    outline_paint: str,
    core_paint: str,
) -> "list[svg.Element]":
    elements: list[svg.Element] = []
    dot = layout.dot
    # Outline rings are stroked along the middle of the outer module row
    ring = (LOCATOR_SIZE - 1) * dot
    core_size = LOCATOR_CORE * dot

    for top, left in layout.locator_origins():
        x, y, _, _ = layout.cell_box(top, left)

        if outline is CornerSquareType.DOT:
            elements.append(
                svg.Circle(
                    cx=x + LOCATOR_SIZE * dot / 2,
                    cy=y + LOCATOR_SIZE * dot / 2,
                    r=ring / 2,
                    fill="none",
                    stroke=outline_paint,
                    stroke_width=dot,
                )
            )
        else:
            radius = 2 * dot if outline is CornerSquareType.EXTRA_ROUNDED else 0
            elements.append(
                svg.Rect(
                    x=x + dot / 2,
                    y=y + dot / 2,
                    width=ring,
                    height=ring,
                    rx=radius or None,
                    ry=radius or None,
                    fill="none",
                    stroke=outline_paint,
                    stroke_width=dot,
                )
            )

        core_x = x + 2 * dot
        core_y = y + 2 * dot
        if core is CornerDotType.DOT:
            elements.append(
                svg.Circle(
                    cx=core_x + core_size / 2,
                    cy=core_y + core_size / 2,
                    r=core_size / 2,
                    fill=core_paint,
                )
            )
        else:
            elements.append(
                svg.Rect(x=core_x, y=core_y, width=core_size, height=core_size, fill=core_paint)
            )

    return elements


def _logo_element(layout: SymbolLayout) -> "svg.Image | None":
    if layout.logo is None or layout.logo_box is None:
        return None
    buffer = io.BytesIO()
    layout.logo.save(buffer, format="PNG")
    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    x0, y0, x1, y1 = layout.logo_box
    return svg.Image(
        href=f"data:image/png;base64,{encoded}",
        x=x0,
        y=y0,
        width=x1 - x0,
        height=y1 - y0,
    )


def render_svg(config: RenderConfiguration) -> str:
    """Render a configuration to an SVG document string."""
    layout = layout_symbol(config)
    width, height = config.width, config.height

    gradients: list[svg.Element] = []
    paints: "dict[FillSpec, str]" = {}
    for region in (config.dots, config.corners_square, config.corners_dot):
        if region.fill in paints:
            continue
        if region.fill.gradient is None:
            paints[region.fill] = region.fill.color or "#000000"
            continue
        gradient_id = f"fill-gradient-{len(gradients)}"
        gradients.append(_gradient_element(gradient_id, region.fill, width, height))
        paints[region.fill] = f"url(#{gradient_id})"

    elements: list[svg.Element] = []
    if gradients:
        elements.append(svg.Defs(elements=gradients))

    elements.append(svg.Rect(x=0, y=0, width=width, height=height, fill=config.background))
    elements.extend(_data_elements(layout, config.dots.shape, paints[config.dots.fill]))
    elements.extend(
        _locator_elements(
            layout,
            config.corners_square.shape,
            config.corners_dot.shape,
            paints[config.corners_square.fill],
            paints[config.corners_dot.fill],
        )
    )

    logo = _logo_element(layout)
    if logo is not None:
        elements.append(logo)

    return svg.SVG(
        width=width,
        height=height,
        viewBox=svg.ViewBoxSpec(0, 0, width, height),
        elements=elements,
    ).as_str()
