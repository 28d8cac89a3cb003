"""Composition of settings into the renderer configuration.

AIDEV-NOTE: Deterministic and free of I/O. The requested size only
affects width/height; every color and shape decision comes from the
settings snapshot.
"""

import math

from models import (
    PLACEHOLDER_URL,
    PREVIEW_SIZE,
    ColorStop,
    FillMode,
    FillSpec,
    GradientSpec,
    LogoOptions,
    QRSettings,
    RegionStyle,
    RenderConfiguration,
)

from .style_resolver import resolve_style


def build_color_options(settings: QRSettings) -> FillSpec:
    """Build the fill shared by data modules and both locator regions.

    Args:
        settings: Current settings snapshot

    Returns:
        Solid FillSpec, or a gradient from fg_color to fg_color2. Rotation
        is converted to radians and only kept for linear gradients.
    """
    if not settings.fill_mode.is_gradient:
        return FillSpec(color=settings.fg_color)

    rotation = 0.0
    if settings.fill_mode is FillMode.LINEAR:
        rotation = settings.gradient_rotation * (math.pi / 180)

    return FillSpec(
        gradient=GradientSpec(
            type=settings.fill_mode,
            rotation=rotation,
            color_stops=(
                ColorStop(offset=0.0, color=settings.fg_color),
                ColorStop(offset=1.0, color=settings.fg_color2),
            ),
        )
    )


def resolve_content(content: str) -> str:
    """Substitute the placeholder URL for empty or blank content."""
    if not content or not content.strip():
        return PLACEHOLDER_URL
    return content


def build_render_config(
    settings: QRSettings,
    size: int = PREVIEW_SIZE,
) -> RenderConfiguration:
    """Build the renderer configuration for a settings snapshot.

    Args:
        settings: Current settings snapshot
        size: Target width and height in pixels

    Returns:
        RenderConfiguration at the requested resolution
    """
    shapes = resolve_style(settings.style)
    fill = build_color_options(settings)

    logo = None
    if settings.logo:
        logo = LogoOptions(image=settings.logo)

    return RenderConfiguration(
        width=size,
        height=size,
        data=resolve_content(settings.content),
        dots=RegionStyle(shape=shapes.dots_type, fill=fill),
        corners_square=RegionStyle(shape=shapes.corners_square_type, fill=fill),
        corners_dot=RegionStyle(shape=shapes.corners_dot_type, fill=fill),
        background=settings.bg_color,
        logo=logo,
    )
