"""QR symbol rendering for the configurator.

AIDEV-NOTE: Organized into modular components:
- style_resolver: user shape choice -> renderer shape tokens
- config_builder: settings snapshot -> RenderConfiguration
- renderer: raster rendering and the QRRenderer collaborator
- svg_export: vector output sharing the raster layout
- frame: frame and caption tables
"""

from .config_builder import build_color_options, build_render_config
from .renderer import QRRenderer, render_image
from .style_resolver import resolve_style
from .svg_export import render_svg

__all__ = [
    "QRRenderer",
    "build_color_options",
    "build_render_config",
    "render_image",
    "render_svg",
    "resolve_style",
]
