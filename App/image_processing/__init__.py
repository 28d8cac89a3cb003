"""Image analysis for logo uploads.

AIDEV-NOTE: This package turns an uploaded logo into suggested colors.
Organized into modular components:
- palette: extract_palette entry point, slot assignment, worker thread
  and the PaletteExtractor that supersedes stale requests
- quantization: pixel filtering and bucket accumulation
- utils: decoding and color conversions
"""

from .palette import (
    ExtractionThread,
    PaletteExtractor,
    extract_palette,
    extract_palette_from_file,
)

__all__ = [
    "ExtractionThread",
    "PaletteExtractor",
    "extract_palette",
    "extract_palette_from_file",
]
