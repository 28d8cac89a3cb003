"""Color helpers shared by palette extraction and rendering.

AIDEV-NOTE: Colors travel through the app as '#rrggbb' strings and are
converted to RGB tuples only at the edges (extraction, rasterizing).
"""

import io
import math

from PIL import Image, ImageColor


def load_image_bytes(data: bytes) -> Image.Image:
    """Decode raw image bytes.

    Args:
        data: Encoded image file contents (PNG, JPG, etc.)

    Returns:
        PIL Image in RGBA mode

    Raises:
        ValueError: If the bytes cannot be decoded as an image
    """
    try:
        image = Image.open(io.BytesIO(data))
        # AIDEV-NOTE: Always convert to RGBA for consistent processing
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return image
    except Exception as e:
        raise ValueError(f"Failed to load image: {e}") from e


def saturation(r: float, g: float, b: float) -> float:
    """HSV-style saturation, 0 for black."""
    high = max(r, g, b)
    low = min(r, g, b)
    if high == 0:
        return 0.0
    return (high - low) / high


def scale_color(
    color: "tuple[float, float, float]", factor: float
) -> "tuple[float, float, float]":
    """Multiply every channel by factor, clamped to 0-255."""
    return tuple(max(0.0, min(255.0, c * factor)) for c in color)


def to_hex(r: float, g: float, b: float) -> str:
    """Format channels as '#rrggbb', rounding and zero-padding each."""
    # half-up, not banker's rounding
    return "#" + "".join(f"{math.floor(c + 0.5):02x}" for c in (r, g, b))


def parse_color(color: str, default=(0, 0, 0)) -> "tuple[int, int, int]":
    """Parse any CSS-style color string to an RGB tuple.

    AIDEV-NOTE: Color text from the inputs is not validated upstream;
    unparsable values fall back to default instead of failing a redraw.
    """
    try:
        return ImageColor.getrgb(color.strip())[:3]
    except (ValueError, AttributeError):
        return default
