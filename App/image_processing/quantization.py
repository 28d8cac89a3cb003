"""Color quantization into coarse buckets for palette extraction.

AIDEV-NOTE: This module groups sampled pixels into buckets keyed by each
channel rounded down to a multiple of QUANTIZATION_STEP. Filtering and key
computation are vectorized with numpy; the bucket fold itself runs in
pixel order because the running blend is order dependent.
"""

import numpy as np
from PIL import Image

from models import (
    ALPHA_THRESHOLD,
    BRIGHTNESS_MAX,
    BRIGHTNESS_MIN,
    QUANTIZATION_STEP,
    ColorBucket,
)


def sample_pixels(
    image: Image.Image,
    filter_brightness: bool = True,
) -> np.ndarray:
    """Return the RGB rows of pixels that carry usable color signal.

    Args:
        image: Input image (any mode, converted to RGBA)
        filter_brightness: Also drop near-white and near-black pixels

    Returns:
        (N, 3) int array in row-major pixel order
    """
    rgba = np.asarray(image.convert("RGBA"), dtype=np.int32).reshape(-1, 4)

    keep = rgba[:, 3] >= ALPHA_THRESHOLD
    if filter_brightness:
        brightness = rgba[:, :3].sum(axis=1) / 3.0
        keep &= (brightness <= BRIGHTNESS_MAX) & (brightness >= BRIGHTNESS_MIN)

    return rgba[keep, :3]


def quantize_keys(pixels: np.ndarray, step: int = QUANTIZATION_STEP) -> np.ndarray:
    """Round every channel down to the nearest multiple of step."""
    return (pixels // step) * step


def bucket_colors(
    pixels: np.ndarray,
    step: int = QUANTIZATION_STEP,
) -> "list[ColorBucket]":
    """Accumulate pixels into quantized buckets.

    Args:
        pixels: (N, 3) RGB rows, as returned by sample_pixels
        step: Quantization step per channel

    Returns:
        Buckets in first-seen order
    """
    buckets: "dict[tuple[int, int, int], ColorBucket]" = {}
    keys = quantize_keys(pixels, step)

    for (r, g, b), key_row in zip(pixels.tolist(), keys.tolist()):
        key = (key_row[0], key_row[1], key_row[2])
        existing = buckets.get(key)
        if existing is None:
            buckets[key] = ColorBucket(key=key, r=float(r), g=float(g), b=float(b))
            continue

        existing.count += 1
        existing.r = (existing.r + r) / 2
        existing.g = (existing.g + g) / 2
        existing.b = (existing.b + b) / 2

    return list(buckets.values())


def rank_buckets(
    buckets: "list[ColorBucket]", limit: int
) -> "list[ColorBucket]":
    """Most frequent buckets first; ties keep first-seen order."""
    return sorted(buckets, key=lambda bucket: bucket.count, reverse=True)[:limit]
