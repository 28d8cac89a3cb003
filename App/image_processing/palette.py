"""Palette extraction from uploaded logo images.

AIDEV-NOTE: Heuristic preview aid, not color science. The image is
downsampled to SAMPLE_SIZE x SAMPLE_SIZE, bucketed, and the most frequent
saturated buckets become the suggestion swatches.
"""

from pathlib import Path

from PIL import Image
from PyQt6.QtCore import QObject, QThread, pyqtSignal

from models import (
    BRIGHTEN_FACTOR,
    DARKEN_FACTOR,
    FALLBACK_PALETTE,
    MAX_SATURATED,
    SAMPLE_SIZE,
    SATURATION_THRESHOLD,
    TOP_BUCKETS,
    ColorBucket,
    ExtractedPalette,
)

from .quantization import bucket_colors, rank_buckets, sample_pixels
from .utils import load_image_bytes, saturation, scale_color, to_hex


def extract_palette(
    image_bytes: bytes,
    filter_brightness: bool = True,
) -> ExtractedPalette:
    """Derive three suggested colors from an image.

    Args:
        image_bytes: Encoded image file contents
        filter_brightness: Skip near-white/near-black pixels

    Returns:
        ExtractedPalette; FALLBACK_PALETTE when the image cannot be
        decoded or no pixel survives filtering. Never raises.
    """
    try:
        image = load_image_bytes(image_bytes)
        sample = image.resize((SAMPLE_SIZE, SAMPLE_SIZE), Image.Resampling.BILINEAR)
    except (ValueError, OSError) as e:
        print(f"Palette extraction failed, using fallback: {e}")
        return FALLBACK_PALETTE

    return palette_from_image(sample, filter_brightness=filter_brightness)


def extract_palette_from_file(
    file_path: "str | Path",
    filter_brightness: bool = True,
) -> ExtractedPalette:
    """Read an image file fully into memory and extract its palette."""
    try:
        data = Path(file_path).read_bytes()
    except OSError as e:
        print(f"Could not read {file_path}: {e}")
        return FALLBACK_PALETTE
    return extract_palette(data, filter_brightness=filter_brightness)


def palette_from_image(
    image: Image.Image,
    filter_brightness: bool = True,
) -> ExtractedPalette:
    """Bucket an already-sampled image and assign the palette slots."""
    pixels = sample_pixels(image, filter_brightness=filter_brightness)
    top = rank_buckets(bucket_colors(pixels), TOP_BUCKETS)
    return assign_slots(top)


def assign_slots(ranked: "list[ColorBucket]") -> ExtractedPalette:
    """Map ranked buckets onto primary/secondary/accent.

    Saturated buckets are preferred; a single saturated color is stretched
    into darker and brighter variants. Without saturated colors the most
    frequent buckets are used as-is, repeating the last one. With no
    buckets at all the fallback palette is returned.
    """
    saturated = [
        bucket for bucket in ranked if saturation(*bucket.color) > SATURATION_THRESHOLD
    ][:MAX_SATURATED]

    if saturated:
        primary = saturated[0].color
        secondary = (
            saturated[1].color
            if len(saturated) > 1
            else scale_color(primary, DARKEN_FACTOR)
        )
        accent = (
            saturated[2].color
            if len(saturated) > 2
            else scale_color(primary, BRIGHTEN_FACTOR)
        )
        return ExtractedPalette(to_hex(*primary), to_hex(*secondary), to_hex(*accent))

    if ranked:
        colors = [bucket.color for bucket in ranked[:3]]
        while len(colors) < 3:
            colors.append(colors[-1])
        return ExtractedPalette(*(to_hex(*color) for color in colors))

    return FALLBACK_PALETTE


class ExtractionThread(QThread):
    """Background thread for palette extraction to avoid blocking UI.

    AIDEV-NOTE: generation identifies the upload that started this thread.
    The receiver drops results whose generation is no longer current, so
    a slow decode never overwrites suggestions for a newer upload.
    """

    finished_palette = pyqtSignal(int, object)  # generation, ExtractedPalette

    def __init__(
        self,
        image_bytes: bytes,
        generation: int,
        filter_brightness: bool = True,
    ):
        super().__init__()
        self.image_bytes = image_bytes
        self.generation = generation
        self.filter_brightness = filter_brightness

    def run(self):
        """Execute extraction in background."""
        palette = extract_palette(
            self.image_bytes, filter_brightness=self.filter_brightness
        )
        if self.isInterruptionRequested():
            return
        self.finished_palette.emit(self.generation, palette)


class PaletteExtractor(QObject):
    """Runs one extraction at a time; a new request supersedes the last.

    AIDEV-NOTE: Superseded threads are interrupted, never waited on from
    the GUI thread, and kept referenced until they exit (a QThread that is
    garbage collected while running aborts the process).
    """

    palette_ready = pyqtSignal(object)  # ExtractedPalette

    def __init__(self, filter_brightness: bool = True, parent: "QObject | None" = None):
        super().__init__(parent)
        self.filter_brightness = filter_brightness
        self.generation = 0
        self.thread: "ExtractionThread | None" = None
        self.retired_threads: "list[ExtractionThread]" = []

    def start(self, image_bytes: bytes) -> int:
        """Extract in the background; returns the request's generation."""
        self.cancel()

        thread = ExtractionThread(
            image_bytes, self.generation, filter_brightness=self.filter_brightness
        )
        thread.finished_palette.connect(self.on_thread_result)
        thread.finished.connect(self._prune_retired)
        self.thread = thread
        print(f"Extracting palette (request {self.generation})")
        thread.start()
        return self.generation

    def cancel(self):
        """Invalidate the current request; its result will be ignored."""
        self.generation += 1
        thread = self.thread
        self.thread = None
        if thread is not None and not thread.isFinished():
            thread.requestInterruption()
            self.retired_threads.append(thread)
        self._prune_retired()

    def shutdown(self):
        """Stop everything and block until all threads have exited."""
        self.cancel()
        for thread in list(self.retired_threads):
            thread.wait()
        self.retired_threads.clear()

    def on_thread_result(self, generation: int, palette: ExtractedPalette):
        if generation != self.generation:
            print(f"Dropping stale palette from request {generation}")
            return
        self.palette_ready.emit(palette)

    def _prune_retired(self):
        self.retired_threads = [t for t in self.retired_threads if not t.isFinished()]
