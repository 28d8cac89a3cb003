"""Export of the configured symbol to an image file.

This module decides between direct symbol export and capturing the whole
decorated preview (symbol + frame + caption).
"""

import os
import tempfile
from pathlib import Path
from typing import Callable

from PIL import Image

from models import (
    PREVIEW_SIZE,
    ExportFormat,
    ExportResult,
    FrameDecoration,
    QRSettings,
    RenderConfiguration,
)
from qr_rendering import QRRenderer, build_render_config


def compute_capture_scale(target_size: int, rendered_width: int) -> float:
    """Scale factor that brings the rendered preview up to target_size.

    Never scales down; a missing width counts as already large enough.
    """
    if rendered_width <= 0:
        return 1.0
    return max(1.0, target_size / rendered_width)


def suggested_export_path(directory: "str | Path | None", fmt: ExportFormat) -> Path:
    """Default save-dialog path: qr-code.<ext> in the last export folder.

    Falls back to the home directory when the folder is unset or gone.
    """
    folder = Path.home()
    if isinstance(directory, (str, Path)) and directory and Path(directory).is_dir():
        folder = Path(directory)
    return folder / f"qr-code.{fmt.value}"


class ExportCoordinator:
    """Renders and saves the symbol at a requested resolution.

    AIDEV-NOTE: Without decoration the renderer writes the file directly
    (PNG or SVG). With a frame or caption the preview subtree is captured
    instead, which only yields rasters, so the format is forced to PNG.
    """

    def __init__(
        self,
        capture: "Callable[[float], Image.Image] | None" = None,
        rendered_width: "Callable[[], int] | None" = None,
        renderer_factory: "Callable[[RenderConfiguration], QRRenderer]" = QRRenderer,
    ):
        """Initialize export coordinator.

        Args:
            capture: Rasterizes the decorated preview at a scale factor
            rendered_width: Current on-screen width of the decorated preview
            renderer_factory: Builds the renderer used for direct export
        """
        self.capture = capture
        self.rendered_width = rendered_width or (lambda: PREVIEW_SIZE)
        self.renderer_factory = renderer_factory

    def export(
        self,
        settings: QRSettings,
        decoration: FrameDecoration,
        target_size: int,
        fmt: ExportFormat,
        path: "str | Path",
    ) -> ExportResult:
        """Export the current symbol.

        Args:
            settings: Settings snapshot
            decoration: Frame/caption snapshot
            target_size: Requested output width in pixels
            fmt: Requested file format
            path: Destination path (suffix follows the effective format)

        Returns:
            ExportResult; failures are reported here, never raised
        """
        if decoration.is_active:
            fmt = ExportFormat.PNG

        target = Path(path).with_suffix(f".{fmt.value}")
        staging: "Path | None" = None

        try:
            # AIDEV-NOTE: Staged beside the target and swapped in whole; a failed
            # export leaves any earlier file untouched
            with tempfile.NamedTemporaryFile(
                dir=target.parent, prefix=".qr-export-", suffix=target.suffix, delete=False
            ) as handle:
                staging = Path(handle.name)

            if decoration.is_active:
                self._export_capture(staging, target_size)
            else:
                config = build_render_config(settings, size=target_size)
                self.renderer_factory(config).export(staging, fmt)

            os.replace(staging, target)
            print(f"Saved {target}")
            return ExportResult(success=True, path=target)

        except Exception as e:
            print(f"Export failed: {e}")
            if staging is not None and staging.exists():
                staging.unlink()
            return ExportResult(success=False, error=str(e))

    def _export_capture(self, target: Path, target_size: int):
        if self.capture is None:
            raise RuntimeError("No preview capture available for framed export")

        scale = compute_capture_scale(target_size, self.rendered_width())
        print(f"Capturing decorated preview at {scale:.2f}x")
        image = self.capture(scale)
        image.save(target, format="PNG")
        print(f"Exported {image.width}x{image.height} png to {target}")
