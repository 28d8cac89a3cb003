"""Live preview of the styled symbol with its frame and caption."""

from typing import Callable, Optional

from PIL import Image, ImageQt
from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QColor, QImage, QPainter, QPainterPath, QPen, QPixmap
from PyQt6.QtWidgets import QGroupBox, QLabel, QVBoxLayout, QWidget

from models import PREVIEW_SIZE, FrameDecoration
from qr_rendering.frame import FrameLayout, frame_layout
from ui.styles import FONTS, SIZES


class FrameWidget(QWidget):
    """Paints background, symbol, caption band and border.

    AIDEV-NOTE: Everything is painted in paintEvent so render() into a
    scaled QPainter reproduces the preview exactly for framed export.
    """

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.decoration = FrameDecoration()
        self.bg_color = "#FFFFFF"
        self.symbol: Optional[QImage] = None
        self.layout_info: FrameLayout = frame_layout(self.decoration, PREVIEW_SIZE)
        self._relayout()

    def set_symbol(self, image: Image.Image):
        """Show a freshly rendered symbol."""
        self.symbol = ImageQt.ImageQt(image.convert("RGBA")).copy()
        self.update()

    def set_decoration(self, decoration: FrameDecoration, bg_color: str):
        self.decoration = decoration
        self.bg_color = bg_color
        self._relayout()
        self.update()

    def _relayout(self):
        self.layout_info = frame_layout(self.decoration, PREVIEW_SIZE)
        self.setFixedSize(self.layout_info.width, self.layout_info.height)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
        self.paint_contents(painter, self.symbol)
        painter.end()

    def paint_contents(self, painter: QPainter, symbol: Optional[QImage]):
        """Paint at 1x layout coordinates (callers may pre-scale painter)."""
        info = self.layout_info
        deco = self.decoration
        frame_color = QColor(deco.frame_color)
        outer = QRectF(0, 0, info.width, info.height)

        # Background, clipped to the frame shape
        clip = QPainterPath()
        clip.addRoundedRect(outer, info.radius, info.radius)
        painter.setClipPath(clip)
        painter.fillRect(outer, QColor(self.bg_color))

        if symbol is not None:
            x, y, w, h = info.symbol_rect
            painter.drawImage(QRectF(x, y, w, h), symbol)

        if info.caption_rect is not None:
            x, y, w, h = info.caption_rect
            band = QRectF(x, y, w, h)
            if deco.has_frame:
                painter.fillRect(band, frame_color)
            painter.setPen(QColor(deco.caption_color))
            painter.setFont(FONTS.CAPTION)
            painter.drawText(band, Qt.AlignmentFlag.AlignCenter, deco.caption_text)

        painter.setClipping(False)

        if info.border:
            half = info.border / 2
            painter.setPen(QPen(frame_color, info.border))
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawRoundedRect(
                outer.adjusted(half, half, -half, -half), info.radius, info.radius
            )

    def capture(self, scale: float, symbol: Optional[Image.Image] = None) -> Image.Image:
        """Rasterize the decorated preview at scale.

        Args:
            scale: Output scale factor relative to the on-screen size
            symbol: Higher resolution symbol to paint instead of the preview

        Returns:
            RGBA PIL image
        """
        info = self.layout_info
        pixmap = QPixmap(round(info.width * scale), round(info.height * scale))
        if pixmap.isNull():
            raise RuntimeError("Could not allocate capture surface")
        pixmap.fill(Qt.GlobalColor.transparent)

        image = self.symbol
        if symbol is not None:
            image = ImageQt.ImageQt(symbol.convert("RGBA")).copy()

        painter = QPainter(pixmap)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
        painter.scale(scale, scale)
        self.paint_contents(painter, image)
        painter.end()

        return ImageQt.fromqpixmap(pixmap).convert("RGBA")


class PreviewPanel(QGroupBox):
    """Panel hosting the frame widget."""

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__("Live Preview", parent)
        # Supplies a symbol rendered at a given pixel size for sharp captures
        self.symbol_provider: Optional[Callable[[int], Image.Image]] = None
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.frame_widget = FrameWidget()
        self.setMinimumSize(*SIZES.PREVIEW_MIN_SIZE)
        layout.addWidget(self.frame_widget, alignment=Qt.AlignmentFlag.AlignCenter)

        hint = QLabel("Scan with any QR reader to test your code")
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        hint.setStyleSheet("color: gray;")
        layout.addWidget(hint)

        self.setLayout(layout)

    def show_symbol(self, image: Image.Image):
        """Renderer listener: display the latest render."""
        self.frame_widget.set_symbol(image)

    def set_decoration(self, decoration: FrameDecoration, bg_color: str):
        self.frame_widget.set_decoration(decoration, bg_color)

    def rendered_width(self) -> int:
        return self.frame_widget.layout_info.width

    def capture(self, scale: float) -> Image.Image:
        """Capture the decorated preview for export."""
        symbol = None
        if self.symbol_provider is not None and scale > 1:
            symbol = self.symbol_provider(round(PREVIEW_SIZE * scale))
        return self.frame_widget.capture(scale, symbol)
