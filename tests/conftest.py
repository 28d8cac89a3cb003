"""Shared fixtures for QR Studio tests."""

import io

import pytest
from PIL import Image
from PyQt6.QtCore import QCoreApplication


def png_bytes(image: Image.Image) -> bytes:
    """Encode a PIL image as PNG file contents."""
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture(scope="session")
def qt_app():
    """Core application for QObject signal tests (no display needed)."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app


@pytest.fixture
def solid_png():
    """Factory for PNG bytes of a single-color image."""

    def make(color, size=(64, 64), mode="RGBA"):
        return png_bytes(Image.new(mode, size, color))

    return make


@pytest.fixture
def red_logo_bytes(solid_png):
    return solid_png((224, 0, 0, 255), size=(40, 40))
