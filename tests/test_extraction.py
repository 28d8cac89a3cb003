"""Tests for background palette extraction and stale-result handling."""

import pytest
from PyQt6.QtCore import QCoreApplication, Qt

from image_processing import ExtractionThread, PaletteExtractor, extract_palette
from settings_store import SettingsStore


@pytest.fixture
def blue_logo_bytes(solid_png):
    return solid_png((0, 0, 224, 255), size=(40, 40))


@pytest.fixture
def extractor(qt_app):
    extractor = PaletteExtractor()
    yield extractor
    extractor.shutdown()


@pytest.fixture
def store(qt_app, extractor):
    store = SettingsStore()
    extractor.palette_ready.connect(store.set_palette)
    return store


def drain(threads):
    """Wait for worker threads, then deliver their queued signals."""
    for thread in threads:
        if thread is not None:
            thread.wait()
    QCoreApplication.processEvents()


class TestExtractionThread:
    def test_emits_generation_and_palette(self, qt_app, red_logo_bytes):
        received = []
        thread = ExtractionThread(red_logo_bytes, 7)
        thread.finished_palette.connect(
            lambda generation, palette: received.append((generation, palette)),
            type=Qt.ConnectionType.DirectConnection,
        )

        thread.start()
        thread.wait()

        assert received == [(7, extract_palette(red_logo_bytes))]


class TestPaletteExtractor:
    def test_generations_increase(self, extractor, red_logo_bytes):
        first = extractor.start(red_logo_bytes)
        first_thread = extractor.thread
        second = extractor.start(red_logo_bytes)

        assert second > first
        drain([first_thread, extractor.thread])

    def test_result_reaches_store(self, extractor, store, red_logo_bytes):
        extractor.start(red_logo_bytes)
        drain([extractor.thread])

        assert store.palette == extract_palette(red_logo_bytes)

    def test_newer_upload_wins(self, extractor, store, red_logo_bytes, blue_logo_bytes):
        received = []
        extractor.palette_ready.connect(received.append)

        first = extractor.start(red_logo_bytes)
        first_thread = extractor.thread
        extractor.start(blue_logo_bytes)
        drain([first_thread, extractor.thread])

        blue = extract_palette(blue_logo_bytes)
        assert store.palette == blue
        assert received == [blue]

        # A slow result from the first upload arriving last changes nothing
        extractor.on_thread_result(first, extract_palette(red_logo_bytes))
        assert store.palette == blue
        assert received == [blue]

    def test_cancel_discards_running_result(self, extractor, store, red_logo_bytes):
        extractor.start(red_logo_bytes)
        running = extractor.thread

        extractor.cancel()
        drain([running])

        assert store.palette is None
        assert extractor.thread is None

    def test_removing_logo_clears_suggestions(self, extractor, store, red_logo_bytes):
        generation = extractor.start(red_logo_bytes)
        drain([extractor.thread])
        assert store.palette is not None

        # Same sequence the controls panel runs when the logo is removed
        extractor.cancel()
        store.update(logo=None)
        store.set_palette(None)
        extractor.on_thread_result(generation, extract_palette(red_logo_bytes))

        assert store.palette is None

    def test_retired_threads_are_released(self, extractor, red_logo_bytes):
        threads = []
        for _ in range(3):
            extractor.start(red_logo_bytes)
            threads.append(extractor.thread)

        drain(threads)

        assert extractor.retired_threads == []

    def test_shutdown_waits_for_everything(self, extractor, red_logo_bytes):
        extractor.start(red_logo_bytes)
        running = extractor.thread

        extractor.shutdown()

        assert running.isFinished()
        assert extractor.retired_threads == []
