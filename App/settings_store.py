"""Observable holder for the configurator state."""

from dataclasses import replace

from PyQt6.QtCore import QObject, pyqtSignal

from models import ExtractedPalette, FrameDecoration, QRSettings


class SettingsStore(QObject):
    """Single owner of settings, suggested palette and frame decoration.

    AIDEV-NOTE: Every mutation goes through a setter that emits a signal
    synchronously, so listeners always see the state right after the
    change. Getters hand out copies; nobody else mutates shared state.
    """

    settings_changed = pyqtSignal(object)  # QRSettings snapshot
    palette_changed = pyqtSignal(object)  # ExtractedPalette | None
    decoration_changed = pyqtSignal(object)  # FrameDecoration snapshot

    def __init__(
        self,
        settings: QRSettings | None = None,
        decoration: FrameDecoration | None = None,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self._settings = settings or QRSettings()
        self._decoration = decoration or FrameDecoration()
        self._palette: ExtractedPalette | None = None

    # -------------------------------------------------------------
    # Snapshots
    # -------------------------------------------------------------

    @property
    def settings(self) -> QRSettings:
        return replace(self._settings)

    @property
    def decoration(self) -> FrameDecoration:
        return replace(self._decoration)

    @property
    def palette(self) -> ExtractedPalette | None:
        return self._palette

    # -------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------

    def update(self, **changes):
        """Apply field changes to the settings and notify.

        Raises:
            AttributeError: If a field name is not part of QRSettings
        """
        for key in changes:
            if not hasattr(self._settings, key):
                raise AttributeError(f"Unknown setting: {key}")

        updated = replace(self._settings, **changes)
        if updated == self._settings:
            return
        self._settings = updated
        self.settings_changed.emit(self.settings)

    def update_decoration(self, **changes):
        """Apply field changes to the frame decoration and notify."""
        updated = replace(self._decoration, **changes)
        if updated == self._decoration:
            return
        self._decoration = updated
        self.decoration_changed.emit(self.decoration)

    def set_palette(self, palette: ExtractedPalette | None):
        """Replace the suggested colors (None clears the swatches)."""
        if palette == self._palette:
            return
        self._palette = palette
        self.palette_changed.emit(palette)
