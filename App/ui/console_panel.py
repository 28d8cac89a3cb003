"""Console dock mirroring extraction and export diagnostics."""

import sys

from PyQt6.QtGui import QTextCursor
from PyQt6.QtWidgets import QGroupBox, QPushButton, QTextEdit, QVBoxLayout

from console_stream import ConsoleStream
from ui.styles import FONTS, SIZES


class ConsolePanel(QGroupBox):
    """Read-only log of print() diagnostics and UI messages.

    capture_stdout() routes sys.stdout through a ConsoleStream so output
    from the palette worker, renderer and exporter shows up here as well
    as in the terminal.
    """

    def __init__(self, parent=None):
        super().__init__(None, parent)
        self.stream: "ConsoleStream | None" = None
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout()

        self.console = QTextEdit()
        self.console.setReadOnly(True)
        self.console.setMinimumHeight(SIZES.CONSOLE_MIN_HEIGHT)
        self.console.setFont(FONTS.CONSOLE)
        layout.addWidget(self.console)

        clear_btn = QPushButton("Clear")
        clear_btn.clicked.connect(self.console.clear)
        layout.addWidget(clear_btn)

        self.setLayout(layout)

    def capture_stdout(self):
        """Mirror everything printed from now on into the console."""
        if self.stream is not None:
            return
        self.stream = ConsoleStream(passthrough=sys.stdout, parent=self)
        self.stream.text_written.connect(self.write_text)
        sys.stdout = self.stream

    def release_stdout(self):
        if self.stream is None:
            return
        if sys.stdout is self.stream:
            sys.stdout = self.stream.passthrough
        self.stream = None

    def write_text(self, text: str):
        """Insert raw stream text (print() writes the newline separately)."""
        cursor = self.console.textCursor()
        cursor.movePosition(QTextCursor.MoveOperation.End)
        cursor.insertText(text)
        self.console.setTextCursor(cursor)
        self._scroll_to_end()

    def append(self, message: str):
        """Add a UI message on its own line."""
        self.console.append(message)
        self._scroll_to_end()

    def _scroll_to_end(self):
        scrollbar = self.console.verticalScrollBar()
        if scrollbar:
            scrollbar.setValue(scrollbar.maximum())
