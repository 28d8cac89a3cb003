"""File-like bridge that forwards print() output to Qt."""

from typing import TextIO

from PyQt6.QtCore import QObject, pyqtSignal


class ConsoleStream(QObject):
    """Stands in for sys.stdout and emits every write as a signal.

    AIDEV-NOTE: Worker threads print too. Emitting is thread-safe and the
    console slot runs queued on the GUI thread, so nothing here touches
    widgets. Writes are also passed through to the original stream.
    """

    text_written = pyqtSignal(str)

    def __init__(self, passthrough: "TextIO | None" = None, parent: "QObject | None" = None):
        super().__init__(parent)
        self.passthrough = passthrough

    def write(self, text: str) -> int:
        if self.passthrough is not None:
            self.passthrough.write(text)
        if text:
            self.text_written.emit(text)
        return len(text)

    def flush(self):
        if self.passthrough is not None:
            self.passthrough.flush()

    def isatty(self) -> bool:
        return False
