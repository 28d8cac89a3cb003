"""QR Studio - Main entry point."""

import sys

from PyQt6.QtWidgets import QApplication

from ui.main_window import QRStudioWindow


def main():
    """Launch the QR Studio application."""
    app = QApplication(sys.argv)

    app.setApplicationDisplayName("QR Studio")
    app.setApplicationName("QRStudio")
    app.setOrganizationName("Good in Theory Studios")

    window = QRStudioWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
