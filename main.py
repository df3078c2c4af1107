"""
Main entry point for the Wellington Trains application.

This module sets up logging, loads the configuration, and starts the main
window. The train data is loaded in the background once the window is shown.
"""

import logging
import os
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication, QMessageBox
from PySide6.QtGui import QIcon

from wellington_trains.core.services.flat_file_repository import CatalogLoadError
from wellington_trains.core.services.service_factory import ServiceFactory
from wellington_trains.managers.config_manager import ConfigManager, ConfigurationError
from wellington_trains.ui.main_window import MainWindow
from version import (
    __version__,
    __app_name__,
    __app_display_name__,
    __company__,
)


def get_log_directory() -> Path:
    """Get the platform log directory."""
    if sys.platform == "darwin":  # macOS
        return Path.home() / "Library" / "Logs" / "WellingtonTrains"
    elif sys.platform == "win32":  # Windows
        return Path(os.environ.get("APPDATA", Path.home())) / "WellingtonTrains" / "logs"
    else:  # Linux and others
        return Path.home() / ".local" / "share" / "wellington_trains" / "logs"


def setup_logging(level: str = "WARNING"):
    """
    Setup application logging with file and console output.

    Args:
        level: Root log level name
    """
    log_dir = get_log_directory()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "wellington_trains.log"

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.FileHandler(str(log_file)), logging.StreamHandler()],
        force=True,
    )


def setup_application_icon(app: QApplication):
    """
    Setup application icon using Unicode train emoji.

    Args:
        app: QApplication instance
    """
    from PySide6.QtGui import QPixmap, QPainter, QFont
    from PySide6.QtCore import Qt

    pixmap = QPixmap(64, 64)
    pixmap.fill(Qt.GlobalColor.transparent)

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    font = QFont()
    font.setPointSize(48)
    painter.setFont(font)
    painter.drawText(pixmap.rect(), Qt.AlignmentFlag.AlignCenter, "🚆")
    painter.end()

    app.setWindowIcon(QIcon(pixmap))


def main():
    """Main application entry point."""
    app = QApplication(sys.argv)
    app.setApplicationName(__app_name__)
    app.setApplicationDisplayName(__app_display_name__)
    app.setApplicationVersion(__version__)
    app.setOrganizationName(__company__)
    app.setQuitOnLastWindowClosed(True)

    try:
        config_manager = ConfigManager()
        config = config_manager.load_config()
    except ConfigurationError as e:
        setup_logging()
        logging.getLogger(__name__).error(f"Configuration error: {e}")
        msg_box = QMessageBox()
        msg_box.setIcon(QMessageBox.Icon.Critical)
        msg_box.setWindowTitle("Configuration Error")
        msg_box.setText(str(e))
        msg_box.exec()
        sys.exit(1)

    setup_logging(config.logging.level)
    logger = logging.getLogger(__name__)
    logger.warning(f"Starting {__app_name__} v{__version__}")

    try:
        setup_application_icon(app)

        window = MainWindow(config_manager)
        window.show()

        try:
            repository = ServiceFactory(config.data.data_directory).get_data_repository()
        except CatalogLoadError as e:
            logger.error(f"Data directory unavailable: {e}")
            window.on_catalog_failed(f"Error loading file: {e}")
        else:
            window.start_loading(repository)

        exit_code = app.exec()
        logger.info(f"Application exiting with code {exit_code}")
        sys.exit(exit_code)

    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
