"""
Main window for the Wellington Trains application.

This module contains the main application window: closed station and line
selectors, one button per query, and a read-only text pane for results.
"""

import logging
from typing import Callable, List, Optional, Tuple

from PySide6.QtCore import Slot
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QComboBox, QFormLayout, QHBoxLayout, QLabel, QMainWindow, QMessageBox,
    QPlainTextEdit, QPushButton, QVBoxLayout, QWidget
)

from version import __app_display_name__, get_about_text
from ..core.interfaces.i_catalog_repository import ICatalogRepository
from ..core.models.catalog import Catalog
from ..core.services.catalog_service import CatalogService
from ..managers.config_manager import ConfigManager
from ..managers.theme_manager import ThemeManager
from .formatters.catalog_formatter import CatalogFormatter
from .workers.catalog_load_worker import CatalogLoadWorker

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Main application window.

    All selectors and buttons stay disabled until a catalog has been loaded.
    """

    def __init__(self, config_manager: Optional[ConfigManager] = None,
                 theme_manager: Optional[ThemeManager] = None):
        """
        Initialize the main window.

        Args:
            config_manager: Shared configuration manager
            theme_manager: Theme manager; created from the config theme if None
        """
        super().__init__()
        self.config_manager = config_manager
        self.config = config_manager.load_config() if config_manager else None

        theme = self.config.display.theme if self.config else "dark"
        self.theme_manager = theme_manager or ThemeManager(theme)

        self.catalog_service: Optional[CatalogService] = None
        self.formatter: Optional[CatalogFormatter] = None
        self.load_worker: Optional[CatalogLoadWorker] = None
        self.action_buttons: List[QPushButton] = []

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self.apply_theme()
        self.set_controls_enabled(False)

        logger.debug("MainWindow initialized")

    def _setup_ui(self):
        """Set up the selectors, action buttons and output pane."""
        self.setWindowTitle(__app_display_name__)
        if self.config:
            self.resize(self.config.display.window_width, self.config.display.window_height)
        else:
            self.resize(900, 650)

        central = QWidget()
        layout = QHBoxLayout(central)

        controls = QVBoxLayout()

        selectors = QFormLayout()
        self.station_combo = QComboBox()
        self.second_station_combo = QComboBox()
        self.line_combo = QComboBox()
        selectors.addRow(QLabel("Station:"), self.station_combo)
        selectors.addRow(QLabel("To station:"), self.second_station_combo)
        selectors.addRow(QLabel("Train line:"), self.line_combo)
        controls.addLayout(selectors)

        for label, handler in self._action_definitions():
            button = QPushButton(label)
            button.clicked.connect(handler)
            controls.addWidget(button)
            self.action_buttons.append(button)

        controls.addStretch()
        layout.addLayout(controls, 3)

        self.output = QPlainTextEdit()
        self.output.setReadOnly(True)
        layout.addWidget(self.output, 5)

        self.setCentralWidget(central)
        self.statusBar().showMessage("Loading train data...")

    def _action_definitions(self) -> List[Tuple[str, Callable[[], None]]]:
        return [
            ("Display all Wellington Region stations", self.show_all_stations),
            ("Display all Wellington Region train lines", self.show_all_lines),
            ("Display train lines available at each station", self.show_lines_by_station),
            ("Display all stations by train line", self.show_stations_by_line),
            ("Display lines available at selected station", self.show_lines_at_station),
            ("Display all stations visited by selected line", self.show_stations_on_line),
            ("Display services on selected train line", self.show_services_on_line),
            ("Display service times at selected station", self.show_services_at_station),
            ("Plan route between two stations", self.plan_route),
        ]

    def _setup_menu(self):
        """Set up the View and Help menus."""
        view_menu = self.menuBar().addMenu("&View")
        self.theme_action = QAction(self.theme_manager.get_theme_icon() + " Toggle theme", self)
        self.theme_action.triggered.connect(self.toggle_theme)
        view_menu.addAction(self.theme_action)

        help_menu = self.menuBar().addMenu("&Help")
        about_action = QAction("About", self)
        about_action.triggered.connect(self.show_about_dialog)
        help_menu.addAction(about_action)

    def _connect_signals(self):
        self.theme_manager.theme_changed.connect(self._on_theme_changed)

    def set_controls_enabled(self, enabled: bool):
        """Enable or disable every selector and action button."""
        for widget in [self.station_combo, self.second_station_combo, self.line_combo]:
            widget.setEnabled(enabled)
        for button in self.action_buttons:
            button.setEnabled(enabled)

    def start_loading(self, repository: ICatalogRepository):
        """
        Load the catalog in the background.

        Args:
            repository: Repository to load from
        """
        self.set_controls_enabled(False)
        self.load_worker = CatalogLoadWorker(repository, self)
        self.load_worker.load_completed.connect(self.on_catalog_loaded)
        self.load_worker.load_failed.connect(self.on_catalog_failed)
        self.load_worker.start()

    @Slot(object)
    def on_catalog_loaded(self, catalog: Catalog):
        """Populate the selectors and enable the UI once the catalog is ready."""
        self.catalog_service = CatalogService(catalog)
        self.formatter = CatalogFormatter(self.catalog_service)

        self._fill_combo(self.station_combo, self.catalog_service.station_names())
        self._fill_combo(self.second_station_combo, self.catalog_service.station_names())
        self._fill_combo(self.line_combo, self.catalog_service.line_names())

        self.set_controls_enabled(True)
        self.output.setPlainText(self.formatter.load_summary())
        self.statusBar().showMessage(f"Loaded {catalog!r}")

    @Slot(str)
    def on_catalog_failed(self, message: str):
        """Report a load failure; the UI stays disabled."""
        self.output.setPlainText(message)
        self.statusBar().showMessage("Train data failed to load")
        self.show_error_message("Data Error", message)

    @staticmethod
    def _fill_combo(combo: QComboBox, names: List[str]):
        combo.clear()
        combo.addItems(names)

    def _show(self, text: str):
        self.output.setPlainText(text)

    def show_all_stations(self):
        self._show(self.formatter.all_stations())

    def show_all_lines(self):
        self._show(self.formatter.all_lines())

    def show_lines_by_station(self):
        self._show(self.formatter.lines_by_station())

    def show_stations_by_line(self):
        self._show(self.formatter.stations_by_line())

    def show_lines_at_station(self):
        self._show(self.formatter.lines_at_station(self.station_combo.currentText()))

    def show_stations_on_line(self):
        self._show(self.formatter.stations_on_line(self.line_combo.currentText()))

    def show_services_on_line(self):
        self._show(self.formatter.services_on_line(self.line_combo.currentText()))

    def show_services_at_station(self):
        self._show(self.formatter.services_at_station(self.station_combo.currentText()))

    def plan_route(self):
        self._show(self.formatter.route(self.station_combo.currentText(),
                                        self.second_station_combo.currentText()))

    def toggle_theme(self):
        """Switch theme and persist the choice."""
        self.theme_manager.switch_theme()
        if self.config_manager:
            self.config_manager.update_theme(self.theme_manager.current_theme)

    def _on_theme_changed(self, theme_name: str):
        self.apply_theme()
        self.theme_action.setText(self.theme_manager.get_theme_icon() + " Toggle theme")
        logger.debug(f"Theme changed to {theme_name}")

    def apply_theme(self):
        self.setStyleSheet(self.theme_manager.get_main_window_stylesheet())

    def show_about_dialog(self):
        QMessageBox.about(self, "About", get_about_text())

    def show_error_message(self, title: str, message: str):
        """
        Show error message dialog.

        Args:
            title: Dialog title
            message: Error message
        """
        msg_box = QMessageBox(self)
        msg_box.setIcon(QMessageBox.Icon.Critical)
        msg_box.setWindowTitle(title)
        msg_box.setText(message)
        msg_box.exec()

    def closeEvent(self, event):
        """Wait for a running load worker before closing."""
        if self.load_worker and self.load_worker.isRunning():
            self.load_worker.wait()
        super().closeEvent(event)
