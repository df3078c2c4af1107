"""
Theme management for the Wellington Trains application.

This module handles switching between light and dark themes and provides
the stylesheet for the main window.
"""

from PySide6.QtCore import QObject, Signal


class ThemeManager(QObject):
    """
    Manages application themes and theme switching.

    Provides functionality to switch between light and dark themes,
    emit signals when themes change, and build theme stylesheets.
    """

    # Signal emitted when theme changes (theme_name: str)
    theme_changed = Signal(str)

    def __init__(self, theme: str = "dark"):
        """
        Initialize the theme manager.

        Args:
            theme: Initial theme name ("dark" or "light")
        """
        super().__init__()
        self.current_theme = theme if theme in ("dark", "light") else "dark"
        self._theme_colors = self._initialize_theme_colors()

    def _initialize_theme_colors(self) -> dict:
        """Initialize color palettes for both themes."""
        return {
            "dark": {
                "background_primary": "#1a1a1a",
                "background_secondary": "#2d2d2d",
                "background_hover": "#404040",
                "text_primary": "#ffffff",
                "text_secondary": "#b0b0b0",
                "text_disabled": "#666666",
                "success": "#4caf50",
                "error": "#f44336",
                "primary_accent": "#1976d2",
                "border_primary": "#404040",
            },
            "light": {
                "background_primary": "#ffffff",
                "background_secondary": "#f5f5f5",
                "background_hover": "#eeeeee",
                "text_primary": "#212121",
                "text_secondary": "#757575",
                "text_disabled": "#bdbdbd",
                "success": "#388e3c",
                "error": "#d32f2f",
                "primary_accent": "#1976d2",
                "border_primary": "#e0e0e0",
            },
        }

    def switch_theme(self) -> None:
        """Switch between light and dark themes."""
        self.current_theme = "light" if self.current_theme == "dark" else "dark"
        self.theme_changed.emit(self.current_theme)

    def set_theme(self, theme_name: str) -> None:
        """
        Set specific theme.

        Args:
            theme_name: Theme name ("dark" or "light")
        """
        if theme_name in ["dark", "light"] and theme_name != self.current_theme:
            self.current_theme = theme_name
            self.theme_changed.emit(self.current_theme)

    def get_theme_icon(self) -> str:
        """Get the theme toggle button icon."""
        return "☀️" if self.current_theme == "dark" else "🌙"

    def get_color(self, color_key: str) -> str:
        """
        Get color value for current theme.

        Args:
            color_key: Color key from theme palette

        Returns:
            str: Color value (hex code)
        """
        return self._theme_colors[self.current_theme].get(color_key, "#000000")

    def get_current_colors(self) -> dict:
        return self._theme_colors[self.current_theme]

    def is_dark_theme(self) -> bool:
        return self.current_theme == "dark"

    def get_main_window_stylesheet(self) -> str:
        """
        Get main window stylesheet for current theme.

        Returns:
            str: CSS stylesheet for the main window and its controls
        """
        colors = self.get_current_colors()

        return f"""
        QMainWindow, QWidget {{
            background-color: {colors['background_primary']};
            color: {colors['text_primary']};
        }}

        QPushButton {{
            background-color: {colors['primary_accent']};
            color: #ffffff;
            border: none;
            border-radius: 6px;
            padding: 6px 12px;
            text-align: left;
        }}

        QPushButton:hover {{
            background-color: {colors['background_hover']};
            color: {colors['text_primary']};
        }}

        QPushButton:disabled {{
            background-color: {colors['background_secondary']};
            color: {colors['text_disabled']};
        }}

        QComboBox {{
            background-color: {colors['background_secondary']};
            color: {colors['text_primary']};
            border: 1px solid {colors['border_primary']};
            border-radius: 4px;
            padding: 4px;
        }}

        QPlainTextEdit {{
            background-color: {colors['background_secondary']};
            color: {colors['text_primary']};
            border: 1px solid {colors['border_primary']};
            font-family: monospace;
        }}

        QStatusBar {{
            background-color: {colors['background_secondary']};
            color: {colors['text_secondary']};
            border-top: 1px solid {colors['border_primary']};
        }}
        """
