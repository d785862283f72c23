from typing import Optional

from textual.app import App

from mailpane.utils.logging import get_logger

logger = get_logger(__name__)


class ThemeManager:
    """Applies a named colour scheme to the application."""

    THEMES = {
        "dark": {
            "background": "#1e1e1e",
            "foreground": "#ffffff",
        },
        "light": {
            "background": "#ffffff",
            "foreground": "#1e1e1e",
        },
        "solarized": {
            "background": "#002b36",
            "foreground": "#93a1a1",
        },
    }

    def __init__(self, app: Optional[App] = None):
        self.app = app
        self.current_theme = "dark"

    def apply_theme(self, theme_name: str) -> bool:
        """Apply a theme across the app. Unknown names are ignored."""
        if theme_name not in self.THEMES:
            logger.warning(f"Unknown theme '{theme_name}', keeping {self.current_theme}")
            return False

        self.current_theme = theme_name
        theme = self.THEMES[theme_name]

        if self.app:
            self.app.screen.styles.background = theme["background"]
            self.app.screen.styles.color = theme["foreground"]
            self.app.refresh(layout=True)

        return True
