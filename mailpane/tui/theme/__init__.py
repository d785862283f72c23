from .theme_manager import ThemeManager

__all__ = ["ThemeManager"]
