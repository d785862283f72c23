from typing import Optional

from textual.containers import Vertical
from textual.widget import Widget
from textual.widgets import Button, Static

from mailpane.core.models.message import Folder
from mailpane.tui.badges import BadgeRegistry, format_caption

SELECTED = "selected"


class MenuButton(Button):
    """Sidebar button tagged with the folder it opens."""

    def __init__(self, label: str, **kwargs):
        super().__init__(label, classes="menu-item", **kwargs)
        self._folder: Optional[Folder] = None
        self.badge_text = ""
        self.caption = label

    @property
    def folder(self) -> Optional[Folder]:
        return self._folder

    @folder.setter
    def folder(self, folder: Folder) -> None:
        if self._folder is not None and self._folder is not folder:
            raise ValueError(f"{self.id} is already tagged with {self._folder.value}")
        self._folder = folder

    def set_badge(self, badge_text: str) -> None:
        if self._folder is None:
            return
        self.badge_text = badge_text
        self.caption = format_caption(self._folder, badge_text)
        self.label = self.caption


def adjust_style_by_folder(widget: Widget, folder: Optional[Folder]) -> None:
    """Add the selected class to a menu button of ``folder``, remove it elsewhere."""
    if isinstance(widget, MenuButton):
        widget.set_class(folder is not None and widget.folder is folder, SELECTED)


class Sidebar(Vertical):
    """App sidebar with one menu button per folder."""

    def compose(self):
        yield Static("📫 mailpane", classes="sidebar-title")
        for folder in Folder:
            yield MenuButton(folder.display_name, id=f"{folder.value}-button")

    @property
    def menu_items(self) -> list[Widget]:
        return list(self.children)

    def button_for(self, folder: Folder) -> MenuButton:
        return self.query_one(f"#{folder.value}-button", MenuButton)

    def folder_selected(self, folder: Optional[Folder]) -> None:
        for widget in self.menu_items:
            adjust_style_by_folder(widget, folder)

    async def refresh_badges(self, registry: BadgeRegistry) -> None:
        for widget in self.menu_items:
            if isinstance(widget, MenuButton) and widget.folder is not None:
                widget.set_badge(await registry.badge_text(widget.folder))
