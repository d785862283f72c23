from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button

from mailpane.core.facade import MessageFacade
from mailpane.core.models.message import Folder
from mailpane.core.sample_data import DatabaseInitialization
from mailpane.tui.badges import BadgeRegistry, BadgeSupplier
from mailpane.tui.events import FolderSelected, MessageModified, MessageOpened
from mailpane.tui.layout.folder_view import FolderView
from mailpane.tui.layout.sidebar import MenuButton, Sidebar
from mailpane.tui.navigation import Navigator, View, folder_route
from mailpane.tui.theme import ThemeManager
from mailpane.tui.widgets.hint_bar import HintBar
from mailpane.tui.widgets.message_viewer import MessageViewer
from mailpane.utils.errors import ErrorHandler, MailpaneError, format_error_message
from mailpane.utils.logging import get_logger

logger = get_logger(__name__)


class MailApp(App):
    CSS_PATH = "styles.tcss"
    TITLE = "mailpane"

    BINDINGS = [
        Binding("1", "open_folder('inbox')", "Inbox", show=False),
        Binding("2", "open_folder('drafts')", "Drafts", show=False),
        Binding("3", "open_folder('sent')", "Sent", show=False),
        Binding("4", "open_folder('junk')", "Junk", show=False),
        Binding("5", "open_folder('trash')", "Trash", show=False),
        Binding("6", "open_folder('flagged')", "Flagged", show=False),
        Binding("r", "toggle_read", "Read/Unread"),
        Binding("f", "toggle_flag", "Flag"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        facade: MessageFacade,
        initializer: Optional[DatabaseInitialization] = None,
        start_route: Optional[str] = None,
        color_scheme: str = "dark",
        show_hint_bar: bool = True,
    ):
        super().__init__()
        self.facade = facade
        self.initializer = initializer
        self.start_route = start_route
        self.color_scheme = color_scheme
        self.show_hint_bar = show_hint_bar
        self.theme_manager = ThemeManager(app=self)
        self.badges = BadgeRegistry()
        self.navigator = Navigator(self.provide_view)
        self.sidebar = Sidebar()
        self.folder_view = FolderView(facade)
        self.message_viewer = MessageViewer()

    def compose(self) -> ComposeResult:
        yield Horizontal(
            self.sidebar,
            Vertical(self.folder_view, self.message_viewer, id="content"),
            id="main",
        )
        if self.show_hint_bar:
            yield HintBar()

    async def on_mount(self) -> None:
        self.theme_manager.apply_theme(self.color_scheme)

        if self.initializer is not None:
            try:
                await self.initializer.init_database_if_empty()
            except MailpaneError as e:
                ErrorHandler.handle(e, context="Initializing sample data")
                self.notify(format_error_message(e), severity="error")

        self.setup_menu_buttons()
        await self.refresh_badges()

        if self.start_route:
            await self.navigate(self.start_route)
        if not self.navigator.state:
            await self.navigate_to_folder(Folder.INBOX)

        self.folder_view.focus()

    def provide_view(self, view_name: str) -> Optional[View]:
        if view_name == FolderView.VIEW_NAME:
            return self.folder_view
        return None

    # --- Menu wiring ---

    def setup_menu_buttons(self) -> None:
        self.map_button(
            self.sidebar.button_for(Folder.INBOX),
            Folder.INBOX,
            self.facade.count_all_unread,
        )
        self.map_button(self.sidebar.button_for(Folder.DRAFTS), Folder.DRAFTS)
        self.map_button(self.sidebar.button_for(Folder.SENT), Folder.SENT)
        self.map_button(self.sidebar.button_for(Folder.JUNK), Folder.JUNK)
        self.map_button(self.sidebar.button_for(Folder.TRASH), Folder.TRASH)
        self.map_button(
            self.sidebar.button_for(Folder.FLAGGED),
            Folder.FLAGGED,
            self.facade.count_flagged_unread,
        )
        self.badges.freeze()

    def map_button(
        self,
        button: MenuButton,
        folder: Folder,
        badge_supplier: Optional[BadgeSupplier] = None,
    ) -> None:
        """Tag a menu button with its folder and optional badge query."""
        button.folder = folder
        if badge_supplier is not None:
            self.badges.register(folder, badge_supplier)

    async def refresh_badges(self) -> bool:
        try:
            await self.sidebar.refresh_badges(self.badges)
            return True

        except MailpaneError as e:
            ErrorHandler.handle(e, context="Refreshing badges", log_traceback=False)
            self.notify(format_error_message(e), severity="error")
            return False

    # --- Navigation ---

    async def navigate(self, route: str) -> bool:
        try:
            await self.navigator.navigate_to(route)
            return True

        except MailpaneError as e:
            ErrorHandler.handle(e, context=f"Navigating to {route}", log_traceback=False)
            self.notify(format_error_message(e), severity="error")
            return False

    async def navigate_to_folder(self, folder: Folder | str) -> bool:
        return await self.navigate(folder_route(folder))

    async def action_open_folder(self, folder_name: str) -> None:
        await self.navigate_to_folder(folder_name)

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        button = event.button
        if isinstance(button, MenuButton) and button.folder is not None:
            event.stop()
            await self.navigate_to_folder(button.folder)

    # --- Observers ---

    def on_folder_selected(self, event: FolderSelected) -> None:
        self.sidebar.folder_selected(event.folder)
        self.message_viewer.show_message(None)
        self.sub_title = event.folder.display_name

    async def on_message_modified(self, event: MessageModified) -> None:
        await self.refresh_badges()

    def on_message_opened(self, event: MessageOpened) -> None:
        self.message_viewer.show_message(event.mail)

    # --- Message actions ---

    async def action_toggle_read(self) -> None:
        await self._run_message_action(self.folder_view.toggle_read, "Toggling read state")

    async def action_toggle_flag(self) -> None:
        await self._run_message_action(self.folder_view.toggle_flag, "Toggling flag")

    async def _run_message_action(self, action, context: str) -> None:
        try:
            await action()
        except MailpaneError as e:
            ErrorHandler.handle(e, context=context, log_traceback=False)
            self.notify(format_error_message(e), severity="error")
