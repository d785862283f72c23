from typing import Optional

from textual.widgets import DataTable

from mailpane.core.facade import MessageFacade
from mailpane.core.models.message import Folder, Message
from mailpane.tui.events import FolderSelected, MessageModified, MessageOpened
from mailpane.tui.navigation import FOLDER_VIEW_NAME
from mailpane.utils.errors import (
    ErrorHandler,
    MailpaneError,
    NavigationError,
    format_error_message,
)
from mailpane.utils.logging import get_logger

logger = get_logger(__name__)

UNREAD_MARK = "●"
FLAG_MARK = "⚑"


def status_marks(message: Message) -> str:
    return (UNREAD_MARK if not message.is_read else " ") + (
        FLAG_MARK if message.is_flagged else " "
    )


class FolderView(DataTable):
    """Message list of one folder."""

    VIEW_NAME = FOLDER_VIEW_NAME

    def __init__(self, facade: MessageFacade, **kwargs):
        super().__init__(cursor_type="row", zebra_stripes=True, **kwargs)
        self.facade = facade
        self.folder: Optional[Folder] = None
        self.messages: dict[str, Message] = {}

    def on_mount(self) -> None:
        self._ensure_columns()

    def _ensure_columns(self) -> None:
        if self.columns:
            return
        self.add_column("", key="status")
        self.add_column("From", key="sender")
        self.add_column("Subject", key="subject")
        self.add_column("Received", key="received")

    async def enter(self, parameters: str) -> None:
        """Open the folder named by ``parameters``."""
        try:
            folder = Folder.from_string(parameters)
        except ValueError as e:
            raise NavigationError(str(e), details={"folder": parameters}) from e

        await self.load_folder(folder)
        self.post_message(FolderSelected(folder))

    async def load_folder(self, folder: Folder) -> None:
        """Replace the rows with the contents of ``folder``."""
        self._ensure_columns()
        self.folder = folder
        self.clear()
        self.messages = {}

        for message in await self.facade.list_folder(folder):
            key = str(message.id)
            self.messages[key] = message
            self.add_row(
                status_marks(message),
                message.sender,
                message.subject,
                message.received_at.strftime("%Y-%m-%d %H:%M"),
                key=key,
            )

        logger.debug(f"Loaded {len(self.messages)} messages from {folder.value}")

    def current_message(self) -> Optional[Message]:
        if self.row_count == 0:
            return None
        row_key = self.coordinate_to_cell_key(self.cursor_coordinate).row_key
        return self.messages.get(row_key.value)

    async def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        message = self.messages.get(event.row_key.value)
        if message is None:
            return

        self.post_message(MessageOpened(message))
        if message.is_read:
            return

        try:
            updated = await self.facade.mark_as_read(message.id)
        except MailpaneError as e:
            ErrorHandler.handle(e, context="Marking message read", log_traceback=False)
            self.notify(format_error_message(e), severity="error")
            return

        self._changed(updated)

    async def toggle_read(self) -> None:
        message = self.current_message()
        if message is None:
            return
        if message.is_read:
            updated = await self.facade.mark_as_unread(message.id)
        else:
            updated = await self.facade.mark_as_read(message.id)
        self._changed(updated)

    async def toggle_flag(self) -> None:
        message = self.current_message()
        if message is None:
            return
        self._changed(await self.facade.toggle_flag(message.id))

    def _changed(self, message: Message) -> None:
        key = str(message.id)
        if self.folder is Folder.FLAGGED and not message.is_flagged:
            self.messages.pop(key, None)
            self.remove_row(key)
        else:
            self.messages[key] = message
            self.update_cell(key, "status", status_marks(message))

        self.post_message(MessageModified(message))
