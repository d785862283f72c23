"""Query and mutation interface the UI uses for messages."""

from typing import List

from mailpane.core.database.repositories.message import MessageRepository
from mailpane.core.models.message import Folder, Message
from mailpane.utils.errors import ErrorHandler, InvalidFolderError, MessageNotFoundError
from mailpane.utils.logging import async_log_call, get_logger

logger = get_logger(__name__)


class MessageFacade:
    """Message access for the UI layer.

    Every mutation returns the updated message. Callers are responsible for
    announcing the change so badge counts can refresh. Storage failures
    surface as ``MailpaneError``.
    """

    FOLDER_INBOX = Folder.INBOX.value
    FOLDER_DRAFTS = Folder.DRAFTS.value
    FOLDER_SENT = Folder.SENT.value
    FOLDER_JUNK = Folder.JUNK.value
    FOLDER_TRASH = Folder.TRASH.value
    FOLDER_FLAGGED = Folder.FLAGGED.value

    def __init__(self, repository: MessageRepository):
        self.repository = repository

    @ErrorHandler.wrap
    async def count_all_unread(self) -> int:
        """Unread messages across every folder."""
        return await self.repository.count_unread()

    @ErrorHandler.wrap
    async def count_flagged_unread(self) -> int:
        return await self.repository.count_flagged_unread()

    @ErrorHandler.wrap
    async def list_folder(self, folder: Folder | str) -> List[Message]:
        return await self.repository.find_by_folder(_as_folder(folder))

    @ErrorHandler.wrap
    async def get_message(self, message_id: int) -> Message:
        message = await self.repository.find_by_id(message_id)
        if message is None:
            raise MessageNotFoundError(f"Message {message_id} not found")
        return message

    @ErrorHandler.wrap
    @async_log_call
    async def mark_as_read(self, message_id: int) -> Message:
        message = await self.get_message(message_id)
        if not message.is_read:
            message.mark_as_read()
            await self.repository.update_flags(message_id, is_read=True)
        return message

    @ErrorHandler.wrap
    @async_log_call
    async def mark_as_unread(self, message_id: int) -> Message:
        message = await self.get_message(message_id)
        if message.is_read:
            message.mark_as_unread()
            await self.repository.update_flags(message_id, is_read=False)
        return message

    @ErrorHandler.wrap
    @async_log_call
    async def toggle_flag(self, message_id: int) -> Message:
        message = await self.get_message(message_id)
        message.toggle_flag()
        await self.repository.update_flags(message_id, is_flagged=message.is_flagged)
        logger.info(
            f"Message {message_id} {'flagged' if message.is_flagged else 'unflagged'}"
        )
        return message

    @ErrorHandler.wrap
    @async_log_call
    async def move_to(self, message_id: int, folder: Folder | str) -> Message:
        target = _as_folder(folder)
        await self.repository.move(message_id, target)
        return await self.get_message(message_id)


def _as_folder(folder: Folder | str) -> Folder:
    if isinstance(folder, Folder):
        return folder
    try:
        return Folder.from_string(folder)
    except ValueError as e:
        raise InvalidFolderError(str(e), details={"folder": folder}) from e
