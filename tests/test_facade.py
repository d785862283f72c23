"""
Tests for the message facade

Tests cover:
- Unread and flagged-unread counts
- Read and flag mutations
- Folder name handling
- Storage failures reported as MailpaneError
"""
import pytest

from mailpane.core.facade import MessageFacade
from mailpane.core.models.message import Folder
from mailpane.utils.errors import InvalidFolderError, MailpaneError, MessageNotFoundError


class TestFolderConstants:
    """Tests for the folder name constants"""

    def test_constants_match_folders(self):
        assert MessageFacade.FOLDER_INBOX == "inbox"
        assert MessageFacade.FOLDER_DRAFTS == "drafts"
        assert MessageFacade.FOLDER_SENT == "sent"
        assert MessageFacade.FOLDER_JUNK == "junk"
        assert MessageFacade.FOLDER_TRASH == "trash"
        assert MessageFacade.FOLDER_FLAGGED == "flagged"


class TestCounts:
    """Tests for badge count queries"""

    async def test_count_all_unread(self, mailbox):
        assert await MessageFacade(mailbox).count_all_unread() == 4

    async def test_count_flagged_unread(self, mailbox):
        assert await MessageFacade(mailbox).count_flagged_unread() == 1


class TestMutations:
    """Tests for read and flag changes"""

    async def test_mark_as_read_lowers_unread_count(self, mailbox):
        facade = MessageFacade(mailbox)
        target = (await facade.list_folder("inbox"))[0]

        updated = await facade.mark_as_read(target.id)

        assert updated.is_read
        assert await facade.count_all_unread() == 3

    async def test_mark_as_read_twice_is_harmless(self, mailbox):
        facade = MessageFacade(mailbox)
        target = (await facade.list_folder(Folder.INBOX))[0]

        await facade.mark_as_read(target.id)
        await facade.mark_as_read(target.id)

        assert await facade.count_all_unread() == 3

    async def test_mark_as_unread(self, mailbox):
        facade = MessageFacade(mailbox)
        read = [m for m in await facade.list_folder(Folder.INBOX) if m.is_read][0]

        updated = await facade.mark_as_unread(read.id)

        assert not updated.is_read
        assert await facade.count_flagged_unread() == 2

    async def test_toggle_flag(self, mailbox):
        facade = MessageFacade(mailbox)
        target = (await facade.list_folder(Folder.INBOX))[0]

        flagged = await facade.toggle_flag(target.id)
        assert flagged.is_flagged
        assert await facade.count_flagged_unread() == 2

        unflagged = await facade.toggle_flag(target.id)
        assert not unflagged.is_flagged
        assert await facade.count_flagged_unread() == 1

    async def test_move_to(self, mailbox):
        facade = MessageFacade(mailbox)
        target = (await facade.list_folder(Folder.INBOX))[0]

        moved = await facade.move_to(target.id, "trash")

        assert moved.folder is Folder.TRASH

    async def test_missing_message(self, facade):
        with pytest.raises(MessageNotFoundError):
            await facade.mark_as_read(31337)

    async def test_unknown_folder_name(self, facade):
        with pytest.raises(InvalidFolderError):
            await facade.list_folder("archive")


class TestStorageFailures:
    """Tests for storage errors crossing the facade"""

    async def test_count_wraps_storage_error(self, broken_repository):
        facade = MessageFacade(broken_repository)

        with pytest.raises(MailpaneError) as exc_info:
            await facade.count_all_unread()

        assert exc_info.value.details == {"function": "count_all_unread"}

    async def test_list_folder_wraps_storage_error(self, broken_repository):
        with pytest.raises(MailpaneError):
            await MessageFacade(broken_repository).list_folder(Folder.INBOX)

    async def test_mutation_wraps_storage_error(self, broken_repository):
        with pytest.raises(MailpaneError):
            await MessageFacade(broken_repository).toggle_flag(1)