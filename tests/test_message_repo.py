"""Tests for MessageRepository with SQLAlchemy Core."""

import pytest

from mailpane.core.database import DatabaseConfig, EngineManager, MessageRepository
from mailpane.core.models.message import Folder
from mailpane.utils.errors import InvalidFolderError, MessageNotFoundError

from .test_helpers import MessageTestHelper


async def test_save_assigns_id_and_find(repository):
    """Saving a new message assigns an id that finds it again"""
    message = MessageTestHelper.create_message(subject="Hello")

    saved = await repository.save(message)
    found = await repository.find_by_id(saved.id)

    assert saved.id is not None
    assert found is not None
    assert found.subject == "Hello"
    assert found.folder is Folder.INBOX
    assert found.received_at == MessageTestHelper.BASE_TIME


async def test_save_existing_updates(repository):
    message = await repository.save(MessageTestHelper.create_message())
    message.subject = "Changed"

    await repository.save(message)

    assert (await repository.find_by_id(message.id)).subject == "Changed"
    assert await repository.count() == 1


async def test_save_unknown_id_raises(repository):
    message = MessageTestHelper.create_message(id=404)

    with pytest.raises(MessageNotFoundError):
        await repository.save(message)


async def test_find_missing_returns_none(repository):
    assert await repository.find_by_id(12345) is None


async def test_find_by_folder_newest_first(mailbox):
    inbox = await mailbox.find_by_folder(Folder.INBOX)

    assert [m.subject for m in inbox] == ["Inbox 1", "Inbox 2", "Inbox 3", "Inbox 4"]


async def test_flagged_folder_is_virtual(mailbox):
    """Flagged lists flagged messages from every folder"""
    flagged = await mailbox.find_by_folder(Folder.FLAGGED)

    assert {m.subject for m in flagged} == {"Inbox 3", "Inbox 4"}
    assert all(m.folder is Folder.INBOX for m in flagged)


async def test_counts(mailbox):
    assert await mailbox.count() == 6
    assert await mailbox.count(Folder.INBOX) == 4
    assert await mailbox.count_unread() == 4
    assert await mailbox.count_unread(Folder.INBOX) == 3
    assert await mailbox.count_flagged_unread() == 1


async def test_empty_store_counts_zero(repository):
    assert await repository.count() == 0
    assert await repository.count_unread() == 0
    assert await repository.count_flagged_unread() == 0


async def test_update_flags(repository):
    message = await repository.save(MessageTestHelper.create_message())

    await repository.update_flags(message.id, is_read=True, is_flagged=True)
    updated = await repository.find_by_id(message.id)

    assert updated.is_read
    assert updated.is_flagged


async def test_update_flags_missing_message(repository):
    with pytest.raises(MessageNotFoundError):
        await repository.update_flags(999, is_read=True)


async def test_move_between_folders(repository):
    message = await repository.save(MessageTestHelper.create_message())

    await repository.move(message.id, Folder.TRASH)

    assert await repository.count(Folder.INBOX) == 0
    assert await repository.count(Folder.TRASH) == 1


async def test_move_into_flagged_rejected(repository):
    message = await repository.save(MessageTestHelper.create_message())

    with pytest.raises(InvalidFolderError):
        await repository.move(message.id, Folder.FLAGGED)


async def test_save_batch_reports_progress(repository):
    messages = [MessageTestHelper.create_message(subject=f"M{i}") for i in range(7)]
    progress = []

    result = await repository.save_batch(
        messages, batch_size=3, progress=lambda done, total: progress.append((done, total))
    )

    assert result.succeeded == 7
    assert result.failed == 0
    assert result.success_rate == 100.0
    assert progress == [(3, 7), (6, 7), (7, 7)]
    assert await repository.count() == 7


async def test_save_batch_uses_configured_batch_size(db_path):
    engine_manager = EngineManager(db_path, config=DatabaseConfig(default_batch_size=2))
    repo = MessageRepository(engine_manager)
    await repo.create_schema()
    progress = []

    try:
        await repo.save_batch(
            [MessageTestHelper.create_message(subject=f"M{i}") for i in range(5)],
            progress=lambda done, total: progress.append(done),
        )
    finally:
        await engine_manager.close()

    assert progress == [2, 4, 5]


async def test_save_batch_empty(repository):
    result = await repository.save_batch([])

    assert result.total == 0
    assert result.success_rate == 0.0
