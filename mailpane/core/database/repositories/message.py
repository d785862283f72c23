"""Message repository with SQLAlchemy Core queries."""

import asyncio
from typing import Callable, List, Optional

from sqlalchemy import func, insert, select, update

from mailpane.core.database.base import metadata
from mailpane.core.database.engine_manager import EngineManager
from mailpane.core.database.models import messages
from mailpane.core.models.message import Folder, Message
from mailpane.utils.errors import InvalidFolderError, MessageNotFoundError
from mailpane.utils.logging import get_logger

from .batch_result import BatchResult

logger = get_logger(__name__)


class MessageRepository:
    """Repository for Message entities using SQLAlchemy Core.

    The virtual ``flagged`` folder is resolved here: reading it returns
    flagged messages from every physical folder, writing into it is
    rejected.
    """

    def __init__(self, engine_manager: EngineManager):
        self.engine_mgr = engine_manager

    async def create_schema(self) -> None:
        """Create tables that do not exist yet."""
        engine = await self.engine_mgr.get_engine()

        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)

        logger.debug("Database schema ensured")

    async def save(self, entity: Message) -> Message:
        """Insert a new message or update an existing one.

        Returns:
            The saved message, with ``id`` populated on insert
        """
        engine = await self.engine_mgr.get_engine()
        values = entity.to_row()

        async with engine.begin() as conn:
            if entity.id is None:
                result = await conn.execute(insert(messages).values(**values))
                entity.id = result.inserted_primary_key[0]
            else:
                result = await conn.execute(
                    update(messages).where(messages.c.id == entity.id).values(**values)
                )
                if result.rowcount == 0:
                    raise MessageNotFoundError(f"Message {entity.id} not found")

        logger.debug(f"Saved message {entity.id} to {entity.folder.value}")
        return entity

    async def save_batch(
        self,
        entities: List[Message],
        batch_size: Optional[int] = None,
        progress: Optional[Callable[[int, int], None]] = None,
    ) -> BatchResult:
        """Insert new messages in batches, one transaction per batch.

        Args:
            entities: Messages to insert
            batch_size: Number of messages per transaction, defaults to the
                engine config's ``default_batch_size``
            progress: Optional callback(current, total)
        """
        if not entities:
            return BatchResult(total=0, succeeded=0, failed=0)

        batch_size = batch_size or self.engine_mgr.config.default_batch_size

        loop = asyncio.get_running_loop()
        start_time = loop.time()
        result = BatchResult(total=len(entities), succeeded=0, failed=0)
        engine = await self.engine_mgr.get_engine()

        for i in range(0, len(entities), batch_size):
            batch = entities[i : i + batch_size]

            try:
                async with engine.begin() as conn:
                    await conn.execute(
                        insert(messages), [entity.to_row() for entity in batch]
                    )
                result.succeeded += len(batch)

            except Exception as e:
                result.failed += len(batch)
                result.errors.append(str(e))
                logger.error(f"Batch insert failed for {len(batch)} messages: {e}")

            if progress:
                progress(result.succeeded + result.failed, result.total)

        result.duration_seconds = loop.time() - start_time
        logger.info(
            f"Batch save complete: {result.succeeded}/{result.total} succeeded "
            f"({result.success_rate:.1f}%) in {result.duration_seconds:.2f}s"
        )

        return result

    async def find_by_id(self, message_id: int) -> Optional[Message]:
        """Find message by id, or ``None``."""
        engine = await self.engine_mgr.get_engine()
        query = select(messages).where(messages.c.id == message_id)

        async with engine.connect() as conn:
            row = (await conn.execute(query)).mappings().first()

        return Message.from_row(row) if row else None

    async def find_by_folder(
        self, folder: Folder, limit: int = 500, offset: int = 0
    ) -> List[Message]:
        """List a folder's messages, newest first."""
        engine = await self.engine_mgr.get_engine()

        query = (
            select(messages)
            .where(self._folder_condition(folder))
            .order_by(messages.c.received_at.desc(), messages.c.id.desc())
            .limit(limit)
            .offset(offset)
        )

        async with engine.connect() as conn:
            rows = (await conn.execute(query)).mappings().all()

        return [Message.from_row(row) for row in rows]

    async def count(self, folder: Optional[Folder] = None) -> int:
        """Count messages in a folder, or in the whole store."""
        query = select(func.count()).select_from(messages)
        if folder is not None:
            query = query.where(self._folder_condition(folder))
        return await self._scalar(query)

    async def count_unread(self, folder: Optional[Folder] = None) -> int:
        """Count unread messages in a folder, or in the whole store."""
        query = (
            select(func.count()).select_from(messages).where(messages.c.is_read.is_(False))
        )
        if folder is not None:
            query = query.where(self._folder_condition(folder))
        return await self._scalar(query)

    async def count_flagged_unread(self) -> int:
        return await self.count_unread(Folder.FLAGGED)

    async def update_flags(
        self,
        message_id: int,
        is_read: Optional[bool] = None,
        is_flagged: Optional[bool] = None,
    ) -> None:
        """Set read and/or flagged state on a message.

        Raises:
            MessageNotFoundError: If the message doesn't exist
        """
        values = {}
        if is_read is not None:
            values["is_read"] = is_read
        if is_flagged is not None:
            values["is_flagged"] = is_flagged
        if not values:
            return

        await self._update(message_id, values)
        logger.debug(f"Updated message {message_id}: {values}")

    async def move(self, message_id: int, folder: Folder) -> None:
        """Move a message to another physical folder.

        Raises:
            InvalidFolderError: If ``folder`` is virtual
            MessageNotFoundError: If the message doesn't exist
        """
        if folder.is_virtual:
            raise InvalidFolderError(
                f"Cannot move messages into {folder.value}",
                details={"message_id": message_id},
            )

        await self._update(message_id, {"folder": folder.value})
        logger.info(f"Moved message {message_id} to {folder.value}")

    async def _update(self, message_id: int, values: dict) -> None:
        engine = await self.engine_mgr.get_engine()
        query = update(messages).where(messages.c.id == message_id).values(**values)

        async with engine.begin() as conn:
            result = await conn.execute(query)

            if result.rowcount == 0:
                raise MessageNotFoundError(f"Message {message_id} not found")

    async def _scalar(self, query) -> int:
        engine = await self.engine_mgr.get_engine()

        async with engine.connect() as conn:
            result = await conn.execute(query)
            return result.scalar() or 0

    @staticmethod
    def _folder_condition(folder: Folder):
        if folder is Folder.FLAGGED:
            return messages.c.is_flagged.is_(True)
        return messages.c.folder == folder.value
