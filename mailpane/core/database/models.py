"""SQLAlchemy table definitions."""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Index,
    Integer,
    String,
    Table,
    Text,
)

from mailpane.core.database.base import metadata
from mailpane.core.models.message import Folder

STORAGE_FOLDERS = tuple(folder.value for folder in Folder.physical())

messages = Table(
    "messages",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("folder", String(20), nullable=False, index=True),
    Column("sender", String(500), nullable=False),
    Column("recipient", String(500), nullable=False),
    Column("subject", String(1000), nullable=False, default="", server_default=""),
    Column("body", Text, nullable=True),
    Column("received_at", DateTime, nullable=False),
    Column("is_read", Boolean, nullable=False, default=False, server_default="0"),
    Column("is_flagged", Boolean, nullable=False, default=False, server_default="0"),
    CheckConstraint(
        "folder IN ({})".format(", ".join(f"'{name}'" for name in STORAGE_FOLDERS)),
        name="folder_values",
    ),
    Index("ix_messages_unread", "folder", "is_read"),
    Index("ix_messages_received_at", "received_at"),
)
