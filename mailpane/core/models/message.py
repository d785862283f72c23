"""Message domain models"""

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional


class Folder(Enum):
    """Mail folders shown in the sidebar."""

    INBOX = "inbox"
    DRAFTS = "drafts"
    SENT = "sent"
    JUNK = "junk"
    TRASH = "trash"
    FLAGGED = "flagged"

    @classmethod
    def from_string(cls, value: str) -> "Folder":
        """Create Folder from string.

        Args:
            value (str): The folder name, case-insensitive.

        Returns:
            Folder: The corresponding Folder enum value.

        Raises:
            ValueError: If the folder name is invalid.
        """
        try:
            return cls(value.strip().lower())

        except (AttributeError, ValueError):
            raise ValueError(f"Invalid folder name: {value}") from None

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def is_virtual(self) -> bool:
        """Virtual folders are views over other folders, never a location."""
        return self is Folder.FLAGGED

    @classmethod
    def physical(cls) -> list["Folder"]:
        return [folder for folder in cls if not folder.is_virtual]


@dataclass
class Message:
    """A stored mail message."""

    sender: str
    recipient: str
    subject: str
    body: str
    received_at: datetime
    folder: Folder = Folder.INBOX
    is_read: bool = False
    is_flagged: bool = False
    id: Optional[int] = None

    def __post_init__(self):
        if self.folder.is_virtual:
            raise ValueError(f"Messages cannot be stored in {self.folder.value}")

    def mark_as_read(self) -> None:
        self.is_read = True

    def mark_as_unread(self) -> None:
        self.is_read = False

    def toggle_flag(self) -> None:
        self.is_flagged = not self.is_flagged

    def get_preview(self, max_length: int = 100) -> str:
        """Get preview of message body."""
        if not self.body:
            return ""

        text = re.sub(r"<[^>]+>", "", self.body)
        text = " ".join(text.split())

        if len(text) <= max_length:
            return text

        return text[: max_length - 3] + "..."

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Message":
        """Create Message from a database row mapping."""
        return cls(
            id=row["id"],
            folder=Folder.from_string(row["folder"]),
            sender=row["sender"],
            recipient=row["recipient"],
            subject=row["subject"] or "",
            body=row["body"] or "",
            received_at=row["received_at"],
            is_read=bool(row["is_read"]),
            is_flagged=bool(row["is_flagged"]),
        )

    def to_row(self) -> dict:
        """Convert Message to a dictionary for database storage.

        The ``id`` key is only present once storage has assigned one.
        """
        row = {
            "folder": self.folder.value,
            "sender": self.sender,
            "recipient": self.recipient,
            "subject": self.subject,
            "body": self.body,
            "received_at": self.received_at,
            "is_read": self.is_read,
            "is_flagged": self.is_flagged,
        }
        if self.id is not None:
            row["id"] = self.id
        return row
