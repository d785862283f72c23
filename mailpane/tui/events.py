"""Application messages exchanged between widgets and the app."""

from textual.message import Message

from mailpane.core.models.message import Folder


class FolderSelected(Message):
    """A folder view was entered."""

    def __init__(self, folder: Folder) -> None:
        self.folder = folder
        super().__init__()


class MessageModified(Message):
    """A mail message changed state (read, flagged, moved)."""

    def __init__(self, mail) -> None:
        self.mail = mail
        super().__init__()


class MessageOpened(Message):
    """A mail message was opened from the list."""

    def __init__(self, mail) -> None:
        self.mail = mail
        super().__init__()
