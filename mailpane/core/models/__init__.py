from .message import Folder, Message

__all__ = ["Folder", "Message"]
