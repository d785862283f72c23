from .batch_result import BatchResult
from .message import MessageRepository

__all__ = ["BatchResult", "MessageRepository"]
