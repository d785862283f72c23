"""Database access layer - public API."""

from .base import metadata
from .config import DatabaseConfig, get_config
from .engine_manager import EngineManager
from .models import messages
from .repositories import BatchResult, MessageRepository

__all__ = [
    "BatchResult",
    "DatabaseConfig",
    "EngineManager",
    "MessageRepository",
    "get_config",
    "messages",
    "metadata",
]
