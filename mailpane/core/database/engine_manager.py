"""Engine manager wrapping SQLAlchemy connection pool."""

import asyncio
from pathlib import Path
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine

from mailpane.core.database.base import create_engine, dispose_engine
from mailpane.core.database.config import DatabaseConfig, get_config
from mailpane.utils.errors import DatabaseConnectionError
from mailpane.utils.logging import get_logger

logger = get_logger(__name__)


class EngineManager:
    """Manages SQLAlchemy async engine lifecycle."""

    def __init__(self, db_path: Path, config: Optional[DatabaseConfig] = None) -> None:
        self.db_path = Path(db_path)
        self.config = config or get_config()
        self._engine: Optional[AsyncEngine] = None
        self._lock = asyncio.Lock()

    async def get_engine(self) -> AsyncEngine:
        """Get or create the async engine.

        Raises:
            DatabaseConnectionError: If engine creation fails
        """
        async with self._lock:
            if self._engine is None:
                try:
                    self._engine = create_engine(self.db_path, config=self.config)
                    logger.info(f"Engine initialised: {self.db_path}")
                except Exception as e:
                    raise DatabaseConnectionError(
                        "Failed to create database engine",
                        details={"db_path": str(self.db_path), "error": str(e)},
                    ) from e

        return self._engine

    async def close(self) -> None:
        """Dispose of engine and close all pooled connections."""
        if self._engine:
            await dispose_engine(self._engine)
            self._engine = None
            logger.info("Engine disposed")
