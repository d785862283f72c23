"""Database configuration with environment variable support."""

import os
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class DatabaseConfig:
    """Configuration for database connection and behavior."""

    # Connection pool settings
    pool_size: int = field(
        default_factory=lambda: int(os.getenv("MAILPANE_DB_POOL_SIZE", "5"))
    )
    max_overflow: int = field(
        default_factory=lambda: int(os.getenv("MAILPANE_DB_MAX_OVERFLOW", "10"))
    )
    pool_timeout: float = field(
        default_factory=lambda: float(os.getenv("MAILPANE_DB_POOL_TIMEOUT", "30.0"))
    )

    # Query timeouts
    query_timeout: float = field(
        default_factory=lambda: float(os.getenv("MAILPANE_DB_QUERY_TIMEOUT", "30.0"))
    )

    # Batch operations
    default_batch_size: int = field(
        default_factory=lambda: int(os.getenv("MAILPANE_DB_BATCH_SIZE", "100"))
    )

    # Logging
    echo: bool = field(
        default_factory=lambda: os.getenv("MAILPANE_DB_ECHO", "false").lower()
        == "true"
    )

    def __post_init__(self):
        """Validate configuration values."""
        if self.pool_size < 1:
            raise ValueError("pool_size must be >= 1")
        if self.max_overflow < 0:
            raise ValueError("max_overflow must be >= 0")
        if self.pool_timeout <= 0:
            raise ValueError("pool_timeout must be > 0")
        if self.query_timeout <= 0:
            raise ValueError("query_timeout must be > 0")
        if self.default_batch_size < 1:
            raise ValueError("default_batch_size must be >= 1")


# Singleton instance
_config: Optional[DatabaseConfig] = None


def get_config() -> DatabaseConfig:
    """Get or create database configuration singleton."""
    global _config
    if _config is None:
        _config = DatabaseConfig()

    return _config

