"""
Shared test fixtures and configuration for pytest
"""
import os
import tempfile

# Keep config, logs and databases out of the real home directory. Must run
# before any mailpane module computes its paths.
os.environ.setdefault("MAILPANE_HOME", tempfile.mkdtemp(prefix="mailpane-tests-"))

import pytest  # noqa: E402

from mailpane.core.database import EngineManager, MessageRepository  # noqa: E402
from mailpane.core.facade import MessageFacade  # noqa: E402
from mailpane.utils.config_manager import ConfigManager  # noqa: E402

from .test_helpers import MessageTestHelper  # noqa: E402


@pytest.fixture
def db_path(tmp_path):
    """Path of a temporary database file"""
    return tmp_path / "test_messages.db"


@pytest.fixture
async def repository(db_path):
    """MessageRepository over an empty temporary database"""
    engine_manager = EngineManager(db_path)
    repo = MessageRepository(engine_manager)
    await repo.create_schema()

    yield repo

    await engine_manager.close()


@pytest.fixture
def facade(repository):
    """MessageFacade over the temporary repository"""
    return MessageFacade(repository)


@pytest.fixture
async def mailbox(repository):
    """Repository holding a small, known set of messages"""
    for message in MessageTestHelper.create_mailbox():
        await repository.save(message)
    return repository


@pytest.fixture(autouse=True)
def fresh_config(tmp_path):
    """Give every test its own ConfigManager singleton and config file"""
    ConfigManager.reset_instance()
    ConfigManager(tmp_path / "config.json")

    yield

    ConfigManager.reset_instance()


@pytest.fixture
async def broken_repository(tmp_path):
    """MessageRepository whose database path is a directory and cannot be opened"""
    db_dir = tmp_path / "not-a-database"
    db_dir.mkdir()
    engine_manager = EngineManager(db_dir)

    yield MessageRepository(engine_manager)

    await engine_manager.close()
