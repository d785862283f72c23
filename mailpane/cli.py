"""Command line entry point for mailpane."""

import argparse
import asyncio
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console

from mailpane import __version__
from mailpane.core.database import EngineManager, MessageRepository
from mailpane.core.facade import MessageFacade
from mailpane.core.models.message import Folder
from mailpane.core.sample_data import DatabaseInitialization
from mailpane.tui.app import MailApp
from mailpane.tui.navigation import folder_route
from mailpane.utils.config_manager import AppConfig, ConfigManager
from mailpane.utils.errors import ConfigurationError, FileSystemError
from mailpane.utils.logging import async_log_call, get_logger, init_logging

logger = get_logger(__name__)


def setup_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mailpane",
        description="Browse a local mailbox in the terminal",
    )
    parser.add_argument(
        "--folder",
        choices=[folder.value for folder in Folder],
        help="Folder to open on start (default: from config)",
    )
    parser.add_argument(
        "--database",
        type=Path,
        help="SQLite database file (default: from config)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="File logging level (default: from config)",
    )
    parser.add_argument(
        "--no-sample-data",
        action="store_true",
        help="Do not seed an empty database with sample messages",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_app(config: AppConfig, args: argparse.Namespace) -> tuple[MailApp, EngineManager]:
    """Wire storage, facade and UI together."""
    db_path = args.database or Path(config.database.database_path).expanduser()
    engine_manager = EngineManager(db_path)
    repository = MessageRepository(engine_manager)

    seed_sample_data = config.database.sample_data and not args.no_sample_data
    initializer = DatabaseInitialization(
        repository,
        size=config.database.sample_size if seed_sample_data else 0,
        seed=config.database.sample_seed,
    )

    app = MailApp(
        MessageFacade(repository),
        initializer=initializer,
        start_route=folder_route(args.folder or config.ui.start_folder),
        color_scheme=config.ui.theme,
        show_hint_bar=config.ui.show_hint_bar,
    )
    return app, engine_manager


@async_log_call
async def run_app(app: MailApp, engine_manager: EngineManager) -> None:
    try:
        await app.run_async()
    finally:
        await engine_manager.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code
    """
    console = Console(stderr=True)
    args = setup_argument_parser().parse_args(argv)

    try:
        config = ConfigManager().config
        init_logging(
            args.log_level or config.logging.log_level,
            max_file_size=config.logging.max_file_size,
            backup_count=config.logging.backup_count,
        )
    except (ConfigurationError, FileSystemError, ValueError) as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        return 1

    try:
        app, engine_manager = build_app(config, args)
        asyncio.run(run_app(app, engine_manager))
        return app.return_code or 0

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        return 130
