"""Centralized path definitions for the mailpane application.

Every path lives under a single application directory, ``~/.mailpane`` by
default. Set ``MAILPANE_HOME`` to relocate it (tests point it at a
temporary directory).
"""

import os
from pathlib import Path

# Base application directory
MAILPANE_DIR = Path(os.getenv("MAILPANE_HOME", Path.home() / ".mailpane"))

# Subdirectories
DATA_DIR = MAILPANE_DIR / "data"
LOGS_DIR = MAILPANE_DIR / "logs"

# Specific files
CONFIG_PATH = MAILPANE_DIR / "config.json"
DATABASE_PATH = DATA_DIR / "mailpane.db"
