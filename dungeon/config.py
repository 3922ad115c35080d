"""
Configuration - read from the environment, optionally via a .env file
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

PROJECT_ROOT = Path(__file__).parent.parent


def get_worlds_dir() -> Path:
    """Directory holding the world folders"""
    return Path(os.getenv("DUNGEON_WORLDS_DIR", str(PROJECT_ROOT / "worlds")))


def get_world_id() -> str:
    """World to load when none is given"""
    return os.getenv("DUNGEON_WORLD", "dungeon")


def get_max_actions() -> int:
    """Most actions resolved for a single command"""
    return int(os.getenv("DUNGEON_MAX_ACTIONS", "100"))


def get_wrap_width() -> int:
    """Column width for wrapped narration"""
    return int(os.getenv("DUNGEON_WRAP_WIDTH", "72"))


def get_log_level() -> str:
    return os.getenv("DUNGEON_LOG_LEVEL", "WARNING").upper()


def get_log_dir() -> Path | None:
    """Directory for log files, or None to log to the console only"""
    log_dir = os.getenv("DUNGEON_LOG_DIR")
    return Path(log_dir) if log_dir else None
