"""Settings from environment variables, with .env loaded first."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_CONTACTS_FILE = "contacts.txt"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _repo_root() -> Path:
    """Return repo root (parent of src)."""
    return Path(__file__).resolve().parent.parent.parent


def load_env() -> None:
    """Load .env from repo root or current dir. Existing env vars win."""
    for path in (_repo_root() / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def get_contacts_path() -> Path:
    """Return path of the contacts file (CONTACTS_FILE env or contacts.txt in cwd)."""
    path = os.environ.get("CONTACTS_FILE", "").strip()
    return Path(path or DEFAULT_CONTACTS_FILE)


def get_log_level() -> int:
    """Return logging level from LOG_LEVEL; unknown names fall back to WARNING."""
    name = os.environ.get("LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level


def configure_logging() -> None:
    logging.basicConfig(format=LOG_FORMAT, level=get_log_level())
