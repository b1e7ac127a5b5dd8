from __future__ import annotations

import logging
import os
from pathlib import Path

DEFAULT_STATE_FILE = Path("~/.local/state/tidyname/state.json")
DEFAULT_HISTORY_LIMIT = 15


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def state_file() -> Path:
    return Path(os.getenv("TIDYNAME_STATE_FILE") or DEFAULT_STATE_FILE).expanduser()


def enabled_default() -> bool:
    return _env_flag("TIDYNAME_ENABLED_DEFAULT", True)


def history_limit() -> int:
    raw = os.getenv("TIDYNAME_HISTORY_LIMIT", "")
    try:
        limit = int(raw)
    except ValueError:
        return DEFAULT_HISTORY_LIMIT
    return limit if limit > 0 else DEFAULT_HISTORY_LIMIT


def configure_logging() -> None:
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
