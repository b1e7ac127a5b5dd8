from __future__ import annotations
import json, logging, threading, time
from typing import Any, Dict, List, Optional

from tidyname import settings

logger = logging.getLogger(__name__)

_lock = threading.Lock()

# ---- state helpers ----

def _state_load() -> Dict[str, Any]:
    path = settings.state_file()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        logger.warning("state file %s unreadable, starting empty: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}

def _state_save(data: Dict[str, Any]):
    path = settings.state_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    tmp.replace(path)

# ---- enabled flag ----

def is_enabled() -> bool:
    value = _state_load().get("enabled")
    if value is None:
        return settings.enabled_default()
    return bool(value)

def set_enabled(flag: bool):
    with _lock:
        data = _state_load()
        data["enabled"] = bool(flag)
        _state_save(data)

# ---- rename history ----

def load_history() -> List[Dict[str, Any]]:
    history = _state_load().get("history") or []
    return [h for h in history if isinstance(h, dict)]

def record_rename(original: str, renamed: str, ts: Optional[int] = None) -> List[Dict[str, Any]]:
    """Prepend a rename to the history, keeping only the most recent entries."""
    entry = {
        "original": original,
        "renamed": renamed,
        "ts": ts if ts is not None else int(time.time() * 1000),
    }
    with _lock:
        data = _state_load()
        history = [h for h in data.get("history") or [] if isinstance(h, dict)]
        history.insert(0, entry)
        data["history"] = history[: settings.history_limit()]
        _state_save(data)
    return data["history"]

def clear_history():
    with _lock:
        data = _state_load()
        data["history"] = []
        _state_save(data)
