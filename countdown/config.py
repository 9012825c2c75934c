import json
import os
import platform
from pathlib import Path
from typing import Any, Dict, Optional

APP_DIR = "countdown"
DEBUG_ENV = "COUNTDOWN_DEBUG"
# recognised keys and the type each must have; anything else is dropped
_KEYS = {"up": bool, "debug": bool}


def _config_base() -> Path:
    system = platform.system().lower()
    if system == "darwin":
        return Path.home() / "Library" / "Application Support"
    if system == "windows":
        return Path(os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming")
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def get_config_path() -> Path:
    return _config_base() / APP_DIR / "config.json"


def get_log_path() -> Path:
    return get_config_path().with_name("countdown.log")


def load_config() -> Dict[str, Any]:
    try:
        raw = json.loads(get_config_path().read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    if not isinstance(raw, dict):
        return {}
    return {key: value for key, value in raw.items() if isinstance(value, _KEYS.get(key, ()))}


def get_count_up(config: Dict[str, Any]) -> Optional[bool]:
    return config.get("up")


def debug_enabled(config: Dict[str, Any]) -> bool:
    return os.environ.get(DEBUG_ENV) == "1" or config.get("debug", False)
