"""Settings read from environment variables (+ .env in the working directory)."""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# ===================== PocketBase =====================
BASE_URL = _env("PB_BASE_URL", "http://127.0.0.1:8090")
API_TOKEN = _env("PB_TOKEN", "")
TASKS_COLLECTION = _env("PB_TASKS_COLLECTION", "tasks")
REQUEST_TIMEOUT = _env_int("PB_TIMEOUT", 10)

# ===================== UI =====================
WINDOW_GEOMETRY = _env("APP_GEOMETRY", "720x640")
TOPMOST = _env_bool("APP_TOPMOST", False)

# ===================== logging =====================
LOG_LEVEL = _env("APP_LOG_LEVEL", "INFO").upper()
LOG_DIR = Path(_env("APP_LOG_DIR", ".local/panels")).expanduser()
