"""Load settings from environment (.env and env vars)."""

from __future__ import annotations

import os
from pathlib import Path

# Load .env from project root if present
_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
if _env_path.exists():
    from dotenv import load_dotenv
    load_dotenv(_env_path)


def _str(key: str, default: str = "") -> str:
    return (os.environ.get(key) or "").strip() or default


def _int(key: str, default: int) -> int:
    try:
        return int(_str(key, str(default)))
    except ValueError:
        return default


# Strapi
STRAPI_BASE_URL = _str("STRAPI_BASE_URL", "https://api-mjcvy.strapidemo.com").rstrip("/")
STRAPI_API_URL = _str("STRAPI_API_URL") or f"{STRAPI_BASE_URL}/api/articles"
STRAPI_API_TOKEN = _str("STRAPI_API_TOKEN") or None

# Grid
ITEMS_PER_PAGE = _int("ITEMS_PER_PAGE", 6)

LOG_LEVEL = _str("LOG_LEVEL", "INFO").upper()
