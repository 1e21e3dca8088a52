"""Environment-driven client settings."""
from __future__ import annotations
from dataclasses import dataclass
import os

from dotenv import find_dotenv, load_dotenv

DEFAULT_BASE_URL = "https://bis.brontosaurus.cz/api"
DEFAULT_EVENTS_PATH = "frontend/events/"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    events_path: str = DEFAULT_EVENTS_PATH
    timeout: float = DEFAULT_TIMEOUT_SECONDS


def load_settings() -> Settings:
    # .env loading is opt-in; search walks up from CWD and existing environment wins.
    if os.getenv("BIS_LOAD_DOTENV") in {"1", "true", "TRUE", "yes", "on"}:
        load_dotenv(find_dotenv(usecwd=True), override=False)
    return Settings(
        base_url=os.getenv("BIS_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        events_path=os.getenv("BIS_API_EVENTS_PATH", DEFAULT_EVENTS_PATH).lstrip("/"),
        timeout=float(os.getenv("BIS_API_TIMEOUT", DEFAULT_TIMEOUT_SECONDS)),
    )
