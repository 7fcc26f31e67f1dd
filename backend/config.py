# backend/config.py
from functools import lru_cache
from pathlib import Path
from typing import Optional
import os
from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[1]

# Load in ascending precedence; later overrides earlier
load_dotenv(ROOT / ".env")
load_dotenv(ROOT / ".env.local", override=True)
load_dotenv(ROOT / "backend" / ".env", override=True)
load_dotenv(ROOT / "backend" / ".env.local", override=True)

DEFAULT_FRAMMER_API_URL = "https://demo.frammer.com/api/api_process_video"


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.getenv(name, default)
    if isinstance(val, str):
        val = val.strip()
    return val or default


class Settings:
    def __init__(self):
        # Server
        self.PORT: int = int(_env("PORT", "3000"))

        # CORS
        self.ALLOWED_ORIGINS: list[str] = [
            s.strip() for s in (_env("ALLOWED_ORIGINS", "*") or "").split(",") if s.strip()
        ]

        # Frammer
        self.FRAMMER_API_URL: str = _env("FRAMMER_API_URL", DEFAULT_FRAMMER_API_URL)
        self.FRAMMER_API_KEY: Optional[str] = _env("FRAMMER_API_KEY")
        self.FRAMMER_TIMEOUT_S: float = float(_env("FRAMMER_TIMEOUT_S", "30"))

        # where Frammer is told to deliver callbacks; informational only
        self.WEBHOOK_URL: Optional[str] = _env("WEBHOOK_URL")


@lru_cache
def get_settings() -> Settings:
    return Settings()
