"""Configuration loaded from environment variables."""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

# Server
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Largest tree source accepted by the render service, in characters
MAX_SOURCE_CHARS: int = int(os.getenv("MAX_SOURCE_CHARS", "20000"))

CORS_ORIGINS: list[str] = [
    o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()
]
