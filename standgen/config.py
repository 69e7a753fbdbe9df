"""Application configuration via environment variables."""

import os
from dotenv import load_dotenv

load_dotenv()


def _optional_int(value: str | None) -> int | None:
    if value is None or not value.strip():
        return None
    return int(value)


# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

# Fixed seed for surface-variation maps; unset means fresh noise per build
SURFACE_SEED = _optional_int(os.getenv("SURFACE_SEED"))
