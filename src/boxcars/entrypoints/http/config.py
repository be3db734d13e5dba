from __future__ import annotations

import os

DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "http://localhost:3000")


def cors_origins() -> list[str]:
    """Local frontends plus FRONTEND_URL when set."""
    origins = list(DEFAULT_CORS_ORIGINS)
    frontend_url = os.getenv("FRONTEND_URL")
    if frontend_url:
        origins.append(frontend_url)
    return origins
