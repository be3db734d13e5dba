from __future__ import annotations

import os

DEFAULT_JWT_ALGORITHM = "HS256"
DEFAULT_JWT_EXPIRES_MINUTES = 7 * 24 * 60


def jwt_secret() -> str:
    secret = os.getenv("JWT_SECRET")

    if not secret:
        raise RuntimeError("JWT_SECRET environment variable is not set")

    return secret


def jwt_algorithm() -> str:
    return os.getenv("JWT_ALGORITHM", DEFAULT_JWT_ALGORITHM)


def jwt_expires_minutes() -> int:
    raw = os.getenv("JWT_EXPIRES_MINUTES")
    if not raw:
        return DEFAULT_JWT_EXPIRES_MINUTES

    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"JWT_EXPIRES_MINUTES must be an integer, got {raw!r}")
