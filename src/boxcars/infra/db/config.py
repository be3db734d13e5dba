from __future__ import annotations

import os

# SQLAlchemy picks psycopg2 for a bare postgresql:// URL; the installed driver is psycopg 3
_DRIVER_PREFIXES = ("postgres://", "postgresql://")
PSYCOPG_PREFIX = "postgresql+psycopg://"


def database_url() -> str:
    """
    Read DATABASE_URL, pinning plain PostgreSQL URLs to the psycopg driver.

    Raises:
        RuntimeError: If DATABASE_URL is not set
    """
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    for prefix in _DRIVER_PREFIXES:
        if url.startswith(prefix):
            return PSYCOPG_PREFIX + url[len(prefix):]

    return url
