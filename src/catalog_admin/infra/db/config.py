from __future__ import annotations

import os

REPOSITORY_BACKENDS = ("sqlalchemy", "memory")


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def repository_backend() -> str:
    backend = os.getenv("CATALOG_REPOSITORY", "sqlalchemy").lower()

    if backend not in REPOSITORY_BACKENDS:
        raise RuntimeError(
            f"CATALOG_REPOSITORY must be one of {', '.join(REPOSITORY_BACKENDS)}, got '{backend}'"
        )

    return backend
