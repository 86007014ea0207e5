from __future__ import annotations

import os


FEE_PLAN_SOURCES = ("memory", "database")


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def fee_plan_source() -> str:
    source = os.getenv("FEE_PLAN_SOURCE", "memory").strip().lower()

    if source not in FEE_PLAN_SOURCES:
        raise RuntimeError(
            f"FEE_PLAN_SOURCE must be one of {', '.join(FEE_PLAN_SOURCES)}, got {source!r}"
        )

    return source
