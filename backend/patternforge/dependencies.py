"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from patternforge.config import settings
from patternforge.engine.pipeline import PatternEngine, create_engine


def get_settings():
    return settings


@lru_cache(maxsize=1)
def get_engine() -> PatternEngine:
    """One engine per process so the procedural cache is shared across requests."""
    return create_engine()
