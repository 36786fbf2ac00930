"""PatternForge procedural pattern engine."""

from patternforge.engine.config import MirrorConfig, PatternConfig
from patternforge.engine.context import CellKey, DrawablePart, ResolvedDocument
from patternforge.engine.registry import get_registry, pattern_type
from patternforge.engine.seeded_random import SeededRandom

__all__ = [
    "CellKey",
    "DrawablePart",
    "MirrorConfig",
    "PatternConfig",
    "ResolvedDocument",
    "SeededRandom",
    "get_registry",
    "pattern_type",
]
