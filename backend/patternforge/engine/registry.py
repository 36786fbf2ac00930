"""Pattern type registry: every layout strategy is a function registered via decorator.

Usage:
    @pattern_type(id="gridCentered", description="Square grid centered in the container")
    def grid_centered(config: PatternConfig) -> Layout:
        return calculate_layout(config.container_size, config.grid_size, ...)

Adding a new layout strategy = one decorated function. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from patternforge.engine.layout import Layout, calculate_brick_layout, calculate_layout
from patternforge.errors import UnknownPatternTypeError

if TYPE_CHECKING:
    from patternforge.engine.config import PatternConfig

logger = logging.getLogger(__name__)

LayoutFn = Callable[["PatternConfig"], Layout]


@dataclass
class PatternTypeSpec:
    id: str
    fn: LayoutFn
    description: str = ""
    tags: set[str] = field(default_factory=set)


class PatternTypeRegistry:
    """Registry of layout strategies keyed by pattern type ID."""

    def __init__(self) -> None:
        self._types: dict[str, PatternTypeSpec] = {}

    def register(self, spec: PatternTypeSpec) -> None:
        if spec.id in self._types:
            raise ValueError(f"Duplicate pattern type ID: {spec.id}")
        self._types[spec.id] = spec
        logger.debug("Registered pattern type %s", spec.id)

    def get(self, type_id: str) -> PatternTypeSpec:
        try:
            return self._types[type_id]
        except KeyError:
            raise UnknownPatternTypeError(
                f"Unknown pattern type: {type_id!r} (known: {', '.join(sorted(self._types))})"
            ) from None

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._types

    def all(self) -> list[PatternTypeSpec]:
        return sorted(self._types.values(), key=lambda s: s.id)

    def layout(self, config: PatternConfig) -> Layout:
        return self.get(config.pattern_type).fn(config)

    @property
    def count(self) -> int:
        return len(self._types)


# Module-level singleton
_registry = PatternTypeRegistry()


def get_registry() -> PatternTypeRegistry:
    return _registry


def pattern_type(
    *,
    id: str,
    description: str = "",
    tags: set[str] | None = None,
    registry: PatternTypeRegistry | None = None,
):
    """Decorator to register a layout strategy."""

    def decorator(fn: LayoutFn) -> LayoutFn:
        spec = PatternTypeSpec(id=id, fn=fn, description=description, tags=tags or set())
        (registry or _registry).register(spec)
        return fn

    return decorator


@pattern_type(id="gridCentered", description="Square tiles centered in the padded container")
def grid_centered(config: PatternConfig) -> Layout:
    return calculate_layout(
        config.container_size, config.grid_size, config.border_padding, config.line_spacing
    )


@pattern_type(id="brick", description="Centered grid with odd rows offset by half a tile")
def brick(config: PatternConfig) -> Layout:
    return calculate_brick_layout(
        config.container_size, config.grid_size, config.border_padding, config.line_spacing
    )
