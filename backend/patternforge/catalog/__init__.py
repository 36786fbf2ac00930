"""Shape catalog: shape ID -> part-producing function."""

from __future__ import annotations

import importlib

from patternforge.catalog.registry import (
    MultiPartShape,
    ShapeCatalog,
    ShapeSet,
    SinglePartShape,
    get_catalog,
    shape,
    shape_set,
)

_BUILTIN_MODULES = ("primitives", "blocks", "flags")


def load_builtin_shapes() -> ShapeCatalog:
    """Import the built-in shape modules so their @shape decorators fire."""
    for module_name in _BUILTIN_MODULES:
        importlib.import_module(f"patternforge.catalog.{module_name}")
    return get_catalog()


__all__ = [
    "MultiPartShape",
    "ShapeCatalog",
    "ShapeSet",
    "SinglePartShape",
    "get_catalog",
    "load_builtin_shapes",
    "shape",
    "shape_set",
]
