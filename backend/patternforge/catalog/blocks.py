"""3×3 block shapes: single-color paths on a 64-unit grid of thirds."""

from __future__ import annotations

from functools import partial

from patternforge.catalog.parts import native_path
from patternforge.catalog.registry import shape, shape_set
from patternforge.engine.context import DrawablePart

shape_set(id="blocks33", name="3×3 Blocks", description="Block patterns on a 3×3 grid")

BLOCK_PATHS: dict[str, str] = {
    "block33_01": (
        "M21.333 64H0V42.667H21.333V64ZM64 64H42.667V42.667H64V64Z"
        "M42.667 42.667H21.333V21.333H42.667V42.667ZM21.333 21.333H0V0H21.333V21.333Z"
        "M64 21.333H42.667V0H64V21.333Z"
    ),
    "block33_02": (
        "M42.667 64H21.333V42.667H42.667V64ZM21.333 42.667H0V21.333H21.333V42.667Z"
        "M64 42.667H42.667V21.333H64V42.667ZM42.667 21.333H21.333V0H42.667V21.333Z"
    ),
    "block33_03": "M21.333 64H0V0H21.333V64ZM64 64H42.667V0H64V64Z",
    "block33_04": "M42.667 64H21.333V0H42.667V64Z",
    "block33_05": "M42.667 21.333H21.333V42.667H42.667V21.333ZM64 64H0V0H64V64Z",
    "block33_06": "M42.667 64H21.333V42.667H0V21.333H21.333V0H42.667V21.333H64V42.667H42.667V64Z",
    "block33_07": (
        "M21.333 64H0V42.667H21.333V64ZM64 64H42.667V42.667H64V64Z"
        "M21.333 21.333H0V0H21.333V21.333ZM64 21.333H42.667V0H64V21.333Z"
    ),
    "block33_08": "M21.333 64H0V42.667H21.333V64ZM64 64H42.667V21.333H0V0H64V64Z",
    "block33_09": "M42.667 64H21.333V42.667H0V21.333H42.667V64Z",
    "block33_10": "M21.333 64H0V42.667H21.333V64ZM64 64H42.667V42.667H64V64Z",
    "block33_12": "M21.333 64H0V21.333H21.333V64ZM64 42.667H42.667V0H64V42.667Z",
    "block33_13": "M64 64H42.667V42.667H64V64ZM21.333 21.333H0V0H21.333V21.333Z",
}


def _block(d: str, cx: float, cy: float, size: float, flip_h: int = 1, flip_v: int = 1) -> DrawablePart:
    return native_path(d, cx, cy, size, flip_h, flip_v)


for _shape_id, _d in BLOCK_PATHS.items():
    shape(id=_shape_id, shape_set="blocks33")(partial(_block, _d))
