"""GET /api/shapes, /api/palettes: what a client can put in a config."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from patternforge.dependencies import get_engine
from patternforge.engine.config import COLOR_PALETTES
from patternforge.engine.pipeline import PatternEngine
from patternforge.models.responses import PalettesResponse, ShapeInfo, ShapeSetInfo, ShapesResponse

router = APIRouter()


@router.get("/shapes", response_model=ShapesResponse)
async def list_shapes(engine: PatternEngine = Depends(get_engine)) -> ShapesResponse:
    sets = [
        ShapeSetInfo(
            id=s.id,
            name=s.name,
            description=s.description,
            multi_color=s.multi_color,
            enabled=s.enabled,
            shapes=[ShapeInfo(id=spec.id, multi_color=spec.multi_color) for spec in engine.catalog.shapes_in_set(s.id)],
        )
        for s in engine.catalog.sets()
    ]
    return ShapesResponse(sets=sets, pattern_types=[t.id for t in engine.registry.all()])


@router.get("/palettes", response_model=PalettesResponse)
async def list_palettes() -> PalettesResponse:
    return PalettesResponse(palettes={name: list(colors) for name, colors in COLOR_PALETTES.items()})
