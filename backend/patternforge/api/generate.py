"""POST /api/generate*: pattern rendering, hit-testing and randomization."""

from __future__ import annotations

import logging
import random
import time

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from patternforge.config import Settings
from patternforge.dependencies import get_engine, get_settings
from patternforge.engine.layout import cell_at_point
from patternforge.engine.pipeline import PatternEngine
from patternforge.engine.randomize import random_colors, randomize_config
from patternforge.errors import InvalidConfigError
from patternforge.models.requests import (
    CellRequest,
    GenerateRequest,
    PatternConfigModel,
    PngRequest,
    RandomColorsRequest,
    RandomizeRequest,
)
from patternforge.models.responses import (
    CellResponse,
    GenerateResponse,
    LayoutInfo,
    RandomColorsResponse,
    RandomizeResponse,
)
from patternforge.svg.rasterizer import svg_to_png
from patternforge.svg.serializer import serialize_document

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate", response_model=GenerateResponse)
async def generate(req: GenerateRequest, engine: PatternEngine = Depends(get_engine)) -> GenerateResponse:
    start = time.perf_counter()
    doc = await engine.generate_async(req.config.to_config(), req.to_overrides())
    svg = serialize_document(doc)
    layout = doc.layout
    return GenerateResponse(
        svg=svg,
        seed=doc.seed,
        tile_size=layout.tile_size,
        layout=LayoutInfo(
            tile_size=layout.tile_size,
            offset_x=layout.offset_x,
            offset_y=layout.offset_y,
            rows=layout.rows,
            cols=layout.cols,
            line_spacing=layout.line_spacing,
            row_shift=layout.row_shift,
        ),
        occupied_cells={str(key): shape_id for key, shape_id in doc.occupied.items()},
        num_parts=doc.num_parts,
        processing_time_ms=round((time.perf_counter() - start) * 1000, 1),
    )


@router.post("/generate/svg")
async def generate_svg(req: GenerateRequest, engine: PatternEngine = Depends(get_engine)) -> Response:
    doc = await engine.generate_async(req.config.to_config(), req.to_overrides())
    return Response(
        content=serialize_document(doc),
        media_type="image/svg+xml",
        headers={"Content-Disposition": f'attachment; filename="pattern-{doc.seed}.svg"'},
    )


@router.post("/generate/png")
async def generate_png(
    req: PngRequest,
    engine: PatternEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> Response:
    if req.scale > settings.png_max_scale:
        raise InvalidConfigError(f"PNG scale {req.scale:g} exceeds maximum {settings.png_max_scale:g}")
    doc = await engine.generate_async(req.config.to_config(), req.to_overrides())
    png = svg_to_png(serialize_document(doc), scale=req.scale)
    return Response(
        content=png,
        media_type="image/png",
        headers={"Content-Disposition": f'attachment; filename="pattern-{doc.seed}.png"'},
    )


@router.post("/cell", response_model=CellResponse | None)
async def cell(req: CellRequest, engine: PatternEngine = Depends(get_engine)) -> CellResponse | None:
    """Which tile is under (x, y)? null for margins and gaps."""
    layout = engine.registry.layout(req.config.to_config())
    key = cell_at_point(layout, req.x, req.y)
    if key is None:
        return None
    return CellResponse(row=key.row, col=key.col, key=str(key))


@router.post("/randomize", response_model=RandomizeResponse)
async def randomize(
    req: RandomizeRequest | None = None,
    engine: PatternEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> RandomizeResponse:
    req = req or RandomizeRequest()
    config = randomize_config(
        engine.catalog,
        seed=req.seed,
        container_size=req.container_size or settings.default_container_size,
    )
    logger.info("Randomized config seed=%s grid=%d", config.seed, config.grid_size)
    return RandomizeResponse(config=PatternConfigModel(**config.to_dict()))


@router.post("/randomize/colors", response_model=RandomColorsResponse)
async def randomize_colors(req: RandomColorsRequest | None = None) -> RandomColorsResponse:
    """Harmonious 3-5 color palette; keeps everything else about the pattern."""
    seed = req.seed if req is not None else None
    return RandomColorsResponse(colors=list(random_colors(random.Random(seed))))
