"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from patternforge.dependencies import get_engine
from patternforge.engine.pipeline import PatternEngine
from patternforge.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(engine: PatternEngine = Depends(get_engine)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        shapes_registered=engine.catalog.count,
        pattern_types_registered=engine.registry.count,
    )
