"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from patternforge.config import settings
from patternforge.errors import PatternError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.patternforge_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def pattern_error_handler(request: Request, exc: PatternError) -> JSONResponse:
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="PatternForge",
        description="Seeded tiled-pattern generator with deterministic SVG and PNG output",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(PatternError, pattern_error_handler)

    # Import shape modules so @shape decorators fire
    from patternforge.catalog import load_builtin_shapes

    load_builtin_shapes()

    from patternforge.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
