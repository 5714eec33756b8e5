from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from healthboard.core.config import settings
from healthboard.core.database import engine
from healthboard.core.process import ProcessContext, resolve_version
from healthboard.core.redis import redis_client


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    # Shutdown
    await redis_client.aclose()
    await engine.dispose()


def create_app() -> FastAPI:
    logging.basicConfig(level=settings.app_log_level)

    process = ProcessContext.capture(resolve_version(settings.app_version))

    app = FastAPI(
        title=settings.app_name,
        version=process.version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.process = process

    # Register routes
    from healthboard.api.v1.router import api_v1_router

    app.include_router(api_v1_router, prefix="/v1")

    return app


app = create_app()
