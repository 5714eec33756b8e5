from __future__ import annotations

from fastapi import APIRouter

from healthboard.api.v1 import health

api_v1_router = APIRouter()

api_v1_router.include_router(health.router, tags=["Health"])
