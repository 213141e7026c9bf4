"""
Health check endpoint.

GET /health — reports whether the process holds its secrets.
Rules:
- Secrets loaded → "healthy" (200)
- Secrets missing → "unhealthy" (503); every submission would fail with
  SECRET_RETRIEVAL_ERROR until the process restarts.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from dependencies import get_secrets_store
from services.secrets_store import SecretsStore

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    secrets_store: SecretsStore = Depends(get_secrets_store),
) -> JSONResponse:
    checks = {"secrets": "ok" if secrets_store.loaded else "not_loaded"}
    overall = "healthy" if secrets_store.loaded else "unhealthy"
    return JSONResponse(
        status_code=200 if overall == "healthy" else 503,
        content={"status": overall, "checks": checks},
    )
