"""
usersvc/api/health.py

Purpose: Service info and health probes
"""

import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from usersvc import __version__
from usersvc.api.deps import get_user_repository
from usersvc.core.config import settings
from usersvc.repositories.user_repository import UserRepository

router = APIRouter()


@router.get("/")
async def root():
    """Root endpoint - basic info."""
    return {
        "name": "usersvc",
        "version": __version__,
        "description": "Users HTTP service backed by MongoDB",
        "status": "running",
        "environment": settings.ENVIRONMENT
    }


@router.get("/health")
async def health_check(repository: UserRepository = Depends(get_user_repository)):
    """
    Health check endpoint.
    Reports database connectivity; 503 when the store is unreachable.
    """
    db_healthy = await repository.ping()
    health_status = {
        "status": "healthy" if db_healthy else "unhealthy",
        "timestamp": time.time(),
        "environment": settings.ENVIRONMENT,
        "version": __version__,
        "checks": {"database": "healthy" if db_healthy else "unhealthy"}
    }

    status_code = 200 if db_healthy else 503
    return JSONResponse(content=health_status, status_code=status_code)


@router.get("/ready")
async def readiness_check(repository: UserRepository = Depends(get_user_repository)):
    """
    Readiness probe - indicates if app is ready to receive traffic.
    """
    if await repository.ping():
        return {"status": "ready"}
    return JSONResponse(
        status_code=503,
        content={"status": "not_ready", "reason": "database_unavailable"}
    )


@router.get("/live")
async def liveness_check():
    """
    Liveness probe - indicates if app is alive.
    """
    return {"status": "alive"}
