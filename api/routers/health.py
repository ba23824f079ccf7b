"""
Health check router.

This router provides the health check endpoint for monitoring and load
balancers.
"""

from fastapi import APIRouter, Depends

from api.deps import get_settings
from backend.settings import Settings

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health(settings: Settings = Depends(get_settings)):
    """
    Simple liveness endpoint for the WebFitness API.

    Returns:
        dict: Status indicator and the running environment
    """
    return {"status": "ok", "environment": settings.environment}
