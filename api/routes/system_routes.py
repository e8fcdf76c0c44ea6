"""
System and administration routes.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request, HTTPException

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/system")


@router.get(
    "/status",
    summary="Get System Status",
    description="Get system status including configuration, store and NSFW classifier settings.",
    response_description="System status information",
    responses={
        200: {
            "description": "System status retrieved successfully",
            "content": {
                "application/json": {
                    "example": {
                        "status": "running",
                        "version": "1.0.0",
                        "configuration_loaded": True,
                        "database_connected": True,
                        "total_cats": 13,
                        "safe_cats": 12,
                        "nsfw_enabled": False,
                        "nsfw_fail_open": True,
                        "max_image_dimension": 400,
                        "litter_loaded": True,
                    }
                }
            },
        },
        500: {"description": "Internal server error"},
    },
)
async def get_system_status(request: Request):
    """Get system status."""
    try:
        config_service = request.app.state.config_service
        database_service = request.app.state.database_service
        seed_service = request.app.state.seed_service

        config = config_service.config

        status_info = {
            "status": "running",
            "version": request.app.version,
            "configuration_loaded": config is not None,
            "database_connected": database_service is not None,
            "total_cats": await database_service.count(),
            "safe_cats": await database_service.count(only_safe=True),
            "litter_loaded": seed_service.loaded,
        }

        if config:
            status_info.update(
                {
                    "nsfw_enabled": config.nsfw.enabled,
                    "nsfw_fail_open": config.nsfw.fail_open,
                    "max_image_dimension": config.image.max_dimension,
                }
            )

        return status_info

    except Exception as e:
        logger.error(f"Error getting system status: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get(
    "/health",
    summary="Health Check",
    description="Simple health check endpoint to verify the API is responding.",
    response_description="Health status",
    responses={
        200: {
            "description": "Service is healthy",
            "content": {
                "application/json": {
                    "example": {
                        "status": "healthy",
                        "timestamp": "2024-01-15T10:30:00+00:00",
                    }
                }
            },
        }
    },
)
async def health_check():
    """Simple health check endpoint."""
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}
