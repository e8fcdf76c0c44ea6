"""
Main routes for core application endpoints.
"""

import logging

from fastapi import APIRouter, Request

logger = logging.getLogger(__name__)

router = APIRouter()

ENDPOINTS = {
    "cats": "/cats",
    "topcats": "/cats/topcats",
    "datatable": "/cats/datatable",
    "system": "/system/status",
}


@router.get(
    "/api",
    summary="Get API Information",
    description="Returns basic information about the Pet Battle API including version and available endpoints.",
    response_description="API metadata and endpoint information",
    responses={
        200: {
            "description": "API information retrieved successfully",
            "content": {
                "application/json": {
                    "example": {
                        "service": "Pet Battle API",
                        "version": "1.0.0",
                        "description": "Upload cats, vote for them and keep the battle safe for work",
                        "endpoints": ENDPOINTS,
                    }
                }
            },
        }
    },
)
async def api_root(request: Request):
    """API information and version."""
    return {
        "service": request.app.title,
        "version": request.app.version,
        "description": "Upload cats, vote for them and keep the battle safe for work",
        "endpoints": ENDPOINTS,
    }
