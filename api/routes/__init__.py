"""
Routes package.
Contains all FastAPI route handlers organized by functionality.
"""

from . import (
    main_routes,
    system_routes,
    cat_routes,
)

__all__ = [
    "main_routes",
    "system_routes",
    "cat_routes",
]
