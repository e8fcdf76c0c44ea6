"""
Persistence layer for the pet battle.

This package contains SQLAlchemy models and database-related utilities
for the pet battle application.
"""

from .models import Base, CatRecord

__all__ = ["Base", "CatRecord"]
