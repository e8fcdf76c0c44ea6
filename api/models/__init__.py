"""
Models package.
Contains all Pydantic models and data structures.
"""

from .config import (
    AppConfig,
    DatabaseConfig,
    ImageCodecConfig,
    NSFWConfig,
    SeedConfig,
    Config,
)
from .cat import (
    EXCLUSION_SENTINEL,
    Cat,
    CatId,
    ClassificationVerdict,
    DataTable,
    RejectionReason,
    SubmissionResult,
)

__all__ = [
    # Config models
    "AppConfig",
    "DatabaseConfig",
    "ImageCodecConfig",
    "NSFWConfig",
    "SeedConfig",
    "Config",
    # Cat models
    "EXCLUSION_SENTINEL",
    "Cat",
    "CatId",
    "ClassificationVerdict",
    "DataTable",
    "RejectionReason",
    "SubmissionResult",
]
