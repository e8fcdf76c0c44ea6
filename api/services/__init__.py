"""
Services package for Pet Battle API.
Contains business logic and service layer functionality.
"""

from .config_service import ConfigService
from .database_service import DatabaseService
from .image_codec_service import ImageCodecService
from .classification_service import ClassificationService
from .upload_pipeline import UploadPipeline
from .seed_service import SeedService

__all__ = [
    "ConfigService",
    "DatabaseService",
    "ImageCodecService",
    "ClassificationService",
    "UploadPipeline",
    "SeedService",
]
