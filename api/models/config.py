"""
Configuration models.
"""

from pathlib import Path
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class AppConfig(BaseModel):
    log_level: str = "INFO"


class DatabaseConfig(BaseModel):
    url: Optional[str] = None  # Falls back to DATABASE_URL / local postgres
    run_migrations: bool = True  # False = create tables from metadata
    echo: bool = False


class ImageCodecConfig(BaseModel):
    """Configuration for the upload resize step."""

    max_dimension: int = Field(400, gt=0)  # Longest side after resize, in pixels
    jpeg_quality: int = Field(85, ge=1, le=95)


class NSFWConfig(BaseModel):
    """Configuration for the external NSFW classifier."""

    enabled: bool = False
    url: str = "http://localhost:5000"
    path: str = "/nsfw"
    timeout_seconds: float = Field(10.0, gt=0)
    fail_open: bool = True  # Treat classifier failures as safe


# Sample litter shipped alongside the service modules
BUNDLED_SEED_DIRECTORY = str(Path(__file__).resolve().parent.parent / "seed_images")


class SeedConfig(BaseModel):
    """Configuration for loading the sample litter into an empty store."""

    enabled: bool = True
    directory: str = BUNDLED_SEED_DIRECTORY
    min_count: int = Field(1, ge=0)
    max_count: int = Field(5, ge=0)

    @model_validator(mode="after")
    def check_count_range(self):
        if self.min_count > self.max_count:
            raise ValueError("seed.min_count must not exceed seed.max_count")
        return self


class Config(BaseModel):
    model_config = ConfigDict()

    app: AppConfig = Field(default_factory=AppConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    image: ImageCodecConfig = Field(default_factory=ImageCodecConfig)
    nsfw: NSFWConfig = Field(default_factory=NSFWConfig)
    seed: SeedConfig = Field(default_factory=SeedConfig)
