"""
Configuration service for Pet Battle API.
"""

import logging
import os
from pathlib import Path
from typing import Optional
import yaml
from pydantic import ValidationError

from models import Config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.yaml"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def default_config_path() -> str:
    return os.getenv("CONFIG_PATH", DEFAULT_CONFIG_PATH)


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        self._config: Optional[Config] = None

    @property
    def config(self) -> Optional[Config]:
        """Get the current configuration."""
        return self._config

    def load_config(self, config_path: Optional[str] = None) -> Config:
        """Load configuration from YAML file or use defaults if file doesn't exist."""
        config_path = config_path or default_config_path()
        try:
            config_file = Path(config_path)

            if config_file.exists():
                logger.info(f"Loading configuration from {config_path}")
                with open(config_file, 'r') as f:
                    config_data = yaml.safe_load(f) or {}

                self._config = Config(**config_data)
            else:
                logger.info(f"Configuration file {config_path} not found, using code defaults")
                self._config = Config()

            self._apply_env_overrides(self._config)

            logger.info(f"NSFW Config: Enabled={self._config.nsfw.enabled}, "
                       f"URL={self._config.nsfw.url}{self._config.nsfw.path}, "
                       f"Fail open={self._config.nsfw.fail_open}")
            logger.info(f"Image Config: Max dimension={self._config.image.max_dimension}px")
            return self._config

        except ValidationError as e:
            logger.error(f"Configuration validation error: {e}")
            raise
        except Exception as e:
            logger.error(f"Error loading configuration: {e}")
            raise

    def reload_config(self, config_path: Optional[str] = None) -> Config:
        """Reload configuration from file."""
        return self.load_config(config_path)

    @staticmethod
    def _apply_env_overrides(config: Config) -> None:
        """Environment variables win over the YAML file."""
        database_url = os.getenv("DATABASE_URL", "").strip()
        if database_url:
            config.database.url = database_url

        nsfw_enabled = os.getenv("NSFW_ENABLED")
        if nsfw_enabled is not None:
            config.nsfw.enabled = nsfw_enabled.strip().lower() in _TRUE_VALUES

        nsfw_url = os.getenv("NSFW_URL", "").strip()
        if nsfw_url:
            config.nsfw.url = nsfw_url
