"""
Seed service for Pet Battle API.

Fills an empty store with the bundled litter of sample cats so a fresh
deployment has something to vote on.
"""

import asyncio
import logging
import random
from pathlib import Path
from typing import List, Optional

from models import Cat, SeedConfig
from services.database_service import DatabaseService
from services.exceptions import CodecError
from services.image_codec_service import ImageCodecService
from utils import to_data_uri

logger = logging.getLogger(__name__)

SEED_IMAGE_SUFFIXES = {".jpeg": "image/jpeg", ".jpg": "image/jpeg", ".png": "image/png"}


class SeedService:
    """Service for loading sample cats into an empty store, at most once."""

    def __init__(
        self,
        image_codec_service: ImageCodecService,
        database_service: DatabaseService,
        config: SeedConfig = None,
        rng: Optional[random.Random] = None,
    ):
        self.image_codec_service = image_codec_service
        self.database_service = database_service
        self.config = config or SeedConfig()
        self.rng = rng or random.Random()
        self._lock = asyncio.Lock()
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    def seed_images(self) -> List[Path]:
        """Sample images in the seed directory, sorted by name."""
        directory = Path(self.config.directory)
        if not directory.is_dir():
            logger.warning(f"Seed directory does not exist: {directory}")
            return []
        return sorted(
            path for path in directory.iterdir()
            if path.is_file() and path.suffix.lower() in SEED_IMAGE_SUFFIXES
        )

    async def load_litter(self, once: bool = True) -> int:
        """
        Load the sample cats if the store is empty.

        Callers in this process are serialized on one lock. With once, only
        the first successful call does any work; the empty-store check
        covers other processes. Returns the number of cats loaded.
        """
        async with self._lock:
            if once and self._loaded:
                return 0

            has_cats = await self.database_service.count() > 0
            self._loaded = True
            if has_cats:
                logger.info("🐾 Store already has cats, skipping litter")
                return 0

            loaded = 0
            for path in self.seed_images():
                if await self._load_one(path):
                    loaded += 1

            logger.info(f"🐾 Loaded {loaded} cats from {self.config.directory}")
            return loaded

    async def _load_one(self, path: Path) -> bool:
        try:
            image_data = await asyncio.to_thread(path.read_bytes)
            image = to_data_uri(image_data, SEED_IMAGE_SUFFIXES[path.suffix.lower()])
            resized = await asyncio.to_thread(self.image_codec_service.resize, image)
        except (OSError, CodecError) as e:
            logger.warning(f"Skipping seed image {path.name}: {e}")
            return False

        cat = Cat(
            image=resized,
            count=self.rng.randint(self.config.min_count, self.config.max_count),
            is_safe_for_work=True,
            voted=False,
        )
        await self.database_service.persist_or_update(cat)
        logger.debug(f"Seeded {path.name} as {cat.id} with count {cat.count}")
        return True
