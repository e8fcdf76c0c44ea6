"""
Image codec service for Pet Battle API.

Uploaded cats arrive as base64 data URIs of any resolution. Before they are
stored every image is decoded, shrunk to fit inside a fixed bounding square
and re-encoded as a JPEG data URI.
"""

import io
import logging
from typing import Tuple

from PIL import Image, UnidentifiedImageError

from models import ImageCodecConfig
from services.exceptions import CodecError
from utils import decode_data_uri, to_data_uri

logger = logging.getLogger(__name__)


class ImageCodecService:
    """Service for decoding, resizing and re-encoding uploaded images."""

    def __init__(self, config: ImageCodecConfig = None):
        self.config = config or ImageCodecConfig()

    @property
    def max_dimension(self) -> int:
        return self.config.max_dimension

    def _open(self, image: str) -> Image.Image:
        try:
            image_data = decode_data_uri(image)
        except ValueError as e:
            raise CodecError(str(e)) from e

        try:
            pil_image = Image.open(io.BytesIO(image_data))
            # Force a full decode so truncated files fail here
            pil_image.load()
        except (UnidentifiedImageError, OSError, Image.DecompressionBombError) as e:
            raise CodecError(f"Cannot decode image: {e}") from e
        return pil_image

    def dimensions(self, image: str) -> Tuple[int, int]:
        """Get (width, height) of an encoded image."""
        with self._open(image) as pil_image:
            return pil_image.size

    def resize(self, image: str) -> str:
        """
        Bound an encoded image to max_dimension on its longest side.

        Aspect ratio is preserved and smaller images are never upscaled. The
        result is always a JPEG data URI.

        Raises:
            CodecError: if the payload cannot be decoded
        """
        with self._open(image) as pil_image:
            original_size = pil_image.size
            resized = pil_image.convert("RGB")
            resized.thumbnail(
                (self.max_dimension, self.max_dimension), Image.Resampling.LANCZOS
            )

            buffer = io.BytesIO()
            try:
                resized.save(buffer, format="JPEG", quality=self.config.jpeg_quality)
            except OSError as e:
                raise CodecError(f"Cannot encode image: {e}") from e

        logger.debug(f"Resized image {original_size} -> {resized.size}")
        return to_data_uri(buffer.getvalue(), "image/jpeg")
