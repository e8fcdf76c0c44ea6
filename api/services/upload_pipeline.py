"""
Upload pipeline that takes a submitted cat from payload to stored record.
"""

import asyncio
import logging

from models import Cat, RejectionReason, SubmissionResult
from services.classification_service import ClassificationService
from services.database_service import DatabaseService
from services.exceptions import CodecError
from services.image_codec_service import ImageCodecService

logger = logging.getLogger(__name__)


class UploadPipeline:
    """
    Runs one submission through vote, resize, save, classify and save again.

    Steps run strictly in order. The first save happens before classification
    so the verdict can be attached to a stored id; between the two saves the
    record is visible with an unset safety flag.
    """

    def __init__(
        self,
        image_codec_service: ImageCodecService,
        classification_service: ClassificationService,
        database_service: DatabaseService,
    ):
        self.image_codec_service = image_codec_service
        self.classification_service = classification_service
        self.database_service = database_service

    async def submit(self, cat: Cat) -> SubmissionResult:
        """
        Submit a cat. Not idempotent: every call votes and may store a new cat.

        Returns an accepted result with the id for safe cats, a BAD_IMAGE
        rejection when the image cannot be decoded (nothing stored) and an
        UNSAFE rejection when the classifier flags it (record kept).

        Raises:
            PersistenceError: if the store fails
        """
        cat.vote()
        # Only the classifier decides; ignore any flag sent by the client
        cat.is_safe_for_work = None

        try:
            cat.image = await asyncio.to_thread(self.image_codec_service.resize, cat.image)
        except CodecError as e:
            logger.info(f"Rejected cat with undecodable image: {e}")
            return SubmissionResult.reject(RejectionReason.BAD_IMAGE, detail=str(e))

        cat_id = await self.database_service.persist_or_update(cat)

        verdict = await self.classification_service.classify(cat_id, cat.image)
        cat.apply_verdict(verdict)
        await self.database_service.persist_or_update(cat)

        if not cat.is_safe_for_work:
            logger.info(f"🚫 Cat {cat_id} rejected as not safe for work")
            return SubmissionResult.reject(
                RejectionReason.UNSAFE,
                cat_id=cat_id,
                detail="Image classified as not safe for work",
            )

        logger.info(f"🐱 Cat {cat_id} accepted with count {cat.count}")
        return SubmissionResult.accept(cat_id)
