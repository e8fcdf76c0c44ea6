"""
NSFW classification client for Pet Battle API.

Endpoint used:
- POST {url}{path}  {"subjectId": "...", "image": "data:..."} -> {"safe": true}
"""

import logging
from typing import Any, Dict, Optional

import httpx

from models import ClassificationVerdict, NSFWConfig
from services.exceptions import ClassificationUnavailable

logger = logging.getLogger(__name__)


class ClassificationService:
    """Service that asks the external NSFW classifier about cat images."""

    def __init__(
        self,
        config: NSFWConfig = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or NSFWConfig()
        self.transport = transport

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    async def classify(self, subject_id: str, image: str) -> ClassificationVerdict:
        """
        Classify an image. Never raises for classifier problems.

        When the feature is disabled the image is safe without a call.
        When the classifier fails the verdict follows the fail_open policy.
        """
        if not self.enabled:
            return ClassificationVerdict(safe=True, source="disabled")

        try:
            verdict = await self.request_verdict(subject_id, image)
        except ClassificationUnavailable as e:
            logger.warning(
                f"⚠️ NSFW classifier unavailable for {subject_id}, "
                f"failing {'open' if self.config.fail_open else 'closed'}: {e}"
            )
            return ClassificationVerdict(safe=self.config.fail_open, source="fallback")

        if not verdict.safe:
            logger.info(f"🔞 NSFW: {subject_id} classified as not safe for work")
        return verdict

    async def request_verdict(self, subject_id: str, image: str) -> ClassificationVerdict:
        """
        Call the classifier.

        Raises:
            ClassificationUnavailable: on any transport, status or payload problem
        """
        base_url = (self.config.url or "").strip().rstrip("/")
        if not base_url:
            raise ClassificationUnavailable("NSFW classifier URL is empty.")

        try:
            async with httpx.AsyncClient(
                base_url=base_url,
                timeout=self.config.timeout_seconds,
                transport=self.transport,
            ) as client:
                resp = await client.post(
                    self.config.path,
                    json={"subjectId": subject_id, "image": image},
                )
        except httpx.TimeoutException as e:
            raise ClassificationUnavailable(f"NSFW request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise ClassificationUnavailable(f"NSFW request failed: {e}") from e
        except Exception as e:
            # Malformed URLs (httpx.InvalidURL) and anything else the client throws
            raise ClassificationUnavailable(f"NSFW request could not be made: {e}") from e

        if resp.status_code != 200:
            # Avoid dumping huge bodies; include a small snippet.
            body = resp.text[:500]
            raise ClassificationUnavailable(
                f"NSFW request failed: {resp.status_code} {body}"
            )

        try:
            data: Dict[str, Any] = resp.json()
        except ValueError as e:
            raise ClassificationUnavailable("NSFW classifier returned non-JSON body.") from e

        safe = data.get("safe") if isinstance(data, dict) else None
        if not isinstance(safe, bool):
            raise ClassificationUnavailable("NSFW classifier returned no verdict.")

        return ClassificationVerdict(safe=safe, source="service")
