import httpx
import pytest

from models import NSFWConfig
from services import ClassificationService
from services.exceptions import ClassificationUnavailable

ENABLED = NSFWConfig(enabled=True, url="http://nsfw.test", path="/nsfw")


@pytest.mark.asyncio
async def test_disabled_classifier_is_safe_without_calling_service(nsfw_transport):
    calls = []
    service = ClassificationService(NSFWConfig(enabled=False), transport=nsfw_transport(False, calls=calls))

    verdict = await service.classify("cat-1", "data:image/jpeg;base64,AAAA")

    assert verdict.safe is True
    assert verdict.source == "disabled"
    assert calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("safe", [True, False])
async def test_classifier_verdict_is_returned(nsfw_transport, safe):
    calls = []
    service = ClassificationService(ENABLED, transport=nsfw_transport(safe, calls=calls))

    verdict = await service.classify("cat-1", "data:image/jpeg;base64,AAAA")

    assert verdict.safe is safe
    assert verdict.source == "service"
    assert calls == [{"subjectId": "cat-1", "image": "data:image/jpeg;base64,AAAA"}]


@pytest.mark.asyncio
async def test_classifier_failure_fails_open(failing_transport):
    service = ClassificationService(ENABLED, transport=failing_transport())

    verdict = await service.classify("cat-1", "img")

    assert verdict.safe is True
    assert verdict.source == "fallback"


@pytest.mark.asyncio
async def test_classifier_failure_fails_closed_when_configured(failing_transport):
    config = ENABLED.model_copy(update={"fail_open": False})
    service = ClassificationService(config, transport=failing_transport())

    verdict = await service.classify("cat-1", "img")

    assert verdict.safe is False
    assert verdict.source == "fallback"


@pytest.mark.asyncio
async def test_classifier_timeout_is_treated_as_failure(failing_transport):
    service = ClassificationService(ENABLED, transport=failing_transport(httpx.ReadTimeout))

    with pytest.raises(ClassificationUnavailable, match="timed out"):
        await service.request_verdict("cat-1", "img")

    assert (await service.classify("cat-1", "img")).safe is True


@pytest.mark.asyncio
async def test_error_status_raises_unavailable(nsfw_transport):
    service = ClassificationService(ENABLED, transport=nsfw_transport(status_code=503))

    with pytest.raises(ClassificationUnavailable, match="503"):
        await service.request_verdict("cat-1", "img")


@pytest.mark.asyncio
async def test_missing_verdict_raises_unavailable(nsfw_transport):
    service = ClassificationService(ENABLED, transport=nsfw_transport(None))

    with pytest.raises(ClassificationUnavailable, match="no verdict"):
        await service.request_verdict("cat-1", "img")


@pytest.mark.asyncio
async def test_empty_url_raises_unavailable():
    service = ClassificationService(ENABLED.model_copy(update={"url": " "}))

    with pytest.raises(ClassificationUnavailable, match="URL is empty"):
        await service.request_verdict("cat-1", "img")


@pytest.mark.asyncio
@pytest.mark.parametrize("url", ["http://[::1", "http://nsfw.test:notaport"])
async def test_malformed_url_fails_open(url):
    service = ClassificationService(ENABLED.model_copy(update={"url": url}))

    with pytest.raises(ClassificationUnavailable):
        await service.request_verdict("cat-1", "img")

    verdict = await service.classify("cat-1", "img")
    assert verdict.safe is True
    assert verdict.source == "fallback"
