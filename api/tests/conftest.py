import io
import json

import httpx
import pytest
import pytest_asyncio
from PIL import Image

from models import ImageCodecConfig, NSFWConfig
from services import (
    ClassificationService,
    DatabaseService,
    ImageCodecService,
    UploadPipeline,
)
from utils import to_data_uri


def make_image_bytes(width: int, height: int, fmt: str = "JPEG", color=(200, 120, 40)) -> bytes:
    mode = "RGBA" if fmt == "PNG" else "RGB"
    if mode == "RGBA":
        color = (*color, 255)
    buffer = io.BytesIO()
    Image.new(mode, (width, height), color).save(buffer, format=fmt)
    return buffer.getvalue()


def make_data_uri(width: int, height: int, fmt: str = "JPEG") -> str:
    mime_type = "image/png" if fmt == "PNG" else "image/jpeg"
    return to_data_uri(make_image_bytes(width, height, fmt), mime_type)


def nsfw_transport(safe=None, status_code: int = 200, calls: list = None):
    """MockTransport that answers NSFW requests; safe=None returns no verdict."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(json.loads(request.content))
        if status_code != 200:
            return httpx.Response(status_code, text="classifier exploded")
        body = {} if safe is None else {"safe": safe}
        return httpx.Response(200, json=body)

    return httpx.MockTransport(handler)


def failing_transport(exc_type=httpx.ConnectError):
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_type("classifier unreachable", request=request)

    return httpx.MockTransport(handler)


@pytest.fixture
def image_codec_service():
    return ImageCodecService(ImageCodecConfig(max_dimension=100))


@pytest_asyncio.fixture
async def database_service(tmp_path):
    service = DatabaseService(f"sqlite+aiosqlite:///{tmp_path / 'cats.db'}")
    await service.init_database(run_migrations=False)
    yield service
    await service.close()


@pytest.fixture
def make_pipeline(image_codec_service, database_service):
    def _make(nsfw_config: NSFWConfig = None, transport=None) -> UploadPipeline:
        classification_service = ClassificationService(
            nsfw_config or NSFWConfig(), transport=transport
        )
        return UploadPipeline(image_codec_service, classification_service, database_service)

    return _make


@pytest.fixture
def data_uri():
    """Factory fixture: data_uri(width, height, fmt="JPEG") -> data URI."""
    return make_data_uri


@pytest.fixture
def image_bytes():
    return make_image_bytes


@pytest.fixture(name="nsfw_transport")
def nsfw_transport_fixture():
    return nsfw_transport


@pytest.fixture(name="failing_transport")
def failing_transport_fixture():
    return failing_transport
