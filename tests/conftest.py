"""
Pytest configuration for the content API tests.

Settings are filled from the environment before the application is imported,
MongoDB is replaced by mongomock-motor and object storage by a recording fake.
"""
import os

os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("MONGO_DB", "glowetsu_test")
os.environ.setdefault("AZURE_STORAGE_CONNECTION_STRING", "UseDevelopmentStorage=true")

import httpx  # noqa: E402
import pytest  # noqa: E402
from httpx import ASGITransport  # noqa: E402
from mongomock_motor import AsyncMongoMockClient  # noqa: E402

import main  # noqa: E402
from glowetsu.core.dependencies import get_image_uploader, get_mongo_db  # noqa: E402


class FakeUploader:
    """Records uploads instead of writing to Azure."""

    def __init__(self):
        self.calls = []
        self.error = None

    async def upload(self, data, filename, content_type):
        if self.error is not None:
            raise self.error
        self.calls.append({"data": data, "filename": filename, "content_type": content_type})
        return f"https://blob.test/content-images/content/{len(self.calls)}-{filename}"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def mongo_db():
    return AsyncMongoMockClient()["glowetsu_test"]


@pytest.fixture
def uploader():
    return FakeUploader()


@pytest.fixture
async def client(mongo_db, uploader):
    main.app.dependency_overrides[get_mongo_db] = lambda: mongo_db
    main.app.dependency_overrides[get_image_uploader] = lambda: uploader
    async with httpx.AsyncClient(
        transport=ASGITransport(app=main.app), base_url="http://localhost"
    ) as http:
        yield http
    main.app.dependency_overrides.clear()
