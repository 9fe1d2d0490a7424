"""
Public display loading: fetched content when available, shared defaults otherwise.
"""
import httpx
import pytest

from glowetsu.collections.content_models import CarouselSlide
from glowetsu.collections.enums import ContentType
from glowetsu.editor import ContentApiClient, ContentApiError, load_public_content, visible_items
from glowetsu.utils.seed_data.content_data import WHY_CHOOSE_US_DATA

pytestmark = pytest.mark.anyio


class _StubClient:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error

    async def fetch(self, content_type):
        if self.error is not None:
            raise self.error
        return self.result


async def test_fetch_failure_falls_back_to_defaults():
    stub = _StubClient(error=ContentApiError(500, "Failed to fetch content"))

    content = await load_public_content(stub, ContentType.WHY_CHOOSE_US)
    assert content.main_title == WHY_CHOOSE_US_DATA["main_title"]
    assert len(content.features) == 3


async def test_empty_response_falls_back_to_defaults():
    content = await load_public_content(_StubClient(result={}), ContentType.CAROUSEL)
    assert content.slides[0].title == "Discover Amazing Destinations"


async def test_malformed_response_falls_back_to_defaults():
    content = await load_public_content(
        _StubClient(result={"heroTitle": 3}), ContentType.ABOUT_US
    )
    assert content.hero_title == "About glowetsu"


async def test_stored_content_is_displayed(client):
    await client.put("/api/content/about-us", json={"heroTitle": "Meet the team"})

    content = await load_public_content(ContentApiClient(client), ContentType.ABOUT_US)
    assert content.hero_title == "Meet the team"


async def test_visible_items_filters_inactive_and_sorts_by_order():
    slides = [
        CarouselSlide(image="", title="late", subtitle="", order=2),
        CarouselSlide(image="", title="hidden", subtitle="", order=0, is_active=False),
        CarouselSlide(image="", title="early", subtitle="", order=1),
    ]
    assert [s.title for s in visible_items(slides)] == ["early", "late"]


def _html_api() -> ContentApiClient:
    transport = httpx.MockTransport(
        lambda request: httpx.Response(
            200, text="<html>maintenance</html>", headers={"content-type": "text/html"}
        )
    )
    return ContentApiClient(httpx.AsyncClient(transport=transport, base_url="http://localhost"))


async def test_non_json_success_body_is_an_api_error():
    api = _html_api()
    with pytest.raises(ContentApiError) as exc_info:
        await api.fetch(ContentType.CAROUSEL)

    assert exc_info.value.status_code == 200
    assert exc_info.value.detail == "Invalid JSON response"


async def test_non_json_success_body_falls_back_to_defaults():
    content = await load_public_content(_html_api(), ContentType.ABOUT_US)
    assert content.hero_title == "About glowetsu"
