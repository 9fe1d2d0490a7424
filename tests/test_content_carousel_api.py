"""
Content API: Carousel

Seed-on-read, whole-list replacement and rejection of malformed slide bodies.
"""
import pytest

pytestmark = pytest.mark.anyio

URL = "/api/content/carousel"


async def test_fresh_storage_seeds_single_default_slide(client, mongo_db):
    resp = await client.get(URL)
    assert resp.status_code == 200
    body = resp.json()
    assert body["_id"] == "carousel"
    assert len(body["slides"]) == 1
    slide = body["slides"][0]
    assert slide["title"] == "Discover Amazing Destinations"
    assert slide["buttonText"] == "Explore Tours"
    assert slide["buttonLink"] == "/tours"
    assert slide["isActive"] is True
    assert slide["id"]
    assert await mongo_db["carousels"].count_documents({}) == 1


async def test_second_get_returns_same_document(client, mongo_db):
    first = (await client.get(URL)).json()
    second = (await client.get(URL)).json()
    assert first == second
    assert await mongo_db["carousels"].count_documents({}) == 1


async def test_put_empty_slides_clears_carousel(client):
    await client.get(URL)

    resp = await client.put(URL, json={"slides": []})
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Carousel updated successfully"
    assert body["carousel"]["slides"] == []

    assert (await client.get(URL)).json()["slides"] == []


@pytest.mark.parametrize(
    "payload", [{"slides": "not-an-array"}, {}, {"slides": None}, {"slides": {"title": "x"}}]
)
async def test_put_without_slides_array_is_rejected_and_keeps_state(client, payload):
    before = (await client.get(URL)).json()

    resp = await client.put(URL, json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Slides array is required"}

    assert (await client.get(URL)).json() == before


async def test_put_with_malformed_slide_is_rejected(client):
    before = (await client.get(URL)).json()

    resp = await client.put(URL, json={"slides": [{"title": "Missing everything else"}]})
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Invalid request body"}
    assert (await client.get(URL)).json() == before


async def test_put_applies_slide_defaults_and_keeps_given_ids(client):
    slides = [
        {
            "id": "slide-alps",
            "image": "https://blob.test/alps.jpg",
            "title": "Alps",
            "subtitle": "Snow and peaks",
            "order": 0,
        },
        {
            "image": "https://blob.test/bali.jpg",
            "title": "Bali",
            "subtitle": "Beaches",
            "order": 1,
            "isActive": False,
        },
    ]

    resp = await client.put(URL, json={"slides": slides})
    assert resp.status_code == 200

    stored = (await client.get(URL)).json()["slides"]
    assert [s["title"] for s in stored] == ["Alps", "Bali"]
    assert stored[0]["id"] == "slide-alps"
    assert stored[1]["id"]
    assert stored[0]["buttonText"] == "Explore Now"
    assert stored[0]["buttonLink"] == "/tours"
    assert stored[1]["isActive"] is False


async def test_put_on_fresh_storage_creates_document(client, mongo_db):
    resp = await client.put(URL, json={"slides": []})
    assert resp.status_code == 200
    assert resp.json()["carousel"]["_id"] == "carousel"
    assert await mongo_db["carousels"].count_documents({}) == 1


async def test_put_keeps_created_at_and_refreshes_updated_at(client):
    seeded = (await client.get(URL)).json()

    updated = (await client.put(URL, json={"slides": []})).json()["carousel"]
    assert updated["createdAt"] == seeded["createdAt"]
    assert updated["updatedAt"]


async def test_non_object_body_is_rejected(client):
    resp = await client.put(URL, json=["not", "an", "object"])
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Invalid request body"}
