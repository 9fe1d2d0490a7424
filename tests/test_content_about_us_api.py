"""
Content API: About-Us

Fields present with a non-null value overwrite the stored ones; everything
else keeps its previous value.
"""
import pytest

pytestmark = pytest.mark.anyio

URL = "/api/content/about-us"


async def test_get_seeds_default_about_us(client, mongo_db):
    resp = await client.get(URL)
    assert resp.status_code == 200
    body = resp.json()
    assert body["_id"] == "about-us"
    assert body["heroTitle"] == "About glowetsu"
    assert body["storyTitle"] == "Our Story"
    assert len(body["storyParagraphs"]) == 3
    assert body["storyImage"].startswith("https://images.pexels.com/")
    assert [m["name"] for m in body["teamMembers"]] == ["Sarah Johnson"]
    assert body["createdAt"] and body["updatedAt"]
    assert await mongo_db["about_us"].count_documents({}) == 1


async def test_partial_put_leaves_other_fields_untouched(client):
    before = (await client.get(URL)).json()

    resp = await client.put(URL, json={"heroTitle": "About Us", "unknownField": 42})
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Content updated successfully"
    assert body["aboutUs"]["heroTitle"] == "About Us"

    after = (await client.get(URL)).json()
    assert after["heroTitle"] == "About Us"
    for field in ("heroSubtitle", "storyTitle", "storyParagraphs", "storyImage", "teamMembers"):
        assert after[field] == before[field]
    assert "unknownField" not in after


async def test_put_applies_empty_string_and_empty_lists(client):
    await client.get(URL)

    resp = await client.put(
        URL, json={"heroSubtitle": "", "storyParagraphs": [], "teamMembers": []}
    )
    assert resp.status_code == 200

    after = (await client.get(URL)).json()
    assert after["heroSubtitle"] == ""
    assert after["storyParagraphs"] == []
    assert after["teamMembers"] == []


async def test_put_null_counts_as_absent(client):
    before = (await client.get(URL)).json()

    resp = await client.put(URL, json={"heroTitle": None, "storyImage": None})
    assert resp.status_code == 200

    after = (await client.get(URL)).json()
    assert after["heroTitle"] == before["heroTitle"]
    assert after["storyImage"] == before["storyImage"]


async def test_team_member_order_is_stored_as_sent(client):
    members = [
        {"name": "B", "role": "Guide", "image": "", "description": "", "order": 5},
        {"name": "A", "role": "Guide", "image": "", "description": "", "order": 0},
    ]
    resp = await client.put(URL, json={"teamMembers": members})
    assert resp.status_code == 200

    stored = (await client.get(URL)).json()["teamMembers"]
    assert [(m["name"], m["order"]) for m in stored] == [("B", 5), ("A", 0)]
    assert all(m["isActive"] for m in stored)


async def test_put_on_fresh_storage_starts_from_defaults(client):
    resp = await client.put(URL, json={"heroTitle": "Hello"})
    assert resp.status_code == 200

    body = resp.json()["aboutUs"]
    assert body["heroTitle"] == "Hello"
    assert body["storyTitle"] == "Our Story"
    assert body["storyImage"]


async def test_put_with_wrong_field_type_is_rejected(client):
    before = (await client.get(URL)).json()

    resp = await client.put(URL, json={"storyParagraphs": "one long paragraph"})
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Invalid request body"}
    assert (await client.get(URL)).json() == before
