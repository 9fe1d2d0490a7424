"""
Editor drafts: id-addressed list edits and payload serialization.
"""
import pytest

from glowetsu.editor.drafts import (
    SECTION_IMAGE_SLOT,
    STORY_IMAGE_SLOT,
    AboutUsDraft,
    CarouselDraft,
    ContentDraft,
    WhyChooseUsDraft,
)
from glowetsu.utils.seed_data.content_data import get_default_content
from glowetsu.collections.content_models import CarouselContent
from glowetsu.collections.enums import ContentType


def _about_us_draft() -> AboutUsDraft:
    return AboutUsDraft.from_document(get_default_content(ContentType.ABOUT_US))


def test_empty_drafts_have_blank_fields():
    assert AboutUsDraft.empty().to_payload()["heroTitle"] == ""
    assert CarouselDraft.empty().to_payload() == {"slides": []}
    assert WhyChooseUsDraft.empty().to_payload()["features"] == []


def test_added_slide_gets_defaults_id_and_next_order():
    draft = CarouselDraft.empty()
    first = draft.add_slide(title="One")
    second = draft.add_slide()

    assert first.id != second.id
    assert (first.order, second.order) == (0, 1)
    assert second.button_text == "Explore Now"
    assert second.button_link == "/tours"


def test_remove_and_update_address_items_by_id():
    draft = CarouselDraft.empty()
    a = draft.add_slide(title="A")
    b = draft.add_slide(title="B")
    c = draft.add_slide(title="C")

    assert draft.remove_slide(a.id) is True
    assert draft.remove_slide(a.id) is False
    draft.update_slide(c.id, title="C2")

    payload = draft.to_payload()
    assert [s["title"] for s in payload["slides"]] == ["B", "C2"]
    assert [s["id"] for s in payload["slides"]] == [b.id, c.id]


def test_update_unknown_item_raises_key_error():
    with pytest.raises(KeyError):
        CarouselDraft.empty().update_slide("missing", title="x")


def test_paragraphs_serialize_as_plain_strings():
    draft = _about_us_draft()
    first_id = draft.paragraphs.ids()[0]
    added = draft.add_paragraph("A fourth paragraph")

    draft.remove_paragraph(first_id)
    draft.update_paragraph(added.id, "Edited")

    paragraphs = draft.to_payload()["storyParagraphs"]
    assert len(paragraphs) == 3
    assert paragraphs[-1] == "Edited"
    assert all(isinstance(p, str) for p in paragraphs)


def test_about_us_image_slots_cover_story_and_members():
    draft = _about_us_draft()
    member = draft.add_team_member(name="Lee", role="Guide")

    assert draft.image_slots()[0] == STORY_IMAGE_SLOT
    assert member.id in draft.image_slots()

    assert draft.attach_image(STORY_IMAGE_SLOT, "https://blob.test/story.png")
    assert draft.attach_image(member.id, "https://blob.test/lee.png")

    payload = draft.to_payload()
    assert payload["storyImage"] == "https://blob.test/story.png"
    assert payload["teamMembers"][-1]["image"] == "https://blob.test/lee.png"
    assert payload["teamMembers"][-1]["order"] == 1


def test_scalar_update_uses_field_names():
    draft = WhyChooseUsDraft.empty()
    draft.update(main_title="Why us", main_description="Because")

    payload = draft.to_payload()
    assert payload["mainTitle"] == "Why us"
    assert payload["mainDescription"] == "Because"


def test_why_choose_us_has_single_image_slot():
    draft = WhyChooseUsDraft.empty()
    feature = draft.add_feature(title="Guides")

    assert draft.image_slots() == [SECTION_IMAGE_SLOT]
    assert draft.attach_image(feature.id, "https://blob.test/x.png") is False
    assert draft.attach_image(SECTION_IMAGE_SLOT, "https://blob.test/x.png") is True
    assert draft.to_payload()["features"][0]["icon"] == "Star"


def test_payload_excludes_key_and_timestamps():
    data = get_default_content(ContentType.CAROUSEL)
    data.update({"_id": "carousel", "createdAt": "2026-01-01T00:00:00", "updatedAt": "2026-01-02T00:00:00"})

    payload = CarouselDraft.from_document(data).to_payload()
    assert set(payload) == {"slides"}


def test_base_draft_cannot_be_instantiated():
    with pytest.raises(TypeError):
        ContentDraft(CarouselContent())
