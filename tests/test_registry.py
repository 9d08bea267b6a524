from datetime import datetime, timedelta, timezone

import pytest

from storebuilder.domain.invariants.section import assert_config_shape
from storebuilder.domain.sections import registry
from storebuilder.domain.sections.exceptions import UnknownSectionType


def test_catalog_has_every_section_type():
    assert len(registry.SECTION_DEFINITIONS) == 32
    assert "header" in registry.SECTION_DEFINITIONS
    assert "product_reviews" in registry.SECTION_DEFINITIONS


def test_all_types_excludes_structural_sections():
    types = registry.all_types()

    assert "header" not in types
    assert "footer" not in types
    assert len(types) == 30
    assert types[0] == "hero_banner"


def test_lookup_unknown_type_raises():
    with pytest.raises(UnknownSectionType) as exc:
        registry.lookup("marquee")

    assert exc.value.section_type == "marquee"
    assert exc.value.code == "UnknownSectionType"


def test_lookup_returns_definition():
    definition = registry.lookup("testimonials")

    assert definition.label == "Testimonials"
    assert definition.category == "content"
    assert definition.default_config["layout"] == "carousel"


def test_every_definition_uses_a_known_category():
    category_ids = {category_id for category_id, _ in registry.SECTION_CATEGORIES}
    for definition in registry.SECTION_DEFINITIONS.values():
        assert definition.category in category_ids


def test_default_config_is_a_fresh_copy():
    first = registry.default_config("hero_slider")
    first["slides"].append({"id": "3", "title": "Extra"})
    first["autoplay"] = False

    second = registry.default_config("hero_slider")

    assert len(second["slides"]) == 2
    assert second["autoplay"] is True
    assert len(registry.SECTION_DEFINITIONS["hero_slider"].default_config["slides"]) == 2


def test_countdown_default_ends_a_week_from_now():
    config = registry.default_config("countdown")

    end = datetime.fromisoformat(config["endDate"])
    expected = datetime.now(timezone.utc) + timedelta(days=7)
    assert abs((end - expected).total_seconds()) < 60
    assert registry.SECTION_DEFINITIONS["countdown"].default_config["endDate"] == ""


@pytest.mark.parametrize("section_type", registry.all_types())
def test_default_configs_match_their_shape(section_type):
    assert_config_shape(section_type, registry.default_config(section_type))


def test_definitions_by_category_drops_empty_categories():
    grouped = registry.definitions_by_category(["spacer", "text_block", "faq"])

    assert [group["id"] for group in grouped] == ["content", "layout"]
    content = grouped[0]
    assert [item["type"] for item in content["sections"]] == ["text_block", "faq"]
    assert content["label"] == "Content"


def test_categories_keep_palette_order():
    assert [c["id"] for c in registry.categories()] == [
        "hero", "products", "categories", "content", "marketing", "layout",
    ]


def test_to_dict_includes_default_config():
    data = registry.lookup("spacer").to_dict()

    assert data == {
        "type": "spacer",
        "label": "Spacer",
        "category": "layout",
        "description": "Vertical spacing element",
        "default_config": {"height": "medium"},
    }


def test_registry_defaults_are_read_only():
    definition = registry.lookup("trust_badges")

    with pytest.raises(TypeError):
        definition.default_config["title"] = "Changed"
    with pytest.raises(AttributeError):
        definition.default_config["badges"].append({"id": "4"})

    config = registry.default_config("trust_badges")
    assert config["title"] == "Why Shop With Us"
    assert isinstance(config["badges"], list)
    assert isinstance(config["badges"][0], dict)
