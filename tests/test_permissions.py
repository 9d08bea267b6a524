import logging

import pytest

from storebuilder.domain.sections import permissions, registry
from storebuilder.normalizers.permission import normalize_permission

SYSTEM_PAGES = ("cart", "checkout", "profile", "order_tracking", "search")


def test_every_page_type_has_an_entry():
    assert set(permissions.PAGE_TYPES) == set(permissions.PAGE_SECTION_PERMISSIONS)


def test_listed_section_types_exist_in_registry():
    for page_type, permission in permissions.PAGE_SECTION_PERMISSIONS.items():
        if permission.allows_all:
            continue
        for section_type in permission.allowed_section_types:
            assert registry.is_known(section_type), (page_type, section_type)


def test_homepage_allows_everything():
    assert permissions.is_allowed("homepage", "hero_banner")
    assert permissions.is_allowed("homepage", "product_reviews")
    assert permissions.allowed_types("homepage") == registry.all_types()
    assert permissions.allowed_section_count("homepage") == 30


@pytest.mark.parametrize(
    "page_type, section_type, expected",
    [
        ("about", "text_block", True),
        ("about", "testimonials", True),
        ("about", "hero_banner", False),
        ("contact", "faq", True),
        ("contact", "gallery", False),
        ("policy", "text_block", True),
        ("policy", "image_text", False),
        ("product", "product_filters", True),
        ("product", "text_block", False),
        ("category", "category_banner", True),
        ("category", "hero_slider", False),
    ],
)
def test_is_allowed_follows_the_table(page_type, section_type, expected):
    assert permissions.is_allowed(page_type, section_type) is expected


@pytest.mark.parametrize("page_type", SYSTEM_PAGES)
def test_system_pages_allow_nothing(page_type):
    assert not permissions.is_allowed(page_type, "text_block")
    assert permissions.allowed_types(page_type) == ()
    assert not permissions.can_accept_more(page_type, 0)
    assert not permissions.can_page_have_sections(page_type)
    assert permissions.system_page_message(page_type)


def test_can_accept_more_boundaries():
    assert permissions.can_accept_more("contact", 9)
    assert not permissions.can_accept_more("contact", 10)
    assert not permissions.can_accept_more("contact", 11)
    assert permissions.can_accept_more("about", 19)
    assert not permissions.can_accept_more("about", 20)


def test_homepage_has_no_limit():
    assert permissions.permission_info("homepage").max_sections is None
    assert permissions.can_accept_more("homepage", 10_000)


def test_unknown_page_type_fails_closed(caplog):
    with caplog.at_level(logging.WARNING, logger="storebuilder.domain.sections.permissions"):
        assert not permissions.is_allowed("landing", "text_block")
        assert permissions.allowed_types("landing") == ()
        assert not permissions.can_accept_more("landing", 0)

    assert "Unknown page type: landing" in caplog.text


def test_unknown_page_type_info_is_synthetic():
    info = permissions.permission_info("landing")

    assert info.allowed_section_types == ()
    assert info.max_sections == 0
    assert info.description == "Unknown page type"
    assert not permissions.can_page_have_sections("landing")
    assert permissions.allowed_section_count("landing") == 0
    assert permissions.system_page_message("landing") is None


def test_content_pages_have_no_system_message():
    assert permissions.system_page_message("about") is None
    assert permissions.can_page_have_sections("about")
    assert permissions.allowed_section_count("about") == 8


def test_normalize_permission_for_editor():
    data = normalize_permission("contact", current_count=10)

    assert data["page_type"] == "contact"
    assert data["max_sections"] == 10
    assert data["allowed_count"] == 5
    assert data["section_count"] == 10
    assert data["can_add_more"] is False
    assert [group["id"] for group in data["palette"]] == ["content", "layout"]


def test_normalize_permission_reports_all_for_homepage():
    data = normalize_permission("homepage")

    assert data["allowed_section_types"] == "all"
    assert data["max_sections"] is None
    assert data["can_have_sections"] is True
    assert "section_count" not in data
