"""
Page-type section permissions.

Which section types a page of a given type may hold, and how many. Homepage
gets the whole catalog; content pages get content-focused sections; shop
pages get product/category sections; system pages (cart, checkout, ...) are
functional and hold no customizable sections.

Every lookup here is total: an unknown page type is treated as allowing
nothing (fail closed) and is logged, never raised.
"""
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from . import registry

logger = logging.getLogger(__name__)

ALL_SECTIONS = "all"

PAGE_TYPES: Tuple[str, ...] = (
    "homepage",
    "about",
    "contact",
    "policy",
    "custom",
    "product",
    "category",
    "cart",
    "checkout",
    "profile",
    "order_tracking",
    "search",
)


@dataclass(frozen=True)
class PageTypePermission:
    allowed_section_types: Union[str, Tuple[str, ...]]
    max_sections: Optional[int]  # None means unbounded
    description: str

    @property
    def allows_all(self) -> bool:
        return self.allowed_section_types == ALL_SECTIONS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "allowed_section_types": (
                ALL_SECTIONS if self.allows_all else list(self.allowed_section_types)
            ),
            "max_sections": self.max_sections,
            "description": self.description,
        }


UNKNOWN_PAGE_PERMISSION = PageTypePermission((), 0, "Unknown page type")

LAYOUT_SECTIONS = ("spacer", "divider")

PAGE_SECTION_PERMISSIONS: Mapping[str, PageTypePermission] = MappingProxyType({
    "homepage": PageTypePermission(
        ALL_SECTIONS, None,
        "Full access to every section type",
    ),
    "about": PageTypePermission(
        ("text_block", "image_text", "gallery", "testimonials", "trust_badges", "faq", *LAYOUT_SECTIONS),
        20,
        "Content sections for telling your story",
    ),
    "contact": PageTypePermission(
        ("text_block", "image_text", "faq", *LAYOUT_SECTIONS),
        10,
        "Minimal sections for contact information",
    ),
    "policy": PageTypePermission(
        ("text_block", "faq", *LAYOUT_SECTIONS),
        10,
        "Text-heavy sections for terms, privacy and refund policies",
    ),
    "custom": PageTypePermission(
        ("text_block", "image_text", "gallery", "faq", *LAYOUT_SECTIONS),
        25,
        "Basic content sections",
    ),
    "product": PageTypePermission(
        (
            "product_grid", "product_carousel", "featured_products", "new_arrivals", "best_sellers",
            "category_grid", "promo_banner", "trust_badges",
            "product_filters", "product_sort", "recently_viewed", "recommended_products", "product_reviews",
            *LAYOUT_SECTIONS,
        ),
        15,
        "Product display and marketing sections around the catalog",
    ),
    "category": PageTypePermission(
        ("category_grid", "category_banner", "product_grid", "promo_banner", *LAYOUT_SECTIONS),
        10,
        "Category browsing sections",
    ),
    "cart": PageTypePermission((), 0, "Shopping cart is a functional page"),
    "checkout": PageTypePermission((), 0, "Checkout is a functional page"),
    "profile": PageTypePermission((), 0, "Customer profile is a functional page"),
    "order_tracking": PageTypePermission((), 0, "Order tracking is a functional page"),
    "search": PageTypePermission((), 0, "Search results are generated dynamically"),
})

SYSTEM_PAGE_MESSAGES: Mapping[str, str] = MappingProxyType({
    "cart": "Shopping cart is a functional page. Configure cart behavior in store settings.",
    "checkout": "Checkout is a functional page. Configure payment and shipping in store settings.",
    "profile": "Customer profile is a functional page managed by the authentication system.",
    "order_tracking": "Order tracking is a functional page that displays order status automatically.",
    "search": "Search results are generated dynamically based on customer queries.",
})


def _entry(page_type: str) -> Optional[PageTypePermission]:
    permission = PAGE_SECTION_PERMISSIONS.get(page_type)
    if permission is None:
        logger.warning("Unknown page type: %s", page_type)
    return permission


def is_allowed(page_type: str, section_type: str) -> bool:
    permission = _entry(page_type)
    if permission is None:
        return False
    if permission.allows_all:
        return True
    return section_type in permission.allowed_section_types


def allowed_types(page_type: str) -> Tuple[str, ...]:
    """All section types a page of ``page_type`` may hold (header/footer excluded)."""
    permission = _entry(page_type)
    if permission is None:
        return ()
    if permission.allows_all:
        return registry.all_types()
    return tuple(permission.allowed_section_types)


def can_accept_more(page_type: str, current_count: int) -> bool:
    permission = _entry(page_type)
    if permission is None:
        return False
    if permission.max_sections is None:
        return True
    return current_count < permission.max_sections


def permission_info(page_type: str) -> PageTypePermission:
    return PAGE_SECTION_PERMISSIONS.get(page_type, UNKNOWN_PAGE_PERMISSION)


def can_page_have_sections(page_type: str) -> bool:
    permission = PAGE_SECTION_PERMISSIONS.get(page_type)
    if permission is None or permission.max_sections == 0:
        return False
    if permission.allows_all:
        return True
    return len(permission.allowed_section_types) > 0


def allowed_section_count(page_type: str) -> int:
    return len(allowed_types(page_type))


def system_page_message(page_type: str) -> Optional[str]:
    return SYSTEM_PAGE_MESSAGES.get(page_type)
