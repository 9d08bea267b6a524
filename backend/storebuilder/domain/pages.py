"""
Page-type helpers used by the editor and the storefront.
"""
from types import MappingProxyType

# Slugs that identify special pages regardless of their stored page type.
SPECIAL_PAGE_SLUGS = MappingProxyType({
    "cart": "cart",
    "checkout": "checkout",
    "account": "profile",
    "profile": "profile",
    "products": "product",
    "catalog": "product",
    "search": "search",
    "orders": "order_tracking",
})

PAGES_WITH_BUILT_IN_CONTENT = frozenset({
    "product",
    "category",
    "cart",
    "checkout",
    "profile",
    "search",
    "order_tracking",
})

PAGE_TYPE_LABELS = MappingProxyType({
    "homepage": "Homepage",
    "about": "About",
    "contact": "Contact",
    "policy": "Policy",
    "custom": "Custom Page",
    "product": "Products",
    "category": "Categories",
    "cart": "Cart",
    "checkout": "Checkout",
    "profile": "Profile",
    "order_tracking": "Order Tracking",
    "search": "Search",
})

# Pages every new store starts with. Protected pages cannot be deleted.
STANDARD_PAGES = (
    {
        "page_type": "homepage",
        "title": "Homepage",
        "slug": "home",
        "is_published": True,
        "is_protected": True,
        "default_sections": (),
    },
    {
        "page_type": "custom",
        "title": "Products",
        "slug": "products",
        "is_published": True,
        "is_protected": True,
        "default_sections": (
            {
                "section_type": "product_grid",
                "name": "All Products",
                "config": {"title": "All Products", "columns": 4, "rows": 4, "showFilters": True},
            },
        ),
    },
    {
        "page_type": "about",
        "title": "About Us",
        "slug": "about",
        "is_published": True,
        "is_protected": False,
        "default_sections": (
            {
                "section_type": "text_block",
                "name": "About Us",
                "config": {
                    "title": "About Our Store",
                    "content": "<p>Welcome to our store. Tell your customers about your business, "
                               "your story, and what makes you unique.</p>",
                    "alignment": "center",
                    "maxWidth": "medium",
                },
            },
        ),
    },
    {
        "page_type": "contact",
        "title": "Contact",
        "slug": "contact",
        "is_published": True,
        "is_protected": False,
        "default_sections": (
            {
                "section_type": "text_block",
                "name": "Contact Information",
                "config": {
                    "title": "Contact Us",
                    "content": "<p>Get in touch with us. We'd love to hear from you!</p>",
                    "alignment": "center",
                    "maxWidth": "medium",
                },
            },
        ),
    },
)

PROTECTED_PAGE_SLUGS = frozenset(page["slug"] for page in STANDARD_PAGES if page["is_protected"])


def resolve_page_type(page_type: str, slug: str) -> str:
    """Page type used for permission checks: special slugs win over the stored type."""
    return SPECIAL_PAGE_SLUGS.get(slug, page_type)


def has_built_in_content(page_type: str) -> bool:
    return page_type in PAGES_WITH_BUILT_IN_CONTENT


def supports_placement(page_type: str) -> bool:
    """Sections can sit above or below built-in content only where there is some."""
    return has_built_in_content(page_type)


def page_type_label(page_type: str) -> str:
    return PAGE_TYPE_LABELS.get(page_type, page_type)


def is_protected(slug: str) -> bool:
    return slug in PROTECTED_PAGE_SLUGS
