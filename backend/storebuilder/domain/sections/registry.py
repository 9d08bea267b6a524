"""
Section type registry.

Static catalog of every section type the builder knows about: label,
palette category, description and the configuration a freshly added section
starts with. Built once at import time and never mutated.
"""
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Sequence, Tuple

from .exceptions import UnknownSectionType


# Header and footer are structural; they are edited outside the section flow.
STRUCTURAL_SECTION_TYPES = frozenset({"header", "footer"})

SECTION_CATEGORIES: Tuple[Tuple[str, str], ...] = (
    ("hero", "Hero Sections"),
    ("products", "Products"),
    ("categories", "Categories"),
    ("content", "Content"),
    ("marketing", "Marketing"),
    ("layout", "Layout"),
)


@dataclass(frozen=True)
class SectionTypeDefinition:
    type: str
    label: str
    category: str
    description: str
    default_config: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}), compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "label": self.label,
            "category": self.category,
            "description": self.description,
            "default_config": default_config(self.type),
        }


# Defaults are stored read-only; default_config() hands out mutable copies.
def _freeze(value):
    if isinstance(value, dict):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value):
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


def _definition(type_, label, category, description, config=None):
    return type_, SectionTypeDefinition(type_, label, category, description, _freeze(config or {}))


SECTION_DEFINITIONS: Mapping[str, SectionTypeDefinition] = MappingProxyType(dict([
    _definition("header", "Header", "layout", "Site header with logo and navigation"),
    _definition("footer", "Footer", "layout", "Site footer with links and info"),

    _definition("hero_banner", "Hero Banner", "hero", "Full-width banner with title, subtitle, and CTA", {
        "title": "Welcome to Our Store",
        "subtitle": "Discover amazing products",
        "buttonText": "Shop Now",
        "buttonLink": "#products",
        "textAlignment": "center",
        "height": "large",
        "backgroundOverlay": 40,
    }),
    _definition("hero_slider", "Hero Slider", "hero", "Sliding hero banners with multiple slides", {
        "slides": [
            {"id": "1", "title": "Slide 1", "subtitle": "First slide description"},
            {"id": "2", "title": "Slide 2", "subtitle": "Second slide description"},
        ],
        "autoplay": True,
        "interval": 5000,
    }),
    _definition("hero_video", "Hero Video", "hero", "Video background with overlay content", {
        "videoUrl": "",
        "title": "Watch Our Story",
        "muted": True,
        "loop": True,
    }),

    _definition("featured_products", "Featured Products", "products", "Showcase your featured products", {
        "title": "Featured Products",
        "productCount": 4,
        "columns": 4,
        "showPrice": True,
        "showAddToCart": True,
    }),
    _definition("product_grid", "Product Grid", "products", "Display products in a grid layout", {
        "title": "Our Products",
        "columns": 4,
        "rows": 2,
        "showFilters": False,
    }),
    _definition("product_carousel", "Product Carousel", "products", "Scrollable product showcase", {
        "title": "Popular Items",
        "productCount": 8,
        "autoplay": True,
    }),
    _definition("new_arrivals", "New Arrivals", "products", "Display newest products", {
        "title": "New Arrivals",
        "productCount": 4,
        "columns": 4,
    }),
    _definition("best_sellers", "Best Sellers", "products", "Show top-selling products", {
        "title": "Best Sellers",
        "productCount": 4,
        "columns": 4,
    }),

    _definition("category_grid", "Category Grid", "categories", "Display categories in a grid", {
        "title": "Shop by Category",
        "columns": 3,
        "showDescription": True,
        "showProductCount": True,
    }),
    _definition("category_banner", "Category Banner", "categories", "Featured category with banner", {
        "title": "Category Name",
        "showProducts": True,
    }),

    _definition("text_block", "Text Block", "content", "Rich text content block", {
        "content": "<p>Add your content here...</p>",
        "alignment": "left",
        "maxWidth": "medium",
    }),
    _definition("image_text", "Image + Text", "content", "Side-by-side image and text", {
        "title": "About Us",
        "content": "Tell your brand story...",
        "imageUrl": "",
        "imagePosition": "left",
    }),
    _definition("gallery", "Image Gallery", "content", "Grid of images", {
        "title": "Gallery",
        "images": [],
        "columns": 3,
        "aspectRatio": "square",
    }),
    _definition("testimonials", "Testimonials", "content", "Customer reviews and quotes", {
        "title": "What Our Customers Say",
        "testimonials": [],
        "layout": "carousel",
    }),
    _definition("faq", "FAQ", "content", "Frequently asked questions", {
        "title": "Frequently Asked Questions",
        "faqs": [],
    }),

    _definition("announcement_bar", "Announcement Bar", "marketing", "Top banner for announcements", {
        "text": "Free shipping on orders over $50!",
        "dismissible": True,
    }),
    _definition("newsletter", "Newsletter Signup", "marketing", "Email subscription form", {
        "title": "Stay Updated",
        "subtitle": "Subscribe to our newsletter for updates and offers",
        "buttonText": "Subscribe",
        "successMessage": "Thank you for subscribing!",
    }),
    _definition("countdown", "Countdown Timer", "marketing", "Sale or event countdown", {
        "title": "Sale Ends In",
        "endDate": "",  # filled in by default_config()
        "expiredMessage": "Sale has ended",
    }),
    _definition("promo_banner", "Promo Banner", "marketing", "Promotional banner", {
        "title": "Special Offer",
        "subtitle": "Limited time only",
        "buttonText": "Shop Now",
        "badge": "SALE",
    }),
    _definition("social_feed", "Social Feed", "marketing", "Social media feed display"),
    _definition("trust_badges", "Trust Badges", "marketing", "Trust and security badges", {
        "title": "Why Shop With Us",
        "badges": [
            {"id": "1", "icon": "Truck", "title": "Free Shipping", "description": "On orders over $50"},
            {"id": "2", "icon": "RotateCcw", "title": "Easy Returns", "description": "30-day return policy"},
            {"id": "3", "icon": "Lock", "title": "Secure Checkout", "description": "SSL encrypted"},
        ],
    }),
    _definition("brand_logos", "Brand Logos", "marketing", "Partner or brand logos", {
        "title": "Our Partners",
        "logos": [],
        "grayscale": True,
    }),

    _definition("custom_html", "Custom HTML", "layout", "Custom HTML/CSS block", {
        "html": "<div>Custom content here</div>",
    }),
    _definition("spacer", "Spacer", "layout", "Vertical spacing element", {
        "height": "medium",
    }),
    _definition("divider", "Divider", "layout", "Horizontal line divider", {
        "style": "solid",
        "width": "container",
    }),

    # Product page specific
    _definition("product_filters", "Product Filters", "products",
                "Sidebar filters for products (price, category, attributes)", {
        "showPriceFilter": True,
        "showCategoryFilter": True,
        "showAttributeFilters": True,
        "layout": "sidebar",
    }),
    _definition("product_sort", "Product Sort", "products", "Sort dropdown for products", {
        "options": ["newest", "price_low", "price_high", "name_asc", "name_desc"],
        "defaultSort": "newest",
    }),
    _definition("recently_viewed", "Recently Viewed", "products", "Display recently viewed products", {
        "title": "Recently Viewed",
        "productCount": 4,
        "columns": 4,
    }),
    _definition("recommended_products", "Recommended Products", "products",
                "Show recommended products based on browsing", {
        "title": "You May Also Like",
        "productCount": 4,
        "columns": 4,
    }),
    _definition("product_reviews", "Product Reviews", "products", "Customer reviews and ratings section", {
        "title": "Customer Reviews",
        "showRatingSummary": True,
        "showWriteReview": True,
        "sortBy": "newest",
    }),
]))

COUNTDOWN_DEFAULT_DURATION = timedelta(days=7)


def lookup(section_type: str) -> SectionTypeDefinition:
    definition = SECTION_DEFINITIONS.get(section_type)
    if definition is None:
        raise UnknownSectionType(section_type)
    return definition


def is_known(section_type: str) -> bool:
    return section_type in SECTION_DEFINITIONS


def all_types() -> Tuple[str, ...]:
    """Every composable section type in catalog order (no header/footer)."""
    return tuple(t for t in SECTION_DEFINITIONS if t not in STRUCTURAL_SECTION_TYPES)


def default_config(section_type: str) -> Dict[str, Any]:
    """
    Fresh copy of the default config for ``section_type``.

    Countdown sections get an end date one week from now.
    """
    config = _thaw(lookup(section_type).default_config)
    if section_type == "countdown":
        config["endDate"] = (datetime.now(timezone.utc) + COUNTDOWN_DEFAULT_DURATION).isoformat()
    return config


def categories() -> List[Dict[str, str]]:
    return [{"id": category_id, "label": label} for category_id, label in SECTION_CATEGORIES]


def definitions_by_category(section_types: Sequence[str]) -> List[Dict[str, Any]]:
    """Group the given types into palette categories, dropping empty ones."""
    wanted = set(section_types)
    grouped = []
    for category_id, label in SECTION_CATEGORIES:
        items = [
            definition.to_dict()
            for type_, definition in SECTION_DEFINITIONS.items()
            if type_ in wanted and definition.category == category_id
        ]
        if items:
            grouped.append({"id": category_id, "label": label, "sections": items})
    return grouped
