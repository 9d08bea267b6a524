"""
Configuration shapes for each section type.

A section's ``config`` column is free-form JSON, but every section type has
its own shape: a hero banner carries title/subtitle/button fields, a
testimonials block carries a list of quotes, and so on. ``CONFIG_SHAPES``
maps a section type tag to its ``TypedDict``; types without a dedicated
shape fall back to ``GenericConfig`` (a flat map of primitives).
"""
from types import MappingProxyType
from typing import Any, Dict, List, Literal, Mapping, NotRequired, Optional, TypedDict, Union


# ------------------------
# Hero
# ------------------------

class HeroBannerConfig(TypedDict):
    title: str
    subtitle: NotRequired[str]
    buttonText: NotRequired[str]
    buttonLink: NotRequired[str]
    secondaryButtonText: NotRequired[str]
    secondaryButtonLink: NotRequired[str]
    backgroundImage: NotRequired[str]
    backgroundOverlay: NotRequired[int]  # 0-100 opacity
    textAlignment: NotRequired[Literal["left", "center", "right"]]
    height: NotRequired[Literal["small", "medium", "large", "full"]]


class HeroSlide(TypedDict):
    id: str
    title: str
    subtitle: NotRequired[str]
    buttonText: NotRequired[str]
    buttonLink: NotRequired[str]
    backgroundImage: NotRequired[str]


class HeroSliderConfig(TypedDict):
    slides: List[HeroSlide]
    autoplay: NotRequired[bool]
    interval: NotRequired[int]


class HeroVideoConfig(TypedDict):
    videoUrl: str
    title: str
    subtitle: NotRequired[str]
    buttonText: NotRequired[str]
    buttonLink: NotRequired[str]
    muted: NotRequired[bool]
    loop: NotRequired[bool]


# ------------------------
# Products & categories
# ------------------------

class FeaturedProductsConfig(TypedDict, total=False):
    title: str
    subtitle: str
    productCount: int
    columns: Literal[2, 3, 4, 5]
    showPrice: bool
    showAddToCart: bool


class ProductGridConfig(TypedDict, total=False):
    title: str
    categoryId: str
    productIds: List[str]
    columns: Literal[2, 3, 4, 5]
    rows: int
    showFilters: bool


class ProductCarouselConfig(TypedDict, total=False):
    title: str
    subtitle: str
    productCount: int
    autoplay: bool


class CategoryGridConfig(TypedDict, total=False):
    title: str
    subtitle: str
    categoryIds: List[str]
    columns: Literal[2, 3, 4]
    showDescription: bool
    showProductCount: bool


class ProductSortConfig(TypedDict):
    options: List[str]
    defaultSort: NotRequired[str]


class CategoryBannerConfig(TypedDict):
    # picked in the editor after the section is added
    categoryId: NotRequired[str]
    title: NotRequired[str]
    subtitle: NotRequired[str]
    backgroundImage: NotRequired[str]
    showProducts: NotRequired[bool]


# ------------------------
# Content
# ------------------------

class TextBlockConfig(TypedDict):
    content: str  # rich text / HTML
    alignment: NotRequired[Literal["left", "center", "right"]]
    maxWidth: NotRequired[Literal["small", "medium", "large", "full"]]


class ImageTextConfig(TypedDict):
    title: NotRequired[str]
    content: str
    imageUrl: str
    imagePosition: NotRequired[Literal["left", "right"]]
    buttonText: NotRequired[str]
    buttonLink: NotRequired[str]


class GalleryImage(TypedDict):
    id: str
    url: str
    alt: NotRequired[str]
    link: NotRequired[str]


class GalleryConfig(TypedDict):
    title: NotRequired[str]
    images: List[GalleryImage]
    columns: NotRequired[Literal[2, 3, 4]]
    aspectRatio: NotRequired[Literal["square", "landscape", "portrait"]]


class Testimonial(TypedDict):
    id: str
    quote: str
    author: str
    role: NotRequired[str]
    avatar: NotRequired[str]
    rating: NotRequired[int]


class TestimonialsConfig(TypedDict):
    title: NotRequired[str]
    testimonials: List[Testimonial]
    layout: NotRequired[Literal["grid", "carousel"]]


class FaqItem(TypedDict):
    id: str
    question: str
    answer: str


class FaqConfig(TypedDict):
    title: NotRequired[str]
    subtitle: NotRequired[str]
    faqs: List[FaqItem]


# ------------------------
# Marketing
# ------------------------

class AnnouncementBarConfig(TypedDict):
    text: str
    link: NotRequired[str]
    backgroundColor: NotRequired[str]
    textColor: NotRequired[str]
    dismissible: NotRequired[bool]


class NewsletterConfig(TypedDict, total=False):
    title: str
    subtitle: str
    buttonText: str
    backgroundColor: str
    successMessage: str


class CountdownConfig(TypedDict):
    title: NotRequired[str]
    endDate: str  # ISO-8601
    backgroundImage: NotRequired[str]
    buttonText: NotRequired[str]
    buttonLink: NotRequired[str]
    expiredMessage: NotRequired[str]


class PromoBannerConfig(TypedDict):
    title: str
    subtitle: NotRequired[str]
    backgroundImage: NotRequired[str]
    buttonText: NotRequired[str]
    buttonLink: NotRequired[str]
    badge: NotRequired[str]


class TrustBadge(TypedDict):
    id: str
    icon: str
    title: str
    description: NotRequired[str]


class TrustBadgesConfig(TypedDict):
    title: NotRequired[str]
    badges: List[TrustBadge]


class BrandLogo(TypedDict):
    id: str
    imageUrl: str
    alt: str
    link: NotRequired[str]


class BrandLogosConfig(TypedDict):
    title: NotRequired[str]
    logos: List[BrandLogo]
    grayscale: NotRequired[bool]


# ------------------------
# Layout
# ------------------------

class SpacerConfig(TypedDict):
    height: Literal["small", "medium", "large", "xlarge"]


class DividerConfig(TypedDict):
    style: Literal["solid", "dashed", "dotted"]
    color: NotRequired[str]
    width: NotRequired[Literal["full", "container", "narrow"]]


class CustomHtmlConfig(TypedDict):
    html: str
    css: NotRequired[str]


Primitive = Optional[Union[str, int, float, bool]]
GenericConfig = Dict[str, Primitive]

SectionConfig = Union[
    HeroBannerConfig,
    HeroSliderConfig,
    HeroVideoConfig,
    FeaturedProductsConfig,
    ProductGridConfig,
    ProductCarouselConfig,
    CategoryGridConfig,
    CategoryBannerConfig,
    ProductSortConfig,
    TextBlockConfig,
    ImageTextConfig,
    GalleryConfig,
    TestimonialsConfig,
    FaqConfig,
    AnnouncementBarConfig,
    NewsletterConfig,
    CountdownConfig,
    PromoBannerConfig,
    TrustBadgesConfig,
    BrandLogosConfig,
    SpacerConfig,
    DividerConfig,
    CustomHtmlConfig,
    GenericConfig,
]


CONFIG_SHAPES: Mapping[str, Any] = MappingProxyType({
    "hero_banner": HeroBannerConfig,
    "hero_slider": HeroSliderConfig,
    "hero_video": HeroVideoConfig,
    "featured_products": FeaturedProductsConfig,
    "product_grid": ProductGridConfig,
    "product_carousel": ProductCarouselConfig,
    "category_grid": CategoryGridConfig,
    "category_banner": CategoryBannerConfig,
    "product_sort": ProductSortConfig,
    "text_block": TextBlockConfig,
    "image_text": ImageTextConfig,
    "gallery": GalleryConfig,
    "testimonials": TestimonialsConfig,
    "faq": FaqConfig,
    "announcement_bar": AnnouncementBarConfig,
    "newsletter": NewsletterConfig,
    "countdown": CountdownConfig,
    "promo_banner": PromoBannerConfig,
    "trust_badges": TrustBadgesConfig,
    "brand_logos": BrandLogosConfig,
    "spacer": SpacerConfig,
    "divider": DividerConfig,
    "custom_html": CustomHtmlConfig,
})


def shape_for(section_type: str):
    """Return the TypedDict for ``section_type``, or None for the generic fallback."""
    return CONFIG_SHAPES.get(section_type)
