from typing import Any, Dict
from sqlalchemy.exc import IntegrityError
from storebuilder.extensions import db
from storebuilder.models.base import utc_now
from storebuilder.models.page import StorePage
from storebuilder.domain.sections.exceptions import UnknownPageType
from storebuilder.domain.sections.permissions import PAGE_TYPES
from storebuilder.utils.audit import log_action
from storebuilder.utils.transaction import transactional


class SlugConflict(ValueError):
    pass


def create_page(
    *,
    store_id: str,
    data: Dict[str, Any],
) -> StorePage:
    """
    Create a store page.

    Edge cases handled:
    - Missing required fields
    - Unknown page type
    - Duplicate slug per store
    """

    title: str | None = data.get("title")
    slug: str | None = data.get("slug")
    page_type: str = data.get("page_type", "custom")

    if not title or not slug:
        raise ValueError("Both title and slug are required")

    if page_type not in PAGE_TYPES:
        raise UnknownPageType(page_type)

    if StorePage.query.filter_by(store_id=store_id, slug=slug).first():
        raise SlugConflict("A page with this slug already exists")

    page = StorePage()
    page.store_id = store_id
    page.title = title
    page.slug = slug
    page.page_type = page_type
    page.is_published = bool(data.get("is_published", False))
    page.show_header = data.get("show_header", True)
    page.show_footer = data.get("show_footer", True)
    page.seo_title = data.get("seo_title")
    page.seo_description = data.get("seo_description")
    if page.is_published:
        page.published_at = utc_now()

    try:
        with transactional():
            db.session.add(page)
            db.session.flush()  # ensures page.id is available

            log_action(
                action="page.create",
                entity_type="page",
                entity_id=page.id,
                payload={
                    "title": page.title,
                    "slug": page.slug,
                    "page_type": page.page_type,
                },
            )

        return page

    except IntegrityError as exc:
        # unique (store_id, slug) raced us
        raise SlugConflict("A page with this slug already exists") from exc
