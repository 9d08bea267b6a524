import logging
from typing import List

from storebuilder.application.pages.create_page import create_page
from storebuilder.application.sections.factory import collection_for_page
from storebuilder.domain.pages import STANDARD_PAGES
from storebuilder.models.page import StorePage

logger = logging.getLogger(__name__)


def provision_standard_pages(*, store_id: str) -> List[StorePage]:
    """
    Create the standard e-commerce pages a store is missing, each with its
    default sections. Existing pages (matched by slug) are left untouched.
    """
    created = []

    for definition in STANDARD_PAGES:
        if StorePage.query.filter_by(store_id=store_id, slug=definition["slug"]).first():
            continue

        page = create_page(
            store_id=store_id,
            data={
                "title": definition["title"],
                "slug": definition["slug"],
                "page_type": definition["page_type"],
                "is_published": definition["is_published"],
            },
        )

        collection = collection_for_page(page)
        for default in definition["default_sections"]:
            section = collection.insert(collection.page_type, default["section_type"])
            collection.update_fields(section["id"], {
                "name": default["name"],
                "config": dict(default["config"]),
            })

        logger.info("Provisioned standard page %s for store %s", page.slug, store_id)
        created.append(page)

    return created
