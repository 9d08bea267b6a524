from storebuilder.application.sections.collection import SectionCollection
from storebuilder.domain.pages import resolve_page_type
from storebuilder.storage.sections import SqlSectionStorage


def collection_for_page(page, load=True) -> SectionCollection:
    """Collection for a ``StorePage`` row, using its effective page type."""
    collection = SectionCollection(
        SqlSectionStorage(page.store_id),
        page_id=page.id,
        store_id=page.store_id,
        page_type=resolve_page_type(page.page_type, page.slug),
    )
    if load:
        collection.load()
    return collection
