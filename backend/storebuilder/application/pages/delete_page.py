from storebuilder.extensions import db
from storebuilder.models.page import StorePage
from storebuilder.models.section import PageSection
from storebuilder.domain.pages import is_protected
from storebuilder.utils.audit import log_action
from storebuilder.utils.transaction import transactional


class ProtectedPage(ValueError):
    pass


def delete_page(
    *,
    store_id: str,
    page_id: str,
) -> None:
    """
    Hard-delete a page and its sections.

    Protected standard pages (home, products) cannot be deleted.
    """

    page = StorePage.query.filter_by(
        id=page_id,
        store_id=store_id,
    ).first()

    if not page:
        raise LookupError("Page not found")

    if is_protected(page.slug):
        raise ProtectedPage(f"The {page.title} page is required and cannot be deleted")

    with transactional():
        deleted_sections = PageSection.query.filter_by(
            store_id=store_id,
            page_id=page.id,
        ).delete(synchronize_session=False)

        db.session.delete(page)

        log_action(
            action="page.delete",
            entity_type="page",
            entity_id=page_id,
            payload={"sections": deleted_sections},
        )
