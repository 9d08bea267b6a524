"""
Section storage.

Row-level access to ``page_sections``. There is deliberately no multi-row
transaction: every write commits on its own, so callers that touch several
rows (reorder, insert-with-shift) must order their writes and be ready to
reload after a partial failure.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from storebuilder.domain.sections.exceptions import SectionNotFound, StorageUnavailable
from storebuilder.extensions import db
from storebuilder.models.section import PageSection
from storebuilder.normalizers.section import normalize_section

logger = logging.getLogger(__name__)

SectionRow = Dict[str, Any]

WRITABLE_FIELDS = frozenset({
    "name",
    "config",
    "is_visible",
    "sort_order",
    "mobile_config",
    "placement",
})


class SectionStorage(ABC):
    """Contract the section collection relies on."""

    @abstractmethod
    def list_for_page(self, page_id: str) -> List[SectionRow]:
        """All sections of a page, ascending by sort order, ties in insertion order."""

    @abstractmethod
    def get(self, section_id: str) -> Optional[SectionRow]:
        ...

    @abstractmethod
    def create(self, fields: SectionRow) -> SectionRow:
        ...

    @abstractmethod
    def update(self, section_id: str, fields: SectionRow) -> SectionRow:
        ...

    @abstractmethod
    def delete(self, section_id: str) -> None:
        ...


class SqlSectionStorage(SectionStorage):
    """Flask-SQLAlchemy backed storage scoped to one store."""

    def __init__(self, store_id: str):
        self.store_id = store_id

    def _query(self):
        return PageSection.query.filter_by(store_id=self.store_id)

    def _fail(self, operation: str, exc: Exception):
        db.session.rollback()
        logger.error("Section storage failed to %s: %s", operation, exc)
        raise StorageUnavailable(operation) from exc

    def list_for_page(self, page_id):
        try:
            rows = (
                self._query()
                .filter_by(page_id=page_id)
                .order_by(PageSection.sort_order.asc(), PageSection.created_at.asc())
                .all()
            )
        except SQLAlchemyError as exc:
            self._fail("load sections", exc)
        return [normalize_section(row, admin=True) for row in rows]

    def get(self, section_id):
        try:
            row = self._query().filter_by(id=section_id).first()
        except SQLAlchemyError as exc:
            self._fail("load the section", exc)
        return normalize_section(row, admin=True) if row else None

    def create(self, fields):
        section = PageSection()
        section.store_id = self.store_id
        section.page_id = fields["page_id"]
        section.section_type = fields["section_type"]
        section.name = fields["name"]
        section.config = fields.get("config", {})
        section.is_visible = fields.get("is_visible", True)
        section.sort_order = fields["sort_order"]
        section.mobile_config = fields.get("mobile_config")
        section.placement = fields.get("placement") or "below"

        try:
            db.session.add(section)
            db.session.commit()
        except SQLAlchemyError as exc:
            self._fail("add the section", exc)
        return normalize_section(section, admin=True)

    def update(self, section_id, fields):
        unknown = set(fields) - WRITABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields are not writable: {sorted(unknown)}")

        try:
            section = self._query().filter_by(id=section_id).first()
            if section is None:
                raise SectionNotFound(section_id)
            for field, value in fields.items():
                setattr(section, field, value)
            db.session.commit()
        except SQLAlchemyError as exc:
            self._fail("update the section", exc)
        return normalize_section(section, admin=True)

    def delete(self, section_id):
        try:
            deleted = self._query().filter_by(id=section_id).delete(synchronize_session=False)
            db.session.commit()
        except SQLAlchemyError as exc:
            self._fail("delete the section", exc)
        if not deleted:
            logger.info("Section %s was already gone", section_id)
