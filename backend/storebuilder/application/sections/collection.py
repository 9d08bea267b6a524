# storebuilder/application/sections/collection.py
"""
Ordered section collection for a single page.

The collection is the only writer of a page's sections during an editor
session. It keeps an in-memory, position-ordered cache of the page's rows
and pushes every change through a ``SectionStorage``. Storage offers no
multi-row transactions, so:

- multi-row writes (insert-with-shift, reorder) are issued one at a time,
  in an order that never makes two rows share a position;
- after a partial failure the cache is reloaded from storage, so the
  in-memory order never drifts from what is persisted. Writes that already
  went through stay applied;
- a reader loading the page mid-sequence can still see an intermediate
  order. That window is kept as short as possible by skipping rows whose
  position does not change.

Delete and duplicate do not renumber. Gaps and a duplicated position are
tolerated until the next reorder, which always rewrites ``0..n-1``.
"""
import copy
import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from storebuilder.domain.invariants.section import assert_config_shape, assert_contiguous_order, assert_placement
from storebuilder.domain.sections import permissions, registry
from storebuilder.domain.sections.exceptions import (
    InvalidConfig,
    PermissionDenied,
    QuotaExceeded,
    ReorderMismatch,
    SectionNotFound,
    StorageUnavailable,
    UnknownSectionType,
)
from storebuilder.storage.sections import SectionRow, SectionStorage

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = frozenset({"name", "config", "is_visible", "mobile_config", "placement"})
MOVE_DIRECTIONS = {"up": -1, "down": 1}


class SectionCollection:
    def __init__(self, storage: SectionStorage, *, page_id: str, store_id: str, page_type: Optional[str] = None):
        self.storage = storage
        self.page_id = page_id
        self.store_id = store_id
        self.page_type = page_type
        self._sections: List[SectionRow] = []

    # ------------------------
    # Reads
    # ------------------------

    @property
    def sections(self) -> List[SectionRow]:
        return [dict(section) for section in self._sections]

    def __len__(self) -> int:
        return len(self._sections)

    def visible_sections(self) -> List[SectionRow]:
        return [dict(section) for section in self._sections if section["is_visible"]]

    def is_contiguous(self) -> bool:
        return sorted(s["sort_order"] for s in self._sections) == list(range(len(self._sections)))

    def find(self, section_id: str) -> SectionRow:
        for section in self._sections:
            if section["id"] == section_id:
                return section
        raise SectionNotFound(section_id)

    def _index_of(self, section_id: str) -> int:
        for index, section in enumerate(self._sections):
            if section["id"] == section_id:
                return index
        raise SectionNotFound(section_id)

    # ------------------------
    # Load
    # ------------------------

    def load(self) -> List[SectionRow]:
        """
        Replace the cache with what storage holds for this page.

        On failure the previous cache is kept and the error propagates.
        """
        rows = self.storage.list_for_page(self.page_id)
        # stable: equal positions keep the order storage returned them in
        self._sections = sorted(rows, key=lambda row: row["sort_order"])
        return self.sections

    def _reload_after_failure(self, operation: str) -> None:
        try:
            self.load()
        except StorageUnavailable:
            logger.error("Could not reload page %s after failed %s; cache may be stale", self.page_id, operation)

    # ------------------------
    # Insert
    # ------------------------

    def insert(self, page_type: str, section_type: str, insert_index: Optional[int] = None) -> SectionRow:
        """
        Add a section of ``section_type`` with its default config.

        Permission, quota and type are checked before storage is touched.
        Sections at or after the target position are shifted down by one,
        highest position first, before the new row is written.
        """
        if not permissions.is_allowed(page_type, section_type):
            definition = registry.SECTION_DEFINITIONS.get(section_type)
            raise PermissionDenied(section_type, page_type, definition.label if definition else None)

        current_count = len(self._sections)
        if not permissions.can_accept_more(page_type, current_count):
            raise QuotaExceeded(page_type, permissions.permission_info(page_type).max_sections or 0)

        try:
            definition = registry.lookup(section_type)
        except UnknownSectionType:
            logger.error("Section type %s passed permission checks but is not in the registry", section_type)
            raise

        target = current_count if insert_index is None else max(0, min(insert_index, current_count))

        try:
            to_shift = [s for s in self._sections if s["sort_order"] >= target]
            for section in sorted(to_shift, key=lambda s: s["sort_order"], reverse=True):
                self.storage.update(section["id"], {"sort_order": section["sort_order"] + 1})

            created = self.storage.create({
                "page_id": self.page_id,
                "store_id": self.store_id,
                "section_type": section_type,
                "name": definition.label,
                "config": registry.default_config(section_type),
                "is_visible": True,
                "sort_order": target,
            })
        except StorageUnavailable:
            self._reload_after_failure("insert")
            raise

        self.load()
        logger.info("Added %s section %s to page %s at %s", section_type, created["id"], self.page_id, target)
        return self._loaded_or(created)

    def _loaded_or(self, row: SectionRow) -> SectionRow:
        for section in self._sections:
            if section["id"] == row["id"]:
                return dict(section)
        return row

    # ------------------------
    # Delete / duplicate
    # ------------------------

    def delete(self, section_id: str) -> None:
        self.find(section_id)
        self.storage.delete(section_id)
        self._sections = [s for s in self._sections if s["id"] != section_id]
        logger.info("Deleted section %s from page %s", section_id, self.page_id)

    def duplicate(self, section: Union[str, SectionRow]) -> SectionRow:
        """
        Copy a section directly after the original.

        Later sections are not shifted, so the copy may share a position with
        the section that followed the original until the next reorder.
        """
        section_id = section if isinstance(section, str) else section["id"]
        original = self.find(section_id)

        if self.page_type is not None and not permissions.can_accept_more(self.page_type, len(self._sections)):
            raise QuotaExceeded(self.page_type, permissions.permission_info(self.page_type).max_sections or 0)

        created = self.storage.create({
            "page_id": original["page_id"],
            "store_id": original["store_id"],
            "section_type": original["section_type"],
            "name": f"{original['name']} (copy)",
            "config": copy.deepcopy(original["config"]),
            "is_visible": original["is_visible"],
            "sort_order": original["sort_order"] + 1,
            "mobile_config": copy.deepcopy(original.get("mobile_config")),
            "placement": original.get("placement", "below"),
        })

        self.load()
        logger.info("Duplicated section %s as %s", section_id, created["id"])
        return self._loaded_or(created)

    # ------------------------
    # Updates
    # ------------------------

    def update_fields(self, section_id: str, fields: Dict[str, Any]) -> SectionRow:
        """
        Merge ``fields`` into the section and persist them.

        The cache is updated first; if storage then fails the error is
        raised but the cached value is kept.
        """
        section = self.find(section_id)

        unknown = set(fields) - MUTABLE_FIELDS
        if unknown:
            raise InvalidConfig(f"Fields cannot be updated: {sorted(unknown)}")
        if "name" in fields and not (isinstance(fields["name"], str) and fields["name"].strip()):
            raise InvalidConfig("Section name must be a non-empty string")
        if "is_visible" in fields and not isinstance(fields["is_visible"], bool):
            raise InvalidConfig("is_visible must be true or false")
        if "config" in fields:
            assert_config_shape(section["section_type"], fields["config"])
        if "placement" in fields:
            assert_placement(fields["placement"])
        if "mobile_config" in fields and fields["mobile_config"] is not None:
            assert_config_shape(section["section_type"], fields["mobile_config"])

        changes = copy.deepcopy(fields)
        section.update(changes)
        self.storage.update(section_id, changes)
        return dict(section)

    def update_config(self, section_id: str, config: Dict[str, Any]) -> SectionRow:
        return self.update_fields(section_id, {"config": config})

    def toggle_visibility(self, section_id: str) -> SectionRow:
        section = self.find(section_id)
        return self.update_fields(section_id, {"is_visible": not section["is_visible"]})

    # ------------------------
    # Ordering
    # ------------------------

    def reorder(self, ordered: Iterable[Union[str, SectionRow]]) -> List[SectionRow]:
        """
        Apply a full new order: the cache is replaced at once, then each
        section whose position changed is written ``sort_order = index``.

        Any storage failure reloads from storage before re-raising.
        """
        current_ids = [s["id"] for s in self._sections]
        ordered_ids = []
        for item in ordered:
            if isinstance(item, dict):
                item = item.get("id")
            if not isinstance(item, str):
                raise ReorderMismatch(missing=set(), unexpected={repr(item)})
            ordered_ids.append(item)

        if len(ordered_ids) != len(set(ordered_ids)) or set(ordered_ids) != set(current_ids):
            raise ReorderMismatch(
                missing=set(current_ids) - set(ordered_ids),
                unexpected=set(ordered_ids) - set(current_ids),
            )

        by_id = {s["id"]: s for s in self._sections}
        previous_orders = {s["id"]: s["sort_order"] for s in self._sections}

        reordered = []
        for index, section_id in enumerate(ordered_ids):
            section = by_id[section_id]
            section["sort_order"] = index
            reordered.append(section)
        self._sections = reordered
        assert_contiguous_order(self._sections)

        try:
            for index, section_id in enumerate(ordered_ids):
                if previous_orders[section_id] != index:
                    self.storage.update(section_id, {"sort_order": index})
        except StorageUnavailable:
            self._reload_after_failure("reorder")
            raise

        logger.info("Reordered %d sections on page %s", len(ordered_ids), self.page_id)
        return self.sections

    def move(self, section_id: str, direction: str) -> List[SectionRow]:
        """Swap a section with its neighbour. Moving past either end does nothing."""
        if direction not in MOVE_DIRECTIONS:
            raise InvalidConfig(f"Direction must be one of {sorted(MOVE_DIRECTIONS)}, got {direction!r}")

        index = self._index_of(section_id)
        target = index + MOVE_DIRECTIONS[direction]
        if target < 0 or target >= len(self._sections):
            return self.sections

        ids = [s["id"] for s in self._sections]
        ids[index], ids[target] = ids[target], ids[index]
        return self.reorder(ids)
