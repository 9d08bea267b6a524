"""Test configuration for the store builder."""
import copy
import itertools

import pytest
from flask_jwt_extended import create_access_token

from storebuilder import create_app
from storebuilder.domain.sections.exceptions import SectionNotFound, StorageUnavailable
from storebuilder.extensions import db
from storebuilder.models.page import StorePage
from storebuilder.models.store import Store
from storebuilder.models.user import User
from storebuilder.storage.sections import SectionStorage


class MemorySectionStorage(SectionStorage):
    """
    Dict-backed storage that records every write.

    ``fail_after`` makes writes raise ``StorageUnavailable`` once that many
    writes have been recorded; ``fail_loads`` does the same for reads.
    """

    def __init__(self):
        self.rows = {}
        self.writes = []
        self.fail_after = None
        self.fail_loads = False
        self._ids = itertools.count(1)
        self._seq = {}

    def _check_write(self, operation):
        if self.fail_after is not None and len(self.writes) >= self.fail_after:
            raise StorageUnavailable(operation)

    def list_for_page(self, page_id):
        if self.fail_loads:
            raise StorageUnavailable("load sections")
        rows = [row for row in self.rows.values() if row["page_id"] == page_id]
        rows.sort(key=lambda row: (row["sort_order"], self._seq[row["id"]]))
        return copy.deepcopy(rows)

    def get(self, section_id):
        row = self.rows.get(section_id)
        return copy.deepcopy(row) if row else None

    def create(self, fields):
        self._check_write("add the section")
        section_id = f"s{next(self._ids)}"
        row = {
            "id": section_id,
            "page_id": fields["page_id"],
            "store_id": fields["store_id"],
            "section_type": fields["section_type"],
            "name": fields["name"],
            "config": copy.deepcopy(fields.get("config", {})),
            "is_visible": fields.get("is_visible", True),
            "sort_order": fields["sort_order"],
            "mobile_config": copy.deepcopy(fields.get("mobile_config")),
            "placement": fields.get("placement") or "below",
        }
        self.rows[section_id] = row
        self._seq[section_id] = len(self._seq)
        self.writes.append(("create", section_id, fields["sort_order"]))
        return copy.deepcopy(row)

    def update(self, section_id, fields):
        self._check_write("update the section")
        if section_id not in self.rows:
            raise SectionNotFound(section_id)
        self.rows[section_id].update(copy.deepcopy(fields))
        self.writes.append(("update", section_id, dict(fields)))
        return copy.deepcopy(self.rows[section_id])

    def delete(self, section_id):
        self._check_write("delete the section")
        self.rows.pop(section_id, None)
        self.writes.append(("delete", section_id, None))


@pytest.fixture()
def memory_storage():
    return MemorySectionStorage()


@pytest.fixture()
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def store(app):
    store = Store(name="Test Store", slug="test-store", is_active=True)
    db.session.add(store)
    db.session.commit()
    return store


@pytest.fixture()
def admin_user(store):
    user = User(store_id=store.id, email="owner@example.com", role="admin", is_active=True)
    user.set_password("correct-horse")
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture()
def headers_for(store):
    def _headers(user_id, role="admin", store_id=None):
        token = create_access_token(
            identity=user_id,
            additional_claims={"store_id": store_id or store.id, "role": role},
        )
        return {"Authorization": f"Bearer {token}", "X-Store-ID": store.id}
    return _headers


@pytest.fixture()
def auth_headers(admin_user, headers_for):
    return headers_for(admin_user.id, role=admin_user.role)


@pytest.fixture()
def make_page(store):
    def _make(slug, page_type="custom", is_published=True, title=None):
        page = StorePage(
            store_id=store.id,
            title=title or slug.replace("-", " ").title(),
            slug=slug,
            page_type=page_type,
            is_published=is_published,
        )
        db.session.add(page)
        db.session.commit()
        return page
    return _make
