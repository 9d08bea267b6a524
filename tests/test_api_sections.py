from sqlalchemy.exc import OperationalError

from storebuilder.extensions import db
from storebuilder.models.audit_log import AuditLog
from storebuilder.models.section import PageSection


def add_section(client, headers, page_id, section_type, insert_index=None):
    payload = {"section_type": section_type}
    if insert_index is not None:
        payload["insert_index"] = insert_index
    return client.post(f"/api/v1/pages/{page_id}/sections", json=payload, headers=headers)


def section_ids(client, headers, page_id):
    res = client.get(f"/api/v1/pages/{page_id}/sections", headers=headers)
    assert res.status_code == 200
    return [item["id"] for item in res.get_json()["items"]]


def test_add_section_to_homepage(client, auth_headers, make_page):
    page = make_page("home", page_type="homepage")

    res = add_section(client, auth_headers, page.id, "testimonials", 0)

    assert res.status_code == 201
    body = res.get_json()
    assert body["section_type"] == "testimonials"
    assert body["sort_order"] == 0
    assert body["config"]["layout"] == "carousel"

    listing = client.get(f"/api/v1/pages/{page.id}/sections", headers=auth_headers).get_json()
    assert [item["id"] for item in listing["items"]] == [body["id"]]
    assert listing["permissions"]["section_count"] == 1
    assert listing["permissions"]["can_add_more"] is True


def test_add_section_writes_audit_entry(client, auth_headers, make_page, admin_user):
    page = make_page("home", page_type="homepage")

    body = add_section(client, auth_headers, page.id, "hero_banner").get_json()

    entry = AuditLog.query.filter_by(entity_id=body["id"]).one()
    assert entry.action == "section.create"
    assert entry.actor_id == admin_user.id
    assert entry.payload["section_type"] == "hero_banner"


def test_cart_page_rejects_sections(client, auth_headers, make_page):
    page = make_page("cart", page_type="custom")

    res = add_section(client, auth_headers, page.id, "hero_banner")

    assert res.status_code == 403
    assert res.get_json() == {
        "error": "PermissionDenied",
        "message": "Hero Banner sections are not available for cart pages",
    }
    assert PageSection.query.filter_by(page_id=page.id).count() == 0


def test_quota_exceeded(client, auth_headers, make_page):
    page = make_page("contact", page_type="contact")
    for _ in range(10):
        assert add_section(client, auth_headers, page.id, "text_block").status_code == 201

    res = add_section(client, auth_headers, page.id, "faq")

    assert res.status_code == 409
    assert res.get_json()["error"] == "QuotaExceeded"
    assert PageSection.query.filter_by(page_id=page.id).count() == 10


def test_unknown_section_type(client, auth_headers, make_page):
    page = make_page("home", page_type="homepage")

    res = add_section(client, auth_headers, page.id, "marquee")

    assert res.status_code == 400
    assert res.get_json()["error"] == "UnknownSectionType"


def test_section_type_is_required(client, auth_headers, make_page):
    page = make_page("home", page_type="homepage")

    res = client.post(f"/api/v1/pages/{page.id}/sections", json={}, headers=auth_headers)

    assert res.status_code == 400


def test_insert_in_the_middle(client, auth_headers, make_page):
    page = make_page("home", page_type="homepage")
    for section_type in ("hero_banner", "text_block", "newsletter"):
        add_section(client, auth_headers, page.id, section_type)
    a, b, c = section_ids(client, auth_headers, page.id)

    new = add_section(client, auth_headers, page.id, "spacer", 1).get_json()

    assert section_ids(client, auth_headers, page.id) == [a, new["id"], b, c]
    rows = PageSection.query.filter_by(page_id=page.id).order_by(PageSection.sort_order).all()
    assert [row.sort_order for row in rows] == [0, 1, 2, 3]


def test_reorder_persists(client, auth_headers, make_page):
    page = make_page("home", page_type="homepage")
    for section_type in ("hero_banner", "text_block", "newsletter"):
        add_section(client, auth_headers, page.id, section_type)
    a, b, c = section_ids(client, auth_headers, page.id)

    res = client.post(
        f"/api/v1/pages/{page.id}/sections/reorder",
        json={"section_ids": [c, a, b]},
        headers=auth_headers,
    )

    assert res.status_code == 200
    assert [item["sort_order"] for item in res.get_json()["items"]] == [0, 1, 2]
    assert section_ids(client, auth_headers, page.id) == [c, a, b]


def test_reorder_mismatch(client, auth_headers, make_page):
    page = make_page("home", page_type="homepage")
    add_section(client, auth_headers, page.id, "hero_banner")
    add_section(client, auth_headers, page.id, "text_block")
    a, _ = section_ids(client, auth_headers, page.id)

    res = client.post(
        f"/api/v1/pages/{page.id}/sections/reorder",
        json={"section_ids": [a]},
        headers=auth_headers,
    )

    assert res.status_code == 400
    assert res.get_json()["error"] == "ReorderMismatch"


def test_update_section_config(client, auth_headers, make_page):
    page = make_page("home", page_type="homepage")
    section = add_section(client, auth_headers, page.id, "hero_banner").get_json()

    res = client.patch(
        f"/api/v1/sections/{section['id']}",
        json={"config": {**section["config"], "title": "Summer Sale"}, "name": "Summer hero"},
        headers=auth_headers,
    )

    assert res.status_code == 200
    row = db.session.get(PageSection, section["id"])
    db.session.refresh(row)
    assert row.config["title"] == "Summer Sale"
    assert row.name == "Summer hero"


def test_update_section_rejects_bad_config(client, auth_headers, make_page):
    page = make_page("home", page_type="homepage")
    section = add_section(client, auth_headers, page.id, "hero_banner").get_json()

    res = client.patch(
        f"/api/v1/sections/{section['id']}",
        json={"config": {"subtitle": "no title"}},
        headers=auth_headers,
    )

    assert res.status_code == 400
    assert res.get_json()["error"] == "InvalidConfig"


def test_toggle_duplicate_move_and_delete(client, auth_headers, make_page):
    page = make_page("home", page_type="homepage")
    first = add_section(client, auth_headers, page.id, "hero_banner").get_json()
    second = add_section(client, auth_headers, page.id, "faq").get_json()

    res = client.post(f"/api/v1/sections/{first['id']}/visibility", headers=auth_headers)
    assert res.get_json()["is_visible"] is False

    res = client.post(f"/api/v1/sections/{first['id']}/duplicate", headers=auth_headers)
    assert res.status_code == 201
    copy_ = res.get_json()
    assert copy_["name"] == "Hero Banner (copy)"
    assert copy_["sort_order"] == 1

    res = client.post(
        f"/api/v1/sections/{second['id']}/move",
        json={"direction": "up"},
        headers=auth_headers,
    )
    assert res.status_code == 200
    assert [item["sort_order"] for item in res.get_json()["items"]] == [0, 1, 2]

    res = client.delete(f"/api/v1/sections/{copy_['id']}", headers=auth_headers)
    assert res.status_code == 200
    assert db.session.get(PageSection, copy_["id"]) is None


def test_storage_failure_is_reported(client, auth_headers, make_page, monkeypatch):
    page = make_page("home", page_type="homepage")

    def broken_commit():
        raise OperationalError("COMMIT", {}, Exception("database is gone"))

    monkeypatch.setattr(db.session, "commit", broken_commit)
    res = add_section(client, auth_headers, page.id, "hero_banner")
    monkeypatch.undo()

    assert res.status_code == 503
    assert res.get_json()["error"] == "StorageUnavailable"
    assert PageSection.query.filter_by(page_id=page.id).count() == 0


def test_staff_can_edit_but_unknown_roles_cannot(client, headers_for, admin_user, make_page):
    page = make_page("home", page_type="homepage")

    staff = headers_for(admin_user.id, role="staff")
    assert add_section(client, staff, page.id, "hero_banner").status_code == 201

    viewer = headers_for(admin_user.id, role="viewer")
    assert add_section(client, viewer, page.id, "hero_banner").status_code == 403


def test_token_for_another_store_is_rejected(client, headers_for, admin_user, make_page):
    page = make_page("home", page_type="homepage")
    headers = headers_for(admin_user.id, store_id="other-store")

    assert add_section(client, headers, page.id, "hero_banner").status_code == 403


def test_update_section_rejects_bad_field_values(client, auth_headers, make_page):
    page = make_page("home", page_type="homepage")
    section = add_section(client, auth_headers, page.id, "hero_banner").get_json()

    for payload in ({"name": None}, {"is_visible": "yes"}):
        res = client.patch(f"/api/v1/sections/{section['id']}", json=payload, headers=auth_headers)

        assert res.status_code == 400
        assert res.get_json()["error"] == "InvalidConfig"

    row = db.session.get(PageSection, section["id"])
    db.session.refresh(row)
    assert row.name == "Hero Banner"
    assert row.is_visible is True


def test_reorder_rejects_non_string_ids(client, auth_headers, make_page):
    page = make_page("home", page_type="homepage")
    add_section(client, auth_headers, page.id, "hero_banner")

    for section_ids in ([{"x": 1}], [["nested"]], [1]):
        res = client.post(
            f"/api/v1/pages/{page.id}/sections/reorder",
            json={"section_ids": section_ids},
            headers=auth_headers,
        )
        assert res.status_code == 400


def test_insert_index_must_not_be_a_boolean(client, auth_headers, make_page):
    page = make_page("home", page_type="homepage")

    res = add_section(client, auth_headers, page.id, "hero_banner", True)

    assert res.status_code == 400
    assert PageSection.query.filter_by(page_id=page.id).count() == 0
