from flask import g, jsonify
from storebuilder.models.page import StorePage
from storebuilder.normalizers.page import normalize_page
from storebuilder.storage.sections import SqlSectionStorage
from . import v1_bp

PUBLIC_SECTION_FIELDS = ("id", "section_type", "name", "config", "mobile_config", "placement", "sort_order")


@v1_bp.route("/storefront/pages/<slug>", methods=["GET"])
def get_storefront_page(slug):
    """Published page with its visible sections in display order."""
    store = g.current_store
    page = StorePage.query.filter_by(
        store_id=store.id,
        slug=slug,
        is_published=True
    ).first_or_404()

    rows = SqlSectionStorage(store.id).list_for_page(page.id)
    sections = [
        {field: row[field] for field in PUBLIC_SECTION_FIELDS}
        for row in rows
        if row["is_visible"]
    ]

    return jsonify(normalize_page(page, sections=sections))
