# storebuilder/api/v1/sections.py
from flask import g, request, jsonify
from flask_jwt_extended import jwt_required
from storebuilder.application.sections.factory import collection_for_page
from storebuilder.extensions import db
from storebuilder.models.page import StorePage
from storebuilder.models.section import PageSection
from storebuilder.normalizers.permission import normalize_permission
from storebuilder.utils.audit import log_action
from storebuilder.utils.decorators import store_required, roles_required
from .pages import EDITOR_ROLES, get_store_page
from . import v1_bp


def get_section_collection(section_id):
    section = PageSection.query.filter_by(
        id=section_id,
        store_id=g.current_store.id
    ).first_or_404()

    page = StorePage.query.filter_by(
        id=section.page_id,
        store_id=g.current_store.id
    ).first_or_404()

    return collection_for_page(page)


def audited(action, entity_type, entity_id, payload=None):
    log_action(action=action, entity_type=entity_type, entity_id=entity_id, payload=payload)
    db.session.commit()


# ------------------------
# Sections
# ------------------------

@v1_bp.route("/pages/<page_id>/sections", methods=["GET"])
@jwt_required()
@store_required
@roles_required(*EDITOR_ROLES)
def list_sections(page_id):
    collection = collection_for_page(get_store_page(page_id))

    return jsonify({
        "items": collection.sections,
        "permissions": normalize_permission(collection.page_type, len(collection)),
    })


@v1_bp.route("/pages/<page_id>/sections", methods=["POST"])
@jwt_required()
@store_required
@roles_required(*EDITOR_ROLES)
def create_section(page_id):
    collection = collection_for_page(get_store_page(page_id))
    data = request.get_json(silent=True) or {}

    section_type = data.get("section_type")
    if not section_type:
        return jsonify({"error": "Section type is required"}), 400

    insert_index = data.get("insert_index")
    if insert_index is not None and (isinstance(insert_index, bool) or not isinstance(insert_index, int)):
        return jsonify({"error": "insert_index must be an integer"}), 400

    section = collection.insert(collection.page_type, section_type, insert_index)

    audited("section.create", "section", section["id"], {
        "page_id": page_id,
        "section_type": section_type,
        "sort_order": section["sort_order"],
    })

    return jsonify(section), 201


@v1_bp.route("/sections/<section_id>", methods=["PATCH"])
@jwt_required()
@store_required
@roles_required(*EDITOR_ROLES)
def update_section(section_id):
    collection = get_section_collection(section_id)
    data = request.get_json(silent=True)

    if not isinstance(data, dict) or not data:
        return jsonify({"error": "No fields provided for update"}), 400

    section = collection.update_fields(section_id, data)

    audited("section.update", "section", section_id, {"fields": sorted(data)})
    return jsonify(section), 200


@v1_bp.route("/sections/<section_id>/visibility", methods=["POST"])
@jwt_required()
@store_required
@roles_required(*EDITOR_ROLES)
def toggle_section_visibility(section_id):
    collection = get_section_collection(section_id)
    section = collection.toggle_visibility(section_id)

    audited("section.visibility", "section", section_id, {"is_visible": section["is_visible"]})
    return jsonify(section), 200


@v1_bp.route("/sections/<section_id>/duplicate", methods=["POST"])
@jwt_required()
@store_required
@roles_required(*EDITOR_ROLES)
def duplicate_section(section_id):
    collection = get_section_collection(section_id)
    section = collection.duplicate(section_id)

    audited("section.duplicate", "section", section["id"], {"source_id": section_id})
    return jsonify(section), 201


@v1_bp.route("/sections/<section_id>/move", methods=["POST"])
@jwt_required()
@store_required
@roles_required(*EDITOR_ROLES)
def move_section(section_id):
    collection = get_section_collection(section_id)
    data = request.get_json(silent=True) or {}

    sections = collection.move(section_id, data.get("direction"))

    audited("section.move", "section", section_id, {"direction": data.get("direction")})
    return jsonify({"items": sections}), 200


@v1_bp.route("/sections/<section_id>", methods=["DELETE"])
@jwt_required()
@store_required
@roles_required(*EDITOR_ROLES)
def delete_section(section_id):
    collection = get_section_collection(section_id)
    collection.delete(section_id)

    audited("section.delete", "section", section_id, {"page_id": collection.page_id})
    return jsonify({"message": "Section deleted"}), 200


@v1_bp.route("/pages/<page_id>/sections/reorder", methods=["POST"])
@jwt_required()
@store_required
@roles_required(*EDITOR_ROLES)
def reorder_sections(page_id):
    collection = collection_for_page(get_store_page(page_id))
    data = request.get_json(silent=True) or {}  # {"section_ids": ["...", ...]}

    section_ids = data.get("section_ids")
    if not isinstance(section_ids, list) or not all(isinstance(i, str) for i in section_ids):
        return jsonify({"error": "Invalid payload"}), 400

    sections = collection.reorder(section_ids)

    audited("section.reorder", "page", page_id, {"count": len(section_ids)})
    return jsonify({"items": sections}), 200
