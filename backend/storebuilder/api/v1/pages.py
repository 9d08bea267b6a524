# storebuilder/api/v1/pages.py
from flask import g, request, jsonify
from flask_jwt_extended import jwt_required
from storebuilder.application.pages.create_page import SlugConflict, create_page as create_page_use_case
from storebuilder.application.pages.delete_page import ProtectedPage, delete_page as delete_page_use_case
from storebuilder.application.pages.provision_standard_pages import provision_standard_pages
from storebuilder.application.sections.factory import collection_for_page
from storebuilder.models.page import StorePage
from storebuilder.normalizers.page import normalize_page
from storebuilder.normalizers.permission import normalize_permission
from storebuilder.utils.decorators import store_required, roles_required
from . import v1_bp

EDITOR_ROLES = ("admin", "staff")


def get_store_page(page_id):
    return StorePage.query.filter_by(
        id=page_id,
        store_id=g.current_store.id
    ).first_or_404()


# ------------------------
# Pages
# ------------------------

@v1_bp.route("/pages", methods=["POST"])
@jwt_required()
@store_required
@roles_required("admin")
def create_page():
    data = request.get_json(silent=True) or {}

    try:
        page = create_page_use_case(store_id=g.current_store.id, data=data)
    except SlugConflict as exc:
        return jsonify({"error": str(exc)}), 409
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    return jsonify({
        "id": page.id,
        "message": "Page created successfully"
    }), 201


@v1_bp.route("/pages", methods=["GET"])
@jwt_required()
@store_required
@roles_required(*EDITOR_ROLES)
def list_pages():
    pages = (
        StorePage.query
        .filter_by(store_id=g.current_store.id)
        .order_by(StorePage.created_at.asc())
        .all()
    )

    return jsonify({"items": [normalize_page(p, admin=True) for p in pages]})


@v1_bp.route("/pages/<page_id>", methods=["GET"])
@jwt_required()
@store_required
@roles_required(*EDITOR_ROLES)
def get_page(page_id):
    page = get_store_page(page_id)
    collection = collection_for_page(page)

    data = normalize_page(page, admin=True, sections=collection.sections)
    data["permissions"] = normalize_permission(collection.page_type, len(collection))
    return jsonify(data)


@v1_bp.route("/pages/<page_id>", methods=["DELETE"])
@jwt_required()
@store_required
@roles_required("admin")
def delete_page(page_id):
    try:
        delete_page_use_case(store_id=g.current_store.id, page_id=page_id)
    except LookupError:
        return jsonify({"error": "Page not found"}), 404
    except ProtectedPage as exc:
        return jsonify({"error": str(exc)}), 409

    return jsonify({"message": "Page deleted successfully"}), 200


@v1_bp.route("/pages/standard", methods=["POST"])
@jwt_required()
@store_required
@roles_required("admin")
def create_standard_pages():
    pages = provision_standard_pages(store_id=g.current_store.id)

    return jsonify({
        "created": [page.slug for page in pages],
        "message": f"{len(pages)} standard pages created"
    }), 201
