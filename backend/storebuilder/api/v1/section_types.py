from flask import jsonify
from flask_jwt_extended import jwt_required
from storebuilder.domain.pages import page_type_label
from storebuilder.domain.sections import permissions, registry
from storebuilder.domain.sections.exceptions import UnknownPageType
from storebuilder.normalizers.permission import normalize_permission
from storebuilder.utils.decorators import store_required
from . import v1_bp


@v1_bp.route("/section-types", methods=["GET"])
@jwt_required()
@store_required
def list_section_types():
    return jsonify({
        "categories": registry.categories(),
        "sections": registry.definitions_by_category(registry.all_types()),
    })


@v1_bp.route("/page-types", methods=["GET"])
@jwt_required()
@store_required
def list_page_types():
    return jsonify([
        {
            "page_type": page_type,
            "label": page_type_label(page_type),
            "can_have_sections": permissions.can_page_have_sections(page_type),
        }
        for page_type in permissions.PAGE_TYPES
    ])


@v1_bp.route("/page-types/<page_type>/permissions", methods=["GET"])
@jwt_required()
@store_required
def get_page_type_permissions(page_type):
    if page_type not in permissions.PAGE_TYPES:
        raise UnknownPageType(page_type)

    return jsonify(normalize_permission(page_type))
