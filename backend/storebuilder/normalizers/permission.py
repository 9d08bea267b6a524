from storebuilder.domain.sections import permissions, registry


def normalize_permission(page_type, current_count=None):
    """Permission summary for a page type, shaped for the editor's palette."""
    info = permissions.permission_info(page_type)
    allowed = permissions.allowed_types(page_type)

    data = {
        "page_type": page_type,
        **info.to_dict(),
        "allowed_types": list(allowed),
        "allowed_count": len(allowed),
        "can_have_sections": permissions.can_page_have_sections(page_type),
        "system_message": permissions.system_page_message(page_type),
        "palette": registry.definitions_by_category(allowed),
    }

    if current_count is not None:
        data["section_count"] = current_count
        data["can_add_more"] = permissions.can_accept_more(page_type, current_count)

    return data
