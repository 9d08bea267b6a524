import copy


def normalize_section(section, admin=False):
    data = {
        "id": section.id,
        "page_id": section.page_id,
        "store_id": section.store_id,
        "section_type": section.section_type,
        "name": section.name,
        "config": copy.deepcopy(section.config) if section.config is not None else {},
        "is_visible": section.is_visible,
        "sort_order": section.sort_order,
        "mobile_config": copy.deepcopy(section.mobile_config),
        "placement": section.placement,
    }

    if admin:
        data["created_at"] = section.created_at.isoformat() if section.created_at else None
        data["updated_at"] = section.updated_at.isoformat() if section.updated_at else None

    return data
