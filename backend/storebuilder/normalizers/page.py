from storebuilder.domain.pages import page_type_label, resolve_page_type, supports_placement


def normalize_page(page, admin=False, sections=None):
    effective_type = resolve_page_type(page.page_type, page.slug)
    data = {
        "id": page.id,
        "title": page.title,
        "slug": page.slug,
        "page_type": effective_type,
        "page_type_label": page_type_label(effective_type),
        "show_header": page.show_header,
        "show_footer": page.show_footer,
        "seo": {
            "title": page.seo_title,
            "description": page.seo_description,
        },
        "supports_placement": supports_placement(effective_type),
    }

    if admin:
        data["stored_page_type"] = page.page_type
        data["is_published"] = page.is_published
        data["published_at"] = page.published_at.isoformat() if page.published_at else None

    if sections is not None:
        data["sections"] = sections

    return data
