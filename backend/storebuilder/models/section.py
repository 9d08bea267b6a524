from storebuilder.extensions import db
from .base import BaseModel
from .store_mixin import StoreMixin

class PageSection(BaseModel, StoreMixin):
    __tablename__ = "page_sections"

    page_id = db.Column(db.String(36), db.ForeignKey("store_pages.id"), nullable=False, index=True)
    section_type = db.Column(db.String(100), nullable=False)  # hero_banner, product_grid, ...
    name = db.Column(db.String(200), nullable=False)
    config = db.Column(db.JSON, nullable=False, default=dict)
    is_visible = db.Column(db.Boolean, nullable=False, default=True)
    # No unique constraint: duplicates may share an order until the next reorder
    sort_order = db.Column(db.Integer, nullable=False, default=0)
    mobile_config = db.Column(db.JSON(none_as_null=True), nullable=True)
    placement = db.Column(db.String(10), nullable=False, default="below")  # above | below built-in content

    __table_args__ = (
        db.Index("idx_page_section_order", "page_id", "sort_order"),
        db.CheckConstraint("placement IN ('above', 'below')", name="ck_page_section_placement"),
    )
