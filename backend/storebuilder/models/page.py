from storebuilder.extensions import db
from .base import BaseModel
from .store_mixin import StoreMixin

class StorePage(BaseModel, StoreMixin):
    __tablename__ = 'store_pages'

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, index=True)
    page_type = db.Column(db.String(50), nullable=False, default='custom', index=True)
    is_published = db.Column(db.Boolean, nullable=False, default=False, index=True)
    published_at = db.Column(db.DateTime(timezone=True), nullable=True)
    show_header = db.Column(db.Boolean, nullable=False, default=True)
    show_footer = db.Column(db.Boolean, nullable=False, default=True)
    seo_title = db.Column(db.String(200), nullable=True)
    seo_description = db.Column(db.Text, nullable=True)

    __table_args__ = (
        db.UniqueConstraint("store_id", "slug", name="uq_page_slug_per_store"),
    )
