from storebuilder.extensions import db

class StoreMixin:
    store_id = db.Column(
        db.String(36),
        db.ForeignKey('stores.id'),
        nullable=False,
        index=True
    )
