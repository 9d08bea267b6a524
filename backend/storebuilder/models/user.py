from werkzeug.security import generate_password_hash, check_password_hash
from storebuilder.extensions import db
from .base import BaseModel
from .store_mixin import StoreMixin

class User(BaseModel, StoreMixin):
    __tablename__ = 'users'

    email = db.Column(db.String(120), nullable=False)
    password_hash = db.Column(db.String(256), nullable=False)

    role = db.Column(db.String(50), nullable=False, default='staff')  # admin | staff
    is_active = db.Column(db.Boolean, default=True)

    __table_args__ = (
        db.UniqueConstraint("store_id", "email", name="uq_user_email_per_store"),
    )

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)
