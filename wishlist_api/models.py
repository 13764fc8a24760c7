from wishlist_api import db
from datetime import datetime

MAX_EMAIL_LENGTH = 120
MAX_NAME_LENGTH = 150
# num is a 32-bit signed INTEGER column
MAX_QUANTITY = 2 ** 31 - 1

# -------------------------
# WishList Model
# -------------------------
class WishList(db.Model):
    __tablename__ = 'wishlist'
    __table_args__ = (
        db.UniqueConstraint('email', 'name', name='unique_email_name'),
    )

    id = db.Column(db.BigInteger().with_variant(db.Integer, 'sqlite'), primary_key=True, autoincrement=True)
    email = db.Column(db.String(MAX_EMAIL_LENGTH), nullable=False, index=True)
    name = db.Column(db.String(MAX_NAME_LENGTH), nullable=False)
    num = db.Column(db.Integer, nullable=False, default=1)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "name": self.name,
            "num": self.num,
            "email": self.email,
        }

    def __repr__(self):
        return f"<WishList {self.email}:{self.name}={self.num}>"
