from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from wishlist_api import db
from wishlist_api.exceptions import DuplicateEntryError
from wishlist_api.models import WishList


class WishlistStore:
    """Persistence of wishlist entries on the Flask-SQLAlchemy session.

    Each write commits on its own. Database errors roll the session back and
    propagate to the caller.
    """

    def __init__(self, session=None):
        self.session = session or db.session

    def list(self, email):
        return self.session.query(WishList).filter_by(email=email).order_by(WishList.id).all()

    def find_by_owner_and_name(self, email, name):
        return self.session.query(WishList).filter_by(email=email, name=name).first()

    def insert(self, entry):
        if self.find_by_owner_and_name(entry.email, entry.name):
            raise DuplicateEntryError(entry.email, entry.name)

        self.session.add(entry)
        try:
            self.session.commit()
        except IntegrityError:
            # A concurrent insert of the same key won the race
            self.session.rollback()
            raise DuplicateEntryError(entry.email, entry.name)
        except SQLAlchemyError:
            self.session.rollback()
            raise

    def update_quantity(self, email, name, num):
        entry = self.find_by_owner_and_name(email, name)
        if not entry:
            return False

        entry.num = num
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        return True

    def remove(self, email, name):
        try:
            deleted = self.session.query(WishList).filter_by(email=email, name=name).delete()
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        return deleted > 0
