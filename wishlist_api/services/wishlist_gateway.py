import logging
from wishlist_api.auth.identity import normalize_email
from wishlist_api.exceptions import DuplicateEntryError
from wishlist_api.models import WishList
from wishlist_api.utils.validators import validate_email, validate_json, validate_name, validate_quantity

UNAUTHORIZED = {'error': 'Unauthorized'}
FORBIDDEN = {'error': 'Forbidden: token does not match wishlist owner'}
SERVER_ERROR = {'error': 'Internal server error'}


class Outcome:
    """Status code and JSON-serializable body produced by a gateway operation."""

    def __init__(self, status, body):
        self.status = status
        self.body = body

    def __repr__(self):
        return f"<Outcome {self.status}>"


class WishlistGateway:
    """
    Only the owner of a wishlist may act on it.

    Every operation first resolves the caller's identity from the credential
    (401 on failure), then compares it with the owner named in the path (403
    on mismatch), and only then touches the store. The gateway keeps no state
    between calls.
    """

    def __init__(self, extractor, store, logger=None):
        self.extractor = extractor
        self.store = store
        self.logger = logger or logging.getLogger(__name__)

    def _authorize(self, credential, email):
        """Return (owner, None) when authorized, otherwise (None, Outcome)."""
        result = self.extractor.extract(credential)
        if not result.ok:
            return None, Outcome(401, UNAUTHORIZED)

        owner = normalize_email(email)
        if result.email != owner:
            self.logger.warning("Forbidden access attempt with mismatched email: %s", email)
            return None, Outcome(403, FORBIDDEN)

        error = validate_email(owner)
        if error:
            return None, Outcome(400, {'error': error})

        return owner, None

    def _server_error(self, action, email):
        self.logger.exception("Failed to %s wishlist for email: %s", action, email)
        return Outcome(500, SERVER_ERROR)

    def list_wishlist(self, credential, email):
        self.logger.info("list_wishlist called with email: %s", email)
        owner, denied = self._authorize(credential, email)
        if denied:
            return denied

        try:
            entries = self.store.list(owner)
        except Exception:
            return self._server_error('list', owner)

        self.logger.info("Successfully retrieved wishlist for email: %s", owner)
        return Outcome(200, [entry.to_dict() for entry in entries])

    def add_entry(self, credential, email, payload=None):
        self.logger.info("add_entry called with email: %s", email)
        owner, denied = self._authorize(credential, email)
        if denied:
            return denied

        error = validate_json(payload, ['name', 'num'])
        error = error or validate_name(payload['name']) or validate_quantity(payload['num'])
        if error:
            return Outcome(400, {'error': error})

        # The owner always comes from the path, never from the body
        entry = WishList(email=owner, name=payload['name'], num=payload['num'])
        try:
            self.store.insert(entry)
        except DuplicateEntryError as e:
            self.logger.warning("Duplicate wishlist entry for email: %s and name: %s", owner, e.name)
            return Outcome(409, {'error': 'Item is already in the wishlist'})
        except Exception:
            return self._server_error('add to', owner)

        self.logger.info("Successfully added wishlist for email: %s", owner)
        return Outcome(201, {'message': 'Added to wishlist'})

    def update_entry(self, credential, email, name, payload=None):
        self.logger.info("update_entry called with email: %s and name: %s", email, name)
        owner, denied = self._authorize(credential, email)
        if denied:
            return denied

        error = validate_json(payload, ['num']) or validate_quantity(payload['num'])
        if error:
            return Outcome(400, {'error': error})

        try:
            updated = False
            if self.store.find_by_owner_and_name(owner, name) is not None:
                updated = self.store.update_quantity(owner, name, payload['num'])
        except Exception:
            return self._server_error('update', owner)

        if not updated:
            self.logger.warning("Wishlist not found for email: %s and name: %s", owner, name)
            return Outcome(404, {'error': 'Wishlist item not found'})

        self.logger.info("Successfully updated wishlist for email: %s and name: %s", owner, name)
        return Outcome(200, {'message': 'Wishlist updated'})

    def delete_entry(self, credential, email, name):
        self.logger.info("delete_entry called with email: %s and name: %s", email, name)
        owner, denied = self._authorize(credential, email)
        if denied:
            return denied

        try:
            deleted = self.store.remove(owner, name)
        except Exception:
            return self._server_error('delete from', owner)

        if not deleted:
            self.logger.warning("Wishlist not found for email: %s and name: %s", owner, name)
            return Outcome(404, {'error': 'Wishlist item not found'})

        self.logger.info("Successfully deleted wishlist for email: %s and name: %s", owner, name)
        return Outcome(200, {'message': 'Removed from wishlist'})
