class WishlistError(Exception):
    """Base class for errors raised by the wishlist service."""


class InvalidIdentityError(WishlistError):
    """The token decoded but does not carry a usable email identity."""


class DuplicateEntryError(WishlistError):
    """An entry with the same (email, name) already exists."""

    def __init__(self, email, name):
        super().__init__(f"Wishlist entry '{name}' already exists for {email}")
        self.email = email
        self.name = name
