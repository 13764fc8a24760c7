import logging
from flask import current_app
from flask_jwt_extended import decode_token
from wishlist_api.exceptions import InvalidIdentityError

BEARER_PREFIX = 'Bearer '


def normalize_email(email):
    """Lower-case and strip an email so path owners and token subjects compare equal."""
    return (email or '').strip().lower()


def extract_email(token):
    """Decode a JWT with the app's Flask-JWT-Extended settings and return its email.

    Raises whatever the decoder raises for malformed, expired or badly signed
    tokens, and InvalidIdentityError for refresh tokens or when the identity
    claim is unusable.
    """
    claims = decode_token(token)
    # Refresh tokens only buy new access tokens
    if claims.get('type') != 'access':
        raise InvalidIdentityError(f"Expected an access token, got '{claims.get('type')}'")
    identity_claim = current_app.config.get('JWT_IDENTITY_CLAIM', 'sub')
    email = claims.get(identity_claim)
    if not isinstance(email, str) or not email.strip():
        raise InvalidIdentityError(f"Token has no usable '{identity_claim}' claim")
    return normalize_email(email)


class AuthResult:
    """Outcome of identity extraction: either an email or a failure reason."""

    def __init__(self, email=None, error=None):
        self.email = email
        self.error = error

    @property
    def ok(self):
        return self.email is not None

    @classmethod
    def success(cls, email):
        return cls(email=email)

    @classmethod
    def failure(cls, error):
        return cls(error=error)

    def __repr__(self):
        if self.ok:
            return f"<AuthResult email={self.email}>"
        return f"<AuthResult error={self.error!r}>"


class IdentityExtractor:
    """Turns an Authorization header value into the email it asserts.

    Every failure (missing header, wrong scheme, undecodable token) yields the
    same kind of AuthResult so callers cannot tell which check failed.
    """

    def __init__(self, decoder=extract_email, logger=None):
        self.decoder = decoder
        self.logger = logger or logging.getLogger(__name__)

    def extract(self, credential):
        if not credential or not credential.startswith(BEARER_PREFIX):
            self.logger.warning("Unauthorized access attempt without Bearer token")
            return AuthResult.failure('missing bearer token')

        token = credential[len(BEARER_PREFIX):].strip()
        if not token:
            self.logger.warning("Unauthorized access attempt with empty Bearer token")
            return AuthResult.failure('empty bearer token')

        try:
            email = self.decoder(token)
        except Exception as e:
            self.logger.warning("Failed to extract email from token: %s", e)
            return AuthResult.failure(str(e) or e.__class__.__name__)

        email = normalize_email(email) if isinstance(email, str) else None
        if not email:
            self.logger.warning("Token decoded without an email identity")
            return AuthResult.failure('no identity')
        return AuthResult.success(email)
