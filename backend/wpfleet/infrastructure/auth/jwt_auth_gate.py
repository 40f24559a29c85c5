"""Bearer JWT implementation of the AuthGate port.

Tokens are HS256-signed with the user id in the ``sub`` claim. A valid
signature is not enough: the user must still exist in the Site Store.
"""

import logging

import jwt

from wpfleet.application.interfaces import AuthGate, AuthResult, SiteStore
from wpfleet.domain.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class JWTAuthGate(AuthGate):
    """Verifies ``Authorization: Bearer <jwt>`` headers."""

    def __init__(self, store: SiteStore, secret: str, algorithm: str = "HS256"):
        self._store = store
        self._secret = secret
        self._algorithm = algorithm

    async def authenticate(self, authorization: str | None) -> AuthResult:
        try:
            token = self._extract_token(authorization)
            user_id = self._decode_subject(token)
            user = await self._store.get_user(user_id)
            if user is None:
                raise AuthenticationError("User not found")
        except AuthenticationError as exc:
            logger.info("Authentication failed: %s", exc.reason)
            return AuthResult(success=False, reason=exc.reason)
        except Exception:
            logger.exception("Authentication failed unexpectedly")
            return AuthResult(success=False, reason="Authentication failed")
        return AuthResult(success=True, user=user)

    @staticmethod
    def _extract_token(authorization: str | None) -> str:
        if not authorization:
            raise AuthenticationError("Access token required")
        parts = authorization.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            raise AuthenticationError("Malformed Authorization header")
        return parts[1]

    def _decode_subject(self, token: str) -> int:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token expired")
        except jwt.PyJWTError:
            raise AuthenticationError("Invalid token")

        subject = payload.get("sub")
        if isinstance(subject, str) and subject.isascii() and subject.isdigit():
            return int(subject)
        raise AuthenticationError("Invalid token subject")
