"""PyJWT implementation of IdentityProvider."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt

from boxcars.domain.errors import UnauthorizedError
from boxcars.ports.identity_provider import IdentityProvider


class JwtIdentityProvider(IdentityProvider):
    """
    Signed bearer tokens carrying the user id in ``sub``.

    Tokens are issued by the identity service sharing the same secret; issue()
    exists for that service, seed scripts and tests.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expires_minutes: int = 60) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._expires = timedelta(minutes=expires_minutes)

    def issue(self, user_id: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {"sub": user_id, "iat": now, "exp": now + self._expires}
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        """
        Decode and check a token.

        Raises:
            UnauthorizedError: If the token is expired, malformed or has no subject
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise UnauthorizedError("Token expired")
        except jwt.InvalidTokenError:
            raise UnauthorizedError("Not authorized, token failed")

        return str(payload["sub"])
