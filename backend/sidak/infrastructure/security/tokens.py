"""Signed, expiring session tokens (HS256 JWTs carrying ``sub``/``iat``/``exp``)."""

import logging
import time
from collections.abc import Callable

import jwt

from sidak.domain.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"


class TokenSigner:
    """Issues and verifies session tokens with a shared secret."""

    def __init__(
        self,
        secret: str,
        ttl_seconds: int = 24 * 60 * 60,
        clock: Callable[[], float] = time.time,
    ):
        if not secret:
            raise ValueError("Token secret must not be empty")
        self._secret = secret
        self._ttl_seconds = ttl_seconds
        self._clock = clock

    def issue(self, username: str) -> str:
        issued_at = int(self._clock())
        payload = {
            "sub": username,
            "iat": issued_at,
            "exp": issued_at + self._ttl_seconds,
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)

    def verify(self, token: str) -> str:
        """Return the username the token was issued for.

        Raises AuthenticationError when the token is expired, forged or malformed.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                options={"require": ["sub", "iat", "exp"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise AuthenticationError("Token expired") from exc
        except jwt.InvalidTokenError as exc:
            logger.debug("Rejected token: %s", exc)
            raise AuthenticationError("Invalid or expired token") from exc
        username = payload.get("sub")
        if not isinstance(username, str) or not username:
            raise AuthenticationError("Invalid or expired token")
        return username
