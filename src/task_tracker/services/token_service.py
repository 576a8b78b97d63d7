"""
Token service for issuing and verifying access tokens.

Tokens are HS256-signed JWTs whose ``sub`` claim is the user id. They are
stateless: there is no refresh and no revocation list, so a token stays
valid until its ``exp`` claim passes.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from ..shared.exceptions import ConfigurationError, InvalidTokenError, UnauthenticatedError
from ..shared.utils.types import UserId

log = logging.getLogger(__name__)

DEFAULT_TOKEN_TTL_SECONDS = 24 * 60 * 60
TOKEN_ALGORITHM = "HS256"


class TokenService:
    """
    Issues and verifies signed, time-limited identity tokens.

    The signing secret is supplied once at construction and never read
    from the environment by this class.
    """

    def __init__(
        self,
        secret: str,
        ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS,
        algorithm: str = TOKEN_ALGORITHM,
    ):
        """
        Initialize the token service.

        Args:
            secret: HMAC signing key
            ttl_seconds: Lifetime of issued tokens
            algorithm: JWT signing algorithm
        """
        if not secret:
            raise ConfigurationError("Token signing secret is not configured")
        if ttl_seconds <= 0:
            raise ConfigurationError("Token lifetime must be positive")

        self._secret = secret
        self.ttl_seconds = ttl_seconds
        self.algorithm = algorithm
        self.log_identifier = "[TokenService]"

    def issue(self, user_id: UserId, now: Optional[datetime] = None) -> str:
        """
        Mint an access token for the user.

        Args:
            user_id: Identifier encoded in the ``sub`` claim
            now: Issue time, defaults to the current UTC time

        Returns:
            Encoded token string
        """
        issued_at = now or datetime.now(timezone.utc)
        claims: Dict[str, Any] = {
            "sub": user_id,
            "iat": issued_at,
            "exp": issued_at + timedelta(seconds=self.ttl_seconds),
        }
        token = jwt.encode(claims, self._secret, algorithm=self.algorithm)
        log.debug("%s Issued token for user %s", self.log_identifier, user_id)
        return token

    def verify(self, token: Optional[str]) -> UserId:
        """
        Validate a token and return the user id it asserts.

        Raises:
            UnauthenticatedError: If no token was supplied
            InvalidTokenError: If the signature, expiry or claims are bad
        """
        if not token:
            raise UnauthenticatedError()

        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            log.debug("%s Rejected expired token", self.log_identifier)
            raise InvalidTokenError("Token has expired")
        except jwt.InvalidTokenError as exc:
            log.debug("%s Rejected token: %s", self.log_identifier, exc)
            raise InvalidTokenError()

        user_id = claims.get("sub")
        if not isinstance(user_id, str) or not user_id.strip():
            log.debug("%s Rejected token without a usable subject", self.log_identifier)
            raise InvalidTokenError()
        return user_id

    @staticmethod
    def extract_bearer_token(authorization: Optional[str]) -> str:
        """
        Pull the token out of an ``Authorization: Bearer <token>`` header.

        Raises:
            UnauthenticatedError: If the header is absent, uses another
                scheme, or carries an empty value
        """
        if not authorization:
            raise UnauthenticatedError()

        scheme, _, value = authorization.strip().partition(" ")
        if scheme.lower() != "bearer" or not value.strip():
            raise UnauthenticatedError()
        return value.strip()
