"""
Authentication utilities with JWT tokens and bcrypt password hashing.

- bcrypt with a random per-password salt for password hashing
- HS256-signed session tokens that expire 7 days after issuance
- UTC timezone consistency
"""

import binascii
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt
from jose.utils import base64url_decode, base64url_encode

from gamehub import config
from gamehub.exceptions import InvalidTokenError, TokenExpiredError

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_PASSWORD_BYTES = 72


def _is_canonical_segment(segment: str) -> bool:
    """True when the base64url segment re-encodes to exactly the same text."""
    try:
        raw = segment.encode("ascii")
        return base64url_encode(base64url_decode(raw)) == raw
    except (ValueError, binascii.Error):
        return False


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain text password against a hashed password."""
    return bcrypt.checkpw(
        _password_bytes(plain_password), hashed_password.encode("utf-8")
    )


def get_password_hash(password: str, rounds: int | None = None) -> str:
    """Hash a plain text password using bcrypt."""
    salt = bcrypt.gensalt(rounds=rounds or config.settings.bcrypt_rounds)
    hashed_password = bcrypt.hashpw(password=_password_bytes(password), salt=salt)
    return hashed_password.decode("utf-8")


class TokenService:
    """
    Issues and verifies signed session tokens.

    The signing secret is passed in explicitly; an empty secret is a
    configuration error and fails immediately.
    """

    def __init__(
        self,
        secret_key: str | None,
        algorithm: str = "HS256",
        expire_days: int = 7,
    ):
        if not secret_key:
            raise ValueError("A non-empty JWT secret key is required")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = timedelta(days=expire_days)

    def issue(
        self,
        user_id: Any,
        extra_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a token whose subject is ``user_id``."""
        now = datetime.now(UTC)
        to_encode = dict(extra_claims or {})
        to_encode.update(
            {
                "sub": str(user_id),
                "iat": now,
                "exp": now + (expires_delta or self.expires_delta),
            }
        )
        return jwt.encode(to_encode, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> dict[str, Any]:
        """
        Decode and verify a token, returning its claims.

        Raises TokenExpiredError once ``exp`` has passed and InvalidTokenError
        for anything else that is wrong with the token.
        """
        # Segments must be canonical base64url; the decoder ignores unused trailing bits
        if not all(_is_canonical_segment(s) for s in token.split(".")):
            raise InvalidTokenError()

        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError as e:
            raise TokenExpiredError() from e
        except JWTError as e:
            raise InvalidTokenError() from e

        if not payload.get("sub"):
            raise InvalidTokenError()
        return payload


@lru_cache
def get_token_service() -> TokenService:
    """Process-wide token service built from settings."""
    return TokenService(
        config.settings.jwt_secret_key,
        algorithm=config.settings.jwt_algorithm,
        expire_days=config.settings.access_token_expire_days,
    )
