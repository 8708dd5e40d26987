# core/security.py
"""Password hashing and signed session tokens."""

import logging
from datetime import datetime, timedelta, UTC
from typing import Optional

import bcrypt
import jwt

from core.exceptions import ConfigurationError, UnauthenticatedError, ValidationError

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """Salted bcrypt hashing of user passwords."""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a password with a fresh per-record salt.
        
        Raises:
            ValidationError: If the password is empty or longer than bcrypt accepts
        """
        encoded = (password or "").encode("utf-8")
        if not encoded:
            raise ValidationError("Password must not be empty")
        if len(encoded) > BCRYPT_MAX_BYTES:
            raise ValidationError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self.rounds)).decode("ascii")

    def verify(self, password: str, hashed: str) -> bool:
        encoded = (password or "").encode("utf-8")
        if not encoded or len(encoded) > BCRYPT_MAX_BYTES or not hashed:
            return False
        try:
            return bcrypt.checkpw(encoded, hashed.encode("ascii"))
        except ValueError:
            # Stored value is not a bcrypt hash
            logger.error("Stored password hash has an invalid format")
            return False


class SessionManager:
    """Issues and verifies signed, time-limited session tokens."""

    def __init__(self, secret: str, lifetime: timedelta = timedelta(days=7), algorithm: str = "HS256"):
        if not secret:
            raise ConfigurationError("A session signing secret is required")
        self._secret = secret
        self.lifetime = lifetime
        self.algorithm = algorithm

    @property
    def max_age(self) -> int:
        """Lifetime in seconds, for the session cookie."""
        return int(self.lifetime.total_seconds())

    def issue(self, user_id: int, now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(UTC)
        payload = {
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: Optional[str]) -> int:
        """Decode a token and return the user id it was issued for.
        
        Raises:
            UnauthenticatedError: If the token is absent, malformed, expired or
                carries an invalid signature
        """
        if not token:
            raise UnauthenticatedError("No token provided")
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            raise UnauthenticatedError("Session expired")
        except jwt.InvalidTokenError:
            raise UnauthenticatedError("Invalid token")

        try:
            return int(payload["sub"])
        except (TypeError, ValueError):
            raise UnauthenticatedError("Invalid token")
