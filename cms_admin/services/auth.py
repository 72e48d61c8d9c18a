"""Authentication service: JWT sessions and admin checks."""

import hmac
import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
from jose import JWTError, jwt

from cms_admin.config import settings

logger = logging.getLogger(__name__)

CREDENTIALS_PROVIDER = "credentials"
GOOGLE_PROVIDER = "google"

# Identity issued to the username/password fallback
ADMIN_IDENTITY = {
    "email": "admin@local",
    "name": "Administrator",
}


class AuthService:
    """Service for authentication operations."""

    def __init__(self):
        self.secret_key = settings.jwt_secret_key
        self.algorithm = settings.jwt_algorithm
        self.access_token_expire_minutes = settings.jwt_access_token_expire_minutes
        self.refresh_token_expire_days = settings.jwt_refresh_token_expire_days

    def verify_admin_credentials(self, username: str, password: str) -> bool:
        """Check the credentials fallback.

        ``ADMIN_PASSWORD`` may be configured as plain text or as a bcrypt hash.
        """
        if not username or not password:
            logger.warning("Missing username or password")
            return False
        if not settings.admin_username or not settings.admin_password:
            logger.warning("Credentials sign-in attempted but no admin account is configured")
            return False

        username_ok = hmac.compare_digest(username.encode(), settings.admin_username.encode())
        stored = settings.admin_password
        if stored.startswith(("$2a$", "$2b$", "$2y$")):
            password_ok = bcrypt.checkpw(password.encode(), stored.encode())
        else:
            password_ok = hmac.compare_digest(password.encode(), stored.encode())

        if username_ok and password_ok:
            logger.info("Admin credentials verified")
            return True
        logger.warning("Invalid admin credentials")
        return False

    def is_allowed_email(self, email: str | None) -> bool:
        """Google sign-ins are limited to the configured allow-list."""
        if not email:
            logger.warning("No email provided by Google")
            return False
        if email.strip().lower() not in settings.admin_email_list:
            logger.warning(f"Unauthorized Google sign-in attempt: {email}")
            return False
        logger.info(f"Allowed Google sign-in: {email}")
        return True

    def _create_token(self, claims: dict[str, Any], token_type: str, expires: timedelta) -> str:
        to_encode = {
            **claims,
            "type": token_type,
            "exp": datetime.now(timezone.utc) + expires,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def create_access_token(self, email: str, name: str | None, provider: str) -> str:
        """Create a JWT access token."""
        return self._create_token(
            {"sub": email, "name": name, "provider": provider, "role": "admin"},
            "access",
            timedelta(minutes=self.access_token_expire_minutes),
        )

    def create_refresh_token(self, email: str, name: str | None, provider: str) -> str:
        """Create a JWT refresh token."""
        return self._create_token(
            {"sub": email, "name": name, "provider": provider, "role": "admin"},
            "refresh",
            timedelta(days=self.refresh_token_expire_days),
        )

    def decode_token(self, token: str) -> dict[str, Any] | None:
        """Decode and validate a JWT token."""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
            return payload
        except JWTError:
            return None

    def verify_access_token(self, token: str) -> dict[str, Any] | None:
        """Verify an access token and return the payload."""
        payload = self.decode_token(token)
        if payload and payload.get("type") == "access":
            return payload
        return None

    def verify_refresh_token(self, token: str) -> dict[str, Any] | None:
        """Verify a refresh token and return the payload."""
        payload = self.decode_token(token)
        if payload and payload.get("type") == "refresh":
            return payload
        return None


auth_service = AuthService()
