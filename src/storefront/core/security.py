"""Security utilities: password hashing, session tokens and CSRF protection."""

import base64
import hashlib
import hmac
import secrets
import time
from urllib.parse import urlparse

from passlib.context import CryptContext

from src.storefront.runtime.context import get_config

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash password."""
    return str(pwd_context.hash(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password."""
    return bool(pwd_context.verify(plain_password, hashed_password))


def generate_secure_token(length: int = 32) -> str:
    """Generate a cryptographically secure random token.

    Args:
        length: Number of random bytes to generate (default 32)

    Returns:
        URL-safe base64 encoded token
    """
    return (
        base64.urlsafe_b64encode(secrets.token_bytes(length))
        .decode("utf-8")
        .rstrip("=")
    )


def _csrf_secret() -> bytes:
    secret = get_config().app.csrf_signing_secret
    return secret.encode() if secret else b"dev-secret"


def generate_csrf_token(session_id: str, timestamp: int | None = None) -> str:
    """Generate CSRF token bound to session and time.

    Args:
        session_id: Session identifier to bind token to
        timestamp: Optional timestamp (defaults to current hour)

    Returns:
        HMAC-based CSRF token
    """
    if timestamp is None:
        timestamp = int(time.time() // 3600)

    message = f"{session_id}:{timestamp}"
    csrf_token = hmac.new(_csrf_secret(), message.encode(), hashlib.sha256).hexdigest()

    return f"{timestamp}:{csrf_token}"


def validate_csrf_token(
    session_id: str, csrf_token: str | None, max_age_hours: int = 24
) -> bool:
    """Validate CSRF token for session.

    Args:
        session_id: Session identifier
        csrf_token: CSRF token to validate
        max_age_hours: Maximum age of token in hours

    Returns:
        True if valid, False otherwise
    """
    if not csrf_token:
        return False

    try:
        token_timestamp, token_value = csrf_token.split(":", 1)
        timestamp = int(token_timestamp)
    except ValueError:
        return False

    current_hour = int(time.time() // 3600)
    if current_hour - timestamp > max_age_hours:
        return False

    expected_value = generate_csrf_token(session_id, timestamp).split(":", 1)[1]

    # Constant-time comparison
    return hmac.compare_digest(expected_value, token_value)


def sanitize_return_url(
    return_to: str | None, default: str = "/", allowed_hosts: list[str] | None = None
) -> str:
    """Sanitize return URL to prevent open redirects.

    Args:
        return_to: User-provided return URL
        default: Fallback when return_to is missing or unsafe
        allowed_hosts: Optional list of allowed hosts for absolute URLs

    Returns:
        Sanitized return URL (relative path or allowed absolute URL)
    """
    if not return_to:
        return default

    return_to = return_to.strip()

    if return_to.startswith("/") and not return_to.startswith("//"):
        if all(ord(c) >= 32 for c in return_to) and "\\" not in return_to:
            return return_to

    if allowed_hosts and return_to.startswith(("http://", "https://")):
        if urlparse(return_to).hostname in allowed_hosts:
            return return_to

    return default
