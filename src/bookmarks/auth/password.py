"""Password hashing utilities.

Uses bcrypt for secure password hashing. bcrypt automatically
handles salting and its checkpw comparison is constant-time.
The work factor comes from settings (12 by default, lowered in tests).
"""

import bcrypt

from bookmarks.config import settings


def hash_password(password: str) -> str:
    """Hash a password with bcrypt.

    bcrypt includes a random salt automatically and produces
    hashes starting with "$2b$". Passwords are truncated
    to 72 bytes (bcrypt's limit).
    """
    pw_bytes = password.encode("utf-8")[:72]
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its bcrypt hash. Malformed hashes never match."""
    try:
        pw_bytes = password.encode("utf-8")[:72]
        hash_bytes = password_hash.encode("utf-8")
        return bcrypt.checkpw(pw_bytes, hash_bytes)
    except (ValueError, TypeError):
        return False


_dummy_hash: str | None = None


def dummy_verify(password: str) -> None:
    """Burn one bcrypt check against a throwaway hash.

    Called when signin targets an unknown email, so that path costs
    the same as a wrong password against a real account.
    """
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = hash_password("dummy-password-for-timing")
    verify_password(password, _dummy_hash)
