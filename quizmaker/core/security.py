"""Password hashing and opaque session token generation."""
import secrets

from passlib.context import CryptContext

from quizmaker.core.config import get_settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=get_settings().password_hash_rounds,
)

# 32 random bytes -> 64 hex characters
SESSION_TOKEN_BYTES = 32


def verify_password(plain: str, hashed: str) -> bool:
    """Return True if ``plain`` matches ``hashed``; never raises on a bad hash."""
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError):
        return False


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def dummy_verify_password() -> None:
    """Burn one verification's worth of time (login for an unknown user)."""
    pwd_context.dummy_verify()


def generate_session_token() -> str:
    return secrets.token_hex(SESSION_TOKEN_BYTES)
