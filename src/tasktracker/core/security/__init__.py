"""Security utilities - password hashing, tokens and response headers."""

from src.tasktracker.core.security.crypto import (
    DUMMY_PASSWORD_HASH,
    TokenType,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from src.tasktracker.core.security.headers import SecurityHeadersMiddleware

__all__ = [
    # Crypto
    "DUMMY_PASSWORD_HASH",
    "TokenType",
    "create_access_token",
    "decode_token",
    "hash_password",
    "verify_password",
    # Headers
    "SecurityHeadersMiddleware",
]
