"""
Security utilities for password hashing and JWT tokens
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

import argon2
import bcrypt
from jose import JWTError, jwt
from passlib.context import CryptContext

from smartbizflow.core.config import settings

# Configure logger
logger = logging.getLogger(__name__)

# New hashes are always bcrypt. Argon2 and the passlib schemes below are only
# verified, for records imported from older deployments.
_argon2_hasher = argon2.PasswordHasher()
legacy_context = CryptContext(schemes=["pbkdf2_sha256", "sha256_crypt"], deprecated="auto")

BCRYPT_MAX_BYTES = 72


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Hash a password with bcrypt at the configured cost factor"""
    if rounds is None:
        rounds = settings.BCRYPT_ROUNDS
    password_bytes = password.encode('utf-8')
    if len(password_bytes) > BCRYPT_MAX_BYTES:
        # Truncate to 72 bytes for bcrypt compatibility
        password_bytes = password_bytes[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=rounds)).decode('utf-8')


def validate_password(password: str) -> str:
    """
    Validate and normalize password for hashing

    Args:
        password: Raw password string

    Returns:
        Normalized password (trimmed)

    Raises:
        ValueError: If password is invalid with specific error message
    """
    if password is None:
        raise ValueError("Password is required")

    # Trim whitespace
    password = password.strip()

    # Check if empty after trimming
    if not password:
        raise ValueError("Password cannot be empty")

    # Check minimum length
    if len(password) < 6:
        raise ValueError("Password must be at least 6 characters")

    # Check UTF-8 byte length for bcrypt compatibility
    if len(password.encode('utf-8')) > BCRYPT_MAX_BYTES:
        raise ValueError("Password cannot be longer than 72 bytes when encoded as UTF-8")

    return password


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Verify a password against its hash"""
    if not hashed_password:
        return False

    if hashed_password.startswith('$argon2'):
        try:
            return _argon2_hasher.verify(hashed_password, plain_password)
        except argon2.exceptions.VerifyMismatchError:
            return False
        except argon2.exceptions.InvalidHashError:
            logger.warning("Stored argon2 hash is malformed")
            return False

    if hashed_password.startswith(('$2a$', '$2b$', '$2y$')):
        try:
            return bcrypt.checkpw(
                plain_password.encode('utf-8')[:BCRYPT_MAX_BYTES],
                hashed_password.encode('utf-8')
            )
        except ValueError:
            logger.warning("Stored bcrypt hash is malformed")
            return False

    # Fallback to passlib context (for legacy hashes)
    try:
        return legacy_context.verify(plain_password, hashed_password)
    except ValueError:
        return False


def create_access_token(data: Dict, expires_minutes: Optional[int] = None) -> str:
    """Create a JWT access token"""
    to_encode = data.copy()

    if expires_minutes is None:
        expires_minutes = settings.JWT_EXPIRE_MINUTES

    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    to_encode.update({"exp": expire})

    encoded_jwt = jwt.encode(
        to_encode,
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM
    )
    return encoded_jwt


def decode_token(token: str) -> Dict:
    """Decode and verify a JWT token"""
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM]
        )
        return payload
    except JWTError:
        raise ValueError("Invalid token")
