# /lms/core/security.py

"""
Cryptographic helpers: bearer-token encoding/decoding and password hashing.

Token issuance (login, registration, OTP) lives outside this service; the
backend only needs to *verify* tokens. `create_access_token` is kept for
operators and for the test suite, which mint tokens with the same claims the
identity service issues: `sub` (user id), `role` and `exp`.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
from jose import jwt, JWTError, ExpiredSignatureError

from . import config
from .errors import AuthError


def create_access_token(subject: str, role: str, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta if expires_delta is not None else timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    claims = {"sub": str(subject), "role": role, "exp": expire}
    return jwt.encode(claims, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Verifies the signature and expiry of a bearer token and returns its claims.

    Raises:
        AuthError: "Token has expired" for an expired token, "Invalid token"
            for anything else that fails verification.
    """
    try:
        return jwt.decode(token, config.JWT_SECRET_KEY, algorithms=[config.JWT_ALGORITHM])
    except ExpiredSignatureError:
        raise AuthError("Token has expired")
    except JWTError:
        raise AuthError("Invalid token")


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=config.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
