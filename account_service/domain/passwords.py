"""
Password hashing helpers (bcrypt).

Plain text is reduced to a base64 SHA-256 digest before bcrypt sees it, so
passwords of any length hash without hitting bcrypt's 72 byte input limit.
"""

import base64
import hashlib

import bcrypt

from config import ApplicationConfig


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def hash_password(password: str) -> str:
    password_hash = bcrypt.hashpw(
        _prehash(password), bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
    )
    return password_hash.decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_prehash(password), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False
