from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_jwt(
    user_id: UUID,
    role: str,
    secret: Optional[str] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Generate JWT session token

    Args:
        user_id: User UUID
        role: User role (user, admin)
        secret: Signing secret, defaults to ApplicationConfig.JWT_SECRET
        expires_delta: Token lifetime, defaults to JWT_EXPIRES_MINUTES

    Returns:
        JWT token string (HS256). Every token carries a unique ``jti`` so two
        tokens minted in the same second never collide in the revocation
        registry.
    """
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=ApplicationConfig.JWT_EXPIRES_MINUTES)
    payload = {
        "user_id": str(user_id),
        "role": role,
        "jti": uuid4().hex,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, secret or ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str, secret: Optional[str] = None) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, secret or ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
        return payload
    except JWTError:
        return None
