import secrets
from datetime import UTC, datetime


def utcnow() -> datetime:
    """Naive UTC timestamp, matching what the database columns store"""
    return datetime.now(UTC).replace(tzinfo=None)


def generate_token() -> str:
    return secrets.token_urlsafe(32)
