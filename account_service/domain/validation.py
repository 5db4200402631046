"""
Field rules shared by registration, password reset and profile updates.
"""

import re
from typing import Dict, Optional

from email_validator import EmailNotValidError, validate_email

MIN_PASSWORD_LENGTH = 8
NAME_PATTERN = re.compile(r"[a-zA-Z0-9][a-zA-Z0-9._\- ]{3,39}")


def is_valid_password(password: Optional[str]) -> bool:
    return password is not None and len(password) >= MIN_PASSWORD_LENGTH


def name_error(name: Optional[str]) -> Optional[str]:
    """Return a message if ``name`` violates the naming rule, else None."""
    if not name or NAME_PATTERN.fullmatch(name) is None:
        return (
            "must consist of at least 4 and up to 40 characters and only allows "
            "to use alphanumerics (a-zA-Z0-9), dots (.), dashes (-), underscores (_) "
            "and spaces. The first character must be a letter or number."
        )
    return None


def email_error(email: Optional[str]) -> Optional[str]:
    if not email:
        return "is required"
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return "is not a valid email address"
    return None


def user_field_errors(name: Optional[str], email: Optional[str]) -> Dict[str, str]:
    """Collect one message per offending identity field"""
    errors = {}
    message = name_error(name)
    if message:
        errors["name"] = message
    message = email_error(email)
    if message:
        errors["email"] = message
    return errors
