"""
Persistence failures raised by the user store.

The application layer never sees a driver exception for an expected
failure: adapters translate them into one of these.
"""

from typing import Dict


class PersistenceError(Exception):
    pass


class DuplicateKeyError(PersistenceError):
    def __init__(self, field: str = ""):
        self.field = field
        super().__init__(f"Duplicate value for {field}" if field else "Duplicate key")


class FieldValidationError(PersistenceError):
    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        super().__init__(", ".join(f"{f}: {m}" for f, m in errors.items()))
