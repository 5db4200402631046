import pytest

from account_service.domain.validation import (
    is_valid_password,
    name_error,
    user_field_errors,
)


@pytest.mark.parametrize("password,valid", [
    ("12345678", True),
    ("longenough1", True),
    ("1234567", False),
    ("", False),
    (None, False),
])
def test_password_length(password, valid):
    assert is_valid_password(password) is valid


@pytest.mark.parametrize("name", ["alice01", "Al.i-c_e 9", "abcd", "a" * 40, "9lives"])
def test_valid_names(name):
    assert name_error(name) is None


@pytest.mark.parametrize(
    "name", ["abc", "a" * 41, "_alice", " alice", "alice!", "alice01\n", "", None]
)
def test_invalid_names(name):
    assert name_error(name) is not None


def test_user_field_errors():
    assert user_field_errors("alice01", "a@x.com") == {}
    assert set(user_field_errors("ab", "nope")) == {"name", "email"}
