"""Tests for the user directory."""
import pytest
from pydantic import ValidationError

from quizmaker.core.exceptions import ConsistencyError, DuplicateEmailError, DuplicateUsernameError
from quizmaker.core.security import verify_password
from quizmaker.db.client import query_first
from quizmaker.schemas.user import UserCreateSchema
from quizmaker.services import users
from quizmaker.services.users import (
    create_user,
    email_exists,
    get_user_by_email,
    get_user_by_id,
    get_user_by_username,
    get_user_by_username_or_email,
    username_exists,
)
from tests.helpers import TEST_PASSWORD, count_rows


def _user_input(**overrides) -> UserCreateSchema:
    data = {
        "first_name": "John",
        "last_name": "Doe",
        "username": "johndoe",
        "email": "john@example.com",
        "password": TEST_PASSWORD,
    }
    data.update(overrides)
    return UserCreateSchema(**data)


def test_create_user_returns_public_view(db):
    user = create_user(db, _user_input())

    assert len(user.id) == 32
    assert user.username == "johndoe"
    assert user.first_name == "John"
    assert "password_hash" not in user.model_dump()
    assert "passwordHash" not in user.model_dump(by_alias=True)
    assert user.model_dump(by_alias=True)["firstName"] == "John"


def test_password_is_stored_hashed(db):
    user = create_user(db, _user_input())
    row = query_first(db, "SELECT password_hash FROM users WHERE id = ?", [user.id])
    assert row["password_hash"] != TEST_PASSWORD
    assert verify_password(TEST_PASSWORD, row["password_hash"])


def test_lookups_ignore_case(db):
    created = create_user(db, _user_input(username="johndoe", email="john@example.com"))

    assert get_user_by_username(db, "JohnDoe").id == created.id
    assert get_user_by_email(db, "JOHN@Example.COM").id == created.id
    assert get_user_by_username_or_email(db, "JOHNDOE").id == created.id
    assert get_user_by_username_or_email(db, "John@example.com").id == created.id
    assert get_user_by_id(db, created.id).email == "john@example.com"


def test_missing_user_lookups_return_none(db):
    assert get_user_by_id(db, "0" * 32) is None
    assert get_user_by_username(db, "ghost") is None
    assert get_user_by_email(db, "ghost@example.com") is None
    assert get_user_by_username_or_email(db, "ghost") is None
    assert username_exists(db, "ghost") is False
    assert email_exists(db, "ghost@example.com") is False


def test_exists_helpers(db):
    create_user(db, _user_input())
    assert username_exists(db, "JOHNDOE")
    assert email_exists(db, "john@EXAMPLE.com")


def test_duplicate_username_differing_in_case(db):
    create_user(db, _user_input())
    with pytest.raises(DuplicateUsernameError):
        create_user(db, _user_input(username="JohnDoe", email="other@example.com"))
    assert count_rows(db, "users") == 1


def test_duplicate_email_differing_in_case(db):
    create_user(db, _user_input())
    with pytest.raises(DuplicateEmailError):
        create_user(db, _user_input(username="someoneelse", email="JOHN@example.com"))
    assert count_rows(db, "users") == 1


def test_unique_index_backs_up_the_precheck(db, monkeypatch):
    create_user(db, _user_input())

    # Simulate losing the race: the pre-check sees nothing, the insert conflicts.
    real_username_exists = users.username_exists
    calls = {"n": 0}

    def racing_username_exists(session, username):
        calls["n"] += 1
        return False if calls["n"] == 1 else real_username_exists(session, username)

    monkeypatch.setattr(users, "username_exists", racing_username_exists)

    with pytest.raises(DuplicateUsernameError):
        create_user(db, _user_input(username="JOHNDOE", email="new@example.com"))
    assert count_rows(db, "users") == 1


def test_missing_reread_is_a_consistency_error(db, monkeypatch):
    monkeypatch.setattr(users, "get_user_by_id", lambda session, user_id: None)
    with pytest.raises(ConsistencyError):
        create_user(db, _user_input())


@pytest.mark.parametrize(
    "overrides",
    [
        {"username": "ab"},
        {"username": "has space"},
        {"email": "not-an-email"},
        {"password": "short1"},
        {"password": "lettersonly"},
        {"password": "12345678"},
        {"password": "a1" * 40},
        {"first_name": ""},
    ],
)
def test_registration_input_is_validated_by_schema(overrides):
    with pytest.raises(ValidationError):
        _user_input(**overrides)
