from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from src.attendance_tracker.attendance_tracker.core.exceptions import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    MissingFieldsError,
)
from src.attendance_tracker.attendance_tracker.users.model import User
from src.attendance_tracker.attendance_tracker.users.service import AuthService

FAST_HASH = "pbkdf2:sha256:1000"


def test_register_stores_salted_hash_not_plaintext(users_repo):
    auth = AuthService(users_repo, hash_method=FAST_HASH)

    user = auth.register("alice", "s3cret")

    stored = users_repo.get_by_username("alice")
    assert stored == user
    assert stored.password_hash != "s3cret"
    assert check_password_hash(stored.password_hash, "s3cret")


def test_register_duplicate_username_keeps_first_user(users_repo):
    auth = AuthService(users_repo, hash_method=FAST_HASH)
    first = auth.register("alice", "one")

    with pytest.raises(DuplicateUsernameError):
        auth.register("alice", "two")

    assert users_repo.get_by_username("alice") == first
    assert auth.authenticate("alice", "one") == first


@pytest.mark.parametrize("username,password", [(None, "pw"), ("  ", "pw"), ("bob", None), ("bob", "")])
def test_register_requires_username_and_password(users_repo, username, password):
    auth = AuthService(users_repo, hash_method=FAST_HASH)

    with pytest.raises(MissingFieldsError):
        auth.register(username, password)


def test_authenticate_wrong_password_and_unknown_user_look_the_same(users_repo):
    auth = AuthService(users_repo, hash_method=FAST_HASH)
    auth.register("alice", "right")

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        auth.authenticate("alice", "wrong")
    with pytest.raises(InvalidCredentialsError) as unknown_user:
        auth.authenticate("nobody", "right")

    assert str(wrong_password.value) == str(unknown_user.value)


def test_authenticate_rejects_corrupted_hash(users_repo):
    users_repo.create_user(username="legacy", password_hash="CHANGE_ME")
    auth = AuthService(users_repo)

    with pytest.raises(InvalidCredentialsError):
        auth.authenticate("legacy", "CHANGE_ME")


def test_public_view_has_no_password_hash():
    user = User(user_id=7, username="alice", password_hash="pbkdf2:sha256:1000$salt$hash")

    assert user.to_public() == {"id": 7, "username": "alice"}


def test_register_and_login_use_the_same_username(users_repo):
    auth = AuthService(users_repo, hash_method=FAST_HASH)

    user = auth.register(" bob ", "pw")

    assert user.username == " bob "
    assert auth.authenticate(" bob ", "pw") == user
    with pytest.raises(InvalidCredentialsError):
        auth.authenticate("bob", "pw")
