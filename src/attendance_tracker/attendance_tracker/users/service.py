from __future__ import annotations

import logging
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty
from ..core.exceptions import DuplicateUsernameError, InvalidCredentialsError, MissingFieldsError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


class AuthService:
    """Use cases: register an account, authenticate (login)."""

    def __init__(self, users: UserRepository, *, hash_method: Optional[str] = None):
        self._users = users
        self._hash_method = hash_method

    def _hash(self, password: str) -> str:
        if self._hash_method:
            return generate_password_hash(password, method=self._hash_method)
        return generate_password_hash(password)

    def register(self, username: str, password: str) -> User:
        username = require_non_empty(username, "username")
        if not password:
            raise MissingFieldsError(["password"])

        if self._users.get_by_username(username):
            raise DuplicateUsernameError("Username already exists")

        user = self._users.create_user(username=username, password_hash=self._hash(password))
        logger.info("registered user id=%s username=%s", user.user_id, user.username)
        return user

    def authenticate(self, username: str, password: str) -> User:
        user = self._users.get_by_username(username or "")
        if not user:
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except (TypeError, ValueError):
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

        return user
