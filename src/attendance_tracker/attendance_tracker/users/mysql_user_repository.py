from __future__ import annotations

from typing import Optional

import mysql.connector

from ..core.exceptions import DuplicateUsernameError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, load_text
from .model import User
from .repository import UserRepository


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_username(self, username: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, username, password_hash
                FROM users
                WHERE username=%s
                """,
                (username,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return User(
                user_id=int(row["user_id"]),
                username=load_text(row["username"]),
                password_hash=row["password_hash"],
            )

    def create_user(self, *, username: str, password_hash: str) -> User:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO users(username, password_hash) VALUES(%s,%s)",
                    (username, password_hash),
                )
                user_id = int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            # Lost a race with a concurrent registration of the same username.
            raise DuplicateUsernameError("Username already exists") from e

        return User(user_id=user_id, username=username, password_hash=password_hash)
