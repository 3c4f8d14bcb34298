"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
All SQL queries related to the `users` table live here.
"""

from typing import Callable, ContextManager

from db import connection as db_connection
from models.user import USER_COLUMNS, User
from utils.logger import get_logger

logger = get_logger(__name__)

USER_BY_ID_SQL = f"SELECT {', '.join(USER_COLUMNS)} FROM users WHERE id = %s;"


class UserNotFoundError(LookupError):
    """Raised when no users row matches the requested key."""

    def __init__(self, user_id: int):
        super().__init__(f"user not found: id={user_id}")
        self.user_id = user_id


class UserStore:
    """
    Repository for reads on the users table.

    Args:
        connection: Zero-argument callable returning a context manager that
            yields a DB-API connection. Defaults to the shared psycopg2 pool.
    """

    def __init__(self, connection: Callable[[], ContextManager] = db_connection.connection):
        self._connection = connection

    # ── READ ──────────────────────────────────────────────

    def get_by_id(self, user_id: int) -> User:
        """
        Fetch a single user by primary key.

        Args:
            user_id: Primary key.

        Returns:
            The matching User.

        Raises:
            UserNotFoundError: If no row has this id.
            Exception: Any driver or decoding failure, re-raised unchanged.
        """
        try:
            with self._connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(USER_BY_ID_SQL, (user_id,))
                    row = cur.fetchone()
            user = User.from_row(row) if row is not None else None
        except Exception as e:
            logger.error(f"Failed to fetch user {user_id}: {e}")
            raise

        if user is None:
            logger.debug(f"No user with id {user_id}")
            raise UserNotFoundError(user_id)
        return user
