"""
models/user.py
--------------
Domain model for application users.
"""

from dataclasses import dataclass, field
from typing import Sequence

# Column order of a users row, as selected by the repository.
USER_COLUMNS: tuple[str, ...] = (
    "id",
    "email",
    "pass_hash",
    "username",
    "first_name",
    "last_name",
    "photo_url",
)


@dataclass(frozen=True)
class User:
    """
    Represents a single user record.

    Attributes:
        id: Database primary key (64-bit, positive).
        email: Login email address.
        pass_hash: Opaque password hash bytes. Never shown in repr.
        username: Public handle.
        first_name: Given name.
        last_name: Family name.
        photo_url: Avatar URL, may be empty.
    """
    id: int
    email: str
    pass_hash: bytes = field(repr=False)
    username: str
    first_name: str
    last_name: str
    photo_url: str = ""

    @classmethod
    def from_row(cls, row: Sequence) -> "User":
        """
        Build a User from a positional database row.

        Raises:
            ValueError: If the row does not have exactly one value per column,
                or the password hash is not binary.
        """
        if len(row) != len(USER_COLUMNS):
            raise ValueError(
                f"Malformed users row: expected {len(USER_COLUMNS)} columns, got {len(row)}"
            )
        # psycopg2 hands back bytea as memoryview
        if not isinstance(row[2], (bytes, bytearray, memoryview)):
            raise ValueError(
                f"Malformed users row: pass_hash must be binary, got {type(row[2]).__name__}"
            )
        return cls(
            id=row[0],
            email=row[1],
            pass_hash=bytes(row[2]),
            username=row[3],
            first_name=row[4],
            last_name=row[5],
            photo_url=row[6] or "",
        )

    def __str__(self) -> str:
        return f"#{self.id} {self.username} <{self.email}>"
