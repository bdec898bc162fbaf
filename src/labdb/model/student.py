"""Student value object.

A Student is built either from a row of the students table or by the caller
before a save/update. It is never mutated in place: updates replace the
stored row with a new value.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Student:
    """A row of the students table."""

    id: int
    first_name: str
    last_name: str
    birthday: date | None = None

    @property
    def full_name(self) -> str:
        """First and last name separated by a space."""
        return f"{self.first_name} {self.last_name}".strip()

    def __str__(self) -> str:
        birthday = self.birthday.isoformat() if self.birthday else "-"
        return f"Student({self.id}, {self.full_name}, {birthday})"
