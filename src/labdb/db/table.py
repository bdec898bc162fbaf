"""Generic table interface.

A Table maps one value type V, keyed by K, to a single relational table.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

V = TypeVar("V")
K = TypeVar("K")


class Table(ABC, Generic[V, K]):
    """CRUD operations over one table.

    Implementations never raise for data-access failures: write operations
    return False, lookups return None and listings return an empty list.
    """

    @abstractmethod
    def get_table_name(self) -> str:
        """Name of the underlying table."""

    @abstractmethod
    def create_table(self) -> bool:
        """Create the table. False if it could not be created."""

    @abstractmethod
    def drop_table(self) -> bool:
        """Drop the table. False if it could not be dropped."""

    @abstractmethod
    def find_by_primary_key(self, key: K) -> V | None:
        """Value stored under key, or None."""

    @abstractmethod
    def find_all(self) -> list[V]:
        """Every stored value."""

    @abstractmethod
    def save(self, value: V) -> bool:
        """Insert value. False on duplicate key or error."""

    @abstractmethod
    def update(self, value: V) -> bool:
        """Replace the row with value's key. False if no such row."""

    @abstractmethod
    def delete(self, key: K) -> bool:
        """Delete the row with key. False if no such row."""
