"""Repository for the students table.

Provides CRUD operations for Student values over an externally owned
SQLite connection. Every operation absorbs driver errors and reports them
through its return value; the cause of the last failure is kept in
``last_error``.
"""

from __future__ import annotations

import sqlite3
from contextlib import closing
from datetime import date, datetime

import structlog

from labdb.db.table import Table
from labdb.model.student import Student
from labdb.utils.dates import from_sql_date, to_sql_date

logger = structlog.get_logger(__name__)

# Hard coded, so safe to interpolate into the statements below
TABLE_NAME = "students"

CREATE_SQL = (
    f"CREATE TABLE {TABLE_NAME} ("
    "id INT NOT NULL PRIMARY KEY, "
    "firstName CHAR(40), "
    "lastName CHAR(40), "
    "birthday DATE"
    ")"
)
DROP_SQL = f"DROP TABLE {TABLE_NAME}"
SELECT_BY_ID_SQL = f"SELECT * FROM {TABLE_NAME} WHERE id = ?"
SELECT_ALL_SQL = f"SELECT * FROM {TABLE_NAME}"
SELECT_BY_BIRTHDAY_SQL = f"SELECT * FROM {TABLE_NAME} WHERE birthday = ?"
INSERT_SQL = f"INSERT INTO {TABLE_NAME} VALUES (?,?,?,?)"
UPDATE_SQL = (
    f"UPDATE {TABLE_NAME} SET id=?, firstName=?, lastName=?, birthday=? WHERE id=?"
)
DELETE_SQL = f"DELETE FROM {TABLE_NAME} WHERE id=?"

# Malformed stored dates surface as ValueError while mapping rows
_READ_ERRORS = (sqlite3.Error, ValueError)


class StudentsTable(Table[Student, int]):
    """Student repository bound to one open connection.

    The connection is not owned: it is never closed or pooled here.
    """

    def __init__(self, connection: sqlite3.Connection):
        if connection is None:
            raise ValueError("StudentsTable requires an open connection")
        self._connection = connection
        self.last_error: Exception | None = None

    def get_table_name(self) -> str:
        return TABLE_NAME

    # =========================================================================
    # DDL
    # =========================================================================

    def create_table(self) -> bool:
        """Create the students table.

        Returns:
            True if created, False on any error (including "already exists")
        """
        if self._execute_ddl(CREATE_SQL, "create_table"):
            logger.debug("students.table_created")
            return True
        return False

    def drop_table(self) -> bool:
        """Drop the students table.

        Returns:
            True if dropped, False on any error (including "no such table")
        """
        if self._execute_ddl(DROP_SQL, "drop_table"):
            logger.debug("students.table_dropped")
            return True
        return False

    # =========================================================================
    # QUERIES
    # =========================================================================

    def find_by_primary_key(self, key: int) -> Student | None:
        """Get student by ID.

        Args:
            key: Student ID

        Returns:
            Student if found, None if missing or on error
        """
        students = self._query(SELECT_BY_ID_SQL, (key,), "find_by_primary_key")
        return students[0] if students else None

    def find_all(self) -> list[Student]:
        """Get all students, in store order. Empty list on error."""
        return self._query(SELECT_ALL_SQL, (), "find_all")

    def find_by_birthday(self, birthday: date | datetime) -> list[Student]:
        """Get all students born on the given calendar day.

        Args:
            birthday: Day to match. A datetime is compared by its date only.

        Returns:
            Matching students, empty list if none or on error
        """
        return self._query(
            SELECT_BY_BIRTHDAY_SQL, (to_sql_date(birthday),), "find_by_birthday"
        )

    # =========================================================================
    # WRITES
    # =========================================================================

    def save(self, value: Student) -> bool:
        """Insert a new student.

        Returns:
            True if exactly one row was inserted. A duplicate ID is a
            constraint violation and returns False.
        """
        saved = self._execute_write(
            INSERT_SQL,
            (value.id, value.first_name, value.last_name, to_sql_date(value.birthday)),
            "save",
        )
        if saved:
            logger.debug("students.saved", id=value.id)
        return saved

    def update(self, value: Student) -> bool:
        """Replace the stored row with the same ID.

        Returns:
            True if exactly one row was updated, False if the ID is unknown
        """
        updated = self._execute_write(
            UPDATE_SQL,
            (
                value.id,
                value.first_name,
                value.last_name,
                to_sql_date(value.birthday),
                value.id,
            ),
            "update",
        )
        if updated:
            logger.debug("students.updated", id=value.id)
        return updated

    def delete(self, key: int) -> bool:
        """Delete student by ID.

        Returns:
            True if deleted, False if not found
        """
        deleted = self._execute_write(DELETE_SQL, (key,), "delete")
        if deleted:
            logger.debug("students.deleted", id=key)
        return deleted

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _execute_ddl(self, sql: str, operation: str) -> bool:
        self.last_error = None
        try:
            with self._connection, closing(self._connection.cursor()) as cursor:
                cursor.execute(sql)
        except sqlite3.Error as e:
            self._record_failure(operation, e)
            return False
        return True

    def _execute_write(self, sql: str, params: tuple, operation: str) -> bool:
        """Run one DML statement as its own unit of work.

        Returns True only if exactly one row was affected.
        """
        self.last_error = None
        try:
            with self._connection, closing(self._connection.cursor()) as cursor:
                cursor.execute(sql, params)
                affected = cursor.rowcount
        except sqlite3.Error as e:
            self._record_failure(operation, e)
            return False
        return affected == 1

    def _query(self, sql: str, params: tuple, operation: str) -> list[Student]:
        self.last_error = None
        try:
            with closing(self._connection.cursor()) as cursor:
                cursor.row_factory = sqlite3.Row
                cursor.execute(sql, params)
                return _read_students(cursor)
        except _READ_ERRORS as e:
            self._record_failure(operation, e)
            return []

    def _record_failure(self, operation: str, error: Exception) -> None:
        self.last_error = error
        logger.warning(
            "students.operation_failed",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
        )


def _read_students(cursor: sqlite3.Cursor) -> list[Student]:
    """Map every remaining row of a cursor to a Student."""
    return [_row_to_student(row) for row in cursor.fetchall()]


def _row_to_student(row: sqlite3.Row) -> Student:
    """Convert database row to Student."""
    return Student(
        id=row["id"],
        first_name=row["firstName"],
        last_name=row["lastName"],
        birthday=from_sql_date(row["birthday"]),
    )
