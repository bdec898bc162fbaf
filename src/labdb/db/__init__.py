"""Database module for SQLite persistence.

Provides:
- Connection management (open_connection, get_db, init_db)
- Generic Table interface
- StudentsTable repository
"""

from labdb.db.database import get_db, init_db, open_connection
from labdb.db.students_table import StudentsTable
from labdb.db.table import Table

__all__ = ["StudentsTable", "Table", "get_db", "init_db", "open_connection"]
