"""labdb: a Student table repository over SQLite."""

from labdb.db import StudentsTable, Table, get_db, init_db, open_connection
from labdb.model import Student

__version__ = "0.1.0"

__all__ = [
    "Student",
    "StudentsTable",
    "Table",
    "get_db",
    "init_db",
    "open_connection",
]
