"""Domain model for the lab database."""

from labdb.model.student import Student

__all__ = ["Student"]
