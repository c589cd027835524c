"""
Request schemas validated before a write reaches the database.
"""
from schooldb.schemas.student import (
    StudentCreate,
    StudentEnrollmentUpdate,
    StudentKey,
)

__all__ = [
    "StudentCreate",
    "StudentEnrollmentUpdate",
    "StudentKey",
]
