"""
Exceptions raised by the SchoolDB data-access layer.

Store failures are not represented here: errors raised by pymongo
propagate to the caller unchanged.
"""


class SchoolDBError(Exception):
    """Base exception for SchoolDB errors."""
    pass


class InvalidArgumentError(SchoolDBError, ValueError):
    """Raised when a write is rejected before reaching the database."""
    pass
