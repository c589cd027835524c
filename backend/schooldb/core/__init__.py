"""
Core module - exceptions shared by the data-access objects.
"""
from schooldb.core.exceptions import SchoolDBError, InvalidArgumentError

__all__ = [
    "SchoolDBError",
    "InvalidArgumentError",
]
