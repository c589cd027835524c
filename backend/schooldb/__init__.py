"""
SchoolDB - data-access layer for the Students and Courses collections.
"""
from schooldb.daos import CourseDAO, StudentDAO
from schooldb.core.exceptions import SchoolDBError, InvalidArgumentError

__version__ = "0.1.0"

__all__ = [
    "CourseDAO",
    "StudentDAO",
    "SchoolDBError",
    "InvalidArgumentError",
]
