"""
Pydantic models for database documents.
"""
from schooldb.models.course import Course
from schooldb.models.student import Student

__all__ = [
    "Course",
    "Student",
]
