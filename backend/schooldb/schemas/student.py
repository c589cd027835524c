"""
Student write request schemas.

Strict mode: bools, floats and numeric strings are rejected rather than
coerced to int.
"""
from pydantic import BaseModel, ConfigDict, Field


class StudentKey(BaseModel):
    """Identifies a single student."""
    model_config = ConfigDict(strict=True)

    student_id: int = Field(..., gt=0, description="Student business key")


class StudentCreate(StudentKey):
    """Add student request."""
    name: str = Field(..., min_length=1, description="Student name")
    age: int = Field(..., gt=0, description="Student age in years")
    enrolled_courses: list[int] = Field(..., description="Course ids, may be empty")


class StudentEnrollmentUpdate(StudentKey):
    """Replace the enrolled courses of a student."""
    enrolled_courses: list[int] = Field(..., description="New course ids, may be empty")
