"""
Student model for the school database.
"""
from typing import Any, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Student(BaseModel):
    """
    Student document model for MongoDB SchoolDB.Students collection.

    No write-side constraints here; see schooldb.schemas.student for those.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: str = Field(..., description="Student name")
    age: int = Field(..., description="Student age in years")
    student_id: int = Field(..., alias="studentId", description="Student business key")
    enrolled_courses: list[int] = Field(
        ...,
        alias="enrolledCourses",
        description="Ids of the courses the student is enrolled in, in order"
    )

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_object_id(cls, value: Any) -> Any:
        if isinstance(value, ObjectId):
            return str(value)
        return value

    def to_document(self) -> dict[str, Any]:
        """Document as stored in the Students collection."""
        return self.model_dump(by_alias=True, exclude={"id"})
