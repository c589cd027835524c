"""
Course model for the school database.
"""
from typing import Any, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Course(BaseModel):
    """
    Course document model for MongoDB SchoolDB.Courses collection.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    # Fields must be present but are stored as given, None included
    course_id: Optional[str] = Field(..., alias="courseId", description="Course business key")
    course_name: Optional[str] = Field(..., alias="courseName", description="Course name")
    department: Optional[str] = Field(..., description="Department offering the course")

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_object_id(cls, value: Any) -> Any:
        if isinstance(value, ObjectId):
            return str(value)
        return value

    def to_document(self) -> dict[str, Any]:
        """Document as stored in the Courses collection."""
        return self.model_dump(by_alias=True, exclude={"id"})
