"""
Course DAO for the Courses collection.
"""
import logging
from contextlib import closing
from typing import Optional

from pymongo.database import Database

from schooldb.database.databases import school_db
from schooldb.models.course import Course

logger = logging.getLogger(__name__)


class CourseDAO:
    """
    CRUD operations on Course documents, keyed by courseId.

    Writes are not validated and courseId is not checked for uniqueness:
    adding the same courseId twice stores two documents, and update/delete
    then act on one unspecified match.
    """

    def __init__(self, db: Database):
        """Initialize with the school database."""
        self.db = db
        self.courses = db[school_db.Collections.COURSES]

    def add_course(self, course_id: str, course_name: str, department: str) -> None:
        """Insert a new course."""
        self.courses.insert_one({
            "courseId": course_id,
            "courseName": course_name,
            "department": department,
        })
        logger.debug(f"Course {course_id} added")

    def get_all_courses(self) -> list[Course]:
        """Return every stored course in natural order."""
        with closing(self.courses.find()) as cursor:
            return [Course.model_validate(doc) for doc in cursor]

    def update_course(self, course_id: str, course_name: str, department: str) -> None:
        """Overwrite name and department of the course with this courseId."""
        result = self.courses.update_one(
            {"courseId": course_id},
            {"$set": {"courseName": course_name, "department": department}},
        )
        logger.debug(f"Course {course_id} update matched {result.matched_count}")

    def delete_course(self, course_id: str) -> None:
        """Delete the course with this courseId, if any."""
        result = self.courses.delete_one({"courseId": course_id})
        logger.debug(f"Course {course_id} delete removed {result.deleted_count}")

    def get_course_by_id(self, course_id: str) -> Optional[Course]:
        """Return the first course with this courseId, or None."""
        doc = self.courses.find_one({"courseId": course_id})
        if doc is None:
            return None
        return Course.model_validate(doc)
