"""
Student DAO for the Students collection.
"""
import logging
from contextlib import closing
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError
from pymongo.database import Database

from schooldb.core.exceptions import InvalidArgumentError
from schooldb.database.databases import school_db
from schooldb.models.student import Student
from schooldb.schemas.student import StudentCreate, StudentEnrollmentUpdate, StudentKey

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT", bound=BaseModel)


def _validate_request(schema: type[RequestT], action: str, **fields: Any) -> RequestT:
    """Build a request schema, raising InvalidArgumentError when it is rejected."""
    try:
        return schema(**fields)
    except ValidationError as e:
        logger.warning(f"Rejected {action}: {e}")
        raise InvalidArgumentError(f"Invalid input parameters for {action}: {e}") from e


class StudentDAO:
    """
    CRUD operations on Student documents, keyed by studentId.

    Every write validates its arguments first and raises
    InvalidArgumentError without touching the collection when they are
    malformed.
    """

    def __init__(self, db: Database):
        """Initialize with the school database."""
        self.db = db
        self.students = db[school_db.Collections.STUDENTS]

    def add_student(
        self,
        name: str,
        age: int,
        student_id: int,
        enrolled_courses: Optional[list[int]],
    ) -> None:
        """Insert a new student after validating every field."""
        request = _validate_request(
            StudentCreate,
            "adding a student",
            name=name,
            age=age,
            student_id=student_id,
            enrolled_courses=enrolled_courses,
        )
        student = Student(
            name=request.name,
            age=request.age,
            student_id=request.student_id,
            enrolled_courses=request.enrolled_courses,
        )
        self.students.insert_one(student.to_document())
        logger.debug(f"Student {request.student_id} added")

    def find_students_by_course(self, course_id: int) -> list[Student]:
        """Return every student whose enrolledCourses contains course_id."""
        return self._find({"enrolledCourses": course_id})

    def get_all_students(self) -> list[Student]:
        """Return every stored student in natural order."""
        return self._find({})

    def get_student_by_id(self, student_id: int) -> Optional[Student]:
        """Return the first student with this studentId, or None."""
        doc = self.students.find_one({"studentId": student_id})
        if doc is None:
            return None
        return Student.model_validate(doc)

    def update_student(self, student_id: int, new_enrolled_courses: Optional[list[int]]) -> None:
        """Replace the enrolled courses of a student; name and age are kept."""
        request = _validate_request(
            StudentEnrollmentUpdate,
            "updating a student",
            student_id=student_id,
            enrolled_courses=new_enrolled_courses,
        )
        result = self.students.update_one(
            {"studentId": request.student_id},
            {"$set": {"enrolledCourses": request.enrolled_courses}},
        )
        logger.debug(f"Student {request.student_id} update matched {result.matched_count}")

    def delete_student(self, student_id: int) -> None:
        """Delete the student with this studentId, if any."""
        request = _validate_request(StudentKey, "deleting a student", student_id=student_id)
        result = self.students.delete_one({"studentId": request.student_id})
        logger.debug(f"Student {request.student_id} delete removed {result.deleted_count}")

    def _find(self, query: dict[str, Any]) -> list[Student]:
        with closing(self.students.find(query)) as cursor:
            return [Student.model_validate(doc) for doc in cursor]
