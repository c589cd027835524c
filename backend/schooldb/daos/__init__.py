"""
Data-access objects for the school database.

Each DAO wraps one collection and is constructed with an explicitly owned
pymongo Database:

- CourseDAO: CRUD over Courses, keyed by courseId
- StudentDAO: CRUD over Students, keyed by studentId, plus lookup of the
  students enrolled in a course
"""
from schooldb.daos.course_dao import CourseDAO
from schooldb.daos.student_dao import StudentDAO

__all__ = [
    "CourseDAO",
    "StudentDAO",
]
