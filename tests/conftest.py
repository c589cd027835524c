"""
Global test fixtures for SchoolDB.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock)
- DAO instances bound to the mock database
- Sample course and student data
"""

import sys
from pathlib import Path

import pytest

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock)
# =============================================================================

@pytest.fixture
def mock_mongo_client():
    """
    Create a mock MongoDB client using mongomock.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    import mongomock
    client = mongomock.MongoClient()
    yield client
    client.close()


@pytest.fixture
def mock_school_db(mock_mongo_client):
    """Provide mock SchoolDB database."""
    from schooldb.database.databases import school_db

    yield mock_mongo_client[school_db.DB_NAME]


# =============================================================================
# DAO Fixtures
# =============================================================================

@pytest.fixture
def course_dao(mock_school_db):
    from schooldb.daos import CourseDAO

    return CourseDAO(mock_school_db)


@pytest.fixture
def student_dao(mock_school_db):
    from schooldb.daos import StudentDAO

    return StudentDAO(mock_school_db)


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def sample_courses() -> list[dict]:
    """Courses as stored by the setup script."""
    return [
        {"courseId": "C001", "courseName": "Mathematics", "department": "Math"},
        {"courseId": "C002", "courseName": "Physics", "department": "Physics"},
        {"courseId": "C003", "courseName": "Biology", "department": "Biology"},
    ]


@pytest.fixture
def sample_students() -> list[dict]:
    """Students as stored by the setup script."""
    return [
        {"name": "Alice", "age": 20, "studentId": 1001, "enrolledCourses": [101, 102]},
        {"name": "Bob", "age": 22, "studentId": 1002, "enrolledCourses": [102, 103]},
    ]


@pytest.fixture
def seeded_course_dao(course_dao, sample_courses):
    """CourseDAO over a collection holding the sample courses."""
    for course in sample_courses:
        course_dao.add_course(course["courseId"], course["courseName"], course["department"])
    return course_dao


@pytest.fixture
def seeded_student_dao(student_dao, sample_students):
    """StudentDAO over a collection holding Alice and Bob."""
    for student in sample_students:
        student_dao.add_student(
            student["name"], student["age"], student["studentId"], student["enrolledCourses"]
        )
    return student_dao
