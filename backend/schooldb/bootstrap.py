#!/usr/bin/env python3
"""
SchoolDB setup

One-shot initializer for a fresh SchoolDB database:
- creates the Students and Courses collections
- seeds three sample courses and two sample students
- creates the studentId index on Students

Usage:
    python -m schooldb.bootstrap

Environment Variables:
    MONGO_URI: MongoDB connection string (default: mongodb://localhost:27017)
    DB_NAME: Database name (default: SchoolDB)
    UNIQUE_BUSINESS_KEYS: Create unique courseId/studentId indexes (default: false)
    LOG_LEVEL: Logging level (default: INFO)
"""
import logging
import sys

from pymongo.collection import Collection
from pymongo.database import Database

from schooldb.config import Settings, get_settings
from schooldb.database.connections import MongoConnection
from schooldb.database.databases import school_db
from schooldb.models import Course, Student

logger = logging.getLogger(__name__)


# ==================== Sample Data ====================

SAMPLE_COURSES = [
    Course(course_id="C001", course_name="Mathematics", department="Math"),
    Course(course_id="C002", course_name="Physics", department="Physics"),
    Course(course_id="C003", course_name="Biology", department="Biology"),
]

SAMPLE_STUDENTS = [
    Student(name="Alice", age=20, student_id=1001, enrolled_courses=[101, 102]),
    Student(name="Bob", age=22, student_id=1002, enrolled_courses=[102, 103]),
]


# ==================== Setup Steps ====================

def _get_or_create_collection(db: Database, name: str) -> Collection:
    if name not in db.list_collection_names():
        db.create_collection(name)
        logger.info(f"{name} collection created.")
    else:
        logger.info(f"{name} collection already exists.")
    return db[name]


def create_students_collection(db: Database) -> Collection:
    """Create the Students collection if it does not exist."""
    return _get_or_create_collection(db, school_db.Collections.STUDENTS)


def create_courses_collection(db: Database) -> Collection:
    """Create the Courses collection if it does not exist."""
    return _get_or_create_collection(db, school_db.Collections.COURSES)


def insert_sample_courses(courses: Collection) -> None:
    courses.insert_many([course.to_document() for course in SAMPLE_COURSES])
    logger.info("Sample courses inserted.")


def insert_sample_students(students: Collection) -> None:
    students.insert_many([student.to_document() for student in SAMPLE_STUDENTS])
    logger.info("Sample students inserted.")


def create_index_on_student_id(students: Collection) -> str:
    """Create the ascending, non-unique studentId index."""
    name = students.create_index([("studentId", 1)])
    logger.info("Index created on studentId.")
    return name


def run_setup(db: Database, unique_keys: bool = False) -> None:
    """Run every setup step against db."""
    students = create_students_collection(db)
    courses = create_courses_collection(db)
    insert_sample_courses(courses)
    insert_sample_students(students)
    if unique_keys:
        school_db.create_school_indexes(db, unique_keys=True)
    else:
        create_index_on_student_id(students)


# ==================== Main Entry Point ====================

def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main() -> int:
    """Main entry point."""
    settings = get_settings()
    configure_logging(settings)
    logger.info(f"Setting up database '{settings.db_name}'")

    connection = MongoConnection(settings.mongo_uri)
    try:
        connection.connect()
        run_setup(
            connection.get_database(settings.db_name),
            unique_keys=settings.unique_business_keys,
        )
    except Exception as e:
        logger.error(f"Error: {e}")
        return 1
    finally:
        connection.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
