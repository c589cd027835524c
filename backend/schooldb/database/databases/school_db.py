"""
School database configuration.
Stores students and the courses they enroll in.

Structure:
- Students: student records, keyed by studentId, with enrolledCourses ids
- Courses: course records, keyed by courseId
"""
import logging

from pymongo.database import Database

logger = logging.getLogger(__name__)

DB_NAME = "SchoolDB"


class Collections:
    """Collection names in SchoolDB."""
    STUDENTS = "Students"
    COURSES = "Courses"

    # Index definitions for each collection
    INDEXES = {
        "Students": [
            {"keys": [("studentId", 1)]},
        ],
    }

    # Used instead of INDEXES when business keys must be unique
    UNIQUE_INDEXES = {
        "Students": [
            {"keys": [("studentId", 1)], "unique": True},
        ],
        "Courses": [
            {"keys": [("courseId", 1)], "unique": True},
        ],
    }


def create_school_indexes(db: Database, unique_keys: bool = False) -> list[str]:
    """
    Create indexes for the school database collections.

    Returns the names of the indexes created. Failures from the server
    (for example duplicate keys already stored when unique_keys is set)
    are raised to the caller.
    """
    definitions = Collections.UNIQUE_INDEXES if unique_keys else Collections.INDEXES
    created = []
    for collection_name, indexes in definitions.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            name = collection.create_index(keys, **kwargs)
            logger.info(f"Index {name} created on {collection_name}")
            created.append(name)
    return created
