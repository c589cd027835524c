"""
Database definitions and collection constants.
"""
from schooldb.database.databases import school_db

__all__ = ["school_db"]
