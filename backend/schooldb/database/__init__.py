"""
Database module - MongoDB connection handle and database definitions.
"""
from schooldb.database.connections import MongoConnection
from schooldb.database.databases import school_db

__all__ = [
    "MongoConnection",
    "school_db",
]
