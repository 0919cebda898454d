"""Database package - all database-related code."""
from app.db.connection import Database, init_db, close_db, get_database
from app.db.models import Base, EmployeeModel

__all__ = [
    "Database",
    "init_db",
    "close_db",
    "get_database",
    "Base",
    "EmployeeModel",
]
