"""
Database module - MongoDB access layer.

This module handles:
- Client lifecycle (connection.py)
- User document queries (users.py)
"""
from edupilot.database.connection import MongoConnection
from edupilot.database.users import UserRepository

__all__ = [
    "MongoConnection",
    "UserRepository",
]
