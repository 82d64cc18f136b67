# File: user_registry/core/errors.py

"""
Database error family raised by the service layer.

Handlers catch these and turn them into a 500 envelope. Expected outcomes
("user already exists", "user does not exist") are not errors and never
show up here.
"""


class DatabaseError(Exception):
    """Base class for technical database failures."""


class ConnectionFailure(DatabaseError):
    """The database could not be reached (or DATABASE_URL is unset)."""


class QueryFailure(DatabaseError):
    """A statement or its commit failed."""
