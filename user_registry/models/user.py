# File: user_registry/models/user.py

"""
The users table.

Only two text columns and no constraints: one row per email is kept by the
check-before-insert in registration, not by the database.
"""

from sqlalchemy import Column, Table, Text

from user_registry.models.base import metadata


users = Table(
    "users",
    metadata,
    Column("name", Text),
    Column("email", Text),
)
