# /lms/db/models/user_models.py

"""
This module defines the SQLAlchemy ORM model for the `User` entity. Every
other record in the system points at a user through a plain string id.
"""

from sqlalchemy import Column, String, Boolean, DateTime

from ..base_class import Base, utcnow


class User(Base):
    """
    SQLAlchemy model representing a student, teacher or admin account.

    The password column holds a bcrypt hash. Users are the only records that
    are ever hard-deleted, and deleting one does not cascade: courses,
    enrollments and submissions that reference the id are left in place and
    every read path treats the missing user as "unknown".
    """
    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    role = Column(String, index=True, nullable=False, default="student")
    email_verified = Column(Boolean, nullable=False, default=False)
    auth_provider = Column(String, nullable=False, default="email")
    google_id = Column(String, unique=True, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
