"""SQLAlchemy Declarative Base - shared base class for ORM models.

Design Decisions:
    - Separate file for Base: models and the session manager both import it
      without importing each other
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for inventory ORM models."""
    pass
