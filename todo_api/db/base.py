"""SQLAlchemy Declarative Base — shared base class for ORM models.

Design Decisions:
    - Separate file for Base: models and the session manager import it without cycles
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all Todo API ORM models."""
    pass
