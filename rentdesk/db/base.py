# rentdesk/db/base.py

"""
Declarative base shared by every table - single source of truth for metadata.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass
