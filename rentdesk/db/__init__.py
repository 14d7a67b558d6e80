"""
Database init - Exports for models and routes
"""

from .base import Base

__all__ = ["Base"]
