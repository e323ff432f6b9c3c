"""Relational persistence (async SQLAlchemy)"""

from .database import create_tables, dispose_engine, get_engine, get_session_factory
from .models import Base, Site

__all__ = ["Base", "Site", "create_tables", "dispose_engine", "get_engine", "get_session_factory"]
