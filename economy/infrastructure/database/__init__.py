"""Database infrastructure helpers (engine, sessions, migrations)."""

from .base import Base
from .session import Database, build_engine

__all__ = ["Base", "Database", "build_engine"]
