"""Database helpers (engine/sessionmaker export)."""

from .session import Base, get_engine, get_sessionmaker

__all__ = ["Base", "get_engine", "get_sessionmaker"]
