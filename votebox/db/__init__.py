"""Database package."""
from votebox.db.session import create_db_engine, make_session_factory, session_scope
from votebox.db.base import Base

__all__ = ["create_db_engine", "make_session_factory", "session_scope", "Base"]
