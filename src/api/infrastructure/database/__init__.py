"""Database infrastructure - async SQLAlchemy engine and sessions."""

from infrastructure.database.dependencies import (
    close_database_connections,
    get_read_engine,
    read_session_scope,
)

__all__ = [
    "close_database_connections",
    "get_read_engine",
    "read_session_scope",
]
