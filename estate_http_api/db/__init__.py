"""
estate_http_api.db
==================

Database package for the Estate HTTP API.

This module centralizes the public DB primitives so the rest of the
service can import them from a single place, e.g.:

    from estate_http_api.db import Base, engine, SessionLocal, get_session
"""

from .models import Base
from .session import SessionLocal, db_session, engine, get_session, init_db

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "get_session",
    "db_session",
    "init_db",
]
