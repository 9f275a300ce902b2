# estate_http_api/db/session.py

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from estate_http_api.config import get_settings
from estate_http_api.db.models import Base

# ---------------------------------------------------------------------------
# Engine / Session factory
# ---------------------------------------------------------------------------

config = get_settings()


def build_engine(database_url: str, *, echo: bool = False) -> Engine:
    """
    Create an engine for ``database_url``.

    SQLite needs a special flag when used in a multi-threaded web app.
    """
    connect_args: dict[str, object] = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}

    return create_engine(
        database_url,
        echo=echo,
        future=True,
        connect_args=connect_args,
    )


engine = build_engine(config.DATABASE_URL, echo=config.DEBUG)

SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,
    class_=Session,
)


def init_db(bind: Engine | None = None) -> None:
    """
    Create all tables that do not exist yet.
    """
    Base.metadata.create_all(bind=bind or engine)


# ---------------------------------------------------------------------------
# FastAPI dependency / helper
# ---------------------------------------------------------------------------


def get_session() -> Generator[Session, None, None]:
    """
    FastAPI-style dependency that yields a database session and ensures it
    is closed afterwards.

    Usage:

        from fastapi import Depends
        from estate_http_api.db.session import get_session

        @router.get("/properties")
        def list_properties(db: Session = Depends(get_session)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def db_session() -> Generator[Session, None, None]:
    """
    Context manager for non-FastAPI usage, e.g. scripts or seeding.

        from estate_http_api.db.session import db_session

        with db_session() as db:
            ...
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


__all__ = ["engine", "SessionLocal", "build_engine", "init_db", "get_session", "db_session"]
