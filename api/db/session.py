"""Engine/session helpers for the SQL backend."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from api.core.config import get_settings

Base = declarative_base()
logger = logging.getLogger(__name__)


@lru_cache
def get_engine():
    settings = get_settings()
    url = (settings.database_url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    connect_args = {}
    if url.startswith("sqlite"):
        # sessions are opened from FastAPI's threadpool
        connect_args["check_same_thread"] = False
    return create_engine(
        url,
        future=True,
        pool_pre_ping=True,
        echo=settings.db_echo,
        connect_args=connect_args,
    )


@lru_cache
def _get_sessionmaker():
    return sessionmaker(
        bind=get_engine(),
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        future=True,
    )


@contextmanager
def get_session() -> Session:
    session: Session = _get_sessionmaker()()
    try:
        yield session
    finally:
        session.close()


def init_db() -> None:
    """Create missing tables for every registered model."""
    from . import models  # noqa: F401  # ensure models are imported for metadata

    Base.metadata.create_all(bind=get_engine())


def dispose_engine() -> None:
    """Release pooled connections and forget the cached engine/sessionmaker."""
    if get_engine.cache_info().currsize:
        get_engine().dispose()
        logger.info("Database engine disposed")
    _get_sessionmaker.cache_clear()
    get_engine.cache_clear()
