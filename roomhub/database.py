"""Engine, sessions and schema setup shared by the rooms API and the seed command.

The API borrows a pooled session per request through `get_db`; the seed
command builds its own session on whatever engine it is handed and creates
the rooms/questions tables with `init_db(bind=...)` before wiping them.

`DATABASE_URL` selects the database. Without it, a `roomhub.db` SQLite file
next to the `roomhub` package is used.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

# Repository root: the directory that contains the roomhub package
PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _default_sqlite_url() -> str:
    db_path = PROJECT_ROOT / "roomhub.db"
    return f"sqlite:///{db_path.as_posix()}"


DATABASE_URL: str = os.getenv("DATABASE_URL", _default_sqlite_url())


def make_engine(url: str) -> Engine:
    """Create an engine for `url`; SQLite needs `check_same_thread=False` under uvicorn."""
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False}, future=True)
    return create_engine(url, future=True)


engine = make_engine(DATABASE_URL)

# Session factory
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False, class_=Session)

# Declarative base for models
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Per-request session for route handlers (`db: Session = Depends(get_db)`).

    Leaving the block hands the connection back to the pool; the engine itself
    is never disposed here.
    """
    with SessionLocal() as db:
        yield db


def init_db(bind: Optional[Engine] = None) -> None:
    """Create the rooms and questions tables on `bind` (default: the app engine) if missing.

    Importing `roomhub.models` here registers the tables on `Base.metadata`.
    """
    target = bind if bind is not None else engine
    try:
        # Import here to avoid circular imports at module import time
        import roomhub.models  # noqa: F401

        logger.info("Creating database tables (if not exists)")
        Base.metadata.create_all(bind=target)
        logger.info("Database initialized")
    except Exception as exc:
        logger.exception("Failed to initialize database: %s", exc)
        raise


__all__ = ["Base", "engine", "SessionLocal", "make_engine", "get_db", "init_db"]
