from __future__ import annotations

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from jobintake.config import Settings, get_settings


def engine_options(settings: Settings) -> dict[str, Any]:
    connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}
    # SQL statements are echoed only at DEBUG.
    return {
        "connect_args": connect_args,
        "echo": settings.log_level.upper() == "DEBUG",
        "future": True,
    }


settings = get_settings()
engine = create_engine(settings.database_url, **engine_options(settings))
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


def get_db_session() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
