from typing import Any, Dict, Generator
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from blogapi.core.config import settings

logger = logging.getLogger("blogapi")

if not settings.DATABASE_URL:
    logger.error("DATABASE_URL is not set or empty!")
    raise ValueError("DATABASE_URL environment variable is required")


def engine_options(database_url: str) -> Dict[str, Any]:
    """
    Engine keyword arguments for the given backend.

    SQLite connections are shared with the request threadpool and have no
    server side to time out, so they skip the pool health settings.
    """
    if make_url(database_url).get_backend_name() == "sqlite":
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


try:
    engine = create_engine(settings.DATABASE_URL, **engine_options(settings.DATABASE_URL))
    logger.info(f"Database engine created for backend {engine.dialect.name}")
except Exception as e:
    logger.error(f"Failed to create database engine: {e}")
    raise

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """One session per request, closed once the response is sent"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
