"""
Pet Directory - Database Configuration
SQLAlchemy engine, session factory and dependency for MySQL
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from typing import Generator

from petdirectory.config import get_settings

settings = get_settings()

engine_options = {"pool_pre_ping": True}
if not settings.database_url.startswith("sqlite"):
    engine_options.update(
        pool_size=10,
        max_overflow=20,
        pool_recycle=3600  # Recycle connections after 1 hour (important for MySQL)
    )

engine = create_engine(settings.database_url, **engine_options)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """
    Database dependency for FastAPI.
    Yields a database session and ensures proper cleanup.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    Initialize the database by creating all tables.
    """
    from petdirectory.models import models  # noqa: F401
    Base.metadata.create_all(bind=engine)
