"""
Shared fixtures: an in-memory SQLite database with the location tables
and a few rows the seeders expect to find.
"""
import os

# Must be set before petdirectory.config is imported anywhere
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from petdirectory.database import Base
from petdirectory.models.models import Country, Province


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def netherlands(db):
    country = Country(slug="netherlands", code="NL", name="Nederland")
    db.add(country)
    db.commit()
    db.refresh(country)
    return country


@pytest.fixture
def zeeland(db, netherlands):
    province = Province(country_id=netherlands.id, slug="zeeland", name="Zeeland", code="ZE")
    db.add(province)
    db.commit()
    db.refresh(province)
    return province
