"""
Pet Directory - SQLAlchemy Models
Location hierarchy: countries -> provinces -> cities
"""
from datetime import datetime
from sqlalchemy import (
    Column, String, Integer, DateTime, ForeignKey, Index, UniqueConstraint
)
from sqlalchemy.orm import relationship

from petdirectory.database import Base


class Country(Base):
    """Countries served by the directory, addressed by slug in URLs."""
    __tablename__ = "countries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(String(255), unique=True, nullable=False, index=True)
    code = Column(String(3), unique=True, nullable=True)  # ISO code, e.g. 'NL'
    name = Column(String(255), nullable=False)

    # Relationships
    provinces = relationship("Province", back_populates="country", cascade="all, delete-orphan")
    cities = relationship("City", back_populates="country", cascade="all, delete-orphan")


class Province(Base):
    """Provinces/states/regions between country and city."""
    __tablename__ = "provinces"
    __table_args__ = (
        UniqueConstraint("country_id", "slug", name="uq_provinces_country_slug"),
        Index("ix_provinces_slug_country", "slug", "country_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    country_id = Column(Integer, ForeignKey("countries.id", ondelete="CASCADE"), nullable=False, index=True)
    slug = Column(String(255), nullable=False)  # e.g. 'noord-holland'
    name = Column(String(255), nullable=False)
    code = Column(String(10), nullable=True)  # e.g. 'NH'
    city_count = Column(Integer, nullable=False, default=0)  # denormalized
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    country = relationship("Country", back_populates="provinces")
    cities = relationship("City", back_populates="province")


class City(Base):
    """Cities; at most one row per (country, slug)."""
    __tablename__ = "cities"
    __table_args__ = (
        UniqueConstraint("country_id", "slug", name="uq_cities_country_slug"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    country_id = Column(Integer, ForeignKey("countries.id", ondelete="CASCADE"), nullable=False, index=True)
    province_id = Column(Integer, ForeignKey("provinces.id", ondelete="SET NULL"), nullable=True, index=True)
    slug = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    place_count = Column(Integer, nullable=False, default=0)  # owned by place discovery
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    country = relationship("Country", back_populates="cities")
    province = relationship("Province", back_populates="cities")
