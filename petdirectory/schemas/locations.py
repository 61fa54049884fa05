"""
Schemas for Location (Country, Province, City) endpoints.
"""
from pydantic import BaseModel
from typing import Optional


class CountryResponse(BaseModel):
    """Country response."""
    id: int
    slug: str
    code: Optional[str] = None
    name: str

    class Config:
        from_attributes = True


class ProvinceResponse(BaseModel):
    """Province response."""
    id: int
    country_id: int
    slug: str
    name: str
    code: Optional[str] = None
    city_count: int = 0

    class Config:
        from_attributes = True


class CityResponse(BaseModel):
    """City response."""
    id: int
    country_id: int
    province_id: Optional[int] = None
    slug: str
    name: str
    place_count: int = 0

    class Config:
        from_attributes = True
