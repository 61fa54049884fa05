"""
Pet Directory - Locations Router
Read-only endpoints for the country -> province -> city hierarchy,
addressed by slug the same way the directory pages are.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from petdirectory.database import get_db
from petdirectory.models.models import Country, Province, City
from petdirectory.schemas.locations import CountryResponse, ProvinceResponse, CityResponse

router = APIRouter(prefix="/locations", tags=["locations"])


def get_country_or_404(db: Session, country_slug: str) -> Country:
    """Look up a country by slug or raise 404."""
    country = db.query(Country).filter(Country.slug == country_slug).first()
    if not country:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Country not found"
        )
    return country


@router.get("/countries", response_model=List[CountryResponse])
async def list_countries(
    db: Session = Depends(get_db)
):
    """
    Get all countries.

    Returns countries sorted alphabetically by name.
    """
    return db.query(Country).order_by(Country.name).all()


@router.get("/countries/{country_slug}", response_model=CountryResponse)
async def get_country(
    country_slug: str,
    db: Session = Depends(get_db)
):
    """
    Get a specific country by slug.
    """
    return get_country_or_404(db, country_slug)


@router.get("/countries/{country_slug}/provinces", response_model=List[ProvinceResponse])
async def list_provinces_by_country(
    country_slug: str,
    db: Session = Depends(get_db)
):
    """
    Get all provinces for a country, sorted by name.
    """
    country = get_country_or_404(db, country_slug)

    return db.query(Province).filter(
        Province.country_id == country.id
    ).order_by(Province.name).all()


@router.get(
    "/countries/{country_slug}/provinces/{province_slug}/cities",
    response_model=List[CityResponse]
)
async def list_cities_by_province(
    country_slug: str,
    province_slug: str,
    db: Session = Depends(get_db)
):
    """
    Get all cities for a province.

    Used for the province landing pages: Country → Province → City
    """
    country = get_country_or_404(db, country_slug)

    province = db.query(Province).filter(
        Province.country_id == country.id,
        Province.slug == province_slug
    ).first()
    if not province:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Province not found"
        )

    return db.query(City).filter(
        City.province_id == province.id
    ).order_by(City.name).all()


@router.get("/countries/{country_slug}/cities/{city_slug}", response_model=CityResponse)
async def get_city(
    country_slug: str,
    city_slug: str,
    db: Session = Depends(get_db)
):
    """
    Get a specific city by slug within its country.
    """
    country = get_country_or_404(db, country_slug)

    city = db.query(City).filter(
        City.country_id == country.id,
        City.slug == city_slug
    ).first()

    if not city:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="City not found"
        )

    return city
