"""
Pet Directory - Province Seeder
Creates a country and its provinces when missing and keeps the
denormalized province city counts in sync.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from petdirectory.models.models import Country, Province, City

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CountrySpec:
    slug: str
    code: str
    name: str


@dataclass(frozen=True)
class ProvinceSpec:
    slug: str
    name: str
    code: Optional[str] = None


@dataclass
class ProvinceSeedResult:
    country_created: bool = False
    added: int = 0
    skipped: int = 0
    would_add: int = 0


def ensure_country(db: Session, spec: CountrySpec, dry_run: bool = False) -> Optional[Country]:
    """
    Get the country by slug, creating it if missing.

    Returns None only in dry-run mode when the country does not exist yet.
    """
    country = db.query(Country).filter(Country.slug == spec.slug).first()
    if country or dry_run:
        return country

    country = Country(slug=spec.slug, code=spec.code, name=spec.name)
    db.add(country)
    db.commit()
    db.refresh(country)
    logger.info("Created country %s (id: %s)", spec.slug, country.id)
    return country


def refresh_city_counts(db: Session, country_id: int) -> int:
    """
    Recompute Province.city_count for every province of a country.

    Returns the number of provinces updated.
    """
    provinces = db.query(Province).filter(Province.country_id == country_id).all()
    counts = dict(
        db.query(City.province_id, func.count(City.id))
        .filter(City.country_id == country_id, City.province_id.isnot(None))
        .group_by(City.province_id)
        .all()
    )
    for province in provinces:
        province.city_count = counts.get(province.id, 0)
    db.commit()
    return len(provinces)


class ProvinceSeeder:
    """Create-or-skip provinces for one country, in the given order."""

    def __init__(self, db: Session, dry_run: bool = False, echo: Optional[Callable[[str], None]] = None):
        self.db = db
        self.dry_run = dry_run
        self.echo = echo or print

    def run(self, country: CountrySpec, provinces: Iterable[ProvinceSpec]) -> ProvinceSeedResult:
        result = ProvinceSeedResult()

        existed = self.db.query(Country.id).filter(Country.slug == country.slug).first() is not None
        row = ensure_country(self.db, country, dry_run=self.dry_run)
        result.country_created = row is not None and not existed

        if row is None:
            self.echo(f"[DRY]  Would create country {country.name} ({country.slug})")
            # Nothing can exist under a country that does not exist yet
            for province in provinces:
                self.echo(f"  [DRY]  {province.name} ({province.slug})")
                result.would_add += 1
            return result

        country_id = row.id
        self.echo(f"{row.name} (id: {country_id}){' created' if result.country_created else ''}")

        for province in provinces:
            exists = self.db.query(Province.id).filter(
                Province.slug == province.slug,
                Province.country_id == country_id
            ).first() is not None

            if exists:
                self.echo(f"  [SKIP] {province.name} ({province.slug})")
                result.skipped += 1
            elif self.dry_run:
                self.echo(f"  [DRY]  {province.name} ({province.slug})")
                result.would_add += 1
            else:
                self.db.add(Province(
                    country_id=country_id,
                    slug=province.slug,
                    name=province.name,
                    code=province.code,
                ))
                self.db.commit()
                self.echo(f"  [ADD]  {province.name} ({province.slug})")
                result.added += 1

        return result
