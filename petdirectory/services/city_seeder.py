"""
Pet Directory - City Seeder
Ensures every city of a static province -> names mapping exists exactly
once per country, skipping the ones that are already there.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from petdirectory.models.models import Country, Province, City
from petdirectory.services.slugs import slugify

logger = logging.getLogger(__name__)


class SeedError(Exception):
    """Base error for seeding scripts."""


class CountryNotFoundError(SeedError):
    """The country the seed targets has no row."""

    def __init__(self, slug: str):
        super().__init__(f"Country '{slug}' not found. Seed countries first.")
        self.slug = slug


class CityStatus(str, Enum):
    ADDED = "added"
    SKIPPED = "skipped"
    WOULD_ADD = "would_add"


STATUS_TAGS = {
    CityStatus.ADDED: "[ADD] ",
    CityStatus.SKIPPED: "[SKIP]",
    CityStatus.WOULD_ADD: "[DRY] ",
}


@dataclass
class CityOutcome:
    province_slug: str
    name: str
    slug: str
    status: CityStatus


@dataclass
class SeedReport:
    """Counts and per-city outcomes of one seeder run."""
    country_slug: str
    dry_run: bool = False
    added: int = 0
    skipped: int = 0
    would_add: int = 0
    missing_provinces: List[str] = field(default_factory=list)
    outcomes: List[CityOutcome] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return self.added + self.skipped + self.would_add

    def record(self, outcome: CityOutcome) -> None:
        self.outcomes.append(outcome)
        if outcome.status is CityStatus.ADDED:
            self.added += 1
        elif outcome.status is CityStatus.SKIPPED:
            self.skipped += 1
        else:
            self.would_add += 1


class CitySeeder:
    """
    Seeds cities for one country from a {province_slug: [city name, ...]} map.

    Provinces are processed in mapping order and cities in list order. The
    duplicate check is scoped to (country, slug), matching the unique
    constraint on the cities table. Each insert is committed on its own so
    an interrupted run keeps what it already added and can simply be re-run.

    Args:
        db: Open SQLAlchemy session
        country_slug: Slug of the country that must already exist
        dry_run: Do every lookup but never insert
        echo: Receives one human-readable line per step (default: print)
    """

    def __init__(
        self,
        db: Session,
        country_slug: str,
        dry_run: bool = False,
        echo: Optional[Callable[[str], None]] = None
    ):
        self.db = db
        self.country_slug = country_slug
        self.dry_run = dry_run
        self.echo = echo or print

    def run(self, mapping: Dict[str, Sequence[str]]) -> SeedReport:
        """
        Seed all cities in the mapping.

        Raises:
            CountryNotFoundError: the target country does not exist. Nothing
                is read or written past the country lookup.
        """
        report = SeedReport(country_slug=self.country_slug, dry_run=self.dry_run)

        country = self.db.query(Country).filter(Country.slug == self.country_slug).first()
        if not country:
            raise CountryNotFoundError(self.country_slug)
        country_id = country.id

        for province_slug, city_names in mapping.items():
            province = self.db.query(Province).filter(
                Province.slug == province_slug,
                Province.country_id == country_id
            ).first()

            if not province:
                logger.warning("Province '%s' not found in %s, skipping %d cities",
                               province_slug, self.country_slug, len(city_names))
                self.echo(f"\n[WARN] Province '{province_slug}' not found, skipping")
                report.missing_provinces.append(province_slug)
                continue

            province_id = province.id
            self.echo(f"\n{province.name} ({province_slug})")

            for name in city_names:
                outcome = self._seed_city(country_id, province_id, province_slug, name)
                report.record(outcome)
                self.echo(f"  {STATUS_TAGS[outcome.status]} {name} ({outcome.slug})")

        return report

    def _city_exists(self, country_id: int, slug: str) -> bool:
        return self.db.query(City.id).filter(
            City.slug == slug,
            City.country_id == country_id
        ).first() is not None

    def _seed_city(self, country_id: int, province_id: int, province_slug: str, name: str) -> CityOutcome:
        slug = slugify(name)

        if self._city_exists(country_id, slug):
            return CityOutcome(province_slug, name, slug, CityStatus.SKIPPED)

        if self.dry_run:
            return CityOutcome(province_slug, name, slug, CityStatus.WOULD_ADD)

        self.db.add(City(
            name=name,
            slug=slug,
            country_id=country_id,
            province_id=province_id,
            place_count=0,
        ))
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            # Another writer inserted the same (country, slug) since our check
            if not self._city_exists(country_id, slug):
                raise
            logger.info("City '%s' was inserted concurrently, skipping", slug)
            return CityOutcome(province_slug, name, slug, CityStatus.SKIPPED)

        return CityOutcome(province_slug, name, slug, CityStatus.ADDED)
