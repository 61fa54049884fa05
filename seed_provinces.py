#!/usr/bin/env python
"""
Seeder script for the Netherlands and its provinces.
Creates the country and any missing provinces, then refreshes each
province's city count. Run after migration and before add_dutch_cities.py.

Usage:
    python seed_provinces.py            # create missing rows, refresh counts
    python seed_provinces.py --dry-run  # report only
"""
import logging
import os
import sys

from dotenv import load_dotenv

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

load_dotenv()

from petdirectory.config import get_settings  # noqa: E402
from petdirectory.database import SessionLocal  # noqa: E402
from petdirectory.data.netherlands import NETHERLANDS, DUTCH_PROVINCES  # noqa: E402
from petdirectory.models.models import Country  # noqa: E402
from petdirectory.services.province_seeder import ProvinceSeeder, refresh_city_counts  # noqa: E402

DRY_RUN_FLAG = "--dry-run"


def seed_provinces(dry_run: bool = False) -> int:
    """Seed the Netherlands and its provinces. Returns the process exit code."""
    session = SessionLocal()

    try:
        print(f"Seeding {NETHERLANDS.name} provinces{' (DRY RUN)' if dry_run else ''}...")

        result = ProvinceSeeder(session, dry_run=dry_run).run(NETHERLANDS, DUTCH_PROVINCES)

        updated = 0
        if not dry_run:
            country = session.query(Country).filter(Country.slug == NETHERLANDS.slug).one()
            updated = refresh_city_counts(session, country.id)
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()

    print("[OK] Province seeding complete!")
    if result.country_created:
        print(f"  - Country created: {NETHERLANDS.name}")
    if dry_run:
        print(f"  - Provinces to add: {result.would_add}")
    else:
        print(f"  - Provinces added: {result.added}")
        print(f"  - City counts refreshed: {updated}")
    print(f"  - Provinces skipped: {result.skipped}")
    return 0


def main(argv=None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv

    unknown = [arg for arg in args if arg != DRY_RUN_FLAG]
    if unknown:
        print(f"[ERROR] Unknown argument(s): {' '.join(unknown)}", file=sys.stderr)
        print(__doc__)
        return 2

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    return seed_provinces(dry_run=DRY_RUN_FLAG in args)


if __name__ == "__main__":
    sys.exit(main())
