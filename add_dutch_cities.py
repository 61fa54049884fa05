#!/usr/bin/env python
"""
Seeder script for Dutch cities, grouped by province.
Run after seed_provinces.py; cities that already exist are skipped,
so the script is safe to re-run.

Usage:
    python add_dutch_cities.py            # insert missing cities
    python add_dutch_cities.py --dry-run  # report what would be added, insert nothing
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
from petdirectory.data.netherlands import NETHERLANDS, DUTCH_CITIES  # noqa: E402
from petdirectory.services.city_seeder import CitySeeder, SeedError, SeedReport  # noqa: E402

DRY_RUN_FLAG = "--dry-run"


def print_summary(report: SeedReport):
    """Print the final counts of a run."""
    print("\n" + "=" * 60)
    print("[SUMMARY]")
    if report.dry_run:
        print(f"  - Would add: {report.would_add}")
    else:
        print(f"  - Added:     {report.added}")
    print(f"  - Skipped:   {report.skipped} (already exist)")
    if report.missing_provinces:
        print(f"  - Missing provinces: {', '.join(report.missing_provinces)}")
    print("=" * 60)

    if report.dry_run:
        print("\nDry run - nothing was written. Run without --dry-run to insert.")
    elif report.added:
        print("\nNext step: run place discovery for the new cities.")


def add_dutch_cities(dry_run: bool = False) -> int:
    """Seed all Dutch cities. Returns the process exit code."""
    session = SessionLocal()

    try:
        print("=" * 60)
        print(f"Adding Dutch cities{' (DRY RUN)' if dry_run else ''}")
        print("=" * 60)

        seeder = CitySeeder(session, NETHERLANDS.slug, dry_run=dry_run)
        report = seeder.run(DUTCH_CITIES)
    except SeedError as e:
        session.rollback()
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()

    print_summary(report)
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

    return add_dutch_cities(dry_run=DRY_RUN_FLAG in args)


if __name__ == "__main__":
    sys.exit(main())
