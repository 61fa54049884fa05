#!/usr/bin/env python
"""
migrate.py - migration commands for the Pet Directory location tables

Usage:
    python migrate.py migrate      # Create the database if needed and run all pending migrations
    python migrate.py rollback     # Rollback last migration
    python migrate.py refresh      # Rollback all and re-run migrations
    python migrate.py status       # Show migration status
    python migrate.py make <name>  # Create new migration file
    python migrate.py fresh        # Drop all tables and re-run migrations
    python migrate.py db:create    # Create the database if it doesn't exist
"""
import sys
import os

# Fix Windows console encoding
if sys.platform == 'win32':
    sys.stdout.reconfigure(encoding='utf-8')

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

ALEMBIC_INI = os.path.join(os.path.dirname(os.path.abspath(__file__)), "alembic.ini")


def run_alembic_command(args: list):
    """Run an alembic command."""
    from alembic.config import Config
    from alembic import command

    alembic_cfg = Config(ALEMBIC_INI)

    if args[0] == "upgrade":
        command.upgrade(alembic_cfg, args[1] if len(args) > 1 else "head")
    elif args[0] == "downgrade":
        command.downgrade(alembic_cfg, args[1] if len(args) > 1 else "-1")
    elif args[0] == "current":
        command.current(alembic_cfg, verbose=True)
    elif args[0] == "history":
        command.history(alembic_cfg, verbose=True)
    elif args[0] == "revision":
        message = args[1] if len(args) > 1 else "new migration"
        command.revision(alembic_cfg, message=message, autogenerate=True)


def migrate():
    """Run all pending migrations."""
    print("[MIGRATE] Running migrations...")
    run_alembic_command(["upgrade", "head"])
    print("[SUCCESS] Migrations completed!")


def rollback():
    """Rollback the last migration."""
    print("[ROLLBACK] Rolling back last migration...")
    run_alembic_command(["downgrade", "-1"])
    print("[SUCCESS] Rollback completed!")


def refresh():
    """Rollback all and re-run migrations."""
    print("[REFRESH] Refreshing database...")
    run_alembic_command(["downgrade", "base"])
    run_alembic_command(["upgrade", "head"])
    print("[SUCCESS] Database refreshed!")


def status():
    """Show migration status."""
    print("[STATUS] Migration Status:")
    print("-" * 50)
    run_alembic_command(["current"])
    print("-" * 50)
    print("\n[HISTORY] Migration History:")
    run_alembic_command(["history"])


def make(name: str):
    """Create a new migration file."""
    print(f"[CREATE] Creating new migration: {name}")
    run_alembic_command(["revision", name])
    print("[SUCCESS] Migration file created!")


def fresh():
    """Drop all tables and re-run migrations."""
    print("[FRESH] Dropping all tables and re-running migrations...")

    from sqlalchemy import MetaData
    from petdirectory.database import engine

    metadata = MetaData()
    metadata.reflect(bind=engine)
    for table in reversed(metadata.sorted_tables):
        print(f"  Dropping table: {table.name}")
    metadata.drop_all(bind=engine)

    print("[SUCCESS] All tables dropped!")

    migrate()


def create_database() -> bool:
    """Create the MySQL database named in DATABASE_URL if it doesn't exist."""
    from sqlalchemy.engine import make_url
    from petdirectory.config import get_settings

    url = make_url(get_settings().database_url)
    if not url.drivername.startswith("mysql"):
        print(f"[SKIP] db:create only applies to MySQL (got '{url.drivername}')")
        return False

    print("[DATABASE] Creating database if not exists...")
    import pymysql

    try:
        conn = pymysql.connect(
            host=url.host or "localhost",
            user=url.username or "root",
            password=url.password or "",
            port=url.port or 3306
        )
        with conn.cursor() as cursor:
            cursor.execute(
                f"CREATE DATABASE IF NOT EXISTS `{url.database}` "
                "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
            )
        conn.commit()
        conn.close()
        print(f"[SUCCESS] Database '{url.database}' created/verified!")
        return True
    except pymysql.MySQLError as e:
        print(f"[ERROR] Error creating database: {e}")
        return False


def main(argv=None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(__doc__)
        return 0

    command = args[0].lower()

    if command == "migrate":
        create_database()
        migrate()
    elif command == "rollback":
        rollback()
    elif command == "refresh":
        refresh()
    elif command == "status":
        status()
    elif command == "make":
        if len(args) < 2:
            print("[ERROR] Please provide a migration name: python migrate.py make <name>")
            return 1
        make(args[1])
    elif command == "fresh":
        fresh()
    elif command == "db:create":
        create_database()
    else:
        print(f"[ERROR] Unknown command: {command}")
        print(__doc__)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
