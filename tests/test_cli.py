"""
Tests for the command-line seed and migration scripts.
"""
import pytest

import add_dutch_cities
import migrate
import seed_provinces
from petdirectory import config
from petdirectory.data.netherlands import DUTCH_CITIES, DUTCH_PROVINCES
from petdirectory.models.models import City, Country, Province

TOTAL_CITIES = sum(len(names) for names in DUTCH_CITIES.values())


@pytest.fixture
def cli_sessions(session_factory, monkeypatch):
    monkeypatch.setattr(add_dutch_cities, "SessionLocal", session_factory)
    monkeypatch.setattr(seed_provinces, "SessionLocal", session_factory)
    return session_factory


def count(session_factory, model):
    db = session_factory()
    try:
        return db.query(model).count()
    finally:
        db.close()


class TestAddDutchCities:
    def test_missing_country_exits_nonzero(self, cli_sessions, capsys):
        assert add_dutch_cities.main([]) == 1

        captured = capsys.readouterr()
        assert "[ERROR]" in captured.err
        assert "netherlands" in captured.err
        assert count(cli_sessions, City) == 0

    def test_unknown_flag_is_rejected(self, cli_sessions, capsys):
        assert add_dutch_cities.main(["--force"]) == 2
        assert "--force" in capsys.readouterr().err

    def test_dry_run_then_real_run(self, cli_sessions, capsys):
        assert seed_provinces.main([]) == 0
        capsys.readouterr()

        assert add_dutch_cities.main(["--dry-run"]) == 0
        out = capsys.readouterr().out
        assert "DRY RUN" in out
        assert f"Would add: {TOTAL_CITIES}" in out
        assert count(cli_sessions, City) == 0

        assert add_dutch_cities.main([]) == 0
        out = capsys.readouterr().out
        assert f"Added:     {TOTAL_CITIES}" in out
        assert "place discovery" in out
        assert count(cli_sessions, City) == TOTAL_CITIES

        assert add_dutch_cities.main([]) == 0
        out = capsys.readouterr().out
        assert "Added:     0" in out
        assert f"Skipped:   {TOTAL_CITIES}" in out


class TestSeedProvinces:
    def test_seeds_and_refreshes_counts(self, cli_sessions, capsys):
        assert seed_provinces.main([]) == 0
        assert add_dutch_cities.main([]) == 0
        assert seed_provinces.main([]) == 0

        out = capsys.readouterr().out
        assert f"Provinces skipped: {len(DUTCH_PROVINCES)}" in out
        db = cli_sessions()
        try:
            zeeland = db.query(Province).filter(Province.slug == "zeeland").one()
            assert zeeland.city_count == len(DUTCH_CITIES["zeeland"])
        finally:
            db.close()

    def test_dry_run_writes_nothing(self, cli_sessions, capsys):
        assert seed_provinces.main(["--dry-run"]) == 0

        assert f"Provinces to add: {len(DUTCH_PROVINCES)}" in capsys.readouterr().out
        assert count(cli_sessions, Country) == 0


class TestMigrate:
    def test_no_command_prints_usage(self, capsys):
        assert migrate.main([]) == 0
        assert "Usage:" in capsys.readouterr().out

    def test_unknown_command(self, capsys):
        assert migrate.main(["seed"]) == 1
        assert "Unknown command: seed" in capsys.readouterr().out

    def test_make_requires_name(self):
        assert migrate.main(["make"]) == 1

    @pytest.mark.parametrize("command,expected", [
        ("rollback", [["downgrade", "-1"]]),
        ("refresh", [["downgrade", "base"], ["upgrade", "head"]]),
        ("status", [["current"], ["history"]]),
    ])
    def test_commands_call_alembic(self, monkeypatch, command, expected):
        calls = []
        monkeypatch.setattr(migrate, "run_alembic_command", calls.append)

        assert migrate.main([command]) == 0
        assert calls == expected

    def test_make_creates_revision(self, monkeypatch):
        calls = []
        monkeypatch.setattr(migrate, "run_alembic_command", calls.append)

        assert migrate.main(["make", "add_city_coordinates"]) == 0
        assert calls == [["revision", "add_city_coordinates"]]

    def test_db_create_skips_non_mysql(self, monkeypatch, capsys):
        monkeypatch.setattr(config, "get_settings", lambda: config.Settings(database_url="sqlite://"))

        assert migrate.create_database() is False
        assert "[SKIP]" in capsys.readouterr().out
