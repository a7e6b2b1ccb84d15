"""Reusable migration runner for both production and tests."""

from pathlib import Path

from alembic.config import Config

from alembic import command

PROJECT_ROOT = Path(__file__).resolve().parents[4]


def _alembic_config(database_url: str | None = None) -> Config:
    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "src" / "alembic"))
    if database_url:
        # Read by env.py in preference to settings.database_url
        config.attributes["database_url"] = database_url
    return config


def run_migrations_sync(database_url: str | None = None) -> None:
    """Run Alembic migrations up to head.

    Args:
        database_url: Optional override of the configured database URL.
                      Async driver URLs are accepted and converted by env.py.
    """
    command.upgrade(_alembic_config(database_url), "head")
