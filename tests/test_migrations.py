"""
Tests for the Alembic migration history.
"""
from pathlib import Path

import pytest
from alembic import command
from alembic.autogenerate import compare_metadata
from alembic.config import Config
from alembic.migration import MigrationContext
from sqlalchemy import create_engine, inspect

from clinic.database import Base

PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def migration_db(tmp_path):
    """Alembic config and engine for a throwaway SQLite file."""
    url = f"sqlite:///{tmp_path / 'migrations.db'}"
    config = Config()
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    config.set_main_option("sqlalchemy.url", url)

    engine = create_engine(url)
    try:
        yield config, engine
    finally:
        engine.dispose()


def test_upgrade_head_matches_models(migration_db):
    config, engine = migration_db
    command.upgrade(config, "head")

    with engine.connect() as connection:
        diff = compare_metadata(MigrationContext.configure(connection), Base.metadata)
    assert diff == []


def test_upgrade_creates_restricting_foreign_keys(migration_db):
    config, engine = migration_db
    command.upgrade(config, "head")

    inspector = inspect(engine)
    assert set(Base.metadata.tables) <= set(inspector.get_table_names())
    [foreign_key] = inspector.get_foreign_keys("prescription_items")
    assert foreign_key["referred_table"] == "appointments"
    assert foreign_key["options"].get("ondelete") == "RESTRICT"


def test_downgrade_base_removes_tables(migration_db):
    config, engine = migration_db
    command.upgrade(config, "head")
    command.downgrade(config, "base")

    assert inspect(engine).get_table_names() == ["alembic_version"]
