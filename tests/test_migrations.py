"""Tests for the Alembic migration against a temporary SQLite file."""
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from app.core.config import settings
from app.models.base import Base
import app.models.location  # noqa: F401

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def migrated_url(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    # alembic/env.py reads the URL from the shared settings object
    monkeypatch.setattr(settings, "database_url", url)
    config = Config()
    config.set_main_option("script_location", str(ROOT / "alembic"))
    command.upgrade(config, "head")
    yield url, config


class TestLocationsMigration:
    """The migration builds the same table the ORM expects."""

    def test_columns_match_model(self, migrated_url):
        url, _ = migrated_url
        engine = create_engine(url)
        try:
            columns = {col["name"]: col for col in inspect(engine).get_columns("locations")}
        finally:
            engine.dispose()

        model = Base.metadata.tables["locations"]
        assert set(columns) == {col.name for col in model.columns}
        for col in model.columns:
            if col.primary_key:
                continue
            assert columns[col.name]["nullable"] == col.nullable

    def test_coordinate_pair_is_unique(self, migrated_url):
        url, _ = migrated_url
        engine = create_engine(url)
        try:
            uniques = inspect(engine).get_unique_constraints("locations")
        finally:
            engine.dispose()

        assert ["latitude", "longitude"] in [uq["column_names"] for uq in uniques]

    def test_downgrade_drops_table(self, migrated_url):
        url, config = migrated_url
        command.downgrade(config, "base")
        engine = create_engine(url)
        try:
            assert "locations" not in inspect(engine).get_table_names()
        finally:
            engine.dispose()
