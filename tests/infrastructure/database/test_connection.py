"""Tests for the Database connection handle."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from sqlalchemy import inspect, text

from coursectl.infrastructure.database import connection as connection_module
from coursectl.infrastructure.database.connection import Database
from coursectl.infrastructure.database.errors import StorageConnectionError, StorageError


class TestOpen:
    def test_opens_in_memory_by_default(self) -> None:
        db = Database()
        try:
            assert db.is_connected
            assert db.url == "sqlite://"
            assert db.connection.execute(text("SELECT 1")).scalar() == 1
        finally:
            db.close()

    def test_creates_schema(self, database: Database) -> None:
        assert {"category", "course"} <= set(inspect(database.engine).get_table_names())

    def test_file_database_persists_between_handles(self, file_db_url: str) -> None:
        with Database(file_db_url) as db:
            db.connection.execute(text("INSERT INTO category (name) VALUES ('Web')"))
            db.connection.commit()
        with Database(file_db_url) as db:
            assert db.connection.execute(text("SELECT name FROM category")).scalar() == "Web"


class TestConnectionFailure:
    def test_failure_is_logged_not_raised(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        url = f"sqlite:///{tmp_path / 'missing' / 'dir' / 'x.db'}"
        with caplog.at_level(logging.ERROR, logger="coursectl"):
            db = Database(url)
        assert db.is_connected is False
        assert "Error connecting to database" in caplog.text

    def test_connection_access_raises(self, tmp_path: Path) -> None:
        db = Database(f"sqlite:///{tmp_path / 'missing' / 'x.db'}")
        with pytest.raises(StorageConnectionError):
            _ = db.connection

    def test_invalid_url(self) -> None:
        db = Database("definitely not a url")
        assert db.is_connected is False
        with pytest.raises(StorageError):
            _ = db.engine

    def test_missing_driver_is_logged_not_raised(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        def _no_driver(*_args: object, **_kwargs: object) -> None:
            raise ModuleNotFoundError("No module named 'psycopg'")

        monkeypatch.setattr(connection_module, "create_db_engine", _no_driver)
        with caplog.at_level(logging.ERROR, logger="coursectl"):
            db = Database("postgresql://u:p@localhost/x")
        assert db.is_connected is False
        assert "psycopg" in caplog.text
        assert "u:***@localhost" in caplog.text
        with pytest.raises(StorageConnectionError):
            _ = db.connection

    def test_connection_error_is_storage_error(self) -> None:
        assert issubclass(StorageConnectionError, StorageError)


class TestClose:
    def test_close_releases_connection(self) -> None:
        db = Database()
        db.close()
        assert db.is_connected is False
        with pytest.raises(StorageConnectionError):
            _ = db.connection

    def test_close_twice(self) -> None:
        db = Database()
        db.close()
        db.close()

    def test_context_manager_closes(self) -> None:
        with Database() as db:
            assert db.is_connected
        assert db.is_connected is False
