"""Shared pytest fixtures for coursectl tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from coursectl.domain.entities import Category, Course
from coursectl.infrastructure.database.connection import Database
from coursectl.infrastructure.repositories import CourseRepository
from coursectl.services.course import CourseService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def database() -> Iterator[Database]:
    """In-memory database with both tables created."""
    db = Database()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def repository(database: Database) -> CourseRepository:
    return CourseRepository(database)


@pytest.fixture
def service(database: Database) -> CourseService:
    return CourseService(database)


@pytest.fixture
def file_db_url(tmp_path: Path) -> str:
    """URL of an on-disk SQLite database that survives across CLI invocations."""
    return f"sqlite:///{tmp_path / 'courses.db'}"


@pytest.fixture(autouse=True)
def _no_config_discovery(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's coursectl.toml or COURSECTL_* env vars out of tests."""
    monkeypatch.delenv("COURSECTL_CONFIG", raising=False)
    monkeypatch.delenv("COURSECTL_DATABASE__URL", raising=False)
    monkeypatch.chdir(tmp_path)


def make_course(
    name: str = "Spring Boot Masterclass",
    category: str = "Web Development",
    description: str = "Master Spring Boot framework for enterprise applications",
) -> Course:
    """Build an unpersisted course with an unpersisted category."""
    return Course(name=name, category=Category(name=category), description=description)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """CLI invocations reconfigure logging onto the runner's stderr; undo that."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    course_level = logging.getLogger("coursectl").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("coursectl").setLevel(course_level)
