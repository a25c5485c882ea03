"""
Pytest fixtures: settings pointed at SQLite, an app per test, and a
TestClient whose exercise repository is replaced by an in-memory fake.
"""
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from app.api.v1.endpoints.exercises import get_exercise_repository
from app.core.config import Settings
from app.main import create_application
from tests.fakes import FakeExerciseRepository

BENCH_PRESS = {
    "name": "Bench Press",
    "reps": "10",
    "weight": "135",
    "unit": "lbs",
    "date": "01-15-23",
}


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings for a throwaway SQLite database that is created at startup."""
    return Settings(
        _env_file=None,
        environment="test",
        database_url=f"sqlite:///{tmp_path / 'exercises.db'}",
        database_create_tables=True,
    )


@pytest.fixture
def fake_repo() -> FakeExerciseRepository:
    return FakeExerciseRepository()


@pytest.fixture
def client(test_settings, fake_repo) -> Generator[TestClient, None, None]:
    """TestClient backed by FakeExerciseRepository."""
    app = create_application(test_settings)
    app.dependency_overrides[get_exercise_repository] = lambda: fake_repo
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def db_client(test_settings) -> Generator[TestClient, None, None]:
    """TestClient backed by the real repository on SQLite."""
    app = create_application(test_settings)
    with TestClient(app) as c:
        yield c
