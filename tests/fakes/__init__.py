"""In-memory fakes for tests."""

from tests.fakes.exercise_repository import FakeExerciseRepository

__all__ = ["FakeExerciseRepository"]
