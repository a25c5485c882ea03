"""Repositories: data access over the ORM models."""

from app.repositories.errors import StoreError
from app.repositories.exercise_repository import ExerciseRepository

__all__ = ["ExerciseRepository", "StoreError"]
