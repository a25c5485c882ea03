"""ORM models - import all so Base.metadata is complete for migrations."""

from app.models.exercise import Exercise

__all__ = ["Exercise"]
