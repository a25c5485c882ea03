"""
Fake ExerciseRepository for testing.

Keeps exercises in a dict so the routing layer can be exercised without a
database. Set ``fail = True`` to make every call raise StoreError, the way
the real repository does when the store is unreachable.
"""
import uuid
from typing import Any, Dict, List, Mapping, Optional

from app.models.exercise import Exercise
from app.repositories import StoreError
from app.repositories.exercise_repository import EXERCISE_FIELDS


class FakeExerciseRepository:
    """In-memory stand-in for ExerciseRepository."""

    def __init__(self, fail: bool = False):
        self.rows: Dict[uuid.UUID, Exercise] = {}
        self.fail = fail
        self.calls: List[str] = []

    def _call(self, name: str) -> None:
        self.calls.append(name)
        if self.fail:
            raise StoreError(f"{name} failed")

    @staticmethod
    def _parse_id(exercise_id) -> Optional[uuid.UUID]:
        try:
            return uuid.UUID(str(exercise_id))
        except ValueError:
            return None

    async def create(self, fields: Mapping[str, Any]) -> Exercise:
        self._call("create")
        exercise = Exercise(id=uuid.uuid4(), **{k: fields[k] for k in EXERCISE_FIELDS})
        self.rows[exercise.id] = exercise
        return exercise

    async def find(self, filters: Optional[Mapping[str, Any]] = None, limit: int = 0) -> List[Exercise]:
        self._call("find")
        filters = filters or {}
        found = [e for e in self.rows.values() if all(getattr(e, k) == v for k, v in filters.items())]
        return found[:limit] if limit > 0 else found

    async def find_by_id(self, exercise_id) -> Optional[Exercise]:
        self._call("find_by_id")
        pk = self._parse_id(exercise_id)
        return self.rows.get(pk) if pk is not None else None

    async def replace(self, exercise_id, fields: Mapping[str, Any]) -> int:
        self._call("replace")
        pk = self._parse_id(exercise_id)
        if pk not in self.rows:
            return 0
        exercise = self.rows[pk]
        for key in EXERCISE_FIELDS:
            setattr(exercise, key, fields[key])
        return 1

    async def delete_by_id(self, exercise_id) -> int:
        self._call("delete_by_id")
        pk = self._parse_id(exercise_id)
        if pk not in self.rows:
            return 0
        del self.rows[pk]
        return 1
