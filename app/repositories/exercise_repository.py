"""Data access for Exercise rows: the only code that queries or mutates the exercises table."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.exercise import Exercise
from app.repositories.errors import StoreError

# Columns a caller may set or filter on; id is owned by the store
EXERCISE_FIELDS = ("name", "reps", "weight", "unit", "date")


def _parse_id(exercise_id: str | uuid.UUID) -> uuid.UUID | None:
    """Return the UUID for exercise_id, or None if it is not a valid id."""
    if isinstance(exercise_id, uuid.UUID):
        return exercise_id
    try:
        return uuid.UUID(str(exercise_id))
    except ValueError:
        return None


def _writable(fields: Mapping[str, Any]) -> dict[str, Any]:
    return {k: fields[k] for k in EXERCISE_FIELDS}


class ExerciseRepository:
    """Create/find/replace/delete exercises within one session.

    Writes are committed before the method returns. Every method raises
    StoreError when the underlying store call fails; the SQLAlchemy error is
    kept as the cause.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, fields: Mapping[str, Any]) -> Exercise:
        """Insert and commit one exercise and return it with its assigned id."""
        exercise = Exercise(**_writable(fields))
        self.session.add(exercise)
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            raise StoreError("create exercise failed") from e
        return exercise

    async def find(self, filters: Mapping[str, Any] | None = None, limit: int = 0) -> list[Exercise]:
        """Exercises whose columns equal every value in filters (all when empty), capped at limit if > 0."""
        query = select(Exercise)
        for key, value in (filters or {}).items():
            if key not in EXERCISE_FIELDS:
                raise StoreError(f"cannot filter exercises on {key!r}")
            query = query.where(getattr(Exercise, key) == value)
        if limit > 0:
            query = query.limit(limit)
        try:
            result = await self.session.execute(query)
        except SQLAlchemyError as e:
            raise StoreError("find exercises failed") from e
        return list(result.scalars().all())

    async def find_by_id(self, exercise_id: str | uuid.UUID) -> Exercise | None:
        """The exercise with this id, or None when it is missing or the id is malformed."""
        pk = _parse_id(exercise_id)
        if pk is None:
            return None
        try:
            return await self.session.get(Exercise, pk)
        except SQLAlchemyError as e:
            raise StoreError("find exercise by id failed") from e

    async def replace(self, exercise_id: str | uuid.UUID, fields: Mapping[str, Any]) -> int:
        """Overwrite every non-id column of one exercise. Returns the number of rows modified."""
        pk = _parse_id(exercise_id)
        if pk is None:
            return 0
        stmt = (
            update(Exercise)
            .where(Exercise.id == pk)
            .values(**_writable(fields))
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as e:
            raise StoreError("replace exercise failed") from e
        return result.rowcount

    async def delete_by_id(self, exercise_id: str | uuid.UUID) -> int:
        """Delete one exercise. Returns the number of rows removed."""
        pk = _parse_id(exercise_id)
        if pk is None:
            return 0
        stmt = delete(Exercise).where(Exercise.id == pk)
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as e:
            raise StoreError("delete exercise failed") from e
        return result.rowcount
