"""Exercise CRUD endpoints."""

import logging
import uuid

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFound, RequestFailed
from app.db.session import get_db
from app.repositories import ExerciseRepository, StoreError
from app.schemas.exercise import ExerciseRead, ExerciseWrite, parse_int

logger = logging.getLogger(__name__)
router = APIRouter()


def get_exercise_repository(db: AsyncSession = Depends(get_db)) -> ExerciseRepository:
    return ExerciseRepository(db)


@router.post("", response_model=ExerciseRead, status_code=201)
async def create_exercise(
    payload: ExerciseWrite,
    repo: ExerciseRepository = Depends(get_exercise_repository),
):
    """Create an exercise from name, reps, weight, unit and date."""
    try:
        return await repo.create(payload.model_dump())
    except StoreError:
        logger.exception("POST /exercises failed")
        raise RequestFailed()


@router.get("/{exercise_id}", response_model=ExerciseRead)
async def get_exercise(
    exercise_id: str,
    repo: ExerciseRepository = Depends(get_exercise_repository),
):
    try:
        exercise = await repo.find_by_id(exercise_id)
    except StoreError:
        logger.exception("GET /exercises/%s failed", exercise_id)
        raise RequestFailed()
    if exercise is None:
        raise NotFound()
    return exercise


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(
    reps: str | None = None,
    limit: str | None = None,
    repo: ExerciseRepository = Depends(get_exercise_repository),
):
    """List exercises. With ?reps=N only those with exactly N reps; ?limit=M caps the count (0 = all)."""
    filters: dict = {}
    try:
        if reps is not None:
            filters["reps"] = parse_int(reps)
        max_rows = parse_int(limit) if limit is not None else 0
        if max_rows < 0:
            raise ValueError("limit must not be negative")
    except ValueError:
        logger.info("GET /exercises rejected query reps=%r limit=%r", reps, limit)
        raise RequestFailed()
    try:
        return await repo.find(filters, max_rows)
    except StoreError:
        logger.exception("GET /exercises failed")
        raise RequestFailed()


@router.put("/{exercise_id}", response_model=ExerciseRead)
async def replace_exercise(
    exercise_id: str,
    payload: ExerciseWrite,
    repo: ExerciseRepository = Depends(get_exercise_repository),
):
    """Replace every field of an exercise. Fields not sent are not kept: they fail validation."""
    fields = payload.model_dump()
    try:
        modified = await repo.replace(exercise_id, fields)
    except StoreError:
        logger.exception("PUT /exercises/%s failed", exercise_id)
        raise RequestFailed()
    # Anything but exactly one modified row is treated as not found
    if modified != 1:
        raise NotFound()
    return ExerciseRead(id=uuid.UUID(exercise_id), **fields)


@router.delete("/{exercise_id}", status_code=204, response_class=Response)
async def delete_exercise(
    exercise_id: str,
    repo: ExerciseRepository = Depends(get_exercise_repository),
):
    try:
        deleted = await repo.delete_by_id(exercise_id)
    except StoreError:
        logger.exception("DELETE /exercises/%s failed", exercise_id)
        raise RequestFailed()
    if deleted != 1:
        raise NotFound()
    return Response(status_code=204)
