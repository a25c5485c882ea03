"""Exercise schemas and the field parsing shared by create and update."""

import re
import uuid
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StringConstraints

from app.core.constants import EXERCISE_DATE_PATTERN, MAX_INT
from app.core.enums import WeightUnit

_INT_TEXT = re.compile(r"[+-]?[0-9]+")


def parse_int(value: Any) -> int:
    """Parse an int, an integral float or a base-10 integer string within the 32-bit column range.

    Raises ValueError otherwise.
    """
    number = _to_int(value)
    if not -MAX_INT - 1 <= number <= MAX_INT:
        raise ValueError("integer out of range")
    return number


def _to_int(value: Any) -> int:
    # bool is an int subclass; True is not a rep count
    if isinstance(value, bool):
        raise ValueError("expected an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _INT_TEXT.fullmatch(value.strip()):
        return int(value.strip())
    raise ValueError("expected an integer")


def parse_positive_int(value: Any) -> int:
    number = parse_int(value)
    if number <= 0:
        raise ValueError("must be greater than zero")
    return number


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


ExerciseName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
PositiveCount = Annotated[int, BeforeValidator(parse_positive_int)]
Unit = Annotated[WeightUnit, BeforeValidator(_strip)]
ExerciseDate = Annotated[str, StringConstraints(pattern=EXERCISE_DATE_PATTERN)]


class ExerciseWrite(BaseModel):
    """Body of POST and PUT. Every field is required; unknown keys (including _id) are ignored."""

    model_config = ConfigDict(use_enum_values=True, extra="ignore")

    name: ExerciseName
    reps: PositiveCount
    weight: PositiveCount
    unit: Unit
    date: ExerciseDate


class ExerciseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID = Field(serialization_alias="_id")
    name: str
    reps: int
    weight: int
    unit: str
    date: str
