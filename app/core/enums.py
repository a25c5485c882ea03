"""Shared enums for models and API."""

from enum import Enum


class WeightUnit(str, Enum):
    """Unit the weight of an exercise is recorded in."""

    KGS = "kgs"
    LBS = "lbs"
