"""Enumerations used across the frogkit domain layer."""

from __future__ import annotations

from enum import StrEnum


class Gender(StrEnum):
    """Known genders. Free text is accepted wherever a gender is expected."""

    FEMALE = "female"
    MALE = "male"


class Habitat(StrEnum):
    """Where the animal lives."""

    LAND = "land"
    WATER = "water"


class Skin(StrEnum):
    """Skin texture."""

    DRY = "dry"
    OILY = "oily"
