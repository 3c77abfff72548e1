"""Shared type aliases for the domain layer."""

from __future__ import annotations

Number = int | float

REQUIRED_FIELDS: tuple[str, ...] = (
    "name",
    "gender",
    "eyes",
    "legs",
    "scent",
    "tongue",
    "heart",
)
OPTIONAL_FIELDS: tuple[str, ...] = ("habitat", "skin", "weight", "height")
LEGACY_TONGUE_WIDTH = "tongueWidth"

__all__ = [
    "LEGACY_TONGUE_WIDTH",
    "Number",
    "OPTIONAL_FIELDS",
    "REQUIRED_FIELDS",
]
