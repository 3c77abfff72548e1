"""Frog records and the fluent builder that assembles them."""

from .builders import (
    BuilderError,
    BuildValidationError,
    FrogBuilder,
    InvalidArgumentError,
    as_toad,
    builder_from_mapping,
    load_frog,
)
from .domain import Eye, Eyes, Frog, Gender, Habitat, Heart, Leg, Skin, Tongue

__all__ = [
    "BuildValidationError",
    "BuilderError",
    "Eye",
    "Eyes",
    "Frog",
    "FrogBuilder",
    "Gender",
    "Habitat",
    "Heart",
    "InvalidArgumentError",
    "Leg",
    "Skin",
    "Tongue",
    "as_toad",
    "builder_from_mapping",
    "load_frog",
]
