"""Domain models for frogkit."""

from .base import DomainModel, OpenDomainModel
from .enums import Gender, Habitat, Skin
from .frog import (
    Eye,
    Eyes,
    Frog,
    Heart,
    Leg,
    Tongue,
    capitalize_first,
    is_sequence,
    migrate_tongue,
)
from .types import (
    LEGACY_TONGUE_WIDTH,
    OPTIONAL_FIELDS,
    REQUIRED_FIELDS,
    Number,
)

__all__ = [
    "DomainModel",
    "Eye",
    "Eyes",
    "Frog",
    "Gender",
    "Habitat",
    "Heart",
    "LEGACY_TONGUE_WIDTH",
    "Leg",
    "Number",
    "OPTIONAL_FIELDS",
    "OpenDomainModel",
    "REQUIRED_FIELDS",
    "Skin",
    "Tongue",
    "capitalize_first",
    "is_sequence",
    "migrate_tongue",
]
