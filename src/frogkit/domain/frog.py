"""Frog record and the value objects it is assembled from."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Annotated, Any

from pydantic import Field, field_validator, model_validator

from .base import DomainModel, OpenDomainModel
from .types import LEGACY_TONGUE_WIDTH, OPTIONAL_FIELDS, Number


def capitalize_first(value: str) -> str:
    """Upper-case the first character and leave the rest untouched."""

    return value[:1].upper() + value[1:]


def migrate_tongue(tongue: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``tongue`` with ``tongueWidth`` renamed to ``width``."""

    migrated = dict(tongue)
    if LEGACY_TONGUE_WIDTH in migrated:
        migrated["width"] = migrated.pop(LEGACY_TONGUE_WIDTH)
    return migrated


def is_sequence(value: object) -> bool:
    """Sequences of items; text and bytes do not count."""

    return isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray)


class Eye(OpenDomainModel):
    """A single eye."""

    volume: Number


class Eyes(OpenDomainModel):
    """Normalized left/right pair of eyes."""

    left: Eye
    right: Eye


class Leg(OpenDomainModel):
    """Free-form leg descriptor, e.g. ``{"size": "small"}``."""


class Tongue(OpenDomainModel):
    """Tongue attributes; ``width`` plus whatever else the caller supplies."""

    width: Number

    @model_validator(mode="before")
    @classmethod
    def migrate_legacy_width(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return migrate_tongue(data)
        return data


class Heart(OpenDomainModel):
    """Heart attributes; ``rate`` is mandatory."""

    rate: Number


class Frog(DomainModel):
    """Fully populated frog record.

    ``habitat``, ``skin``, ``weight`` and ``height`` are presence-based: they
    are only part of the record when they were supplied at construction time.
    """

    name: Annotated[str, Field(min_length=1)]
    gender: Annotated[str, Field(min_length=1)]
    eyes: Eyes
    legs: tuple[Leg, ...]
    scent: str
    tongue: Tongue
    heart: Heart
    habitat: str | None = None
    skin: str | None = None
    weight: Number | None = None
    height: Number | None = None

    @field_validator("name")
    @classmethod
    def capitalize_name(cls, value: str) -> str:
        return capitalize_first(value)

    @field_validator("legs", mode="before")
    @classmethod
    def ensure_legs_sequence(cls, value: Any) -> Any:
        if not is_sequence(value):
            msg = '"legs" must be a sequence'
            raise ValueError(msg)
        return tuple(value)

    def has(self, field: str) -> bool:
        """Whether ``field`` is part of this record."""

        if field in OPTIONAL_FIELDS:
            return field in self.model_fields_set and getattr(self, field) is not None
        return field in type(self).model_fields

    def as_record(self) -> dict[str, Any]:
        """JSON-ready dict; optional fields that were never supplied are left out."""

        unset = {field for field in OPTIONAL_FIELDS if not self.has(field)}
        return self.model_dump(mode="json", exclude=unset)
