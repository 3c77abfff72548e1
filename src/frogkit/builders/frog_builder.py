"""Fluent builder assembling ``Frog`` records."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from frogkit.domain import (
    LEGACY_TONGUE_WIDTH,
    REQUIRED_FIELDS,
    Frog,
    Heart,
    Leg,
    Number,
    Tongue,
    capitalize_first,
    is_sequence,
    migrate_tongue,
)

from .exceptions import BuildValidationError, InvalidArgumentError
from .eyes import resolve_eyes

HeartCallback = Callable[[dict[str, Any]], Heart | Mapping[str, Any]]


class FrogBuilder:
    """Accumulates frog attributes through chained setters.

    Every setter normalizes its input immediately and returns the builder, so
    calls can be chained in any order. ``build()`` checks that the required
    fields are present and returns an immutable ``Frog``. A builder belongs to
    a single caller; it is not meant to be shared.
    """

    def __init__(
        self,
        name: str,
        gender: str,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        if not isinstance(name, str) or not name:
            msg = "name must be a non-empty string"
            raise InvalidArgumentError(msg)
        if not isinstance(gender, str) or not gender:
            msg = "gender must be a non-empty string"
            raise InvalidArgumentError(msg)
        self._logger = logger or logging.getLogger(__name__)
        self._values: dict[str, Any] = {
            "name": capitalize_first(name),
            "gender": gender,
        }

    def __repr__(self) -> str:
        return f"FrogBuilder(name={self.name!r}, fields={sorted(self._values)})"

    @property
    def name(self) -> str:
        return self._values["name"]

    def snapshot(self) -> dict[str, Any]:
        """Shallow copy of the fields set so far."""

        return dict(self._values)

    def set_eyes(self, eyes: Any) -> FrogBuilder:
        self._values["eyes"] = resolve_eyes(eyes, self.snapshot())
        self._logger.debug("Resolved eyes for %s: %s", self.name, self._values["eyes"])
        return self

    def set_legs(self, legs: Sequence[Leg | Mapping[str, Any]]) -> FrogBuilder:
        if not is_sequence(legs):
            msg = f'"legs" is not a sequence: {type(legs).__name__}'
            raise InvalidArgumentError(msg)
        parsed: list[Leg] = []
        for index, leg in enumerate(legs):
            if not isinstance(leg, Leg | Mapping):
                msg = f"leg {index} must be a mapping, got {type(leg).__name__}"
                raise InvalidArgumentError(msg)
            parsed.append(Leg.model_validate(leg))
        self._values["legs"] = tuple(parsed)
        return self

    def set_scent(self, scent: str) -> FrogBuilder:
        self._values["scent"] = scent
        return self

    def set_tongue(self, tongue: Tongue | Mapping[str, Any]) -> FrogBuilder:
        if isinstance(tongue, Tongue):
            self._values["tongue"] = tongue
            return self
        if not isinstance(tongue, Mapping):
            msg = f"tongue must be a mapping, got {type(tongue).__name__}"
            raise InvalidArgumentError(msg)
        if LEGACY_TONGUE_WIDTH in tongue:
            self._logger.debug(
                "Migrating legacy %s field on %s's tongue", LEGACY_TONGUE_WIDTH, self.name
            )
        try:
            self._values["tongue"] = Tongue.model_validate(migrate_tongue(tongue))
        except ValidationError as exc:
            msg = f"Invalid tongue: {exc}"
            raise InvalidArgumentError(msg) from exc
        return self

    def set_heart(self, heart: Heart | Mapping[str, Any] | HeartCallback) -> FrogBuilder:
        """Set the heart, optionally derived from the current weight and height.

        A callable receives ``{"weight": ..., "height": ...}`` (``None`` for
        values not set yet) and must return the heart mapping.
        """

        if callable(heart):
            heart = heart(
                {
                    "weight": self._values.get("weight"),
                    "height": self._values.get("height"),
                }
            )
        if isinstance(heart, Heart):
            self._values["heart"] = heart
            return self
        if not isinstance(heart, Mapping):
            msg = f"heart is not a mapping: {type(heart).__name__}"
            raise InvalidArgumentError(msg)
        if "rate" not in heart:
            msg = "heart is missing its rate"
            raise InvalidArgumentError(msg)
        try:
            self._values["heart"] = Heart.model_validate(heart)
        except ValidationError as exc:
            msg = f"Invalid heart: {exc}"
            raise InvalidArgumentError(msg) from exc
        return self

    def set_habitat(self, habitat: str) -> FrogBuilder:
        self._values["habitat"] = habitat
        return self

    def set_skin(self, skin: str) -> FrogBuilder:
        self._values["skin"] = skin
        return self

    def set_weight(self, weight: Number | None = None) -> FrogBuilder:
        if weight is not None:
            self._values["weight"] = weight
        return self

    def set_height(self, height: Number | None = None) -> FrogBuilder:
        if height is not None:
            self._values["height"] = height
        return self

    def missing_fields(self) -> tuple[str, ...]:
        return tuple(field for field in REQUIRED_FIELDS if field not in self._values)

    def validate(self) -> bool:
        return not self.missing_fields()

    def build(self) -> Frog:
        missing = self.missing_fields()
        if missing:
            self._logger.warning(
                "Refusing to build %s; missing fields: %s", self.name, ", ".join(missing)
            )
            raise BuildValidationError(missing)
        try:
            frog = Frog(**self._values)
        except ValidationError as exc:
            msg = f"Cannot build frog {self.name}: {exc}"
            raise InvalidArgumentError(msg) from exc
        self._logger.debug("Built frog %s", frog.name)
        return frog


__all__ = ["FrogBuilder", "HeartCallback"]
