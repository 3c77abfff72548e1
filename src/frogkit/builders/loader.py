"""Create builders from plain mapping descriptions such as parsed JSON."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from frogkit.domain import Frog

from .exceptions import InvalidArgumentError
from .frog_builder import FrogBuilder
from .toad import as_toad

_SETTERS = {
    "eyes": FrogBuilder.set_eyes,
    "legs": FrogBuilder.set_legs,
    "scent": FrogBuilder.set_scent,
    "tongue": FrogBuilder.set_tongue,
    "heart": FrogBuilder.set_heart,
    "habitat": FrogBuilder.set_habitat,
    "skin": FrogBuilder.set_skin,
    "weight": FrogBuilder.set_weight,
    "height": FrogBuilder.set_height,
}
_KNOWN_KEYS = frozenset({"name", "gender", "toad", *_SETTERS})


def builder_from_mapping(
    data: Mapping[str, Any],
    *,
    toad: bool = False,
    logger: logging.Logger | None = None,
) -> FrogBuilder:
    """Return a builder with every key of ``data`` applied.

    ``toad=True`` or a ``toad: true`` key applies the toad presets first so
    explicit ``habitat`` or ``skin`` keys still take precedence.
    """

    if not isinstance(data, Mapping):
        msg = f"frog description must be a mapping, got {type(data).__name__}"
        raise InvalidArgumentError(msg)
    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        msg = f"Unknown frog attributes: {', '.join(unknown)}"
        raise InvalidArgumentError(msg)
    for key in ("name", "gender"):
        if key not in data:
            msg = f"frog description is missing {key!r}"
            raise InvalidArgumentError(msg)

    builder = FrogBuilder(data["name"], data["gender"], logger=logger)
    if toad or data.get("toad"):
        as_toad(builder)
    for key, setter in _SETTERS.items():
        if key in data:
            setter(builder, data[key])
    return builder


def load_frog(data: Mapping[str, Any], *, logger: logging.Logger | None = None) -> Frog:
    """Build a ``Frog`` straight from a mapping description."""

    return builder_from_mapping(data, logger=logger).build()


__all__ = ["builder_from_mapping", "load_frog"]
