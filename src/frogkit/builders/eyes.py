"""Accepted shapes for eyes input and their resolution into ``Eyes``.

Callers may describe a pair of eyes four ways:

* ``PairInput``: ``[left, right]``
* ``ScalarInput``: one volume shared by both eyes
* ``DerivationCallback``: a function computing the eyes from the builder state
* ``NormalizedObject``: an ``Eyes`` instance or ``{"left": ..., "right": ...}``

Raw Python values are classified once by ``classify_eyes_input`` and every
variant knows how to resolve itself.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from frogkit.domain import Eye, Eyes, Number, is_sequence

from .exceptions import InvalidArgumentError

BuilderState = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class PairInput:
    left: Eye | Mapping[str, Any]
    right: Eye | Mapping[str, Any]

    def resolve(self, state: BuilderState) -> Eyes:
        return Eyes(left=self.left, right=self.right)


@dataclass(frozen=True, slots=True)
class ScalarInput:
    volume: Number

    def resolve(self, state: BuilderState) -> Eyes:
        return Eyes(left=Eye(volume=self.volume), right=Eye(volume=self.volume))


@dataclass(frozen=True, slots=True)
class DerivationCallback:
    func: Callable[[BuilderState], Eyes | Mapping[str, Any]]

    def resolve(self, state: BuilderState) -> Eyes:
        return Eyes.model_validate(self.func(state))


@dataclass(frozen=True, slots=True)
class NormalizedObject:
    value: Eyes | Mapping[str, Any]

    def resolve(self, state: BuilderState) -> Eyes:
        return Eyes.model_validate(self.value)


EyesInput = PairInput | ScalarInput | DerivationCallback | NormalizedObject


def classify_eyes_input(value: Any) -> EyesInput:
    """Wrap a raw eyes value in the matching input variant."""

    if isinstance(value, EyesInput):
        return value
    if isinstance(value, Eyes | Mapping):
        return NormalizedObject(value)
    if isinstance(value, bool):
        msg = "eyes cannot be a boolean"
        raise InvalidArgumentError(msg)
    if isinstance(value, int | float):
        return ScalarInput(value)
    if callable(value):
        return DerivationCallback(value)
    if is_sequence(value):
        if len(value) != 2:
            msg = f"eyes pair must have exactly 2 items, got {len(value)}"
            raise InvalidArgumentError(msg)
        return PairInput(left=value[0], right=value[1])
    msg = f"Unsupported eyes input of type {type(value).__name__}"
    raise InvalidArgumentError(msg)


def resolve_eyes(value: Any, state: BuilderState) -> Eyes:
    """Classify ``value`` and resolve it against the builder ``state``."""

    eyes_input = classify_eyes_input(value)
    try:
        return eyes_input.resolve(state)
    except ValidationError as exc:
        msg = f"Invalid eyes input: {exc}"
        raise InvalidArgumentError(msg) from exc


__all__ = [
    "BuilderState",
    "DerivationCallback",
    "EyesInput",
    "NormalizedObject",
    "PairInput",
    "ScalarInput",
    "classify_eyes_input",
    "resolve_eyes",
]
