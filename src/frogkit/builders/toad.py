"""Toad presets applied on top of a frog builder."""

from __future__ import annotations

from frogkit.domain import Habitat, Skin

from .frog_builder import FrogBuilder

TOAD_HABITAT = Habitat.LAND.value
TOAD_SKIN = Skin.DRY.value


def as_toad(builder: FrogBuilder) -> FrogBuilder:
    """Preset a land habitat and dry skin, returning the same builder."""

    return builder.set_habitat(TOAD_HABITAT).set_skin(TOAD_SKIN)


__all__ = ["TOAD_HABITAT", "TOAD_SKIN", "as_toad"]
