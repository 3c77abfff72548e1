"""Demonstration frogs, built on demand."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from frogkit.builders import FrogBuilder, as_toad
from frogkit.domain import Eyes, Frog, Gender, Habitat, Skin


def _small_legs() -> list[dict[str, str]]:
    return [{"size": "small"} for _ in range(4)]


def sally() -> Frog:
    return (
        FrogBuilder("sally", Gender.FEMALE)
        .set_eyes([{"volume": 1.1}, {"volume": 1.12}])
        .set_scent("blueberry")
        .set_heart({"rate": 12})
        .set_weight(5)
        .set_height(3.1)
        .set_legs(_small_legs())
        .set_tongue({"width": 12, "color": "navy blue", "type": "round"})
        .set_habitat(Habitat.WATER.value)
        .set_skin(Skin.OILY.value)
        .build()
    )


def kelly() -> Frog:
    return (
        as_toad(FrogBuilder("kelly", Gender.FEMALE))
        .set_eyes([{"volume": 1.1}, {"volume": 1.12}])
        .set_scent("black ice")
        .set_heart({"rate": 11})
        .set_weight(5)
        .set_height(3.1)
        .set_legs(_small_legs())
        .set_tongue({"width": 12.5, "color": "olive", "type": "round"})
        .build()
    )


def mike() -> Frog:
    return (
        as_toad(FrogBuilder("mike", Gender.MALE))
        .set_eyes([{"volume": 1.1}, {"volume": 1.12}])
        .set_scent("smelly socks")
        .set_heart({"rate": 15})
        .set_weight(12)
        .set_height(5.2)
        .set_legs([{"size": "medium"} for _ in range(4)])
        .set_tongue({"width": 12.5, "color": "olive", "type": "round"})
        .build()
    )


def _derive_eyes(state: Mapping[str, Any]) -> Eyes:
    # Heavy frogs get big eyes; females get a smaller right eye.
    weight = state.get("weight", 0)
    if weight > 10:
        return Eyes.model_validate({"left": {"volume": 5}, "right": {"volume": 5}})
    right = 0.8 if state.get("gender") == Gender.FEMALE else 1
    return Eyes.model_validate({"left": {"volume": 1}, "right": {"volume": right}})


def larry() -> Frog:
    return (
        FrogBuilder("larry", Gender.MALE)
        .set_weight(6)
        .set_height(3.5)
        .set_eyes(_derive_eyes)
        .set_scent("sweaty socks")
        .set_heart(lambda body: {"rate": 22 if body["weight"] and body["weight"] < 10 else 18})
        .set_legs(_small_legs())
        .set_tongue({"tongueWidth": 18, "color": "dark red", "type": "round"})
        .build()
    )


SAMPLES: dict[str, Callable[[], Frog]] = {
    "sally": sally,
    "kelly": kelly,
    "mike": mike,
    "larry": larry,
}


def build_samples() -> dict[str, Frog]:
    """Build every sample frog keyed by its lower-case name."""

    return {key: factory() for key, factory in SAMPLES.items()}


__all__ = ["SAMPLES", "build_samples", "kelly", "larry", "mike", "sally"]
