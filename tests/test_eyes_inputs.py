from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from frogkit.builders import (
    DerivationCallback,
    FrogBuilder,
    InvalidArgumentError,
    NormalizedObject,
    PairInput,
    ScalarInput,
    classify_eyes_input,
    resolve_eyes,
)
from frogkit.domain import Eye, Eyes


def _eyes_dump(builder: FrogBuilder) -> dict[str, Any]:
    return builder.snapshot()["eyes"].model_dump()


def test_pair_input_maps_left_then_right() -> None:
    builder = FrogBuilder("sally", "female").set_eyes([{"volume": 1.1}, {"volume": 1.12}])
    assert _eyes_dump(builder) == {"left": {"volume": 1.1}, "right": {"volume": 1.12}}


def test_scalar_input_applies_to_both_eyes() -> None:
    builder = FrogBuilder("sally", "female").set_eyes(2)
    assert _eyes_dump(builder) == {"left": {"volume": 2}, "right": {"volume": 2}}


def test_normalized_object_is_unchanged() -> None:
    value = {"left": {"volume": 1}, "right": {"volume": 2}}
    builder = FrogBuilder("sally", "female").set_eyes(value)
    assert _eyes_dump(builder) == value


def test_eyes_instance_is_kept() -> None:
    eyes = Eyes(left=Eye(volume=1.5), right=Eye(volume=1.51))
    builder = FrogBuilder("sally", "female").set_eyes(eyes)
    assert builder.snapshot()["eyes"] == eyes


def test_callback_receives_current_state() -> None:
    def derive(state: Mapping[str, Any]) -> dict[str, Any]:
        if state.get("weight", 0) > 10:
            return {"left": {"volume": 5}, "right": {"volume": 5}}
        right = 0.8 if state["gender"] == "female" else 1
        return {"left": {"volume": 1}, "right": {"volume": right}}

    heavy = FrogBuilder("mike", "male").set_weight(12).set_eyes(derive)
    assert _eyes_dump(heavy) == {"left": {"volume": 5}, "right": {"volume": 5}}

    light = FrogBuilder("sally", "female").set_eyes(derive)
    assert _eyes_dump(light) == {"left": {"volume": 1}, "right": {"volume": 0.8}}


def test_callback_resolves_immediately() -> None:
    calls: list[int] = []

    def derive(state: Mapping[str, Any]) -> dict[str, Any]:
        calls.append(1)
        return {"left": {"volume": 1}, "right": {"volume": 1}}

    builder = FrogBuilder("sally", "female").set_eyes(derive)
    builder.set_weight(20)
    assert calls == [1]


@pytest.mark.parametrize(
    ("value", "variant"),
    [
        ([{"volume": 1}, {"volume": 2}], PairInput),
        (({"volume": 1}, {"volume": 2}), PairInput),
        (1.5, ScalarInput),
        (3, ScalarInput),
        (lambda state: state, DerivationCallback),
        ({"left": {"volume": 1}, "right": {"volume": 1}}, NormalizedObject),
    ],
)
def test_classify_eyes_input(value: Any, variant: type) -> None:
    assert isinstance(classify_eyes_input(value), variant)


def test_classify_passes_variants_through() -> None:
    scalar = ScalarInput(4)
    assert classify_eyes_input(scalar) is scalar
    assert resolve_eyes(scalar, {}).right.volume == 4


@pytest.mark.parametrize(
    "value",
    [
        True,
        "big",
        None,
        [{"volume": 1}],
        [{"volume": 1}, {"volume": 1}, {"volume": 1}],
        [1, 2],
        {"left": {"volume": 1}},
    ],
)
def test_invalid_eyes_rejected(value: Any) -> None:
    with pytest.raises(InvalidArgumentError):
        FrogBuilder("sally", "female").set_eyes(value)


def test_callback_returning_bad_shape_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        FrogBuilder("sally", "female").set_eyes(lambda state: 2)


def test_normalized_object_keeps_extra_keys() -> None:
    value = {"left": {"volume": 1}, "right": {"volume": 2}, "note": "x"}
    builder = FrogBuilder("sally", "female").set_eyes(value)
    assert _eyes_dump(builder) == value


def test_scalar_input_keeps_integer_volume() -> None:
    builder = FrogBuilder("sally", "female").set_eyes(2)
    assert isinstance(builder.snapshot()["eyes"].left.volume, int)
