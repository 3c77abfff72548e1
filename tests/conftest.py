from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

# Ensure the src/ directory is importable when tests run via `uv run pytest`.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from frogkit.builders import FrogBuilder  # noqa: E402


@pytest.fixture
def frog_data() -> dict[str, Any]:
    return {
        "name": "sally",
        "gender": "female",
        "eyes": [{"volume": 1.1}, {"volume": 1.12}],
        "legs": [{"size": "small"}] * 4,
        "scent": "blueberry",
        "tongue": {"width": 12, "color": "navy blue", "type": "round"},
        "heart": {"rate": 12},
    }


@pytest.fixture
def complete_builder() -> FrogBuilder:
    return (
        FrogBuilder("sally", "female")
        .set_eyes([{"volume": 1.1}, {"volume": 1.12}])
        .set_legs([{"size": "small"}] * 4)
        .set_scent("blueberry")
        .set_tongue({"width": 12, "color": "navy blue", "type": "round"})
        .set_heart({"rate": 12})
    )
