"""Builder subsystem exports."""

from .exceptions import BuilderError, BuildValidationError, InvalidArgumentError
from .eyes import (
    DerivationCallback,
    EyesInput,
    NormalizedObject,
    PairInput,
    ScalarInput,
    classify_eyes_input,
    resolve_eyes,
)
from .frog_builder import FrogBuilder
from .loader import builder_from_mapping, load_frog
from .toad import TOAD_HABITAT, TOAD_SKIN, as_toad

__all__ = [
    "BuildValidationError",
    "BuilderError",
    "DerivationCallback",
    "EyesInput",
    "FrogBuilder",
    "InvalidArgumentError",
    "NormalizedObject",
    "PairInput",
    "ScalarInput",
    "TOAD_HABITAT",
    "TOAD_SKIN",
    "as_toad",
    "builder_from_mapping",
    "classify_eyes_input",
    "load_frog",
    "resolve_eyes",
]
