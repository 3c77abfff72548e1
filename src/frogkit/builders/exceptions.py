"""Builder-specific exceptions."""

from __future__ import annotations


class BuilderError(RuntimeError):
    """Base class for frog builder failures."""


class InvalidArgumentError(BuilderError, ValueError):
    """Raised when a setter receives a value of the wrong shape."""


class BuildValidationError(BuilderError):
    """Raised when ``build()`` is called before every required field is set."""

    def __init__(self, missing: tuple[str, ...]) -> None:
        self.missing = missing
        super().__init__(f"Cannot build frog; missing required fields: {', '.join(missing)}")
