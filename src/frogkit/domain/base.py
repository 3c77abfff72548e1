"""Core base classes for domain models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable domain model base with strict validation."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_assignment=True)


class OpenDomainModel(BaseModel):
    """Immutable model that keeps caller supplied attributes it does not declare."""

    model_config = ConfigDict(frozen=True, extra="allow")
