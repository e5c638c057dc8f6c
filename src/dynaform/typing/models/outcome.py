"""Validation outcome and layout models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ValidationOutcome(BaseModel):
    """Result of one validation pass over a form's fields."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    accepted: bool
    identifier: str | None = None
    message: str | None = None

    @classmethod
    def accept(cls) -> ValidationOutcome:
        return cls(accepted=True)

    @classmethod
    def reject(cls, identifier: str, message: str) -> ValidationOutcome:
        return cls(accepted=False, identifier=identifier, message=message)


class Rect(BaseModel):
    """Viewport-relative bounding box of a rendered element."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    top: float = 0.0
    left: float = 0.0
    width: float = 0.0
    height: float = 0.0
