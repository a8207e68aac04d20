"""Delta result model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Classification(str, Enum):
    """How a value compares with its reference. Positive deltas are worse."""

    BETTER = "better"
    WORSE = "worse"
    AT_REFERENCE = "at_reference"
    UNAVAILABLE = "unavailable"


class DeltaResult(BaseModel):
    """Signed delta to a reference and its classification."""

    model_config = ConfigDict(frozen=True)

    delta: float | None = None
    classification: Classification = Classification.UNAVAILABLE

    @property
    def available(self) -> bool:
        return self.classification is not Classification.UNAVAILABLE
