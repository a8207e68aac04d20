"""Race and driver lookup models."""

from __future__ import annotations

import datetime

from pydantic import BaseModel, ConfigDict, field_validator


class Race(BaseModel):
    """A race event."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None
    date: datetime.date | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, value: object) -> object:
        return str(value) if isinstance(value, int) else value

    @property
    def season(self) -> int | None:
        return self.date.year if self.date else None


class Driver(BaseModel):
    """A driver entry with car number."""

    model_config = ConfigDict(frozen=True)

    id: str
    number: int | None = None
    name: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, value: object) -> object:
        return str(value) if isinstance(value, int) else value

    @property
    def display_name(self) -> str:
        """Name with car number, e.g. ``"Jane Doe (#13)"``."""
        if self.name and self.number is not None:
            return f"{self.name} (#{self.number})"
        if self.number is not None:
            return f"#{self.number}"
        return self.name or self.id
