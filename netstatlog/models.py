"""Pydantic models for sampled interface counters."""

from __future__ import annotations

import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field


class StatRecord(BaseModel):
    """Cumulative byte counters of one interface on one calendar day.

    ``total_bytes`` is always derived from the two counters and is never
    accepted as input.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    date: datetime.date
    in_bytes: int = Field(ge=0)
    out_bytes: int = Field(ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_bytes(self) -> int:
        return self.in_bytes + self.out_bytes
