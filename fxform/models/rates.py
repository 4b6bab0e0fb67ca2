from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RateRecord(BaseModel):
    """One row of the rate table: pivot units per one unit of ``code``."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., pattern=r"^[A-Z]{3}$")
    rate: Decimal = Field(..., gt=0)

    @field_validator("code", mode="before")
    @classmethod
    def upper_code(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v
