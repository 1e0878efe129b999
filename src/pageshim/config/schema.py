"""Pydantic v2 configuration models for pageshim."""

from __future__ import annotations

import math
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pageshim.core.clock import MAX_EPOCH_MS, MIN_EPOCH_MS, to_epoch_millis


class LcgParameters(BaseModel):
    """Constants of the linear congruential generator behind ``Math.random``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    multiplier: int = Field(default=9301, gt=0, description="Multiplier A")
    increment: int = Field(default=49297, ge=0, description="Increment C")
    modulus: int = Field(default=233280, gt=1, description="Modulus M")

    @model_validator(mode="after")
    def _validate_no_fixed_point(self) -> LcgParameters:
        # s * (A - 1) = -C (mod M) is solvable iff gcd(A - 1, M) divides -C.
        # A solution is a state the generator can never leave.
        g = math.gcd(self.multiplier - 1, self.modulus)
        if (-self.increment) % g == 0:
            raise ValueError(
                "LCG constants have a fixed point "
                f"(gcd(multiplier - 1, modulus) = {g} divides -increment)"
            )
        return self


class ShimConfig(BaseModel):
    """Everything needed to build one determinism shim."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    reference_instant: int = Field(
        ge=MIN_EPOCH_MS,
        le=MAX_EPOCH_MS,
        description="Fixed 'now' in milliseconds since the Unix epoch",
    )
    lcg: LcgParameters = Field(default_factory=LcgParameters)
    enabled: bool = Field(
        default=True,
        description="When false, no overrides are rendered or installed",
    )

    @field_validator("reference_instant", mode="before")
    @classmethod
    def _coerce_datetime(cls, value: object) -> object:
        if isinstance(value, datetime):
            if value.tzinfo is None:
                raise ValueError("reference_instant datetime must be timezone-aware")
            return to_epoch_millis(value)
        return value
