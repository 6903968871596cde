"""Pydantic models for sampling configuration."""
from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SamplingConfig(BaseModel):
    min_dist: float = Field(gt=0)
    k: int = Field(default=30, ge=1)
    method: Literal["poisson", "ssi"] = "poisson"
    seed: int | None = None
    n: int | None = Field(default=None, ge=1)
    max_rounds: int | None = Field(default=None, ge=1)
    max_attempts: int = Field(default=1000, ge=1)
    workers: int = Field(default=1, ge=1)
    quad_segs: int = Field(default=16, ge=1)
    log_level: Literal["none", "info", "debug"] = "none"

    model_config = ConfigDict(extra="forbid")

    @field_validator("min_dist")
    @classmethod
    def _finite_min_dist(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("min_dist must be finite")
        return v

    @model_validator(mode="after")
    def _check_method_options(self):
        if self.method == "ssi" and self.max_rounds is not None:
            raise ValueError("max_rounds only applies to method 'poisson'")
        return self


class ProfileSampling(BaseModel):
    """Top-level layout of a config file: ``{"sampling": {...}}``."""

    sampling: SamplingConfig

    model_config = ConfigDict(extra="forbid")


__all__ = ["SamplingConfig", "ProfileSampling"]
