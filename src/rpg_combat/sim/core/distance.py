"""Distance from home -- drives which enemy tiers can appear."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

# Upper bounds (inclusive) of the near and mid bands, in steps from home.
NEAR_MAX_STEPS = 6
MID_MAX_STEPS = 15


class DistanceKind(str, Enum):
    NEAR = "near"
    MID = "mid"
    FAR = "far"


class Distance(BaseModel):
    """How far the hero stands from home.

    Only ``kind`` affects enemy selection weights; ``steps`` feeds the
    enemy level and spawn decisions.
    """

    model_config = {"frozen": True}

    kind: DistanceKind
    steps: int = Field(default=0, ge=0)

    @classmethod
    def near(cls, steps: int = 0) -> Distance:
        return cls(kind=DistanceKind.NEAR, steps=steps)

    @classmethod
    def mid(cls, steps: int = NEAR_MAX_STEPS + 1) -> Distance:
        return cls(kind=DistanceKind.MID, steps=steps)

    @classmethod
    def far(cls, steps: int = MID_MAX_STEPS + 1) -> Distance:
        return cls(kind=DistanceKind.FAR, steps=steps)

    @classmethod
    def from_steps(cls, steps: int) -> Distance:
        """Classify a step count into its distance band."""
        if steps < 0:
            raise ValueError(f"steps must be >= 0, got {steps}")
        if steps <= NEAR_MAX_STEPS:
            return cls.near(steps)
        if steps <= MID_MAX_STEPS:
            return cls.mid(steps)
        return cls.far(steps)

    @property
    def is_home(self) -> bool:
        return self.steps == 0
