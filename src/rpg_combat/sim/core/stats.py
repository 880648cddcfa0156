"""Linear per-level stat growth."""

from __future__ import annotations

from pydantic import BaseModel


class Stat(BaseModel):
    """An attribute of a character class, such as hp, strength or speed.

    Holds the starting value and the amount added for each level.
    """

    model_config = {"frozen": True}

    base: int
    increase: int

    def at(self, level: int) -> int:
        """Value of the stat at *level*: ``base + level * increase``."""
        if level < 0:
            raise ValueError(f"level must be >= 0, got {level}")
        return self.base + level * self.increase

    @classmethod
    def of(cls, base: int, increase: int) -> Stat:
        """Positional shorthand, mostly for tables and tests."""
        return cls(base=base, increase=increase)
