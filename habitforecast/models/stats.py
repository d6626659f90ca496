# habitforecast/models/stats.py

# ─── Model ────────────────────────────────────────────────────────────────────
#            Attribute Blocks and Derived Result Models
# ──────────────────────────────────────────────────────────────────────────────

# SECTION: MODULE DOCSTRING
"""Attribute blocks (STR/CON/INT/PER) and the value objects produced by the
derivation pipeline: DerivedStats and DailyStats.

Result models are frozen; every call builds fresh instances.
"""

# SECTION: IMPORTS
from __future__ import annotations

from typing import Literal

from pydantic import Field

from habitforecast.helpers._pydantic import HabitForecastBaseModel

StatName = Literal["str", "con", "int", "per"]
STAT_NAMES: tuple[StatName, ...] = ("str", "con", "int", "per")

# API spelling -> attribute name ("str" and "int" shadow builtins)
_FIELD_FOR_STAT: dict[str, str] = {"str": "str_", "con": "con", "int": "int_", "per": "per"}


# KLASS: StatPoints
class StatPoints(HabitForecastBaseModel):
    """The four character attributes."""

    str_: float = Field(..., alias="str")
    con: float = Field(...)
    int_: float = Field(..., alias="int")
    per: float = Field(...)

    def get(self, stat: StatName) -> float:
        return getattr(self, _FIELD_FOR_STAT[stat])

    def as_dict(self) -> dict[str, float]:
        return {stat: self.get(stat) for stat in STAT_NAMES}

    @classmethod
    def from_mapping(cls, values: dict[str, float]) -> StatPoints:
        """Builds a block from a {"str": .., "con": .., "int": .., "per": ..} mapping."""
        return cls.model_validate({stat: values[stat] for stat in STAT_NAMES})

    def __repr__(self) -> str:
        parts = ", ".join(f"{stat}={self.get(stat):g}" for stat in STAT_NAMES)
        return f"{self.__class__.__name__}({parts})"


# KLASS: DerivedStats
class DerivedStats(HabitForecastBaseModel):
    """Per-source attribute breakdown and totals for one user snapshot."""

    armor: StatPoints
    buffs: StatPoints
    points: StatPoints
    level_bonus: int = Field(..., alias="levelBonus")
    totals: StatPoints


# KLASS: DailyStats
class DailyStats(HabitForecastBaseModel):
    """Outcome of one pass over the task list."""

    due_count: int = Field(0, alias="dueCount", description="Unfinished due dailies not evaded.")
    daily_damage_to_self: float = Field(0.0, alias="dailyDamageToSelf", description="Sum of per-daily damage, each rounded to 0.1.")
    boss_damage: float = Field(0.0, alias="bossDamage", description="Damage the boss deals the whole party, ceiled to 0.1.")
    total_damage_to_self: float = Field(0.0, alias="totalDamageToSelf", description="Daily plus boss damage, ceiled to 0.1.")
    dailies_evaded: int = Field(0, alias="dailiesEvaded", description="Dailies skipped by stealth.")

    def __repr__(self) -> str:
        return (
            f"DailyStats(due={self.due_count}, evaded={self.dailies_evaded}, "
            f"self={self.daily_damage_to_self:.1f}, boss={self.boss_damage:.1f}, total={self.total_damage_to_self:.1f})"
        )
