# habitforecast/models/report.py

# SECTION: MODULE DOCSTRING
"""The combined forecast report returned by `build_forecast` and printed by the CLI."""

# SECTION: IMPORTS
from __future__ import annotations

from pydantic import Field

from habitforecast.helpers._pydantic import HabitForecastBaseModel

from .stats import DailyStats, DerivedStats
from .task import Todo
from .user import CharacterVitals


# KLASS: ForecastReport
class ForecastReport(HabitForecastBaseModel):
    """Everything derived from one user snapshot and task list."""

    derived_stats: DerivedStats = Field(..., alias="derivedStats")
    constitution_bonus: float = Field(..., alias="constitutionBonus")
    daily_stats: DailyStats = Field(..., alias="dailyStats")
    todos_due: list[Todo] = Field(default_factory=list, alias="todosDue")
    # Only available when built from a raw user payload
    vitals: CharacterVitals | None = None
