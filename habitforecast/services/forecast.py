# habitforecast/services/forecast.py

# SECTION: MODULE DOCSTRING
"""Entry points that run the whole derivation for one user snapshot.

Nothing is cached: each call recomputes from the snapshots it is given.
"""

# SECTION: IMPORTS
from datetime import datetime, tzinfo
from typing import Any, Iterable

from habitforecast.helpers._logger import log
from habitforecast.helpers._pydantic import create_from_dict
from habitforecast.models.game_content import ContentResolver
from habitforecast.models.report import ForecastReport
from habitforecast.models.stats import DailyStats, DerivedStats
from habitforecast.models.task import Task, TaskList
from habitforecast.models.user import CharacterVitals, UserAttributes

from .damage_simulator import simulate
from .stat_aggregator import compute_constitution_bonus, compute_derived_stats
from .todo_filter import todos_due_by, todos_due_today


def _run_stats(attrs: UserAttributes, tasks: Iterable[Task]) -> tuple[DerivedStats, float, DailyStats]:
    derived = compute_derived_stats(attrs)
    con_bonus = compute_constitution_bonus(derived.totals.con)
    daily_stats = simulate(
        tasks,
        stealth_charges=attrs.stealth,
        constitution_bonus=con_bonus,
        on_boss_quest=attrs.is_on_boss_quest,
        boss_strength=attrs.boss_strength,
    )
    return derived, con_bonus, daily_stats


# FUNC: combine
def combine(attrs: UserAttributes, tasks: Iterable[Task]) -> DailyStats:
    """Daily damage forecast for `attrs` given the task list."""
    return _run_stats(attrs, tasks)[2]


# FUNC: build_forecast
def build_forecast(
    attrs: UserAttributes,
    tasks: TaskList | list[Task],
    deadline: datetime | None = None,
    zone: tzinfo | None = None,
    vitals: CharacterVitals | None = None,
) -> ForecastReport:
    """Derived stats, mitigation, damage forecast and todos due, in one report.

    Args:
        attrs: User snapshot.
        tasks: Task snapshot, in API order.
        deadline: Todo cutoff; defaults to the end of today in `zone`.
        zone: Calendar zone for the default cutoff.
        vitals: Display values to attach to the report, if known.
    """
    task_seq = list(tasks)
    derived, con_bonus, daily_stats = _run_stats(attrs, task_seq)
    todos = todos_due_by(task_seq, deadline) if deadline is not None else todos_due_today(task_seq, zone=zone)
    log.info(f"Forecast: {daily_stats.due_count} dailies due, {daily_stats.total_damage_to_self:.1f} HP, {len(todos)} todos due")
    return ForecastReport(
        derived_stats=derived,
        constitution_bonus=con_bonus,
        daily_stats=daily_stats,
        todos_due=todos,
        vitals=vitals,
    )


# FUNC: forecast_from_payloads
def forecast_from_payloads(
    raw_user: dict[str, Any],
    raw_tasks: list[dict[str, Any]],
    resolver: ContentResolver | None = None,
    deadline: datetime | None = None,
    zone: tzinfo | None = None,
) -> ForecastReport:
    """Parses raw `/user` and `/tasks/user` payloads and builds the report, vitals included."""
    resolver = resolver or ContentResolver()
    attrs = UserAttributes.from_api_data(resolver.hydrate_user(raw_user))
    vitals = create_from_dict(CharacterVitals, raw_user)
    tasks = TaskList.from_raw_api_list(raw_tasks)
    return build_forecast(attrs, tasks, deadline=deadline, zone=zone, vitals=vitals)
