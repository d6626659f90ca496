# habitforecast/services/damage_simulator.py

# SECTION: MODULE DOCSTRING
"""Forecast of the damage unfinished dailies will deal at the next cron.

One pass over the task list, in list order:

* only dailies that are due and not completed are considered;
* while stealth charges remain, each such daily is evaded (first come,
  first served; severity and priority play no part);
* every other one deals `abs(0.9747 ** clamp(value))`, reduced by checklist
  progress, times constitution mitigation, priority and 2, rounded to 0.1;
* on a boss quest the same checklist-adjusted delta (unmitigated, priority
  applied only below 1) times boss strength is added to the party damage.

Totals are rounded up to 0.1 at the end.
"""

# SECTION: IMPORTS
import math
from typing import Iterable

from habitforecast.exceptions import MissingFieldError
from habitforecast.helpers._logger import log
from habitforecast.models.stats import DailyStats
from habitforecast.models.task import Daily, Task

# Habitica caps task value to these bounds when scoring
TASK_VALUE_MIN = -47.27
TASK_VALUE_MAX = 21.27
DAMAGE_CURVE_BASE = 0.9747
SELF_DAMAGE_MULTIPLIER = 2


# SECTION: ROUNDING


# FUNC: round_to_tenth
def round_to_tenth(x: float) -> float:
    """Nearest 0.1, halves toward +infinity. Non-finite values pass through."""
    if not math.isfinite(x):
        return x
    return math.floor(x * 10 + 0.5) / 10


# FUNC: ceil_to_tenth
def ceil_to_tenth(x: float) -> float:
    """Round up to 0.1. Non-finite values pass through."""
    if not math.isfinite(x):
        return x
    return math.ceil(x * 10) / 10


# SECTION: PER-TASK DAMAGE


# FUNC: clamp_task_value
def clamp_task_value(value: float) -> float:
    if value < TASK_VALUE_MIN:
        return TASK_VALUE_MIN
    if value > TASK_VALUE_MAX:
        return TASK_VALUE_MAX
    return value


# FUNC: calculate_task_delta
def calculate_task_delta(task: Daily) -> float:
    """Damage fraction of one daily after checklist credit.

    Each completed checklist item removes an equal share of the undamped
    delta. The share is computed once, so the result can go below zero when
    most items are done; it is deliberately not clamped.
    """
    delta = abs(math.pow(DAMAGE_CURVE_BASE, clamp_task_value(task.value)))
    if task.checklist:
        per_item_share = delta / len(task.checklist)
        for item in task.checklist:
            if item.completed:
                delta -= per_item_share
    return delta


def _is_pending_daily(task: Task) -> bool:
    return task.type == "daily" and task.is_due and not task.completed


# SECTION: SIMULATION


# FUNC: simulate
def simulate(
    tasks: Iterable[Task],
    stealth_charges: int,
    constitution_bonus: float,
    on_boss_quest: bool,
    boss_strength: float | None,
) -> DailyStats:
    """Runs the daily damage forecast over `tasks` in the order given.

    Args:
        tasks: Task snapshot; only dailies are read.
        stealth_charges: Dailies that may be skipped without damage.
        constitution_bonus: Mitigation multiplier from `compute_constitution_bonus`.
        on_boss_quest: Whether missed dailies also hurt the party through a boss.
        boss_strength: The boss's `str`; required when `on_boss_quest`.

    Returns:
        A new DailyStats.

    Raises:
        MissingFieldError: If on a boss quest without a boss strength.
    """
    due_count = 0
    dailies_evaded = 0
    daily_damage_to_self = 0.0
    boss_damage = 0.0
    stealth_remaining = stealth_charges

    for task in tasks:
        if not _is_pending_daily(task):
            continue

        if stealth_remaining > 0:
            stealth_remaining -= 1
            dailies_evaded += 1
            log.debug(f"Daily {task.id[:8]} evaded by stealth ({stealth_remaining} left)")
            continue

        due_count += 1
        delta = calculate_task_delta(task)

        self_damage = round_to_tenth(delta * constitution_bonus * task.priority * SELF_DAMAGE_MULTIPLIER)
        daily_damage_to_self += self_damage

        party_delta = 0.0
        if on_boss_quest:
            if boss_strength is None:
                raise MissingFieldError("party.quest.data.boss.str", model="QuestBoss")
            party_delta = delta * task.priority if task.priority < 1 else delta
            boss_damage += party_delta * boss_strength

        log.debug(
            f"Daily {task.id[:8]}: value={task.value:.2f} prio={task.priority:g} "
            f"delta={delta:.4f} self={self_damage:.1f} party_delta={party_delta:.4f}"
        )

    stats = DailyStats(
        due_count=due_count,
        daily_damage_to_self=daily_damage_to_self,
        boss_damage=ceil_to_tenth(boss_damage),
        total_damage_to_self=ceil_to_tenth(daily_damage_to_self + boss_damage),
        dailies_evaded=dailies_evaded,
    )
    log.debug(f"Daily forecast: {stats!r}")
    return stats
