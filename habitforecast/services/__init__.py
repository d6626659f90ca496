# habitforecast/services/__init__.py

# SECTION: MODULE DOCSTRING
"""Pure computations over user and task snapshots.

- stat_aggregator: total attributes and constitution mitigation
- damage_simulator: cron damage forecast for unfinished dailies
- todo_filter: todos due before a deadline
- forecast: runs the whole pipeline for one snapshot
"""

from .damage_simulator import ceil_to_tenth, round_to_tenth, simulate
from .forecast import build_forecast, combine, forecast_from_payloads
from .stat_aggregator import compute_constitution_bonus, compute_derived_stats
from .todo_filter import todos_due_by, todos_due_today

__all__ = [
    "compute_derived_stats",
    "compute_constitution_bonus",
    "simulate",
    "round_to_tenth",
    "ceil_to_tenth",
    "todos_due_by",
    "todos_due_today",
    "combine",
    "build_forecast",
    "forecast_from_payloads",
]
