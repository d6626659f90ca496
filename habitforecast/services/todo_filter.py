# habitforecast/services/todo_filter.py

# SECTION: MODULE DOCSTRING
"""Selection of todos due before a deadline."""

# SECTION: IMPORTS
from datetime import datetime, tzinfo
from typing import Iterable

from habitforecast.helpers._date import end_of_day, to_utc
from habitforecast.helpers._logger import log
from habitforecast.models.task import Task, Todo


# FUNC: todos_due_by
def todos_due_by(tasks: Iterable[Task], deadline: datetime) -> list[Todo]:
    """Todos with a due date strictly before `deadline`, in list order.

    Completion is not considered. Naive datetimes are taken as UTC.
    """
    cutoff = to_utc(deadline)
    if cutoff is None:
        raise ValueError("deadline is required")
    due = [task for task in tasks if task.type == "todo" and task.due_date is not None and task.due_date < cutoff]
    log.debug(f"{len(due)} todos due before {cutoff.isoformat()}")
    return due


# FUNC: todos_due_today
def todos_due_today(tasks: Iterable[Task], now: datetime | None = None, zone: tzinfo | None = None) -> list[Todo]:
    """Todos due before the end of the current day in `zone` (system local zone by default)."""
    return todos_due_by(tasks, end_of_day(now, zone))
