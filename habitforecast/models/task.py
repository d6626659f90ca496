# habitforecast/models/task.py

# ─── Title ────────────────────────────────────────────────────────────────────
#         Habitica Task Models (Habits, Dailies, Todos, Rewards)
# ──────────────────────────────────────────────────────────────────────────────

# SECTION: MODULE DOCSTRING
"""Pydantic models for Habitica tasks and the ordered TaskList container.

Only the fields the forecast reads are modelled. Dailies must carry `value`,
`priority`, `isDue`, `completed` and `checklist`; a payload without them is
rejected with MissingFieldError instead of being defaulted.
"""

# SECTION: IMPORTS
from __future__ import annotations

import uuid
from collections import Counter
from datetime import datetime
from typing import Annotated, Any, Iterator, Literal

import emoji_data_python
from pydantic import Field, field_validator

from habitforecast.exceptions import MissingFieldError
from habitforecast.helpers._date import to_utc
from habitforecast.helpers._logger import log
from habitforecast.helpers._pydantic import HabitForecastBaseModel, create_from_dict

TaskType = Literal["habit", "daily", "todo", "reward"]


# SECTION: NESTED DATA MODELS


# KLASS: ChecklistItem
class ChecklistItem(HabitForecastBaseModel):
    """A single sub-task of a daily or todo."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    text: str = ""
    completed: bool = Field(...)

    @field_validator("text", mode="before")
    @classmethod
    def parse_text_emoji(cls, value: Any) -> str:
        if isinstance(value, str):
            return emoji_data_python.replace_colons(value).strip()
        return ""

    def __str__(self) -> str:
        return f"{'[x]' if self.completed else '[ ]'} {self.text}"


# SECTION: BASE TASK MODEL


# KLASS: Task
class Task(HabitForecastBaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), alias="_id")
    text: str = ""
    type: TaskType
    value: float = 0.0
    priority: float = 1.0

    @field_validator("text", mode="before")
    @classmethod
    def parse_text_emoji(cls, value: Any) -> str:
        if isinstance(value, str):
            return emoji_data_python.replace_colons(value).strip()
        return ""

    def __repr__(self) -> str:
        text_preview = self.text[:25].replace("\n", " ")
        if len(self.text) > 25:
            text_preview += "..."
        prio = f" P{self.priority:g}" if self.priority != 1.0 else ""
        return f"{self.__class__.__name__}(id='{self.id[:8]}'{prio}, text='{text_preview}')"

    def __str__(self) -> str:
        return self.text


# SECTION: TASK SUBCLASSES


# KLASS: Habit
class Habit(Task):
    type: Literal["habit"] = "habit"


# KLASS: Daily
class Daily(Task):
    """A recurring task; damages its owner when left undone on a due day."""

    type: Literal["daily"] = "daily"
    value: float = Field(...)
    priority: float = Field(...)
    is_due: bool = Field(..., alias="isDue")
    completed: bool = Field(...)
    checklist: list[ChecklistItem] = Field(...)

    @property
    def checklist_completed(self) -> int:
        return sum(1 for item in self.checklist if item.completed)

    def __repr__(self) -> str:
        status = "done" if self.completed else ("due" if self.is_due else "not_due")
        chk = f" Chk:{self.checklist_completed}/{len(self.checklist)}" if self.checklist else ""
        return f"Daily(id='{self.id[:8]}' P{self.priority:g} V{self.value:.2f} S:{status}{chk}, text='{self.text[:15]}')"


# KLASS: Todo
class Todo(Task):
    type: Literal["todo"] = "todo"
    completed: bool = False
    due_date: datetime | None = Field(None, alias="date")
    checklist: list[ChecklistItem] = Field(default_factory=list)

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date_utc(cls, value: Any) -> datetime | None:
        """Unparseable dates are dropped so the todo is simply never due."""
        try:
            return to_utc(value)
        except ValueError:
            log.warning(f"Ignoring unparseable todo date {value!r}")
            return None


# KLASS: Reward
class Reward(Task):
    type: Literal["reward"] = "reward"


AnyTask = Annotated[Habit | Daily | Todo | Reward, Field(discriminator="type")]

TASK_MODELS: dict[str, type[Task]] = {
    "habit": Habit,
    "daily": Daily,
    "todo": Todo,
    "reward": Reward,
}


# FUNC: parse_task
def parse_task(raw: dict[str, Any], prefix: str = "") -> Task | None:
    """Validates one raw task dict into its typed model.

    Returns None (with a warning) for task types this package does not know.

    Raises:
        MissingFieldError: If `type` or a field required by that type is absent.
        InvalidPayloadError: If a field holds a value of the wrong type.
    """
    if "type" not in raw or raw["type"] is None:
        raise MissingFieldError(f"{prefix}.type" if prefix else "type", model="Task")
    type_str = str(raw["type"]).lower()
    task_model = TASK_MODELS.get(type_str)
    if task_model is None:
        task_id = str(raw.get("_id", raw.get("id", "unknown")))[:8]
        log.warning(f"Skipping task {task_id} with unknown type '{type_str}'")
        return None
    return create_from_dict(task_model, raw, prefix=prefix)


# SECTION: TASK LIST CONTAINER


# KLASS: TaskList
class TaskList(HabitForecastBaseModel):
    """Ordered task collection. Order is the order received and is significant."""

    tasks: list[AnyTask] = Field(default_factory=list)

    @classmethod
    def from_raw_api_list(cls, raw_data: list[dict[str, Any]]) -> TaskList:
        """Builds a TaskList from the `/tasks/user` payload, keeping its order."""
        if not isinstance(raw_data, list):
            raise TypeError(f"Expected a list of tasks, got {type(raw_data).__name__}")
        log.info(f"Parsing {len(raw_data)} raw task entries")
        parsed: list[Task] = []
        for i, item in enumerate(raw_data):
            if not isinstance(item, dict):
                raise TypeError(f"Task entry {i} is {type(item).__name__}, expected dict")
            task = parse_task(item, prefix=f"[{i}]")
            if task is not None:
                parsed.append(task)
        log.debug(f"Parsed {len(parsed)} tasks")
        return cls(tasks=parsed)

    def get_tasks_by_type(self, type: TaskType) -> list[Task]:
        """All tasks of one type, in list order."""
        return [task for task in self.tasks if task.type == type]

    def get_dailies(self) -> list[Daily]:
        return self.get_tasks_by_type("daily")

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __getitem__(self, index: int) -> Task:
        return self.tasks[index]

    def __repr__(self) -> str:
        counts = Counter(task.type for task in self.tasks)
        count_str = ", ".join(f"{t}:{c}" for t, c in sorted(counts.items()))
        return f"TaskList(count={len(self.tasks)}, types=[{count_str}])"
