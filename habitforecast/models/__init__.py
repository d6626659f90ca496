# habitforecast/models/__init__.py

# ─── Title ────────────────────────────────────────────────────────────────────
#             habitforecast Data Models Package Index
# ──────────────────────────────────────────────────────────────────────────────

# SECTION: MODULE DOCSTRING
"""Exports the Pydantic models for user snapshots, tasks, static game content
and the results of the forecast pipeline.
"""

# SECTION: EXPORTS

# --- Game Content (Static) ---
from .game_content import ContentResolver, GearItem, Quest, QuestBoss

# --- Attribute Blocks & Results ---
from .report import ForecastReport
from .stats import STAT_NAMES, DailyStats, DerivedStats, StatPoints

# --- Task ---
from .task import (
    ChecklistItem,
    Daily,
    Habit,
    Reward,
    Task,
    TaskList,  # Ordered container
    Todo,
    parse_task,
)

# --- User ---
from .user import (
    CLASS_DISPLAY_NAMES,
    Buffs,
    CharacterVitals,
    PartyQuest,
    UserAttributes,
    class_display_name,
)

__all__ = [
    # Content
    "ContentResolver",
    "GearItem",
    "Quest",
    "QuestBoss",
    # Stats
    "STAT_NAMES",
    "StatPoints",
    "DerivedStats",
    "DailyStats",
    "ForecastReport",
    # Tasks
    "ChecklistItem",
    "Task",
    "Habit",
    "Daily",
    "Todo",
    "Reward",
    "TaskList",
    "parse_task",
    # User
    "Buffs",
    "PartyQuest",
    "UserAttributes",
    "CharacterVitals",
    "CLASS_DISPLAY_NAMES",
    "class_display_name",
]
