"""
Pytest Configuration and Fixtures for habitforecast Tests
==========================================================

Purpose
-------
Raw Habitica payload factories shared by the unit tests. Payloads are built
the way the API returns them (camelCase keys, `_id`, `class`, `str`), so the
tests exercise the same parsing path as real snapshots.

Architecture Notes
------------------
- Factories return fresh dicts; tests may mutate them freely
- Values default to the neutral case (level 0, no gear, no buffs) so a
  daily with value 0 and priority 1 deals exactly 2.0 damage
"""

from __future__ import annotations

import itertools
from typing import Any

import pytest

from habitforecast.models import ContentResolver, TaskList, UserAttributes

_ids = itertools.count(1)


# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast tests without I/O beyond tmp_path")


# ============================================================================
# RAW PAYLOAD FACTORIES
# ============================================================================


def make_raw_user(
    points: dict[str, float] | None = None,
    buffs: dict[str, float] | None = None,
    level: int = 0,
    klass: str = "warrior",
    equipped: dict[str, Any] | None = None,
    quest: dict[str, Any] | None = None,
) -> dict[str, Any]:
    stat_points = {"str": 0, "con": 0, "int": 0, "per": 0, **(points or {})}
    stat_buffs = {"str": 0, "con": 0, "int": 0, "per": 0, "stealth": 0, **(buffs or {})}
    return {
        "_id": "user-0001",
        "balance": 2.5,
        "profile": {"name": "Tester", "blurb": "hello"},
        "preferences": {"sleep": False, "costume": False},
        "purchased": {"plan": {"consecutive": {"trinkets": 3}}},
        "stats": {
            **stat_points,
            "lvl": level,
            "class": klass,
            "buffs": stat_buffs,
            "gp": 10.6,
            "exp": 120.9,
            "toNextLevel": 250,
            "hp": 42.7,
            "maxHealth": 50,
            "mp": 30.2,
            "maxMP": 60,
        },
        "items": {"gear": {"equipped": dict(equipped or {}), "costume": {}}},
        "party": {"quest": dict(quest or {})},
    }


def make_raw_daily(
    value: float = 0.0,
    priority: float = 1.0,
    is_due: bool = True,
    completed: bool = False,
    checklist: list[bool] | None = None,
    text: str = "Daily",
) -> dict[str, Any]:
    return {
        "_id": f"daily-{next(_ids):04d}",
        "type": "daily",
        "text": text,
        "value": value,
        "priority": priority,
        "isDue": is_due,
        "completed": completed,
        "checklist": [{"id": f"chk-{i}", "text": f"item {i}", "completed": done} for i, done in enumerate(checklist or [])],
    }


def make_raw_todo(date: str | None = None, completed: bool = False, text: str = "Todo") -> dict[str, Any]:
    raw = {"_id": f"todo-{next(_ids):04d}", "type": "todo", "text": text, "value": 0, "priority": 1, "completed": completed}
    if date is not None:
        raw["date"] = date
    return raw


def make_raw_habit(text: str = "Habit") -> dict[str, Any]:
    return {"_id": f"habit-{next(_ids):04d}", "type": "habit", "text": text, "value": 0, "priority": 1}


def make_gear(stats: dict[str, float] | None = None, klass: str | None = None, special_class: str | None = None) -> dict[str, Any]:
    gear = {"str": 0, "con": 0, "int": 0, "per": 0, **(stats or {})}
    if klass is not None:
        gear["klass"] = klass
    if special_class is not None:
        gear["specialClass"] = special_class
    return gear


def make_catalog() -> dict[str, Any]:
    return {
        "gear": {
            "flat": {
                "weapon_warrior_1": {"text": "Training Sword", **make_gear({"str": 2}, klass="warrior")},
                "armor_base_0": {"text": "Plain Clothing", **make_gear(klass="base")},
                "shield_special_1": {"text": "Crystal Shield", **make_gear({"con": 4}, klass="special", special_class="warrior")},
            }
        },
        "quests": {
            "dilatory": {"text": "The Dread Drag'on", "category": "boss", "boss": {"name": "Drag'on", "hp": 5000000, "str": 2}},
            "dustbunnies": {"text": "The Feral Dust Bunnies", "category": "unlockable", "boss": {"name": "Dust Bunnies", "hp": 100, "str": 0.5}},
            "egg": {"text": "Egg Hunt", "category": "pet", "collect": {"plainEgg": {"count": 40}}},
        },
    }


def attrs_from(raw_user: dict[str, Any], catalog: dict[str, Any] | None = None) -> UserAttributes:
    resolver = ContentResolver(catalog)
    return UserAttributes.from_api_data(resolver.hydrate_user(raw_user))


def tasks_from(*raw_tasks: dict[str, Any]) -> TaskList:
    return TaskList.from_raw_api_list(list(raw_tasks))


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def catalog() -> dict[str, Any]:
    """A small `/content` catalog with class gear and two boss quests."""
    return make_catalog()


@pytest.fixture
def resolver(catalog) -> ContentResolver:
    return ContentResolver(catalog)


@pytest.fixture
def neutral_attrs() -> UserAttributes:
    """Level 0 warrior with no gear, buffs or quest (constitution bonus 1.0)."""
    return attrs_from(make_raw_user())
