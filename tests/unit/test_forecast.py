"""
Unit Tests for the Forecast Pipeline
=====================================

Test Coverage
-------------
- `combine` against the manual aggregate -> bonus -> simulate pipeline
- `build_forecast` report contents and deadline handling
- `forecast_from_payloads` from raw responses
"""

from datetime import datetime, timezone

import pytest

from habitforecast.models import ForecastReport
from habitforecast.services import (
    build_forecast,
    combine,
    compute_constitution_bonus,
    compute_derived_stats,
    forecast_from_payloads,
    simulate,
)
from tests.conftest import attrs_from, make_gear, make_raw_daily, make_raw_todo, make_raw_user, tasks_from


@pytest.fixture
def tanky_attrs(catalog):
    """Level 20 warrior with 115 total CON on a strength-2 boss quest (bonus 0.54)."""
    raw = make_raw_user(
        points={"con": 90},
        buffs={"con": 5, "stealth": 1},
        level=20,
        klass="warrior",
        equipped={"armor": make_gear({"con": 10})},
        quest={"key": "dilatory"},
    )
    return attrs_from(raw, catalog)


@pytest.fixture
def mixed_tasks():
    return tasks_from(
        make_raw_daily(value=5, priority=2),
        make_raw_daily(value=-8, priority=1, checklist=[True, False, False, False]),
        make_raw_daily(value=0, priority=0.5),
        make_raw_daily(value=0, completed=True),
        make_raw_todo(date="2024-01-01T00:00:00Z", text="overdue"),
        make_raw_todo(date="2099-01-01T00:00:00Z", text="someday"),
    )


@pytest.mark.unit
class TestCombine:
    """Test the one-call daily forecast."""

    def test_matches_manual_pipeline(self, tanky_attrs, mixed_tasks):
        # Arrange
        derived = compute_derived_stats(tanky_attrs)
        bonus = compute_constitution_bonus(derived.totals.con)
        expected = simulate(
            mixed_tasks,
            stealth_charges=tanky_attrs.stealth,
            constitution_bonus=bonus,
            on_boss_quest=tanky_attrs.is_on_boss_quest,
            boss_strength=tanky_attrs.boss_strength,
        )

        # Act
        result = combine(tanky_attrs, mixed_tasks)

        # Assert
        assert result == expected
        assert result.dailies_evaded == 1
        assert result.due_count == 2
        assert result.boss_damage > 0

    def test_neutral_user_single_daily(self, neutral_attrs):
        stats = combine(neutral_attrs, tasks_from(make_raw_daily(value=0)))

        assert stats.total_damage_to_self == 2.0


@pytest.mark.unit
class TestBuildForecast:
    """Test the full report."""

    def test_report_contents(self, tanky_attrs, mixed_tasks):
        # Act
        report = build_forecast(tanky_attrs, mixed_tasks, deadline=datetime(2024, 6, 1, tzinfo=timezone.utc))

        # Assert
        assert isinstance(report, ForecastReport)
        assert report.derived_stats.totals.con == 115.0
        assert report.constitution_bonus == pytest.approx(0.54)
        assert report.daily_stats == combine(tanky_attrs, mixed_tasks)
        assert [todo.text for todo in report.todos_due] == ["overdue"]

    def test_default_deadline_is_end_of_today(self, neutral_attrs, mixed_tasks):
        report = build_forecast(neutral_attrs, mixed_tasks, zone=timezone.utc)

        assert [todo.text for todo in report.todos_due] == ["overdue"]

    def test_report_serialises_with_api_keys(self, neutral_attrs, mixed_tasks):
        dumped = build_forecast(neutral_attrs, mixed_tasks).model_dump(by_alias=True)

        assert set(dumped) == {"derivedStats", "constitutionBonus", "dailyStats", "todosDue", "vitals"}
        assert "totalDamageToSelf" in dumped["dailyStats"]

    def test_report_without_raw_user_has_no_vitals(self, neutral_attrs):
        assert build_forecast(neutral_attrs, []).vitals is None


@pytest.mark.unit
class TestForecastFromPayloads:
    """Test the raw-payload entry point."""

    def test_raw_payloads(self, resolver):
        # Arrange
        raw_user = make_raw_user(klass="warrior", equipped={"weapon": "weapon_warrior_1"})
        raw_tasks = [make_raw_daily(value=0), make_raw_todo(date="2024-01-01T00:00:00Z")]

        # Act
        report = forecast_from_payloads(raw_user, raw_tasks, resolver=resolver, deadline=datetime(2024, 2, 1, tzinfo=timezone.utc))

        # Assert
        assert report.derived_stats.armor.str_ == 3.0
        assert report.daily_stats.total_damage_to_self == 2.0
        assert len(report.todos_due) == 1

    def test_raw_payloads_include_vitals(self, resolver):
        raw_user = make_raw_user(level=4, klass="wizard")

        report = forecast_from_payloads(raw_user, [make_raw_daily(value=0)], resolver=resolver)

        assert report.vitals is not None
        assert report.vitals.gems == 10
        assert report.vitals.class_display_name == "Mage"
        assert report.vitals.level == 4
