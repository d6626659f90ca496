"""
Unit Tests for the Command Line Entry Point
============================================

Test Coverage
-------------
- Successful run from saved responses
- Exit codes for unreadable input and bad arguments
"""

import json

import pytest

from habitforecast.__main__ import main
from tests.conftest import make_catalog, make_raw_daily, make_raw_todo, make_raw_user


@pytest.fixture
def snapshot_files(tmp_path):
    user_path = tmp_path / "user.json"
    tasks_path = tmp_path / "tasks.json"
    content_path = tmp_path / "content.json"
    user_path.write_text(json.dumps({"success": True, "data": make_raw_user(equipped={"weapon": "weapon_warrior_1"})}), encoding="utf-8")
    tasks_path.write_text(
        json.dumps({"success": True, "data": [make_raw_daily(value=0), make_raw_todo(date="2024-01-01T00:00:00Z")]}),
        encoding="utf-8",
    )
    content_path.write_text(json.dumps({"success": True, "data": make_catalog()}), encoding="utf-8")
    return user_path, tasks_path, content_path


@pytest.mark.unit
class TestMain:
    """Test exit codes and output of the CLI."""

    def test_prints_report(self, snapshot_files, capsys):
        # Arrange
        user_path, tasks_path, content_path = snapshot_files

        # Act
        code = main([str(user_path), str(tasks_path), "--content", str(content_path), "--deadline", "2024-02-01T00:00:00Z"])

        # Assert
        assert code == 0
        out = capsys.readouterr().out
        assert "totalDamageToSelf" in out
        assert "todosDue" in out

    def test_unresolved_gear_exits_with_error(self, snapshot_files):
        user_path, tasks_path, _ = snapshot_files

        assert main([str(user_path), str(tasks_path)]) == 1

    def test_missing_file_exits_with_error(self, snapshot_files, tmp_path):
        _, tasks_path, content_path = snapshot_files

        assert main([str(tmp_path / "absent.json"), str(tasks_path), "--content", str(content_path)]) == 1

    def test_bad_deadline_exits_with_error(self, snapshot_files):
        user_path, tasks_path, content_path = snapshot_files

        assert main([str(user_path), str(tasks_path), "--content", str(content_path), "--deadline", "tomorrow-ish"]) == 1

    def test_bad_log_level_is_a_usage_error(self, snapshot_files):
        user_path, tasks_path, _ = snapshot_files

        with pytest.raises(SystemExit) as exc_info:
            main([str(user_path), str(tasks_path), "--log-level", "loud"])

        assert exc_info.value.code == 2

    def test_writes_report_file(self, snapshot_files, tmp_path):
        # Arrange
        user_path, tasks_path, content_path = snapshot_files
        output = tmp_path / "out" / "report.json"

        # Act
        code = main([str(user_path), str(tasks_path), "--content", str(content_path), "--output", str(output)])

        # Assert
        assert code == 0
        report = json.loads(output.read_text(encoding="utf-8"))
        assert report["dailyStats"]["totalDamageToSelf"] == 2.0
        assert report["derivedStats"]["armor"]["str"] == 3.0

    def test_unparseable_todo_date_is_skipped(self, snapshot_files, tmp_path):
        # Arrange
        user_path, _, content_path = snapshot_files
        tasks_path = tmp_path / "odd_tasks.json"
        tasks_path.write_text(json.dumps([make_raw_daily(value=0), make_raw_todo(date="31/12/2024")]), encoding="utf-8")
        output = tmp_path / "report.json"

        # Act
        code = main([str(user_path), str(tasks_path), "--content", str(content_path), "--output", str(output)])

        # Assert
        assert code == 0
        report = json.loads(output.read_text(encoding="utf-8"))
        assert report["dailyStats"]["totalDamageToSelf"] == 2.0
        assert report["todosDue"] == []

    def test_invalid_field_value_exits_with_error(self, tmp_path, snapshot_files):
        _, tasks_path, content_path = snapshot_files
        user_path = tmp_path / "bard.json"
        user_path.write_text(json.dumps(make_raw_user(klass="bard")), encoding="utf-8")

        assert main([str(user_path), str(tasks_path), "--content", str(content_path)]) == 1

    def test_report_carries_vitals(self, snapshot_files, tmp_path):
        user_path, tasks_path, content_path = snapshot_files
        output = tmp_path / "report.json"

        main([str(user_path), str(tasks_path), "--content", str(content_path), "--output", str(output)])

        vitals = json.loads(output.read_text(encoding="utf-8"))["vitals"]
        assert vitals["gems"] == 10
        assert vitals["health"] == 42
        assert vitals["class_display_name"] == "Warrior"
