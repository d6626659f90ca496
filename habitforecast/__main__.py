# habitforecast/__main__.py

# SECTION: MODULE DOCSTRING
"""Command line entry point.

    python -m habitforecast USER_JSON TASKS_JSON [--content CONTENT_JSON]
                            [--deadline ISO8601] [--output REPORT_JSON]
                            [--log-level LEVEL]

Reads saved `/user` and `/tasks/user` responses (enveloped or bare), prints
the forecast report as JSON.
"""

# SECTION: IMPORTS
import argparse
import sys
from pathlib import Path

from rich.traceback import install as install_traceback

from habitforecast.config import LOG_LEVELS, get_settings
from habitforecast.exceptions import HabitForecastError
from habitforecast.helpers import console, load_json, log, resolve_timezone, save_json, setup_logging, to_utc, unwrap_envelope
from habitforecast.models import ContentResolver
from habitforecast.services import forecast_from_payloads


# FUNC: build_parser
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="habitforecast",
        description="Forecast Habitica cron damage from saved user and task snapshots.",
    )
    parser.add_argument("user_json", type=Path, help="saved /user (or /members/{id}) response")
    parser.add_argument("tasks_json", type=Path, help="saved /tasks/user response")
    parser.add_argument("--content", type=Path, default=None, help="saved /content response used to resolve gear and quests")
    parser.add_argument("--deadline", default=None, help="todo cutoff as ISO 8601 (default: end of today)")
    parser.add_argument("--output", type=Path, default=None, help="also write the report to this JSON file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="console log level (default from HABITFORECAST_LOG_LEVEL)",
    )
    return parser


def _load_payload(path: Path, what: str):
    data = load_json(path)
    if data is None:
        raise HabitForecastError(f"Could not read {what} snapshot from '{path}'", details=str(path))
    return unwrap_envelope(data)


# FUNC: run
def run(args: argparse.Namespace) -> int:
    settings = get_settings()

    content_path = args.content or settings.content_path
    resolver = ContentResolver.from_json(content_path) if content_path else ContentResolver()

    raw_user = _load_payload(args.user_json, "user")
    raw_tasks = _load_payload(args.tasks_json, "tasks")
    if not isinstance(raw_user, dict):
        raise HabitForecastError(f"User snapshot in '{args.user_json}' is not a JSON object")
    if not isinstance(raw_tasks, list):
        raise HabitForecastError(f"Tasks snapshot in '{args.tasks_json}' is not a JSON array")

    try:
        deadline = to_utc(args.deadline)
        zone = resolve_timezone(settings.timezone)
    except ValueError as e:
        raise HabitForecastError(str(e)) from e

    report = forecast_from_payloads(raw_user, raw_tasks, resolver=resolver, deadline=deadline, zone=zone)

    console.print_json(report.model_dump_json(by_alias=True))
    if args.output and not save_json(report.model_dump(mode="json", by_alias=True), args.output):
        raise HabitForecastError(f"Could not write report to '{args.output}'", details=str(args.output))
    log.success(f"Forecast ready: {report.daily_stats.total_damage_to_self:.1f} HP at next cron")
    return 0


# FUNC: main
def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    level = args.log_level or settings.log_level
    setup_logging(console_level=level, log_dir=settings.log_dir)
    install_traceback(show_locals=False)

    try:
        return run(args)
    except HabitForecastError as e:
        log.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
