# habitforecast/helpers/__init__.py

"""habitforecast helper utilities.

- Logging setup (_logger.py)
- Date/time normalisation (_date.py)
- JSON snapshot I/O (_json.py)
- Pydantic base model and parsing (_pydantic.py)
- Rich console (_rich.py)
"""

from ._date import end_of_day, resolve_timezone, to_utc
from ._json import load_json, save_json, unwrap_envelope
from ._logger import SUCCESS_LEVEL_NUM, get_logger, log, setup_logging
from ._pydantic import HabitForecastBaseModel, create_from_dict
from ._rich import console

__all__ = [
    # Logging
    "log",
    "get_logger",
    "setup_logging",
    "SUCCESS_LEVEL_NUM",
    # Rich Console
    "console",
    # JSON Handling
    "load_json",
    "save_json",
    "unwrap_envelope",
    # Pydantic Utilities
    "HabitForecastBaseModel",
    "create_from_dict",
    # Date Utilities
    "to_utc",
    "end_of_day",
    "resolve_timezone",
]
