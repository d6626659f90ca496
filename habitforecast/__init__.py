# habitforecast/__init__.py
"""habitforecast package initialization.

Forecasts the damage a Habitica character will take at the next cron from
saved `/user` and `/tasks/user` snapshots.
"""

# --- Define Package Metadata ---
__version__ = "0.1.0"
__author__ = "vainilie"

# --- Expose Key Components ---
from .exceptions import ContentCatalogError, HabitForecastError, InvalidPayloadError, MissingFieldError
from .models import ContentResolver, TaskList, UserAttributes
from .services import build_forecast, combine

__all__ = [
    "__version__",
    "HabitForecastError",
    "MissingFieldError",
    "InvalidPayloadError",
    "ContentCatalogError",
    "ContentResolver",
    "UserAttributes",
    "TaskList",
    "combine",
    "build_forecast",
]
