# habitforecast/helpers/_json.py
# ─── Helper ───────────────────────────────────────────────────────────────────
#                JSON Save/Load Utilities
# ──────────────────────────────────────────────────────────────────────────────

# SECTION: MODULE DOCSTRING
"""Utility functions for reading and writing JSON snapshots.

Habitica responses arrive wrapped as `{"success": true, "data": ...}`;
`unwrap_envelope` strips that wrapper so saved responses and bare payloads
can be used interchangeably.
"""

# SECTION: IMPORTS
import json
from pathlib import Path
from typing import Any

from ._logger import log

# SECTION: TYPE ALIASES
JSONSerializable = dict[str, Any] | list[Any]
LoadResult = JSONSerializable | None

# SECTION: CORE FUNCTIONS


# FUNC: save_json
def save_json(data: JSONSerializable, filepath: str | Path, indent: int = 4) -> bool:
    """Saves Python data (dict or list) to a JSON file with pretty printing.

    Returns:
        True if saving was successful, False otherwise.
    """
    output_path = Path(filepath).resolve()
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=indent, ensure_ascii=False, default=str)
        log.info(f"Saved JSON data to: '{output_path}'")
        return True
    except TypeError as e:
        log.error(f"Data structure not JSON serializable for '{output_path}': {e}")
        return False
    except OSError as e:
        log.error(f"Could not write file '{output_path}': {e}")
        return False


# FUNC: load_json
def load_json(filepath: str | Path) -> LoadResult:
    """Loads data from a JSON file.

    Returns:
        The loaded dict or list, or None if the file doesn't exist, cannot be
        read, or does not contain a JSON object/array.
    """
    input_path = Path(filepath).resolve()

    if not input_path.is_file():
        log.warning(f"JSON file not found at '{input_path}'")
        return None

    log.debug(f"Loading JSON from: '{input_path}'")
    try:
        with input_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        log.error(f"Failed to load or parse JSON file '{input_path}': {e}")
        return None

    if isinstance(data, (dict, list)):
        return data
    log.warning(f"Invalid data type ({type(data).__name__}) in JSON file: '{input_path}'. Expected dict or list.")
    return None


# FUNC: unwrap_envelope
def unwrap_envelope(payload: Any) -> Any:
    """Returns `payload["data"]` for a Habitica API envelope, else the payload itself."""
    if isinstance(payload, dict) and "data" in payload and ("success" in payload or len(payload) == 1):
        return payload["data"]
    return payload
