# habitforecast/helpers/_rich.py

# SECTION: MODULE DOCSTRING
"""Shared Rich console for stdout output.

Log records go to stderr through the logger's own console; this one is for
command output only.
"""

# SECTION: IMPORTS
from rich.console import Console

console = Console(highlight=False)
