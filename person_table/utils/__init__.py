"""
Utilities package for the person table application.

Exports shared helpers for logging and the date source.
Keep this package lightweight and free of domain-specific logic.
"""

from person_table.utils.clock import current_date, resolve_today
from person_table.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "current_date",
    "resolve_today",
]
