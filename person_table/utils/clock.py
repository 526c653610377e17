"""
Date source for validation and age classification.

"Today" comes from the configured `REFERENCE_DATE` when one is set, otherwise
from the system clock. Callers that need determinism pass a date explicitly.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from person_table.config import get_settings


def current_date() -> date:
    """Return the configured reference date, or the system date."""
    reference = get_settings().reference_date
    return reference if reference is not None else date.today()


def resolve_today(today: Optional[date] = None) -> date:
    """Use the given date if provided, else fall back to `current_date()`."""
    return today if today is not None else current_date()


__all__ = ["current_date", "resolve_today"]
