"""
Person table - a small people register with validation and age categories.

This package provides the core of a form/table application:

- A `Person` record with name and birth date validation
- Age categorization (baby, child, teen, adult, senior)
- An in-memory registry with add, multi-row delete and restore-to-seed
- A Rich/Typer terminal front end driving the registry

The core returns validation problems as data so a front end can show all of
them at once; only contract violations raise.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from person_table.config import Settings, get_settings
from person_table.domain.models import (
    AgeCategory,
    Person,
    ValidationResult,
    classify_age,
    validate_birth_date,
    validate_person,
)
from person_table.domain.seed import SEED_PEOPLE
from person_table.registry import AddResult, DeletionResult, PersonRegistry
from person_table.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "AgeCategory",
    "Person",
    "ValidationResult",
    "classify_age",
    "validate_birth_date",
    "validate_person",
    "SEED_PEOPLE",
    # Registry
    "AddResult",
    "DeletionResult",
    "PersonRegistry",
    # Logging
    "configure_logging",
    "get_logger",
]
