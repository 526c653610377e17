"""
Domain package for the person table.

Exports the person record, its validation and age classification, and the
seed set. Keep this package focused on data definitions and validation
concerns.
"""

from person_table.domain.models import (
    AgeCategory,
    Person,
    ValidationResult,
    age_in_years,
    classify_age,
    validate_birth_date,
    validate_person,
)
from person_table.domain.seed import SEED_PEOPLE, seed_candidates

__all__ = [
    "AgeCategory",
    "Person",
    "ValidationResult",
    "age_in_years",
    "classify_age",
    "validate_birth_date",
    "validate_person",
    "SEED_PEOPLE",
    "seed_candidates",
]
