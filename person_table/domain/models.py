"""
Domain models for the person table.

Defines the `Person` record with its validation rules and the derived age
category. Validation never raises for invalid input: every check returns a
`ValidationResult` carrying all applicable messages so a form can show every
problem at once.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from person_table.utils.clock import resolve_today
from person_table.utils.logging import get_logger

log = get_logger(__name__)

FIRST_NAME_ERROR = "First name must contain minimum one character."
LAST_NAME_ERROR = "Last name must contain minimum one character."
BIRTH_DATE_ERROR = "Birth date must not be in future."


class AgeCategory(str, Enum):
    BABY = "BABY"
    CHILD = "CHILD"
    TEEN = "TEEN"
    ADULT = "ADULT"
    SENIOR = "SENIOR"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of a validation check.

    Truthy when valid. `errors` holds human-readable messages in the order the
    checks ran.
    """

    valid: bool
    errors: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid


class Person(BaseModel):
    """
    A single row of the person table.

    Candidates are built without an id; a registry assigns one when it accepts
    the record and stores a copy carrying it.
    """

    person_id: Optional[int] = Field(None, description="Registry-assigned identifier.")
    first_name: Optional[str] = Field(None, description="Given name, required.")
    last_name: Optional[str] = Field(None, description="Family name, required.")
    birth_date: Optional[date] = Field(None, description="Optional date of birth.")

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": False,
    }

    @field_validator("birth_date", mode="before")
    @classmethod
    def _parse_iso_birth_date(cls, value: Any) -> Optional[date]:
        """Accept only date objects or ISO `YYYY-MM-DD` strings."""
        if value is None or isinstance(value, date):
            return value
        if isinstance(value, str):
            return date.fromisoformat(value.strip())
        raise ValueError(
            f"birth date must be a date or YYYY-MM-DD string, got {type(value).__name__}"
        )

    @classmethod
    def from_fields(
        cls,
        first_name: Optional[str],
        last_name: Optional[str],
        birth_date: Union[date, str, None] = None,
    ) -> "Person":
        """
        Build a candidate from raw form values.

        A blank birth date string means the field was left empty. A malformed
        one raises `pydantic.ValidationError`.
        """
        if isinstance(birth_date, str) and not birth_date.strip():
            birth_date = None
        return cls(first_name=first_name, last_name=last_name, birth_date=birth_date)

    def with_id(self, person_id: int) -> "Person":
        return self.model_copy(update={"person_id": person_id})

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def is_valid_birth_date(self, today: Optional[date] = None) -> ValidationResult:
        return validate_birth_date(self.birth_date, today)

    def is_valid_person(self, today: Optional[date] = None) -> ValidationResult:
        return validate_person(self, today)

    def age_category(self, today: Optional[date] = None) -> AgeCategory:
        return classify_age(self.birth_date, today)

    def save(self, today: Optional[date] = None) -> ValidationResult:
        """
        Accept the record if it is valid.

        Succeeds exactly when `is_valid_person` does; acceptance is logged.
        """
        result = self.is_valid_person(today)
        if result.valid:
            log.info(
                f"Saved person {self.full_name}",
                extra={"person_id": self.person_id, "birth_date": self.birth_date},
            )
        return result


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_birth_date(
    birth_date: Optional[date], today: Optional[date] = None
) -> ValidationResult:
    """
    Check that a birth date is not in the future.

    An absent birth date is valid; the field is optional.
    """
    if birth_date is None:
        return ValidationResult(valid=True)
    if birth_date > resolve_today(today):
        return ValidationResult(valid=False, errors=[BIRTH_DATE_ERROR])
    return ValidationResult(valid=True)


def validate_person(person: Person, today: Optional[date] = None) -> ValidationResult:
    """
    Run every person check and collect all failures.

    Order of messages: first name, last name, birth date.
    """
    errors: List[str] = []
    if _is_blank(person.first_name):
        errors.append(FIRST_NAME_ERROR)
    if _is_blank(person.last_name):
        errors.append(LAST_NAME_ERROR)
    errors.extend(validate_birth_date(person.birth_date, today).errors)
    return ValidationResult(valid=not errors, errors=errors)


def age_in_years(birth_date: date, today: date) -> int:
    """Whole calendar years from `birth_date` to `today`, negative if in the future."""
    years = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def classify_age(birth_date: Optional[date], today: Optional[date] = None) -> AgeCategory:
    """
    Map a birth date to its age category.

    BABY [0, 2), CHILD [2, 13), TEEN [13, 19], ADULT (19, 50], SENIOR above 50.
    Missing or future birth dates are UNKNOWN.
    """
    if birth_date is None:
        return AgeCategory.UNKNOWN
    years = age_in_years(birth_date, resolve_today(today))
    if years < 0:
        return AgeCategory.UNKNOWN
    if years < 2:
        return AgeCategory.BABY
    if years < 13:
        return AgeCategory.CHILD
    if years <= 19:
        return AgeCategory.TEEN
    if years <= 50:
        return AgeCategory.ADULT
    return AgeCategory.SENIOR


__all__ = [
    "AgeCategory",
    "BIRTH_DATE_ERROR",
    "FIRST_NAME_ERROR",
    "LAST_NAME_ERROR",
    "Person",
    "ValidationResult",
    "age_in_years",
    "classify_age",
    "validate_birth_date",
    "validate_person",
]
