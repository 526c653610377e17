from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from person_table.domain.models import AgeCategory, Person, age_in_years, classify_age

TODAY = date(2024, 1, 1)


@pytest.mark.parametrize(
    ("birth_date", "expected"),
    [
        (date(2023, 6, 1), AgeCategory.BABY),
        (date(2022, 1, 1), AgeCategory.CHILD),
        (date(2011, 1, 1), AgeCategory.TEEN),
        (date(2005, 1, 1), AgeCategory.TEEN),
        (date(2004, 1, 1), AgeCategory.ADULT),
        (date(1974, 1, 1), AgeCategory.ADULT),
        (date(1973, 1, 1), AgeCategory.SENIOR),
        (None, AgeCategory.UNKNOWN),
    ],
)
def test_age_category_boundaries(birth_date: Optional[date], expected: AgeCategory):
    assert classify_age(birth_date, TODAY) is expected


@pytest.mark.parametrize(
    ("birth_date", "expected"),
    [
        # Birthday not reached yet in the reference year
        (date(2022, 1, 2), AgeCategory.BABY),
        (date(2011, 1, 2), AgeCategory.CHILD),
        (date(2004, 1, 2), AgeCategory.TEEN),
        (date(1973, 1, 2), AgeCategory.ADULT),
        (TODAY, AgeCategory.BABY),
    ],
)
def test_age_uses_calendar_years(birth_date: date, expected: AgeCategory):
    assert classify_age(birth_date, TODAY) is expected


def test_future_birth_date_is_unknown():
    assert classify_age(date(2024, 1, 2), TODAY) is AgeCategory.UNKNOWN
    assert age_in_years(date(2024, 1, 2), TODAY) == -1


def test_leap_day_birthday():
    born = date(2000, 2, 29)
    assert age_in_years(born, date(2001, 2, 28)) == 0
    assert age_in_years(born, date(2001, 3, 1)) == 1
    assert age_in_years(born, date(2004, 2, 29)) == 4


def test_classification_is_pure():
    born = date(2011, 12, 16)
    assert classify_age(born, TODAY) == classify_age(born, TODAY)


def test_person_age_category_method():
    person = Person(first_name="Mason", last_name="Boyd", birth_date=date(2003, 4, 20))
    assert person.age_category(TODAY) is AgeCategory.ADULT
    assert Person(first_name="No", last_name="Date").age_category(TODAY) is AgeCategory.UNKNOWN


def test_category_values_are_names():
    assert [category.value for category in AgeCategory] == [
        "BABY",
        "CHILD",
        "TEEN",
        "ADULT",
        "SENIOR",
        "UNKNOWN",
    ]
