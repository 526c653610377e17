"""Fixed demonstration rows used to initialize and restore a registry."""

from __future__ import annotations

from datetime import date
from typing import List, Tuple

from person_table.domain.models import Person

SEED_PEOPLE: Tuple[Tuple[str, str, date], ...] = (
    ("Ashwin", "Sharan", date(2012, 10, 11)),
    ("Advik", "Sharan", date(2012, 10, 11)),
    ("Layne", "Estes", date(2011, 12, 16)),
    ("Mason", "Boyd", date(2003, 4, 20)),
    ("Babalu", "Sharan", date(1980, 1, 10)),
)


def seed_candidates() -> List[Person]:
    """Build new id-less records for the seed set."""
    return [
        Person(first_name=first, last_name=last, birth_date=birth)
        for first, last, birth in SEED_PEOPLE
    ]


__all__ = ["SEED_PEOPLE", "seed_candidates"]
