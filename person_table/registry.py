"""
In-memory registry of person rows.

The registry owns the ordered row collection and the identifier sequence. It
is the only place ids are minted; ids are never reused, not even after a
restore. All reads and mutations run under one re-entrant lock per instance so
the collection and the counter always change together.

Usage:
    from person_table.registry import PersonRegistry

    registry = PersonRegistry()
    result = registry.add(Person.from_fields("Ada", "Lovelace", "1815-12-10"))
    if not result:
        print(result.errors)
    registry.delete_by_indices({0, 2})
    registry.restore()
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Iterable, List, Optional, Tuple

from person_table.config import get_settings
from person_table.domain.models import Person, ValidationResult, validate_person
from person_table.domain.seed import seed_candidates
from person_table.utils.clock import current_date
from person_table.utils.logging import get_logger

log = get_logger(__name__)

NOTHING_SELECTED = "Please select a row to delete."


@dataclass(frozen=True)
class AddResult(ValidationResult):
    """Validation outcome of `PersonRegistry.add`, with the stored row on success."""

    person: Optional[Person] = None


@dataclass(frozen=True)
class DeletionResult:
    """
    Outcome of `PersonRegistry.delete_by_indices`.

    `deleted` lists removed rows in their former display order. An empty
    selection is not an error: it sets `nothing_selected` and `message`.
    """

    deleted: List[Person] = field(default_factory=list)
    nothing_selected: bool = False
    message: Optional[str] = None


class PersonRegistry:
    """
    Ordered collection of accepted person rows.

    Parameters
    ----------
    start_id : int | None
        First id to mint. Defaults to settings.registry_start_id.
    seed : bool | None
        Load the seed set on construction. Defaults to settings.seed_on_start.
    today : callable | None
        Date source for validation. Defaults to the configured clock.
    """

    def __init__(
        self,
        *,
        start_id: Optional[int] = None,
        seed: Optional[bool] = None,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        settings = get_settings()
        self._next_id = settings.registry_start_id if start_id is None else start_id
        self._today = today or current_date
        self._items: List[Person] = []
        self._lock = threading.RLock()

        load_seed = settings.seed_on_start if seed is None else seed
        if load_seed:
            self._items.extend(self.seed())

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _mint_id(self) -> int:
        person_id = self._next_id
        self._next_id += 1
        return person_id

    def seed(self) -> List[Person]:
        """
        Return new seed rows with freshly minted ids.

        The registry's rows are left untouched; ids continue the sequence.
        """
        with self._lock:
            return [candidate.with_id(self._mint_id()) for candidate in seed_candidates()]

    def add(self, candidate: Person) -> AddResult:
        """
        Validate a candidate and append it when valid.

        An invalid candidate leaves the rows and the id sequence unchanged.
        """
        with self._lock:
            result = validate_person(candidate, self._today())
            if not result.valid:
                log.info(
                    "Rejected candidate",
                    extra={"errors": result.errors, "candidate": candidate.full_name},
                )
                return AddResult(valid=False, errors=result.errors)

            person = candidate.with_id(self._mint_id())
            self._items.append(person)
            log.info(
                f"Added person {person.person_id}",
                extra={"person_id": person.person_id, "rows": len(self._items)},
            )
            return AddResult(valid=True, person=person)

    def delete_by_indices(self, indices: Iterable[int]) -> DeletionResult:
        """
        Remove the rows at the given positions.

        Positions refer to the current ordering and are removed from the highest
        down so earlier removals never shift later ones. Any position outside
        the current rows raises IndexError and nothing is removed.
        """
        with self._lock:
            selected = sorted(set(indices), reverse=True)
            if not selected:
                log.info(NOTHING_SELECTED)
                return DeletionResult(nothing_selected=True, message=NOTHING_SELECTED)

            size = len(self._items)
            invalid = [index for index in selected if index < 0 or index >= size]
            if invalid:
                log.warning(
                    "Rejected deletion of out-of-range rows",
                    extra={"indices": sorted(invalid), "rows": size},
                )
                raise IndexError(
                    f"Row positions {sorted(invalid)} out of range for {size} rows"
                )

            removed = [self._items.pop(index) for index in selected]
            removed.reverse()
            log.info(
                f"Deleted {len(removed)} row(s)",
                extra={
                    "deleted": [person.person_id for person in removed],
                    "rows": len(self._items),
                },
            )
            return DeletionResult(deleted=removed)

    def restore(self) -> Tuple[Person, ...]:
        """Replace all rows with a fresh seed set."""
        with self._lock:
            self._items.clear()
            self._items.extend(self.seed())
            log.info("Restored seed rows", extra={"rows": len(self._items)})
            return tuple(self._items)

    def list_people(self) -> Tuple[Person, ...]:
        """Snapshot of the current rows in display order."""
        with self._lock:
            return tuple(self._items)


__all__ = ["AddResult", "DeletionResult", "NOTHING_SELECTED", "PersonRegistry"]
