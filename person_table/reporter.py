from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from person_table.domain.models import AgeCategory, Person

_CATEGORY_STYLES = {
    AgeCategory.BABY: "magenta",
    AgeCategory.CHILD: "cyan",
    AgeCategory.TEEN: "blue",
    AgeCategory.ADULT: "green",
    AgeCategory.SENIOR: "yellow",
    AgeCategory.UNKNOWN: "dim",
}


def build_people_table(people: Sequence[Person], today: date) -> Table:
    """
    Render person rows as a rich table.

    The Row column shows the position used for deletion; the age category is
    derived against `today`.
    """
    table = Table(
        title="People",
        box=box.ROUNDED,
        caption=f"Age categories as of {today.isoformat()}",
    )

    table.add_column("Row", justify="right", style="dim", no_wrap=True)
    table.add_column("Id", justify="right", style="magenta")
    table.add_column("First Name", style="cyan")
    table.add_column("Last Name", style="cyan")
    table.add_column("Birth Date", justify="right", style="green")
    table.add_column("Age Category", justify="center")

    for row, person in enumerate(people):
        category = person.age_category(today)
        table.add_row(
            str(row),
            "" if person.person_id is None else str(person.person_id),
            escape(person.first_name or ""),
            escape(person.last_name or ""),
            person.birth_date.isoformat() if person.birth_date else "",
            f"[{_CATEGORY_STYLES[category]}]{category.value}[/]",
        )

    return table


def print_people(
    people: Sequence[Person], today: date, console: Optional[Console] = None
) -> None:
    console = console or Console()

    if not people:
        console.print("[yellow]No people to display.[/yellow]")
        return

    console.print(build_people_table(people, today))


def print_errors(errors: Iterable[str], console: Optional[Console] = None) -> None:
    """Print validation messages, one per line."""
    console = console or Console()
    for message in errors:
        console.print(f"[red]{message}[/red]")


__all__ = ["build_people_table", "print_errors", "print_people"]
