from __future__ import annotations

import sys
from datetime import datetime
from typing import Optional

import typer
from pydantic import ValidationError

from person_table.config import get_settings
from person_table.domain.models import Person
from person_table.registry import PersonRegistry
from person_table.reporter import print_errors, print_people
from person_table.session import TableSession
from person_table.utils.clock import resolve_today
from person_table.utils.logging import configure_logging

app = typer.Typer(help="Person table: add, delete and restore people rows.")

_TODAY_OPTION_HELP = "Reference date for validation and age categories (default: today)."


def _setup_logging() -> None:
    configure_logging(get_settings())


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    reference = settings.reference_date.isoformat() if settings.reference_date else "system date"
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json={settings.log_json} | "
        f"today={reference} | start_id={settings.registry_start_id} "
        f"seed_on_start={settings.seed_on_start}"
    )


@app.command()
def show(
    today: Optional[datetime] = typer.Option(
        None, "--today", "-t", formats=["%Y-%m-%d"], help=_TODAY_OPTION_HELP
    ),
) -> None:
    """
    Render the seed rows with their age categories.
    """
    _setup_logging()
    reference = resolve_today(today.date() if today else None)
    registry = PersonRegistry(seed=True, today=lambda: reference)
    print_people(registry.list_people(), reference)


@app.command()
def check(
    first_name: str = typer.Argument(..., help="First name."),
    last_name: str = typer.Argument(..., help="Last name."),
    birth_date: Optional[str] = typer.Option(
        None, "--birth-date", "-b", help="Birth date as YYYY-MM-DD."
    ),
    today: Optional[datetime] = typer.Option(
        None, "--today", "-t", formats=["%Y-%m-%d"], help=_TODAY_OPTION_HELP
    ),
) -> None:
    """
    Validate a person without adding it and print the age category.
    """
    _setup_logging()
    reference = resolve_today(today.date() if today else None)
    try:
        candidate = Person.from_fields(first_name, last_name, birth_date)
    except ValidationError:
        typer.echo(f"Invalid birth date '{birth_date}'; expected YYYY-MM-DD.", err=True)
        raise typer.Exit(code=2)

    result = candidate.is_valid_person(reference)
    if not result:
        print_errors(result.errors)
        raise typer.Exit(code=1)

    typer.echo(f"{candidate.full_name}: {candidate.age_category(reference).value}")


@app.command()
def session(
    today: Optional[datetime] = typer.Option(
        None, "--today", "-t", formats=["%Y-%m-%d"], help=_TODAY_OPTION_HELP
    ),
) -> None:
    """
    Start an interactive table session over a freshly seeded registry.
    """
    _setup_logging()
    reference = resolve_today(today.date() if today else None)
    registry = PersonRegistry(today=lambda: reference)
    TableSession(registry, today=lambda: reference).run()


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
