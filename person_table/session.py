"""
Interactive table session.

Terminal counterpart of the add / delete / restore controls of a table form.
Each command line is translated into one registry call and the outcome is
rendered; the registry never sees anything but plain values.
"""

from __future__ import annotations

import shlex
from datetime import date
from typing import Callable, List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from person_table.domain.models import Person
from person_table.registry import PersonRegistry
from person_table.reporter import print_errors, print_people
from person_table.utils.clock import current_date
from person_table.utils.logging import get_logger

log = get_logger(__name__)

HELP_TEXT = """\
Commands:
  add FIRST LAST [YYYY-MM-DD]   add a person (quote names containing spaces)
  delete ROW [ROW ...]          delete the rows at the given positions
  restore                       reset the table to the seed rows
  list                          show the table
  help                          show this help
  quit                          leave the session"""


class TableSession:
    """Command interpreter over a `PersonRegistry`."""

    def __init__(
        self,
        registry: PersonRegistry,
        console: Optional[Console] = None,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self.registry = registry
        self.console = console or Console()
        self._today = today or current_date

    def show(self) -> None:
        print_people(self.registry.list_people(), self._today(), self.console)

    def handle_command(self, line: str) -> bool:
        """
        Run one command line.

        Returns False when the session should end.
        """
        try:
            parts = shlex.split(line)
        except ValueError as exc:
            self.console.print(f"[red]Could not parse command: {escape(str(exc))}[/red]")
            return True

        if not parts:
            return True

        command, args = parts[0].lower(), parts[1:]
        if command in ("quit", "exit"):
            return False
        if command == "help":
            self.console.print(HELP_TEXT, markup=False)
        elif command == "list":
            self.show()
        elif command == "add":
            self._add(args)
        elif command == "delete":
            self._delete(args)
        elif command == "restore":
            self.registry.restore()
            self.console.print("[green]Rows restored.[/green]")
            self.show()
        else:
            self.console.print(
                f"[yellow]Unknown command '{escape(command)}'. Type 'help' for commands.[/yellow]"
            )
        return True

    def _add(self, args: List[str]) -> None:
        if len(args) not in (2, 3):
            self.console.print("Usage: add FIRST LAST [YYYY-MM-DD]", style="yellow", markup=False)
            return

        birth_date = args[2] if len(args) == 3 else None
        try:
            candidate = Person.from_fields(args[0], args[1], birth_date)
        except ValidationError:
            self.console.print(
                f"[red]Invalid birth date '{escape(birth_date or '')}'; expected YYYY-MM-DD.[/red]"
            )
            return

        result = self.registry.add(candidate)
        if not result:
            print_errors(result.errors, self.console)
            return

        self.console.print(
            f"[green]Added {escape(result.person.full_name)} with id {result.person.person_id}.[/green]"
        )

    def _delete(self, args: List[str]) -> None:
        try:
            indices = {int(arg) for arg in args}
        except ValueError:
            self.console.print("[red]Row positions must be whole numbers.[/red]")
            return

        try:
            result = self.registry.delete_by_indices(indices)
        except IndexError as exc:
            self.console.print(f"[red]{escape(str(exc))}[/red]")
            return

        if result.nothing_selected:
            self.console.print(f"[yellow]{result.message}[/yellow]")
            return

        self.console.print(f"[green]Deleted {len(result.deleted)} row(s).[/green]")
        self.show()

    def run(self, prompt: str = "person-table") -> None:
        """Show the table and read commands until quit or end of input."""
        self.show()
        while True:
            try:
                line = typer.prompt(prompt, default="", show_default=False)
            except typer.Abort:
                log.debug("Session input closed")
                break
            if not self.handle_command(line):
                break


__all__ = ["HELP_TEXT", "TableSession"]
