"""Tests for the Typer CLI."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from person_table import main
from person_table.domain.models import FIRST_NAME_ERROR, LAST_NAME_ERROR

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CLI runs from installing handlers bound to the runner's streams."""
    monkeypatch.setattr(main, "configure_logging", lambda *args, **kwargs: None)


def test_info_shows_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REFERENCE_DATE", "2024-01-01")
    result = runner.invoke(main.app, ["info"])

    assert result.exit_code == 0
    assert "today=2024-01-01" in result.output
    assert "start_id=1" in result.output


def test_check_valid_person_prints_category() -> None:
    result = runner.invoke(
        main.app, ["check", "Layne", "Estes", "--birth-date", "2011-12-16", "--today", "2024-01-01"]
    )

    assert result.exit_code == 0
    assert "Layne Estes: CHILD" in result.output


def test_check_without_birth_date_is_unknown() -> None:
    result = runner.invoke(main.app, ["check", "Grace", "Hopper"])

    assert result.exit_code == 0
    assert "Grace Hopper: UNKNOWN" in result.output


def test_check_invalid_person_lists_errors() -> None:
    result = runner.invoke(main.app, ["check", " ", ""])

    assert result.exit_code == 1
    assert FIRST_NAME_ERROR in result.output
    assert LAST_NAME_ERROR in result.output


def test_check_future_birth_date() -> None:
    result = runner.invoke(
        main.app, ["check", "Future", "Kid", "-b", "2024-06-01", "-t", "2024-01-01"]
    )

    assert result.exit_code == 1
    assert "Birth date must not be in future." in result.output


def test_check_malformed_birth_date() -> None:
    result = runner.invoke(main.app, ["check", "Grace", "Hopper", "-b", "not-a-date"])
    assert result.exit_code == 2


def test_show_renders_seed_table() -> None:
    result = runner.invoke(main.app, ["show", "--today", "2024-01-01"])

    assert result.exit_code == 0
    for name in ("Ashwin", "Advik", "Layne", "Mason", "Babalu"):
        assert name in result.output
