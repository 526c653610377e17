"""
Pytest configuration for the person table.

Provides fixtures for:
- Environment and settings isolation
- A fixed reference date for validation and age categories
- Fresh seeded and empty registries
"""

from __future__ import annotations

from datetime import date
from typing import Generator

import pytest

from person_table.config import get_settings
from person_table.registry import PersonRegistry

FIXED_TODAY = date(2024, 1, 1)

_SETTINGS_ENV_VARS = (
    "APP_ENV",
    "LOG_LEVEL",
    "LOG_JSON",
    "REFERENCE_DATE",
    "REGISTRY_START_ID",
    "SEED_ON_START",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Generator[None, None, None]:
    """
    Run every test against default settings.

    Clears settings-related environment variables, moves away from any local
    `.env` file and resets the cached Settings instance.
    """
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fixed_today() -> date:
    """
    Reference date used for deterministic validation and classification.
    """
    return FIXED_TODAY


@pytest.fixture
def registry(fixed_today: date) -> PersonRegistry:
    """
    Registry loaded with the five seed rows (ids 1-5).
    """
    return PersonRegistry(today=lambda: fixed_today)


@pytest.fixture
def empty_registry(fixed_today: date) -> PersonRegistry:
    """
    Registry with no rows; the first accepted person gets id 1.
    """
    return PersonRegistry(seed=False, today=lambda: fixed_today)
