"""Shared test fixtures for json_locale tests."""

from __future__ import annotations

import pytest

from json_locale.config import configure, reset_configuration
from json_locale.translates import Translatable


@pytest.fixture(autouse=True)
def _reset_configuration():
    """Every test starts and ends with the default configuration."""
    reset_configuration()
    yield
    reset_configuration()


@pytest.fixture
def make_host():
    """Factory for fresh Translatable classes (one per call)."""

    def _make(name: str = "Klass") -> type[Translatable]:
        return type(name, (Translatable,), {})

    return _make


@pytest.fixture
def es_en_de() -> None:
    """Configure es/en/de with generated raw accessors."""
    configure(available_locales=["es", "en", "de"], set_missing_accessor=True)
