"""Shared pytest fixtures."""

import logging

import pytest

from palette_core.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached per process; drop the cache around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def engine_events(caplog):
    """Capture engine events emitted on the ``palette_core.events`` logger."""
    caplog.set_level(logging.DEBUG, logger="palette_core.events")
    return caplog


@pytest.fixture
def sample_hexes() -> list[str]:
    return [
        "#000000",
        "#FFFFFF",
        "#FF0000",
        "#00FF00",
        "#0000FF",
        "#808080",
        "#3399CC",
        "#1A2B3C",
        "#FF7F50",
        "#9DC183",
        "#722F37",
        "#E6E6FA",
        "#FF0001",
        "#010203",
    ]
