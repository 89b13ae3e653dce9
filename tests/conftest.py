import os

import pytest
from typer.testing import CliRunner

from hotel_rooms.cli.main import build_application
from hotel_rooms.core import HotelConfig
from hotel_rooms.rooms import RoomRegistry


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep HOTEL_* variables from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("HOTEL_"):
            monkeypatch.delenv(key)


@pytest.fixture
def registry():
    return RoomRegistry()


@pytest.fixture
def hotel():
    return build_application(HotelConfig())


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    return CliRunner()
