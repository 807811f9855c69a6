"""Shared fixtures for fakeit tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from fakeit import A, Event, EventArgs
from fakeit.config import Settings, configure_logging, get_settings


@dataclass(frozen=True)
class TemperatureChanged(EventArgs):
    celsius: float


class Thermostat:
    """A small class with events, used as the faked type."""

    updated = Event(TemperatureChanged)
    reset = Event()

    def __init__(self, celsius: float = 20.0) -> None:
        self.celsius = celsius

    def set(self, celsius: float) -> None:
        self.celsius = celsius
        self.updated.fire(self, TemperatureChanged(celsius))

    def read(self) -> float:
        return self.celsius


@pytest.fixture(autouse=True, scope="session")
def _logging() -> None:
    configure_logging(Settings(log_level="DEBUG"))


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def thermostat_type() -> type[Thermostat]:
    return Thermostat


@pytest.fixture
def args_type() -> type[TemperatureChanged]:
    return TemperatureChanged


@pytest.fixture
def thermostat() -> Thermostat:
    return Thermostat()


@pytest.fixture
def fake_thermostat() -> Thermostat:
    return A.fake(Thermostat)
