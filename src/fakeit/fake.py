"""Entry points for creating and inspecting fakes."""

from __future__ import annotations

from typing import Any, TypeVar

from fakeit.config.settings import Settings
from fakeit.core.exceptions import NotAFakeError
from fakeit.interception.fake_manager import FakeManager, get_fake_manager
from fakeit.interception.proxy import create_fake

T = TypeVar("T")


class A:
    """Creates fakes: ``A.fake(Thermostat)``."""

    @staticmethod
    def fake(fake_type: type[T], settings: Settings | None = None) -> T:
        return create_fake(fake_type, settings)


class Fake:
    """Access to the machinery behind a fake."""

    @staticmethod
    def get_fake_manager(fake: Any) -> FakeManager:
        return get_fake_manager(fake)

    @staticmethod
    def is_fake(value: Any) -> bool:
        try:
            get_fake_manager(value)
        except NotAFakeError:
            return False
        return True
