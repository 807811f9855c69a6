"""Per-fake interception state."""

from __future__ import annotations

from typing import Any

from fakeit.config.logging import get_logger
from fakeit.config.settings import Settings, get_settings
from fakeit.core.exceptions import NotAFakeError
from fakeit.core.interfaces import FakeObjectCallRule
from fakeit.core.messages import ExceptionMessage, render
from fakeit.interception.rules import DefaultReturnValueRule, EventRule

logger = get_logger(__name__)

FAKE_MANAGER_ATTRIBUTE = "_fakeit_manager"


class FakeManager:
    """Receives every intercepted call of one fake object.

    Calls are recorded, then answered by the first rule that applies.
    Rules are tried in order: rules added with :meth:`add_rule_first`,
    then the event rule, then the default return value rule.
    """

    def __init__(self, fake_type: type, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        self.fake_type = fake_type
        self.fake_object: Any = None
        self._record_calls = settings.record_calls
        self._recorded_calls: list[Any] = []
        self._event_rule = EventRule()
        self._rules: list[FakeObjectCallRule] = [self._event_rule, DefaultReturnValueRule()]

    def add_rule_first(self, rule: FakeObjectCallRule) -> None:
        """Give *rule* precedence over every rule added before it."""
        self._rules.insert(0, rule)

    def intercept(self, call: Any) -> Any:
        """Record *call* and return the answer of the first applicable rule."""
        if self._record_calls:
            self._recorded_calls.append(call)

        for rule in self._rules:
            if rule.is_applicable_to(call):
                logger.debug(
                    "fake_manager.intercept",
                    fake_type=self.fake_type.__name__,
                    member=getattr(call, "member_name", None) or getattr(call, "event_name", None),
                    rule=type(rule).__name__,
                )
                return rule.apply(call)
        return None

    @property
    def recorded_calls(self) -> list[Any]:
        return list(self._recorded_calls)

    def event_handlers(self, event_name: str) -> tuple[Any, ...]:
        return self._event_rule.handlers(event_name)


def get_fake_manager(fake: Any) -> FakeManager:
    """Return the manager of *fake*, or raise ``NotAFakeError``."""
    manager = getattr(fake, "__dict__", {}).get(FAKE_MANAGER_ATTRIBUTE)
    if not isinstance(manager, FakeManager):
        raise NotAFakeError(
            render(ExceptionMessage.NOT_A_FAKE, value=fake),
            details={"type": type(fake).__name__},
        )
    return manager
