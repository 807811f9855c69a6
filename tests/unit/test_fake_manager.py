"""Tests for fakeit.interception.fake_manager."""

import pytest

from fakeit.config.settings import Settings
from fakeit.core.exceptions import NotAFakeError
from fakeit.interception.calls import EventAccessor, EventCall, InterceptedCall
from fakeit.interception.fake_manager import FakeManager, get_fake_manager
from fakeit.raising import Raise


class Widget:
    pass


class ReturnsAnswer:
    """Answers every method call with 42."""

    def __init__(self):
        self.applied = []

    def is_applicable_to(self, call):
        return isinstance(call, InterceptedCall)

    def apply(self, call):
        self.applied.append(call)
        return 42


@pytest.mark.unit
class TestFakeManager:
    def test_method_calls_return_none_by_default(self):
        manager = FakeManager(Widget)

        assert manager.intercept(InterceptedCall("render")) is None

    def test_calls_are_recorded_in_order(self):
        manager = FakeManager(Widget)
        first = InterceptedCall("render", (1,))
        second = EventCall("clicked", EventAccessor.ADD, print)

        manager.intercept(first)
        manager.intercept(second)

        assert manager.recorded_calls == [first, second]

    def test_recording_can_be_disabled(self):
        manager = FakeManager(Widget, Settings(record_calls=False))

        manager.intercept(InterceptedCall("render"))

        assert manager.recorded_calls == []

    def test_recording_follows_environment(self, monkeypatch):
        monkeypatch.setenv("FAKEIT_RECORD_CALLS", "false")

        manager = FakeManager(Widget)
        manager.intercept(InterceptedCall("render"))

        assert manager.recorded_calls == []

    def test_recorded_calls_is_a_snapshot(self):
        manager = FakeManager(Widget)
        manager.recorded_calls.append("not a call")

        assert manager.recorded_calls == []

    def test_event_calls_reach_event_rule(self):
        manager = FakeManager(Widget)

        manager.intercept(EventCall("clicked", EventAccessor.ADD, print))

        assert manager.event_handlers("clicked") == (print,)

    def test_raise_through_manager(self):
        manager = FakeManager(Widget)
        received = []
        manager.intercept(EventCall("clicked", EventAccessor.ADD, lambda s, e: received.append(e)))
        request = Raise.with_empty()

        manager.intercept(EventCall("clicked", EventAccessor.ADD, request.go))

        assert len(received) == 1

    def test_rule_added_first_takes_precedence(self):
        manager = FakeManager(Widget)
        rule = ReturnsAnswer()

        manager.add_rule_first(rule)
        result = manager.intercept(InterceptedCall("render"))
        manager.intercept(EventCall("clicked", EventAccessor.ADD, print))

        assert result == 42
        assert rule.applied == [InterceptedCall("render")]
        assert manager.event_handlers("clicked") == (print,)


@pytest.mark.unit
class TestGetFakeManager:
    def test_ordinary_object_is_not_a_fake(self):
        with pytest.raises(NotAFakeError) as exc_info:
            get_fake_manager(Widget())

        assert exc_info.value.details == {"type": "Widget"}

    def test_object_without_dict_is_not_a_fake(self):
        with pytest.raises(NotAFakeError):
            get_fake_manager(3)
