"""Rules deciding how a fake answers intercepted calls."""

from __future__ import annotations

from typing import Any

from fakeit.config.logging import get_logger
from fakeit.core.events import HandlerList
from fakeit.core.interfaces import EventRaiserArguments
from fakeit.interception.calls import EventAccessor, EventCall
from fakeit.raising import find_event_raiser

logger = get_logger(__name__)


class EventRule:
    """Keeps the subscribers of a fake's events and raises them on request.

    Subscribing the handler of a raise request does not subscribe it:
    every current subscriber of the event is called with the captured
    sender and arguments instead.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, HandlerList[Any]] = {}

    def is_applicable_to(self, call: Any) -> bool:
        return isinstance(call, EventCall)

    def apply(self, call: EventCall) -> None:
        if call.accessor is EventAccessor.REMOVE:
            subscribers = self._subscribers.get(call.event_name)
            if subscribers is not None:
                subscribers.unsubscribe(call.handler)
            return

        raiser = find_event_raiser(call.handler)
        if raiser is not None:
            self._raise(call.event_name, raiser)
            return

        self._subscribers.setdefault(call.event_name, HandlerList()).subscribe(call.handler)

    def handlers(self, event_name: str) -> tuple[Any, ...]:
        """Current subscribers of *event_name*, in subscription order."""
        return tuple(self._subscribers.get(event_name, ()))

    def _raise(self, event_name: str, raiser: EventRaiserArguments) -> None:
        subscribers = self._subscribers.get(event_name, HandlerList())
        log = logger.bind(event_name=event_name, subscriber_count=len(subscribers))
        log.debug("event_rule.raise")
        subscribers.publish(raiser.sender, raiser.event_arguments)


class DefaultReturnValueRule:
    """Answers every call that no other rule handled with ``None``."""

    def is_applicable_to(self, call: Any) -> bool:
        return True

    def apply(self, call: Any) -> None:
        return None
