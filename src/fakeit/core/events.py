"""Events that test code can subscribe to with ``+=``.

An event is declared as a class attribute::

    class Thermostat:
        updated = Event(TemperatureChanged)

        def set(self, celsius: float) -> None:
            self.updated.fire(self, TemperatureChanged(celsius))

and subscribed to on an instance::

    thermostat.updated += on_updated
    thermostat.updated -= on_updated

Handlers are called synchronously in subscription order.
"""

from __future__ import annotations

import weakref
from typing import Any, Generic, Iterator

from fakeit.core.event_args import EventArgs, EventHandler, TArgs
from fakeit.core.exceptions import EventAssignmentError, EventStorageError
from fakeit.core.messages import ExceptionMessage, render


class HandlerList(Generic[TArgs]):
    """Ordered handlers of a single event."""

    def __init__(self) -> None:
        self._handlers: list[EventHandler[TArgs]] = []

    def subscribe(self, handler: EventHandler[TArgs]) -> None:
        """Register *handler*; registering it twice calls it twice."""
        self._handlers.append(handler)

    def unsubscribe(self, handler: EventHandler[TArgs]) -> None:
        """Remove the most recent registration of *handler*, if any."""
        for index in range(len(self._handlers) - 1, -1, -1):
            if self._handlers[index] == handler:
                del self._handlers[index]
                return

    def publish(self, sender: Any, e: TArgs) -> None:
        """Call every handler registered at the time of the call."""
        for handler in tuple(self._handlers):
            handler(sender, e)

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[EventHandler[TArgs]]:
        return iter(tuple(self._handlers))


class Event(Generic[TArgs]):
    """Class-level declaration of an event carrying ``args_type`` payloads."""

    def __init__(self, args_type: type[TArgs] = EventArgs, doc: str | None = None) -> None:  # type: ignore[assignment]
        self.args_type = args_type
        self.name = ""
        self._storage_name = ""
        # Instances without a __dict__ (__slots__), by id() until collected.
        self._slotted_handlers: dict[int, HandlerList[TArgs]] = {}
        self.__doc__ = doc

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self._storage_name = f"_{name}_handlers"

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return BoundEvent(self, instance)

    def __set__(self, instance: Any, value: Any) -> None:
        # ``obj.event += handler`` writes the BoundEvent back after __iadd__.
        if isinstance(value, BoundEvent) and value.event is self and value.instance is instance:
            return
        raise EventAssignmentError(
            render(ExceptionMessage.EVENT_ASSIGNMENT, event_name=self.name),
            details={"event": self.name},
        )

    def __delete__(self, instance: Any) -> None:
        raise EventAssignmentError(
            render(ExceptionMessage.EVENT_ASSIGNMENT, event_name=self.name),
            details={"event": self.name},
        )

    def add(self, instance: Any, handler: EventHandler[TArgs]) -> None:
        self._handler_list(instance).subscribe(handler)

    def remove(self, instance: Any, handler: EventHandler[TArgs]) -> None:
        self._handler_list(instance).unsubscribe(handler)

    def handlers(self, instance: Any) -> tuple[EventHandler[TArgs], ...]:
        return tuple(self._handler_list(instance))

    def _handler_list(self, instance: Any) -> HandlerList[TArgs]:
        try:
            storage = vars(instance)
        except TypeError:
            return self._slotted_handler_list(instance)
        return storage.setdefault(self._storage_name, HandlerList())

    def _slotted_handler_list(self, instance: Any) -> HandlerList[TArgs]:
        key = id(instance)
        handlers = self._slotted_handlers.get(key)
        if handlers is not None:
            return handlers
        try:
            weakref.finalize(instance, self._slotted_handlers.pop, key, None)
        except TypeError as e:
            raise EventStorageError(
                render(
                    ExceptionMessage.EVENT_STORAGE,
                    event_name=self.name,
                    type_name=type(instance).__qualname__,
                ),
                details={"event": self.name, "type": type(instance).__qualname__},
            ) from e
        handlers = self._slotted_handlers[key] = HandlerList()
        return handlers

    def __repr__(self) -> str:
        return f"<Event {self.name}({self.args_type.__name__})>"


class BoundEvent(Generic[TArgs]):
    """An event as seen through one instance."""

    __slots__ = ("event", "instance")

    def __init__(self, event: Event[TArgs], instance: Any) -> None:
        self.event = event
        self.instance = instance

    def __iadd__(self, handler: EventHandler[TArgs]) -> BoundEvent[TArgs]:
        self.event.add(self.instance, handler)
        return self

    def __isub__(self, handler: EventHandler[TArgs]) -> BoundEvent[TArgs]:
        self.event.remove(self.instance, handler)
        return self

    @property
    def handlers(self) -> tuple[EventHandler[TArgs], ...]:
        """Handlers currently subscribed, in subscription order."""
        return self.event.handlers(self.instance)

    def fire(self, sender: Any, e: TArgs) -> None:
        """Invoke every subscribed handler with ``(sender, e)``."""
        for handler in self.handlers:
            handler(sender, e)

    def __repr__(self) -> str:
        return f"<BoundEvent {self.event.name} of {type(self.instance).__name__}>"
