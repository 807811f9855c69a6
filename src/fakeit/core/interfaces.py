"""Protocols shared between the raise bridge and the interception engine.

The interception engine depends only on these Protocols, never on the
concrete classes that implement them.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from fakeit.core.event_args import EventArgs


@runtime_checkable
class EventRaiserArguments(Protocol):
    """Sender and payload captured by a raise request."""

    @property
    def sender(self) -> Any: ...

    @property
    def event_arguments(self) -> EventArgs: ...


@runtime_checkable
class FakeObjectCallRule(Protocol):
    """Decides how a fake answers an intercepted call."""

    def is_applicable_to(self, call: Any) -> bool: ...
    def apply(self, call: Any) -> Any: ...
