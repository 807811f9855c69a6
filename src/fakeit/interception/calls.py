"""Calls intercepted on fake objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EventAccessor(str, Enum):
    """How an intercepted event subscription changes the event."""

    ADD = "add"
    REMOVE = "remove"


@dataclass(frozen=True)
class InterceptedCall:
    """A method call, or a property read or write, on a fake."""

    member_name: str
    arguments: tuple[Any, ...] = ()
    keyword_arguments: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class EventCall:
    """A ``+=`` or ``-=`` on an event of a fake."""

    event_name: str
    accessor: EventAccessor
    handler: Any
