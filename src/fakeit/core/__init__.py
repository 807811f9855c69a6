"""Core types for fakeit."""

from fakeit.core.event_args import EventArgs, EventHandler
from fakeit.core.events import BoundEvent, Event, HandlerList
from fakeit.core.exceptions import (
    ConfigurationError,
    EventAssignmentError,
    EventStorageError,
    FakeCreationError,
    FakeItError,
    MisusedRaiseHandlerError,
    NotAFakeError,
)

__all__ = [
    "BoundEvent",
    "ConfigurationError",
    "Event",
    "EventArgs",
    "EventAssignmentError",
    "EventHandler",
    "EventStorageError",
    "FakeCreationError",
    "FakeItError",
    "HandlerList",
    "MisusedRaiseHandlerError",
    "NotAFakeError",
]
