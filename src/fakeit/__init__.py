"""fakeit: fake objects whose events can be raised from tests."""

from fakeit.core.event_args import EventArgs, EventHandler
from fakeit.core.events import Event
from fakeit.core.exceptions import (
    EventAssignmentError,
    EventStorageError,
    FakeCreationError,
    FakeItError,
    MisusedRaiseHandlerError,
    NotAFakeError,
)
from fakeit.fake import A, Fake
from fakeit.raising import Raise, RaiseRequest

__all__ = [
    "A",
    "Event",
    "EventArgs",
    "EventAssignmentError",
    "EventHandler",
    "EventStorageError",
    "Fake",
    "FakeCreationError",
    "FakeItError",
    "MisusedRaiseHandlerError",
    "NotAFakeError",
    "Raise",
    "RaiseRequest",
]
