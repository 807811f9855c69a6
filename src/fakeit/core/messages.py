"""Human-readable diagnostic messages.

Templates use ``str.format`` placeholders and are rendered with
:func:`render`.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ExceptionMessage(str, Enum):
    """Message templates for the errors raised by fakeit."""

    NOW_CALLED_DIRECTLY = (
        "The now method on the event raise is not meant to be called directly, "
        "only use it to register to an event on a fake object that you want to "
        "be raised."
    )
    EVENT_ASSIGNMENT = (
        "The event '{event_name}' can only be subscribed to with += or "
        "unsubscribed from with -=, not assigned or deleted."
    )
    EVENT_STORAGE = (
        "The event '{event_name}' cannot keep handlers for {type_name} instances: "
        "a class using __slots__ must include '__weakref__' in them."
    )
    NOT_A_CLASS = "Only classes can be faked, got {value!r}."
    FINAL_CLASS = "The type {type_name} is marked final and cannot be faked."
    PROXY_GENERATION_FAILED = "No fake could be generated for {type_name}: {reason}"
    NOT_A_FAKE = "The object {value!r} is not recognized as a fake object."
    UNKNOWN_LOG_LEVEL = "Unknown log level '{level}'."


def render(message: ExceptionMessage, **kwargs: Any) -> str:
    """Fill in the placeholders of *message*."""
    return message.value.format(**kwargs)
