"""Raising events on fake objects.

A fake's event is raised by attaching the handler of a raise request to it::

    fake.updated += Raise.with_(TemperatureChanged(21.5)).go

The fake's interception layer recognises the handler, pulls the captured
sender and arguments out of it and calls every handler subscribed to
``fake.updated``.  The handler itself is never called on that path.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Generic, overload

from fakeit.core.event_args import EventArgs, EventHandler, TArgs
from fakeit.core.exceptions import MisusedRaiseHandlerError
from fakeit.core.interfaces import EventRaiserArguments
from fakeit.core.messages import ExceptionMessage, render

_MISSING = object()

_WITH_SIGNATURE = inspect.Signature(
    [
        inspect.Parameter("sender", inspect.Parameter.POSITIONAL_OR_KEYWORD, default=None),
        inspect.Parameter("e", inspect.Parameter.POSITIONAL_OR_KEYWORD, default=_MISSING),
    ]
)


class Raise:
    """Builds raise requests for events on fake objects."""

    @overload
    @staticmethod
    def with_(e: TArgs) -> RaiseRequest[TArgs]: ...

    @overload
    @staticmethod
    def with_(sender: Any, e: TArgs) -> RaiseRequest[TArgs]: ...

    @staticmethod
    def with_(*arguments: Any, **keywords: Any) -> RaiseRequest[Any]:
        """Raise an event with the given arguments.

        ``with_(e)`` raises with no sender, ``with_(sender, e)`` raises with
        *sender*.  Both may be passed by keyword: ``with_(sender=s, e=args)``.
        Neither is validated.
        """
        if len(arguments) == 1 and not keywords:
            return RaiseRequest(None, arguments[0])
        bound = _WITH_SIGNATURE.bind(*arguments, **keywords)
        bound.apply_defaults()
        if bound.arguments["e"] is _MISSING:
            raise TypeError("with_() missing required argument: 'e'")
        return RaiseRequest(bound.arguments["sender"], bound.arguments["e"])

    @staticmethod
    def with_empty() -> RaiseRequest[EventArgs]:
        """Raise an event with no sender and ``EventArgs.EMPTY``."""
        return RaiseRequest(None, EventArgs.EMPTY)


class RaiseRequest(Generic[TArgs]):
    """Exposes an event handler to attach to an event of a fake object
    in order to raise that event.
    """

    __slots__ = ("_sender", "_event_arguments")

    def __init__(self, sender: Any, e: TArgs) -> None:
        object.__setattr__(self, "_sender", sender)
        object.__setattr__(self, "_event_arguments", e)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def go(self) -> EventHandler[TArgs]:
        """The handler to attach to the event to raise."""
        return self.now

    def now(self, sender: Any, e: TArgs) -> None:
        """Attach this handler to an event on a fake object to raise that event.

        Calling it, directly or through an event of an ordinary object,
        raises :class:`MisusedRaiseHandlerError`.
        """
        raise MisusedRaiseHandlerError(render(ExceptionMessage.NOW_CALLED_DIRECTLY))

    def __repr__(self) -> str:
        return f"<RaiseRequest {type(self._event_arguments).__name__}>"


@dataclass(frozen=True)
class _CapturedRaise:
    sender: Any
    event_arguments: EventArgs


def find_event_raiser(handler: Any) -> EventRaiserArguments | None:
    """Return the captured sender and arguments if *handler* came from a raise request.

    Any other handler, including the unbound ``RaiseRequest.now``, gives
    ``None``.
    """
    request = getattr(handler, "__self__", None)
    if not isinstance(request, RaiseRequest):
        return None
    if getattr(handler, "__func__", None) is not RaiseRequest.now:
        return None
    return _CapturedRaise(request._sender, request._event_arguments)
