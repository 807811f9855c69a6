"""Event argument payloads.

Every event carries a payload deriving from :class:`EventArgs`.  Payloads
with data are usually declared as dataclasses::

    @dataclass(frozen=True)
    class TemperatureChanged(EventArgs):
        celsius: float
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, TypeVar


class EventArgs:
    """Base class for event payloads that carry no data.

    ``EventArgs.EMPTY`` is the canonical instance for events without data.
    """

    EMPTY: ClassVar[EventArgs]

    def __repr__(self) -> str:
        if type(self) is EventArgs:
            return "EventArgs.EMPTY" if self is EventArgs.EMPTY else "EventArgs()"
        return super().__repr__()


EventArgs.EMPTY = EventArgs()

TArgs = TypeVar("TArgs", bound=EventArgs)

# (sender, e) -> None
EventHandler = Callable[[Any, TArgs], None]
