"""Generation of fake objects.

A fake is an instance of a generated subclass of the faked type.  The
subclass replaces every method, property and event of the faked type with
a member that hands the call to the fake's :class:`FakeManager`.  Dunder
methods are kept, except ``__repr__`` and abstract ones, so abstract base
classes can be faked.  Class and static methods have no instance to
dispatch on; they are answered by one manager per generated subclass,
stored on the subclass.
"""

from __future__ import annotations

import functools
import inspect
import types
from typing import Any, Callable, TypeVar

from fakeit.config.logging import get_logger
from fakeit.config.settings import Settings
from fakeit.core.event_args import EventHandler
from fakeit.core.events import Event
from fakeit.core.exceptions import FakeCreationError
from fakeit.core.messages import ExceptionMessage, render
from fakeit.interception.calls import EventAccessor, EventCall, InterceptedCall
from fakeit.interception.fake_manager import (
    FAKE_MANAGER_ATTRIBUTE,
    FakeManager,
    get_fake_manager,
)

logger = get_logger(__name__)

T = TypeVar("T")

_proxy_classes: dict[type, type] = {}


class InterceptedEvent(Event[Any]):
    """An event whose subscriptions are handled by the fake manager."""

    def add(self, instance: Any, handler: EventHandler[Any]) -> None:
        get_fake_manager(instance).intercept(EventCall(self.name, EventAccessor.ADD, handler))

    def remove(self, instance: Any, handler: EventHandler[Any]) -> None:
        get_fake_manager(instance).intercept(EventCall(self.name, EventAccessor.REMOVE, handler))

    def handlers(self, instance: Any) -> tuple[EventHandler[Any], ...]:
        return get_fake_manager(instance).event_handlers(self.name)


def _copy_metadata(
    interceptor: Callable[..., Any],
    name: str,
    original: Callable[..., Any] | None,
) -> Callable[..., Any]:
    if original is None or not callable(original):
        interceptor.__name__ = name
        return interceptor
    interceptor = functools.wraps(original)(interceptor)
    # wraps() copies the abstract flag along with the rest of __dict__.
    interceptor.__dict__.pop("__isabstractmethod__", None)
    return interceptor


def _intercepting_method(name: str, original: Callable[..., Any] | None) -> Callable[..., Any]:
    def method(self: Any, *args: Any, **kwargs: Any) -> Any:
        return get_fake_manager(self).intercept(InterceptedCall(name, args, kwargs))

    return _copy_metadata(method, name, original)


def _intercepting_classmethod(
    name: str, original: Callable[..., Any], class_manager: FakeManager
) -> classmethod:
    def method(cls: type, *args: Any, **kwargs: Any) -> Any:
        return class_manager.intercept(InterceptedCall(name, args, kwargs))

    return classmethod(_copy_metadata(method, name, original))


def _intercepting_staticmethod(
    name: str, original: Callable[..., Any], class_manager: FakeManager
) -> staticmethod:
    def function(*args: Any, **kwargs: Any) -> Any:
        return class_manager.intercept(InterceptedCall(name, args, kwargs))

    return staticmethod(_copy_metadata(function, name, original))


def _intercepting_property(name: str, original: property | None) -> property:
    def getter(self: Any) -> Any:
        return get_fake_manager(self).intercept(InterceptedCall(name))

    def setter(self: Any, value: Any) -> None:
        get_fake_manager(self).intercept(InterceptedCall(name, (value,)))

    if original is None:
        return property(getter)
    return property(
        getter,
        setter if original.fset is not None else None,
        doc=original.__doc__,
    )


def _intercepting_member(name: str, attr: Any, class_manager: FakeManager) -> Any:
    """Return the intercepting replacement for *attr*, or None to keep it."""
    if isinstance(attr, Event):
        return InterceptedEvent(attr.args_type, attr.__doc__)
    if isinstance(attr, property):
        return _intercepting_property(name, attr)
    if isinstance(attr, classmethod):
        return _intercepting_classmethod(name, attr.__func__, class_manager)
    if isinstance(attr, staticmethod):
        return _intercepting_staticmethod(name, attr.__func__, class_manager)
    if inspect.isfunction(attr):
        return _intercepting_method(name, attr)
    return None


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _intercepted_members(fake_type: type, class_manager: FakeManager) -> dict[str, Any]:
    members: dict[str, Any] = {}
    abstract = getattr(fake_type, "__abstractmethods__", frozenset())

    # Walk base first so the most derived definition of a name wins.
    for klass in reversed(fake_type.__mro__):
        if klass is object:
            continue
        for name, attr in vars(klass).items():
            replacement = None if _is_dunder(name) else _intercepting_member(name, attr, class_manager)
            if replacement is None:
                members.pop(name, None)
            else:
                members[name] = replacement

    # Abstract dunders, e.g. __len__ of a Sized subclass.
    for name in abstract:
        if name in members:
            continue
        attr = inspect.getattr_static(fake_type, name, None)
        members[name] = _intercepting_member(name, attr, class_manager) or _intercepting_method(
            name, None
        )

    return members


def _fake_repr(self: Any) -> str:
    return f"<Faked {get_fake_manager(self).fake_type.__qualname__}>"


def _generate_proxy_class(fake_type: type) -> type:
    class_manager = FakeManager(fake_type)
    members = _intercepted_members(fake_type, class_manager)
    members["__module__"] = fake_type.__module__
    members["__qualname__"] = f"Fake{fake_type.__qualname__}"
    members["__repr__"] = _fake_repr
    members[FAKE_MANAGER_ATTRIBUTE] = class_manager

    try:
        proxy = types.new_class(
            f"Fake{fake_type.__name__}",
            (fake_type,),
            exec_body=lambda namespace: namespace.update(members),
        )
    except TypeError as e:
        raise FakeCreationError(
            render(
                ExceptionMessage.PROXY_GENERATION_FAILED,
                type_name=fake_type.__qualname__,
                reason=e,
            ),
            details={"type": fake_type.__qualname__},
        ) from e

    logger.debug(
        "proxy.generated",
        fake_type=fake_type.__qualname__,
        intercepted=sorted(k for k in members if not _is_dunder(k) and k != FAKE_MANAGER_ATTRIBUTE),
    )
    class_manager.fake_object = proxy
    return proxy


def get_proxy_class(fake_type: type) -> type:
    """Return the (cached) generated subclass used to fake *fake_type*."""
    if not isinstance(fake_type, type):
        raise FakeCreationError(render(ExceptionMessage.NOT_A_CLASS, value=fake_type))
    if getattr(fake_type, "__final__", False):
        raise FakeCreationError(
            render(ExceptionMessage.FINAL_CLASS, type_name=fake_type.__qualname__),
            details={"type": fake_type.__qualname__},
        )

    proxy = _proxy_classes.get(fake_type)
    if proxy is None:
        proxy = _proxy_classes[fake_type] = _generate_proxy_class(fake_type)
    return proxy


def create_fake(fake_type: type[T], settings: Settings | None = None) -> T:
    """Create a fake instance of *fake_type* without running its ``__init__``."""
    proxy = get_proxy_class(fake_type)
    try:
        fake = object.__new__(proxy)
    except TypeError as e:
        raise FakeCreationError(
            render(
                ExceptionMessage.PROXY_GENERATION_FAILED,
                type_name=fake_type.__qualname__,
                reason=e,
            ),
            details={"type": fake_type.__qualname__},
        ) from e

    manager = FakeManager(fake_type, settings)
    manager.fake_object = fake
    vars(fake)[FAKE_MANAGER_ATTRIBUTE] = manager
    return fake
