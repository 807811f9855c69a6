"""Interception of calls on fake objects."""

from fakeit.interception.calls import EventAccessor, EventCall, InterceptedCall
from fakeit.interception.fake_manager import FakeManager, get_fake_manager
from fakeit.interception.proxy import create_fake, get_proxy_class
from fakeit.interception.rules import DefaultReturnValueRule, EventRule

__all__ = [
    "DefaultReturnValueRule",
    "EventAccessor",
    "EventCall",
    "EventRule",
    "FakeManager",
    "InterceptedCall",
    "create_fake",
    "get_fake_manager",
    "get_proxy_class",
]
