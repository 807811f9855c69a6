"""Custom exceptions for fakeit."""


class FakeItError(Exception):
    """Base exception for all fakeit errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(FakeItError):
    """Raised when there's a configuration problem."""

    pass


class MisusedRaiseHandlerError(FakeItError):
    """Raised when a raise handler is invoked instead of being attached to a fake event."""

    pass


class EventAssignmentError(FakeItError):
    """Raised when an event attribute is assigned or deleted instead of subscribed to."""

    pass


class FakeCreationError(FakeItError):
    """Raised when a fake cannot be created for the requested type."""

    pass


class NotAFakeError(FakeItError):
    """Raised when a fake manager is requested for an ordinary object."""

    pass


class EventStorageError(FakeItError):
    """Raised when an event cannot keep handlers for an instance of its owner."""

    pass
