"""Exception types raised by the book plugins."""

from __future__ import annotations


class PluginError(RuntimeError):
    """Base class for errors raised by the book plugins."""


class HookRegistrationError(PluginError):
    """Raised when a hook handler cannot be registered."""


class HookDispatchError(PluginError):
    """Raised when a hook handler fails while an event is dispatched.

    When the handler itself raised, that exception is chained as
    ``__cause__``. A pipeline handler returning something other than a page
    raises this error with no cause.
    """

    def __init__(self, event_name: str, handler_name: str, detail: str) -> None:
        self.event_name = event_name
        self.handler_name = handler_name
        super().__init__(
            f"Handler '{handler_name}' failed during '{event_name}': {detail}"
        )


class SessionStateError(PluginError):
    """Raised when session state is read before the build was initialised."""


class ManifestError(ValueError):
    """Raised when a book manifest is readable but structurally invalid."""


__all__ = [
    "HookDispatchError",
    "HookRegistrationError",
    "ManifestError",
    "PluginError",
    "SessionStateError",
]
