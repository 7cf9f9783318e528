"""Lifecycle events and the registry that dispatches them to plugin handlers.

Exports
-------
- ``HookRegistry``: Ordered event-to-handler mapping.
- ``InitEvent``, ``PageEvent``, ``StartEvent``, ``NavigationChangeEvent``:
  Typed payloads for each host hook.

Examples
--------
>>> from book_plugins.hooks import InitEvent, PageEvent
>>> from book_plugins.plugins import registry
>>> registry.dispatch(InitEvent(), session)  # doctest: +SKIP
>>> page = registry.dispatch(PageEvent(page), session)  # doctest: +SKIP
"""

from .events import (
    EVENT_NAMES,
    PIPELINE_EVENTS,
    HostEvent,
    InitEvent,
    NavigationChangeEvent,
    PageEvent,
    StartEvent,
    canonical_event_name,
)
from .registry import Handler, HookRegistry

__all__ = [
    "EVENT_NAMES",
    "PIPELINE_EVENTS",
    "Handler",
    "HookRegistry",
    "HostEvent",
    "InitEvent",
    "NavigationChangeEvent",
    "PageEvent",
    "StartEvent",
    "canonical_event_name",
]
