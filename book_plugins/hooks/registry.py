"""Registry mapping host lifecycle events to plugin handlers.

This module provides :class:`HookRegistry`, which keeps the handlers for each
event in registration order and dispatches events to them:

* ``page`` is a pipeline: every handler receives the page returned by the
  previous one, and dispatch returns the final page.
* ``init``, ``start``, and ``navigation-change`` are notifications: every
  handler runs independently and dispatch returns ``None``.

Handlers are registered once at import time and the registry is then sealed.
There is no retry: the first failing handler aborts dispatch for that event
and the failure reaches the host as :class:`~book_plugins.errors.HookDispatchError`.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from book_plugins.errors import HookDispatchError, HookRegistrationError
from book_plugins.models import Page

from .events import EVENT_NAMES, PIPELINE_EVENTS, PageEvent, canonical_event_name

if typ.TYPE_CHECKING:
    from book_plugins.session import BuildSession

    from .events import HostEvent

Handler = typ.Callable[["BuildSession", typ.Any], typ.Any]

logger = logging.getLogger(__name__)


def _handler_name(handler: Handler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


class HookRegistry:
    """Ordered event-to-handler mapping with pipeline and notification dispatch.

    Examples
    --------
    >>> registry = HookRegistry()
    >>> registry.register("page", number_headings)  # doctest: +SKIP
    >>> registry.seal()
    >>> page = registry.dispatch(PageEvent(page), session)  # doctest: +SKIP
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {name: [] for name in EVENT_NAMES}
        self._sealed = False

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, event_name: str, handler: Handler) -> None:
        """Append ``handler`` to the handlers of ``event_name``.

        Parameters
        ----------
        event_name : str
            Host hook name; ``page-render`` and ``page.change`` are accepted as
            aliases of ``page`` and ``navigation-change``.
        handler : Handler
            Callable taking ``(session, event)``.

        Raises
        ------
        HookRegistrationError
            If the registry is sealed, the event is unknown, or the handler is
            already registered for the event.
        """
        name = canonical_event_name(event_name)
        if self._sealed:
            msg = f"Cannot register '{_handler_name(handler)}': registry is sealed"
            raise HookRegistrationError(msg)
        if name not in self._handlers:
            known = ", ".join(EVENT_NAMES)
            msg = f"Unknown event '{event_name}'. Known events: {known}"
            raise HookRegistrationError(msg)
        if handler in self._handlers[name]:
            msg = f"Handler '{_handler_name(handler)}' is already registered for '{name}'"
            raise HookRegistrationError(msg)
        self._handlers[name].append(handler)
        logger.debug("Registered '%s' for '%s'", _handler_name(handler), name)

    def hook(self, event_name: str) -> typ.Callable[[Handler], Handler]:
        """Return a decorator registering the decorated function for ``event_name``."""

        def _decorator(handler: Handler) -> Handler:
            self.register(event_name, handler)
            return handler

        return _decorator

    def seal(self) -> None:
        """Reject any further registration."""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        """Return ``True`` once :meth:`seal` has been called."""
        return self._sealed

    def handlers(self, event_name: str) -> tuple[Handler, ...]:
        """Return the handlers registered for ``event_name`` in order."""
        return tuple(self._handlers.get(canonical_event_name(event_name), ()))

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def dispatch(self, event: HostEvent, session: BuildSession) -> Page | None:
        """Run the handlers registered for ``event`` against ``session``.

        Parameters
        ----------
        event : HostEvent
            The event variant fired by the host.
        session : BuildSession
            The build session passed by reference to every handler.

        Returns
        -------
        Page or None
            The final :class:`~book_plugins.models.Page` for pipeline events,
            otherwise ``None``.

        Raises
        ------
        HookDispatchError
            If a handler raises (chained as ``__cause__``), or a pipeline
            handler returns something other than a page.
        """
        if event.name in PIPELINE_EVENTS:
            return self._run_pipeline(typ.cast("PageEvent", event), session)
        for handler in self._handlers[event.name]:
            self._call(handler, event, session)
        return None

    def _run_pipeline(self, event: PageEvent, session: BuildSession) -> Page:
        page = event.page
        for handler in self._handlers[event.name]:
            result = self._call(handler, dc.replace(event, page=page), session)
            if not isinstance(result, Page):
                msg = f"expected a Page, got {type(result).__name__}"
                raise HookDispatchError(event.name, _handler_name(handler), msg)
            page = result
        return page

    @staticmethod
    def _call(handler: Handler, event: HostEvent, session: BuildSession) -> typ.Any:
        try:
            return handler(session, event)
        except Exception as exc:
            raise HookDispatchError(event.name, _handler_name(handler), str(exc)) from exc


__all__ = ["Handler", "HookRegistry"]
