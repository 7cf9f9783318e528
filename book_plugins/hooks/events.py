"""Host lifecycle events modelled as a closed set of tagged variants.

Each event class carries a ``name`` matching the host hook it stands for and
only the fields that hook provides. Handlers therefore receive a concrete,
typed payload instead of an untyped argument bag.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from book_plugins.models import Page

if typ.TYPE_CHECKING:
    from book_plugins.config import RawConfig

INIT = "init"
PAGE = "page"
START = "start"
NAVIGATION_CHANGE = "navigation-change"

EVENT_NAMES = (INIT, PAGE, START, NAVIGATION_CHANGE)
PIPELINE_EVENTS = frozenset({PAGE})
EVENT_ALIASES = {"page-render": PAGE, "page.change": NAVIGATION_CHANGE}


@dc.dataclass(frozen=True, slots=True)
class InitEvent:
    """Fired once when the build starts, before any page is rendered."""

    name: typ.ClassVar[str] = INIT


@dc.dataclass(frozen=True, slots=True)
class PageEvent:
    """Fired once per content page; handlers return the page to publish."""

    page: Page
    name: typ.ClassVar[str] = PAGE


@dc.dataclass(frozen=True, slots=True)
class StartEvent:
    """Fired when the navigation panel is first rendered."""

    global_config: RawConfig | None = None
    name: typ.ClassVar[str] = START


@dc.dataclass(frozen=True, slots=True)
class NavigationChangeEvent:
    """Fired each time the reader moves to another page."""

    name: typ.ClassVar[str] = NAVIGATION_CHANGE


HostEvent = InitEvent | PageEvent | StartEvent | NavigationChangeEvent


def canonical_event_name(name: str) -> str:
    """Return the canonical hook name for ``name``, resolving known aliases.

    Examples
    --------
    >>> canonical_event_name("page-render")
    'page'
    >>> canonical_event_name("start")
    'start'
    """
    return EVENT_ALIASES.get(name, name)


__all__ = [
    "EVENT_ALIASES",
    "EVENT_NAMES",
    "INIT",
    "NAVIGATION_CHANGE",
    "PAGE",
    "PIPELINE_EVENTS",
    "START",
    "HostEvent",
    "InitEvent",
    "NavigationChangeEvent",
    "PageEvent",
    "StartEvent",
    "canonical_event_name",
]
