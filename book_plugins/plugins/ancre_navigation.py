"""The ``ancre-navigation`` plugin: heading anchors and page navigation."""

from __future__ import annotations

import typing as typ

from book_plugins._constants import ANCRE_NAVIGATION
from book_plugins.anchors import PageAnnotator

from .base import BookAssets, PluginDefinition

if typ.TYPE_CHECKING:
    from book_plugins.hooks import HookRegistry, InitEvent, PageEvent
    from book_plugins.models import Page
    from book_plugins.session import BuildSession

PLUGIN = PluginDefinition(
    name=ANCRE_NAVIGATION,
    book=BookAssets(assets="assets/ancre-navigation"),
    description="Number page headings and add an anchor navigation block.",
)

_annotator = PageAnnotator()


def on_init(session: BuildSession, event: InitEvent) -> None:  # noqa: ARG001
    """Resolve and freeze the build's configuration."""
    session.resolve()


def on_page(session: BuildSession, event: PageEvent) -> Page:
    """Return the page with anchored headings and navigation."""
    return _annotator.annotate(session.config, event.page, log=session.log)


def register(registry: HookRegistry) -> None:
    """Register the plugin's handlers on ``registry``."""
    registry.register("init", on_init)
    registry.register("page", on_page)


__all__ = ["PLUGIN", "on_init", "on_page", "register"]
