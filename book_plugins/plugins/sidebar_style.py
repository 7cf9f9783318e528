"""The ``sidebar-style`` plugin: book title and author in the sidebar."""

from __future__ import annotations

import typing as typ

from book_plugins._constants import SIDEBAR_STYLE
from book_plugins.logs import safe_log
from book_plugins.sidebar import SidebarAnnotator

from .base import BookAssets, PluginDefinition

if typ.TYPE_CHECKING:
    from book_plugins.config import ResolvedConfig
    from book_plugins.hooks import HookRegistry, NavigationChangeEvent, StartEvent
    from book_plugins.session import BuildSession

PLUGIN = PluginDefinition(
    name=SIDEBAR_STYLE,
    book=BookAssets(assets="assets/sidebar-style"),
    description="Show the book title and author at the top of the sidebar.",
)

_annotator = SidebarAnnotator()


def on_start(session: BuildSession, event: StartEvent) -> None:
    """Decorate the panel when it is first rendered."""
    _decorate(session, session.resolve(event.global_config))


def on_navigation_change(session: BuildSession, event: NavigationChangeEvent) -> None:  # noqa: ARG001
    """Decorate the panel again; a no-op once the header is present."""
    _decorate(session, session.config)


def _decorate(session: BuildSession, config: ResolvedConfig) -> None:
    if session.panel is None:
        return
    state = _annotator.annotate(config, session.panel)
    if config.print_log:
        safe_log(session.log, f"sidebar-style: panel header {state.value}")


def register(registry: HookRegistry) -> None:
    """Register the plugin's handlers on ``registry``."""
    registry.register("start", on_start)
    registry.register("navigation-change", on_navigation_change)


__all__ = ["PLUGIN", "on_navigation_change", "on_start", "register"]
