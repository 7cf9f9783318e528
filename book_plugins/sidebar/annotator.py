"""Insert the book title and author into the navigation panel.

:class:`SidebarAnnotator` implements the ``sidebar-style`` handler. On a
panel without a sidebar header and with ``title`` configured it:

1. prepends ``<div class="sidebar-header"><h1 class="title">…</h1></div>`` to
   ``.book-summary``;
2. overwrites the **last** entry of the summary list with an author credit
   when ``author`` is configured, or empties it otherwise.

The second step is destructive: whatever the last entry held before (usually
the host's "published with" link, but not necessarily) is replaced. Books
relying on that entry for their own content lose it; this matches the
long-standing behaviour of the plugin and is kept for compatibility, not as an
extension point.

Once the header is present every later event is a no-op. Without a title
nothing is ever inserted and the author setting has no visible effect.
"""

from __future__ import annotations

import typing as typ

from book_plugins._constants import (
    AUTHOR_CREDIT_PREFIX,
    AUTHOR_CREDIT_TEMPLATE,
    SIDEBAR_HEADER_TEMPLATE,
)
from book_plugins.templating import build_environment, render_fragment

from .panel import NavigationPanel, PanelState

if typ.TYPE_CHECKING:
    from pathlib import Path

    from book_plugins.config import ResolvedConfig


class SidebarAnnotator:
    """Idempotently add the sidebar header to a :class:`NavigationPanel`."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        env = build_environment(templates_dir)
        self._header_template = env.get_template(SIDEBAR_HEADER_TEMPLATE)
        self._credit_template = env.get_template(AUTHOR_CREDIT_TEMPLATE)

    def annotate(self, config: ResolvedConfig, panel: NavigationPanel) -> PanelState:
        """Insert the header into ``panel`` unless it is already present.

        Parameters
        ----------
        config : ResolvedConfig
            The session's frozen configuration.
        panel : NavigationPanel
            The shared panel, mutated in place.

        Returns
        -------
        PanelState
            The panel state after the call.
        """
        if panel.state is PanelState.PRESENT or not config.title:
            return panel.state
        summary = panel.summary()
        if summary is None:
            return panel.state

        summary.insert(0, render_fragment(self._header_template, title=config.title))
        last_entry = panel.last_entry()
        if last_entry is not None:
            last_entry.clear()
            if config.author:
                last_entry.append(
                    render_fragment(
                        self._credit_template,
                        prefix=AUTHOR_CREDIT_PREFIX,
                        author=config.author,
                    )
                )
        return panel.state


__all__ = ["SidebarAnnotator"]
