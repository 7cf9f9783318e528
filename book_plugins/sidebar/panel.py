"""The long-lived navigation panel mutated by the ``sidebar-style`` plugin."""

from __future__ import annotations

import enum

from bs4 import BeautifulSoup, Tag

from book_plugins._constants import (
    BOOK_SUMMARY_SELECTOR,
    SIDEBAR_HEADER_SELECTOR,
    SUMMARY_ENTRY_SELECTOR,
)


class PanelState(enum.Enum):
    """Whether the panel's header slot holds the injected sidebar header."""

    ABSENT = "absent"
    PRESENT = "present"


class NavigationPanel:
    """Table-of-contents panel shared by every navigation event of a build.

    The panel wraps the summary HTML rendered by the host (a ``.book-summary``
    container holding the ``ul.summary`` list). Its :attr:`state` is always
    read from the markup itself, so any number of independent call paths
    agree on whether the header is already there.
    """

    def __init__(self, html: str) -> None:
        self._soup = BeautifulSoup(html, "html.parser")

    @property
    def state(self) -> PanelState:
        """Return :attr:`PanelState.PRESENT` when the header marker exists."""
        if self._soup.select_one(SIDEBAR_HEADER_SELECTOR) is None:
            return PanelState.ABSENT
        return PanelState.PRESENT

    def summary(self) -> Tag | None:
        """Return the ``.book-summary`` container, if the panel has one."""
        return self._soup.select_one(BOOK_SUMMARY_SELECTOR)

    def last_entry(self) -> Tag | None:
        """Return the last ``li`` of the summary list in document order."""
        entries = self._soup.select(SUMMARY_ENTRY_SELECTOR)
        return entries[-1] if entries else None

    def html(self) -> str:
        """Serialize the panel back to HTML."""
        return str(self._soup)

    def __str__(self) -> str:
        return self.html()


__all__ = ["NavigationPanel", "PanelState"]
