"""Per-event values handed to the plugin handlers by the host."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(frozen=True, slots=True)
class Page:
    """A rendered content page passed through the ``page`` hook.

    Handlers treat the page as a value: they read it and return either the
    same instance or a modified copy, and never keep a reference to it.

    Attributes
    ----------
    path : str
        Path of the page relative to the book root (for example
        ``"chapter-1/intro.md"``).
    content : str
        Rendered HTML body of the page.
    level : str or None
        Summary numbering of the page (for example ``"1.2"``), when the host
        knows it.
    title : str or None
        Page title from the summary, when available.
    """

    path: str
    content: str
    level: str | None = None
    title: str | None = None

    def with_content(self, content: str) -> Page:
        """Return a copy of the page carrying ``content``."""
        return dc.replace(self, content=content)


__all__ = ["Page"]
