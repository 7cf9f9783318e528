"""Number page headings and inject an anchor navigation block.

:class:`PageAnnotator` implements the ``ancre-navigation`` page handler. For a
page containing ``h1`` to ``h3`` headings it gives every heading a stable id,
optionally prefixes hierarchical numbering, and inserts a navigation block
linking to each heading plus an optional back-to-top link.

The transformation is pure: numbering counters and anchor bookkeeping live in
the call, so the same configuration and content always produce the same
output regardless of the order in which the host renders pages. Pages without
headings, pages carrying the ``<!-- ex_nonav -->`` marker, and books that do
not configure the plugin are returned unchanged, as the very same object.

Example
-------
>>> from book_plugins.anchors import PageAnnotator
>>> from book_plugins.config import resolve_config
>>> from book_plugins.models import Page
>>> config = resolve_config({"ancre-navigation": {}})
>>> page = Page("intro.md", "<h1>Intro</h1><p>Body</p>")
>>> annotated = PageAnnotator().annotate(config, page)
>>> 'id="intro"' in annotated.content
True
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from bs4 import BeautifulSoup, NavigableString, Tag

from book_plugins._constants import (
    ANCHOR_NAVIGATION_ID,
    ANCHOR_NAVIGATION_TEMPLATE,
    GO_TOP_ID,
    GO_TOP_TEMPLATE,
    NO_NAV_MARKER,
    TOC_PLACEHOLDER_TAG,
)
from book_plugins.config import AnchorMode, AnchorOptions
from book_plugins.logs import LogSink, safe_log
from book_plugins.templating import build_environment, render_fragment

if typ.TYPE_CHECKING:
    from pathlib import Path

    from book_plugins.config import ResolvedConfig
    from book_plugins.models import Page

HEADING_TAGS = ("h1", "h2", "h3")
HEADING_PATTERN = re.compile(r"<h[1-3][\s>/]", re.IGNORECASE)


@dc.dataclass(frozen=True, slots=True)
class AnchorEntry:
    """One heading listed in the page navigation block.

    Attributes
    ----------
    level : int
        Navigation depth (1 to 3), relative to the highest heading on the page.
    anchor : str
        Id assigned to the heading.
    label : str
        Heading text without numbering.
    number : str
        Hierarchical number prefixed to the heading, or ``""``.
    """

    level: int
    anchor: str
    label: str
    number: str


class PageAnnotator:
    """Inject heading anchors and navigation into rendered page content."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the annotator and load its templates.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing the Jinja templates; defaults to the package
            templates.
        """
        env = build_environment(templates_dir)
        self._navigation_template = env.get_template(ANCHOR_NAVIGATION_TEMPLATE)
        self._go_top_template = env.get_template(GO_TOP_TEMPLATE)

    def annotate(
        self, config: ResolvedConfig, page: Page, *, log: LogSink | None = None
    ) -> Page:
        """Return ``page`` with numbered, anchored headings and navigation.

        Parameters
        ----------
        config : ResolvedConfig
            The session's frozen configuration.
        page : Page
            Page handed over by the host.
        log : LogSink, optional
            Receives one diagnostic record when ``config.print_log`` is set.

        Returns
        -------
        Page
            A modified copy of ``page``, or ``page`` itself when there is
            nothing to annotate.
        """
        if config.print_log:
            safe_log(log, f"ancre-navigation: annotating '{page.path}'")
        options = config.anchors
        if not options.enabled or NO_NAV_MARKER in page.content:
            return page
        if not HEADING_PATTERN.search(page.content):
            return page

        soup = BeautifulSoup(page.content, "html.parser")
        entries = self._anchor_headings(soup, options, page.level)
        if not entries:
            return page

        navigation = render_fragment(
            self._navigation_template,
            element_id=ANCHOR_NAVIGATION_ID,
            mode=str(options.mode),
            style=options.style,
            entries=entries,
        )
        self._place_navigation(soup, navigation, options.mode)
        if options.show_go_top:
            soup.append(render_fragment(self._go_top_template, element_id=GO_TOP_ID))
        return page.with_content(str(soup))

    def _anchor_headings(
        self, soup: BeautifulSoup, options: AnchorOptions, page_level: str | None
    ) -> list[AnchorEntry]:
        """Assign ids and numbers to the listed headings, returning their entries."""
        headings = [
            heading
            for heading in soup.find_all(HEADING_TAGS)
            if options.multiple_h1 or heading.name != "h1"
        ]
        if not headings:
            return []

        top_rank = min(_rank(heading) for heading in headings)
        used: set[str] = {str(tag["id"]) for tag in soup.find_all(id=True)}
        counters = [0, 0, 0]
        entries: list[AnchorEntry] = []
        for index, heading in enumerate(headings, start=1):
            level = _rank(heading) - top_rank + 1
            _advance(counters, level)
            label = heading.get_text(" ", strip=True)
            anchor = heading.get("id")
            if not anchor:
                anchor = _unique_anchor(_slugify(label) or f"anchor-{index}", used)
                heading["id"] = anchor
            number = ""
            if options.show_level:
                number = _format_number(
                    counters[:level],
                    page_level if options.associated_with_summary else None,
                )
                heading.insert(0, NavigableString(f"{number} "))
            entries.append(AnchorEntry(level, str(anchor), label, number))
        return entries

    @staticmethod
    def _place_navigation(soup: BeautifulSoup, navigation: Tag, mode: AnchorMode) -> None:
        """Insert the navigation block and drop any unused TOC placeholders."""
        placeholder = soup.find(TOC_PLACEHOLDER_TAG)
        if mode is AnchorMode.PAGE_TOP and isinstance(placeholder, Tag):
            placeholder.replace_with(navigation)
        elif mode is AnchorMode.PAGE_TOP:
            soup.insert(0, navigation)
        else:
            soup.append(navigation)
        for leftover in soup.find_all(TOC_PLACEHOLDER_TAG):
            leftover.decompose()


def _rank(heading: Tag) -> int:
    return int(heading.name[1])


def _advance(counters: list[int], level: int) -> None:
    """Count a heading at ``level``, resetting deeper counters."""
    for parent in range(level - 1):
        counters[parent] = counters[parent] or 1
    counters[level - 1] += 1
    for deeper in range(level, len(counters)):
        counters[deeper] = 0


def _format_number(counters: list[int], page_level: str | None) -> str:
    """Return ``"1.2."`` style numbering, prefixed by the page's summary level.

    Examples
    --------
    >>> _format_number([1, 2], None)
    '1.2.'
    >>> _format_number([3], "2.1")
    '2.1.3.'
    """
    parts = [str(value) for value in counters]
    if page_level:
        parts.insert(0, page_level.strip(". "))
    return ".".join(parts) + "."


def _slugify(value: str) -> str:
    """Convert heading text into a lowercase hyphen-separated slug."""
    return re.sub(r"[^\w]+", "-", value.lower()).strip("-_")


def _unique_anchor(base: str, used: set[str]) -> str:
    """Return a unique anchor, appending numeric suffixes and mutating ``used``."""
    candidate = base
    suffix = 2
    while candidate in used:
        candidate = f"{base}-{suffix}"
        suffix += 1
    used.add(candidate)
    return candidate


__all__ = ["AnchorEntry", "HEADING_TAGS", "PageAnnotator"]
