"""Reference host driver firing the plugin lifecycle over files on disk.

The real host (the book generator) owns rendering, bundling, and the browser
side. This module reproduces just enough of its event contract to run the
plugins outside of it: :class:`BookBuild` fires ``init``, ``page``, ``start``,
and ``navigation-change`` against one :class:`~book_plugins.session.BuildSession`,
and :func:`annotate_book` wires that to manifest, page, and summary files for
the ``book-plugins`` CLI.

Example
-------
>>> from book_plugins.host import BookBuild
>>> from book_plugins.models import Page
>>> build = BookBuild({"sidebar-style": {"title": "Guide"}})
>>> build.start().title
'Guide'
>>> build.render_page(Page("intro.md", "<p>Hello</p>")).content
'<p>Hello</p>'
"""

from __future__ import annotations

import logging
import shutil
import typing as typ
from pathlib import Path

from markdown import markdown

from book_plugins.config import load_book_manifest, merge_raw_configs
from book_plugins.errors import SessionStateError
from book_plugins.hooks import InitEvent, NavigationChangeEvent, PageEvent, StartEvent
from book_plugins.logs import LogSink, default_log_sink
from book_plugins.models import Page
from book_plugins.plugins import PLUGINS, registry as default_registry
from book_plugins.session import BuildSession
from book_plugins.sidebar import NavigationPanel

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from book_plugins.config import RawConfig, ResolvedConfig
    from book_plugins.hooks import HookRegistry

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = frozenset({".md", ".markdown"})
MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "sane_lists"]
PANEL_FILENAME = "summary.html"
ASSETS_DIRNAME = "gitbook"


class BookBuild:
    """Drive one build session through the registered plugin hooks."""

    def __init__(
        self,
        raw_config: RawConfig | None = None,
        *,
        panel: NavigationPanel | None = None,
        registry: HookRegistry | None = None,
        log: LogSink | None = None,
    ) -> None:
        """Create the session for a new build.

        Parameters
        ----------
        raw_config : RawConfig, optional
            The book's ``pluginsConfig`` mapping.
        panel : NavigationPanel, optional
            Navigation panel decorated by the sidebar handlers.
        registry : HookRegistry, optional
            Registry to dispatch against; defaults to the plugins' registry.
        log : LogSink, optional
            Diagnostic sink; defaults to the ``book_plugins`` logger.
        """
        self.registry = registry or default_registry
        self.session = BuildSession(
            raw_config=raw_config, panel=panel, log=log or default_log_sink()
        )

    def start(self) -> ResolvedConfig:
        """Fire ``init`` and return the session's frozen configuration."""
        self.registry.dispatch(InitEvent(), self.session)
        return self.session.resolve()

    def render_page(self, page: Page) -> Page:
        """Fire ``page`` for one content page and return the page to publish."""
        self._require_started()
        result = self.registry.dispatch(PageEvent(page), self.session)
        return typ.cast("Page", result)

    def open_panel(self) -> None:
        """Fire ``start`` as the navigation panel is first rendered."""
        self._require_started()
        self.registry.dispatch(StartEvent(self.session.raw_config), self.session)

    def navigate(self) -> None:
        """Fire ``navigation-change`` as the reader moves to another page."""
        self._require_started()
        self.registry.dispatch(NavigationChangeEvent(), self.session)

    def _require_started(self) -> None:
        if not self.session.initialised:
            msg = "The 'init' event must be fired before any other event."
            raise SessionStateError(msg)


def read_page(path: Path, *, level: str | None = None) -> Page:
    """Load a page from disk, converting markdown sources to HTML."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in MARKDOWN_SUFFIXES:
        text = markdown(text, extensions=MARKDOWN_EXTENSIONS)
    return Page(path=path.name, content=text, level=level, title=path.stem)


def annotate_book(
    pages: cabc.Sequence[Path],
    *,
    output_dir: Path,
    manifest: Path | None = None,
    summary: Path | None = None,
    overrides: RawConfig | None = None,
    log: LogSink | None = None,
) -> list[Path]:
    """Run one build over ``pages`` and write the results to ``output_dir``.

    Parameters
    ----------
    pages : Sequence[Path]
        Page sources (HTML or markdown) in summary order; page ``n`` gets the
        summary level ``"n"``.
    output_dir : Path
        Directory receiving ``<stem>.html`` per page, the decorated panel, and
        the plugin assets.
    manifest : Path, optional
        ``book.json``/``book.yaml`` supplying the plugin configuration.
    summary : Path, optional
        HTML of the navigation panel; when omitted no panel is decorated.
    overrides : RawConfig, optional
        Configuration layered over the manifest.
    log : LogSink, optional
        Diagnostic sink for the build.

    Returns
    -------
    list[Path]
        Every file written, pages first.
    """
    raw = merge_raw_configs(
        load_book_manifest(manifest) if manifest else None, overrides
    )
    panel = None
    if summary is not None:
        panel = NavigationPanel(summary.read_text(encoding="utf-8"))
    build = BookBuild(raw, panel=panel, log=log)
    build.start()

    output_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for index, source in enumerate(pages, start=1):
        page = build.render_page(read_page(source, level=str(index)))
        target = output_dir / f"{source.stem}.html"
        target.write_text(page.content, encoding="utf-8")
        written.append(target)

    if panel is not None:
        build.open_panel()
        build.navigate()
        target = output_dir / PANEL_FILENAME
        target.write_text(panel.html(), encoding="utf-8")
        written.append(target)

    written.extend(copy_plugin_assets(output_dir / ASSETS_DIRNAME))
    return written


def copy_plugin_assets(destination: Path) -> list[Path]:
    """Copy every plugin's assets directory under ``destination``."""
    copied: list[Path] = []
    for plugin in PLUGINS:
        target = destination / plugin.name
        shutil.copytree(plugin.book.directory, target, dirs_exist_ok=True)
        logger.debug("Copied assets of '%s' to %s", plugin.name, target)
        copied.extend(target / sheet for sheet in plugin.book.css)
    return copied


__all__ = ["BookBuild", "annotate_book", "copy_plugin_assets", "read_page"]
