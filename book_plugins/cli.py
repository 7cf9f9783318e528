"""Cyclopts CLI entrypoint for running the book plugins over local files.

The ``book-plugins`` console script defined here fires the plugin lifecycle
the way the book generator would: it reads the plugin configuration from a
book manifest, annotates each page, decorates the navigation panel, and copies
the plugin assets next to the output. Option values can also be supplied via
``INPUT_*`` environment variables, which keeps CI invocations short.

Examples
--------
Annotate two chapters with the configuration from ``book.json``:

>>> from book_plugins.cli import app
>>> app.run(
...     ["annotate", "intro.md", "usage.md", "--book", "book.json"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import ANCRE_NAVIGATION, SIDEBAR_STYLE
from .host import annotate_book

DEFAULT_OUTPUT_DIR = Path("_book")

app = App(name="book-plugins", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _build_overrides(
    *,
    title: str | None,
    author: str | None,
    print_log: bool | None,
    anchors: bool | None,
) -> dict[str, dict[str, typ.Any]]:
    """Translate CLI flags into a raw configuration layer."""
    sidebar: dict[str, typ.Any] = {}
    if title is not None:
        sidebar["title"] = title
    if author is not None:
        sidebar["author"] = author
    if print_log is not None:
        sidebar["printLog"] = print_log
    overrides: dict[str, dict[str, typ.Any]] = {}
    if sidebar:
        overrides[SIDEBAR_STYLE] = sidebar
    if anchors:
        overrides[ANCRE_NAVIGATION] = {}
    return overrides


@app.command(help="Annotate rendered pages and the navigation panel.")
def annotate(
    pages: typ.Annotated[
        list[Path], Parameter(help="Page sources (HTML or Markdown) in summary order")
    ],
    *,
    book: typ.Annotated[
        Path | None, Parameter(help="Book manifest (book.json or book.yaml)")
    ] = None,
    summary: typ.Annotated[
        Path | None, Parameter(help="HTML of the navigation panel to decorate")
    ] = None,
    output_dir: typ.Annotated[
        Path, Parameter(help="Where to write the annotated files")
    ] = DEFAULT_OUTPUT_DIR,
    title: typ.Annotated[
        str | None, Parameter(help="Override sidebar-style.title")
    ] = None,
    author: typ.Annotated[
        str | None, Parameter(help="Override sidebar-style.author")
    ] = None,
    print_log: typ.Annotated[
        bool | None, Parameter(help="Override printLog to trace the handlers")
    ] = None,
    anchors: typ.Annotated[
        bool, Parameter(help="Enable ancre-navigation even if the manifest omits it")
    ] = False,
) -> None:
    """Run one build session over ``pages`` and print the written paths.

    Parameters
    ----------
    pages : list[Path]
        Page sources; markdown files are converted to HTML first.
    book : Path or None, optional
        Manifest supplying ``pluginsConfig``; when ``None`` only the CLI
        overrides configure the plugins.
    summary : Path or None, optional
        Navigation panel HTML; the decorated copy is written as
        ``summary.html``.
    output_dir : Path, optional
        Output folder, ``_book`` by default.
    title, author : str or None, optional
        Override the sidebar header values from the manifest.
    print_log : bool or None, optional
        Override ``printLog``.
    anchors : bool, optional
        Enable anchor navigation with default options.

    Returns
    -------
    None
        Writes the annotated artefacts and prints one ``wrote`` line per file.
    """
    overrides = _build_overrides(
        title=title, author=author, print_log=print_log, anchors=anchors
    )
    written = annotate_book(
        pages,
        output_dir=output_dir,
        manifest=book,
        summary=summary,
        overrides=overrides,
    )
    for path in written:
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``book-plugins`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
