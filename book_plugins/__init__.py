"""Book generator plugins adding heading anchors and a styled sidebar.

This package implements two host plugins -- ``ancre-navigation`` and
``sidebar-style`` -- on top of a small configuration and hook-dispatch core,
plus a ``book-plugins`` CLI that runs them over local files.

Exports
-------
- ``BookBuild``: Drive one build session through the plugin hooks.
- ``BuildSession``: Session context handed to every handler.
- ``registry``: The sealed hook registry holding both plugins' handlers.
- ``app`` / ``main``: Cyclopts application and console entry point.

Examples
--------
>>> from book_plugins import BookBuild
>>> build = BookBuild({"sidebar-style": {"title": "Guide"}})
>>> build.start().title
'Guide'
"""

from __future__ import annotations

from .cli import app, main
from .host import BookBuild
from .plugins import registry
from .session import BuildSession

__all__ = ["BookBuild", "BuildSession", "app", "main", "registry"]
