"""Load, merge, and resolve the plugins' book configuration.

This subpackage reads the book manifest (``book.json`` or ``book.yaml``),
merges it with override layers, and resolves the ``ancre-navigation`` and
``sidebar-style`` namespaces into a frozen :class:`ResolvedConfig` that the
page and sidebar handlers consume. The primary entry points are
:func:`load_book_manifest`, :func:`merge_raw_configs`, and
:class:`ConfigStore`.

Examples
--------
>>> from pathlib import Path
>>> from book_plugins.config import ConfigStore, load_book_manifest
>>> raw = load_book_manifest(Path("book.json"))  # doctest: +SKIP
>>> ConfigStore().resolve(raw).title  # doctest: +SKIP
'Guide'
"""

from .helpers import merge_raw_configs
from .loader import load_book_manifest
from .models import (
    AnchorMode,
    AnchorOptions,
    NavigationStyle,
    RawConfig,
    ResolvedConfig,
)
from .store import ConfigStore, resolve_config

__all__ = [
    "AnchorMode",
    "AnchorOptions",
    "ConfigStore",
    "NavigationStyle",
    "RawConfig",
    "ResolvedConfig",
    "load_book_manifest",
    "merge_raw_configs",
    "resolve_config",
]
