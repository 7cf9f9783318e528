"""Load the plugin configuration from a book manifest file."""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from book_plugins.errors import ManifestError

MANIFEST_SECTION = "pluginsConfig"
YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def load_book_manifest(path: Path) -> dict[str, typ.Any]:
    """Return the raw plugin configuration stored in a book manifest.

    Parameters
    ----------
    path : Path
        Filesystem path to ``book.json`` or a YAML manifest (``book.yaml``).

    Returns
    -------
    dict[str, Any]
        The manifest's ``pluginsConfig`` object keyed by plugin namespace;
        empty when the manifest has no plugin configuration.

    Raises
    ------
    FileNotFoundError
        If the manifest does not exist at ``path``.
    ManifestError
        If the top-level structure or the ``pluginsConfig`` entry is not a
        mapping.
    json.JSONDecodeError, YAMLError
        If the manifest cannot be parsed.

    Examples
    --------
    >>> from pathlib import Path
    >>> raw = load_book_manifest(Path("book.json"))  # doctest: +SKIP
    >>> sorted(raw)  # doctest: +SKIP
    ['ancre-navigation', 'sidebar-style']
    """
    if not path.exists():
        msg = f"Book manifest '{path}' not found."
        raise FileNotFoundError(msg)

    with path.open("r", encoding="utf-8") as handle:
        if path.suffix.lower() in YAML_SUFFIXES:
            loader = YAML(typ="safe")
            loader.version = (1, 2)
            loaded = loader.load(handle)
        else:
            loaded = json.load(handle)
    loaded = loaded or {}
    if not isinstance(loaded, dict):
        msg = f"Top-level structure of '{path}' must be a mapping."
        raise ManifestError(msg)

    section = loaded.get(MANIFEST_SECTION) or {}
    if not isinstance(section, dict):
        msg = f"'{MANIFEST_SECTION}' in '{path}' must be a mapping."
        raise ManifestError(msg)
    return dict(section)


__all__ = ["MANIFEST_SECTION", "load_book_manifest"]
