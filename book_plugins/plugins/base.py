"""Asset declarations shared by the plugin definitions."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parents[1]


@dc.dataclass(frozen=True, slots=True)
class BookAssets:
    """Static files a plugin hands to the host's bundler.

    Attributes
    ----------
    assets : str
        Assets directory, relative to the package root.
    css : tuple[str, ...]
        Stylesheets, relative to ``assets``.
    """

    assets: str
    css: tuple[str, ...] = ("style/plugin.css",)

    @property
    def directory(self) -> Path:
        """Return the absolute path of the assets directory."""
        return (PACKAGE_ROOT / self.assets).resolve()

    def stylesheets(self) -> list[Path]:
        """Return the absolute paths of the declared stylesheets."""
        return [self.directory / sheet for sheet in self.css]


@dc.dataclass(frozen=True, slots=True)
class PluginDefinition:
    """Name and assets of one book plugin."""

    name: str
    book: BookAssets
    description: str = ""


__all__ = ["BookAssets", "PluginDefinition"]
