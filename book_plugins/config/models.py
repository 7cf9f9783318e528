"""Typed dataclasses describing resolved plugin configuration."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

RawConfig = typ.Mapping[str, typ.Any]
"""Book manifest ``pluginsConfig`` object keyed by plugin namespace."""


class AnchorMode(enum.StrEnum):
    """Where the page navigation block is placed."""

    FLOAT = "float"
    PAGE_TOP = "pageTop"


@dc.dataclass(frozen=True, slots=True)
class NavigationStyle:
    """Icon classes used when rendering the page navigation block."""

    show_level_icon: bool = False
    level1_icon: str = "fa fa-hand-o-right"
    level2_icon: str = "fa fa-hand-o-right"
    level3_icon: str = "fa fa-hand-o-right"
    float_icon: str = "fa fa-navicon"

    def level_icon(self, level: int) -> str | None:
        """Return the icon class for a heading ``level`` when icons are shown."""
        if not self.show_level_icon:
            return None
        icons = (self.level1_icon, self.level2_icon, self.level3_icon)
        if 1 <= level <= len(icons):
            return icons[level - 1]
        return None


@dc.dataclass(frozen=True, slots=True)
class AnchorOptions:
    """Options of the ``ancre-navigation`` plugin.

    Attributes
    ----------
    enabled : bool
        ``True`` when the book configures the ``ancre-navigation`` namespace;
        pages pass through untouched otherwise.
    show_level : bool
        Prefix heading text with hierarchical numbering.
    associated_with_summary : bool
        Prefix the numbering with the page's summary level.
    multiple_h1 : bool
        When ``False``, ``h1`` headings are page titles and are skipped.
    mode : AnchorMode
        Placement of the navigation block.
    show_go_top : bool
        Append a back-to-top link to each annotated page.
    float_style, page_top_style : NavigationStyle
        Icon settings for each placement mode.
    """

    enabled: bool = False
    show_level: bool = True
    associated_with_summary: bool = True
    multiple_h1: bool = True
    mode: AnchorMode = AnchorMode.FLOAT
    show_go_top: bool = True
    float_style: NavigationStyle = dc.field(default_factory=NavigationStyle)
    page_top_style: NavigationStyle = dc.field(default_factory=NavigationStyle)

    @property
    def style(self) -> NavigationStyle:
        """Return the icon settings for the active placement mode."""
        if self.mode is AnchorMode.PAGE_TOP:
            return self.page_top_style
        return self.float_style


@dc.dataclass(frozen=True, slots=True)
class ResolvedConfig:
    """Flattened, defaulted view of a book's plugin configuration.

    A resolved config is frozen for the whole build session: every page and
    every navigation event of one build sees the same values.
    """

    title: str | None = None
    author: str | None = None
    print_log: bool = False
    anchors: AnchorOptions = dc.field(default_factory=AnchorOptions)


__all__ = [
    "AnchorMode",
    "AnchorOptions",
    "NavigationStyle",
    "RawConfig",
    "ResolvedConfig",
]
