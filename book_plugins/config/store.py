"""Resolve raw plugin configuration into a frozen :class:`ResolvedConfig`.

Resolution is total: a missing manifest section, unknown keys, and values of
the wrong type all fall back to documented defaults. Coercions are reported
through the session's log sink only when ``printLog`` is enabled, so a quiet
book never sees diagnostics about its configuration.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from book_plugins._constants import ANCRE_NAVIGATION, PLUGIN_NAMESPACES, SIDEBAR_STYLE
from book_plugins.logs import LogSink, safe_log

from .helpers import FieldReader
from .models import AnchorMode, AnchorOptions, NavigationStyle, ResolvedConfig

if typ.TYPE_CHECKING:
    from .models import RawConfig


def resolve_config(raw: RawConfig | None, *, log: LogSink | None = None) -> ResolvedConfig:
    """Return the effective configuration described by ``raw``.

    Parameters
    ----------
    raw : RawConfig or None
        The manifest's ``pluginsConfig`` mapping. ``None`` is a valid,
        all-defaults configuration.
    log : LogSink, optional
        Receives one message per coerced field when ``printLog`` is enabled.

    Returns
    -------
    ResolvedConfig
        Fully defaulted configuration; this function never raises.

    Examples
    --------
    >>> resolve_config(None).print_log
    False
    >>> resolve_config({"sidebar-style": {"title": " Guide "}}).title
    'Guide'
    """
    issues: list[str] = []
    if raw is not None and not hasattr(raw, "get"):
        issues.append(f"pluginsConfig: expected a mapping, got {type(raw).__name__}")
    sidebar = FieldReader.for_namespace(raw, SIDEBAR_STYLE, issues)
    anchors = FieldReader.for_namespace(raw, ANCRE_NAVIGATION, issues)

    flags = [
        reader.flag("printLog", False) for reader in (sidebar, anchors) if reader
    ]
    print_log = any(flags)
    resolved = ResolvedConfig(
        title=sidebar.optional_str("title") if sidebar else None,
        author=sidebar.optional_str("author") if sidebar else None,
        print_log=print_log,
        anchors=_resolve_anchor_options(anchors),
    )
    if print_log:
        for issue in issues:
            safe_log(log, f"config: {issue}")
    return resolved


def _resolve_anchor_options(reader: FieldReader | None) -> AnchorOptions:
    """Build anchor navigation options from the ``ancre-navigation`` section."""
    if reader is None:
        return AnchorOptions()
    base = AnchorOptions()
    return AnchorOptions(
        enabled=True,
        show_level=reader.flag("showLevel", base.show_level),
        associated_with_summary=reader.flag(
            "associatedWithSummary", base.associated_with_summary
        ),
        multiple_h1=reader.flag("multipleH1", base.multiple_h1),
        mode=reader.choice("mode", AnchorMode, base.mode),
        show_go_top=reader.flag("showGoTop", base.show_go_top),
        float_style=_resolve_style(reader.section("float")),
        page_top_style=_resolve_style(reader.section("pageTop")),
    )


def _resolve_style(reader: FieldReader) -> NavigationStyle:
    base = NavigationStyle()
    return NavigationStyle(
        show_level_icon=reader.flag("showLevelIcon", base.show_level_icon),
        level1_icon=reader.text("level1Icon", base.level1_icon),
        level2_icon=reader.text("level2Icon", base.level2_icon),
        level3_icon=reader.text("level3Icon", base.level3_icon),
        float_icon=reader.text("floatIcon", base.float_icon),
    )


class _UnkeyableError(Exception):
    """Raised internally when a raw value cannot take part in a cache key."""


def _freeze(value: object) -> cabc.Hashable:
    """Return a hashable, type-tagged form of ``value``.

    Mapping order is ignored, and scalar types stay distinct, so ``True``,
    ``1``, ``b"x"`` and ``"b'x'"`` never share a key.
    """
    match value:
        case cabc.Mapping():
            items = frozenset((_freeze(key), _freeze(item)) for key, item in value.items())
            return ("mapping", items)
        case list() | tuple():
            return ("sequence", tuple(_freeze(item) for item in value))
        case set() | frozenset():
            return ("set", frozenset(_freeze(item) for item in value))
        case _:
            try:
                hash(value)
            except TypeError as exc:
                raise _UnkeyableError from exc
            return (type(value).__qualname__, value)


def _cache_key(raw: RawConfig | None) -> cabc.Hashable | None:
    """Return a canonical key for the plugin namespaces in ``raw``.

    Returns ``None`` when some value cannot be keyed; such input is resolved
    without memoisation.
    """
    relevant: object = raw
    if isinstance(raw, cabc.Mapping):
        relevant = {key: raw[key] for key in PLUGIN_NAMESPACES if key in raw}
    try:
        return _freeze(relevant)
    except _UnkeyableError:
        return None


class ConfigStore:
    """Memoise :func:`resolve_config` results for one build session.

    The store holds no state beyond its cache: resolving the same input twice
    returns the same frozen :class:`ResolvedConfig` instance, and resolving a
    different input simply resolves it. Freezing the session's configuration
    is the job of :class:`~book_plugins.session.BuildSession`.
    """

    def __init__(self, *, log: LogSink | None = None) -> None:
        self._log = log
        self._cache: dict[cabc.Hashable, ResolvedConfig] = {}

    def resolve(self, raw: RawConfig | None) -> ResolvedConfig:
        """Return the resolved configuration for ``raw``, resolving it at most once."""
        key = _cache_key(raw)
        if key is None:
            return resolve_config(raw, log=self._log)
        cached = self._cache.get(key)
        if cached is None:
            cached = resolve_config(raw, log=self._log)
            self._cache[key] = cached
        return cached

    def clear(self) -> None:
        """Drop every memoised configuration."""
        self._cache.clear()


__all__ = ["ConfigStore", "resolve_config"]
