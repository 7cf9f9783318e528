"""Per-build session context shared by every plugin handler.

A :class:`BuildSession` is created by the host when a build starts and passed
by reference to each hook invocation. It owns the build's configuration
store, the frozen :class:`~book_plugins.config.ResolvedConfig`, the logging
sink, and the long-lived navigation panel. Nothing here is module-level, so
two builds in the same process never see each other's configuration.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from book_plugins.config import ConfigStore, ResolvedConfig
from book_plugins.errors import SessionStateError
from book_plugins.logs import LogSink, default_log_sink

if typ.TYPE_CHECKING:
    from book_plugins.config import RawConfig
    from book_plugins.sidebar import NavigationPanel


@dc.dataclass(slots=True)
class BuildSession:
    """State scoped to one build invocation.

    Attributes
    ----------
    raw_config : RawConfig or None
        The book's plugin configuration as read from the manifest.
    panel : NavigationPanel or None
        The table-of-contents panel shared across navigation events, when the
        host renders one.
    log : LogSink
        Diagnostic sink handed to the handlers.
    store : ConfigStore
        Memoising resolver created from ``log``.
    """

    raw_config: RawConfig | None = None
    panel: NavigationPanel | None = None
    log: LogSink = dc.field(default_factory=default_log_sink)
    store: ConfigStore = dc.field(init=False, repr=False)
    _config: ResolvedConfig | None = dc.field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.store = ConfigStore(log=self.log)

    @property
    def initialised(self) -> bool:
        """Return ``True`` once the session's configuration is frozen."""
        return self._config is not None

    @property
    def config(self) -> ResolvedConfig:
        """Return the frozen configuration for this build.

        Raises
        ------
        SessionStateError
            If read before the ``init`` event resolved the configuration.
        """
        if self._config is None:
            msg = "Build session read before the 'init' event resolved its config."
            raise SessionStateError(msg)
        return self._config

    def resolve(self, raw: RawConfig | None = None) -> ResolvedConfig:
        """Resolve and freeze the session configuration.

        The first call freezes the configuration, resolving ``raw`` when given
        or the session's ``raw_config`` otherwise. Later calls return the
        frozen value unchanged.
        """
        if self._config is None:
            source = self.raw_config if raw is None else raw
            self._config = self.store.resolve(source)
        return self._config


__all__ = ["BuildSession"]
