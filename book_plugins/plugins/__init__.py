"""Plugin definitions and the registry their hooks are registered on.

Importing this package registers every plugin handler exactly once on
:data:`registry` and seals it, so hosts dispatch against a fixed set of
handlers for the whole process.

Examples
--------
>>> from book_plugins.hooks import PageEvent
>>> from book_plugins.plugins import registry
>>> page = registry.dispatch(PageEvent(page), session)  # doctest: +SKIP
"""

from book_plugins.hooks import HookRegistry

from . import ancre_navigation, sidebar_style
from .base import BookAssets, PluginDefinition

PLUGINS: tuple[PluginDefinition, ...] = (ancre_navigation.PLUGIN, sidebar_style.PLUGIN)

registry = HookRegistry()
ancre_navigation.register(registry)
sidebar_style.register(registry)
registry.seal()

__all__ = ["PLUGINS", "BookAssets", "PluginDefinition", "registry"]
