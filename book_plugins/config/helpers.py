"""Coercion helpers shared by the plugin configuration resolver.

Every reader method returns a usable value: anything of the wrong type falls
back to the caller's default and the problem is recorded in ``issues`` so the
resolver can report it when diagnostics are enabled.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

_T = typ.TypeVar("_T", bound=str)


def _type_name(value: object) -> str:
    return type(value).__name__


@dc.dataclass(slots=True)
class FieldReader:
    """Read typed values from one namespaced option mapping.

    Parameters
    ----------
    path : str
        Dotted location of ``payload`` used in issue messages (for example
        ``"ancre-navigation.float"``).
    payload : Mapping
        Option mapping to read from; keys that are never read are ignored.
    issues : list[str]
        Shared list receiving one message per coerced field.
    """

    path: str
    payload: cabc.Mapping[str, typ.Any]
    issues: list[str] = dc.field(default_factory=list)

    @classmethod
    def for_namespace(
        cls, raw: object, namespace: str, issues: list[str]
    ) -> FieldReader | None:
        """Return a reader for ``raw[namespace]`` or ``None`` when it is unset."""
        if not isinstance(raw, cabc.Mapping):
            return None
        payload = raw.get(namespace)
        if payload is None:
            return None
        if not isinstance(payload, cabc.Mapping):
            issues.append(
                f"{namespace}: expected a mapping, got {_type_name(payload)}; ignored"
            )
            return None
        return cls(namespace, payload, issues)

    def _report(self, key: str, value: object, expected: str, default: object) -> None:
        self.issues.append(
            f"{self.path}.{key}: expected {expected}, got {_type_name(value)}; "
            f"using default {default!r}"
        )

    def optional_str(self, key: str) -> str | None:
        """Return a stripped string value, or ``None`` when absent or empty."""
        value = self.payload.get(key)
        match value:
            case None:
                return None
            case str():
                return value.strip() or None
            case _:
                self._report(key, value, "a string", None)
                return None

    def text(self, key: str, default: str) -> str:
        """Return a non-empty string value or ``default``."""
        return self.optional_str(key) or default

    def flag(self, key: str, default: bool) -> bool:
        """Return a boolean value or ``default``."""
        value = self.payload.get(key)
        match value:
            case None:
                return default
            case bool():
                return value
            case _:
                self._report(key, value, "a boolean", default)
                return default

    def choice(self, key: str, choices: type[_T], default: _T) -> _T:
        """Return the member of the string enum ``choices`` named by ``key``."""
        value = self.payload.get(key)
        if value is None:
            return default
        if isinstance(value, str):
            try:
                return choices(value.strip())
            except ValueError:
                pass
        allowed = ", ".join(repr(str(member)) for member in choices)  # type: ignore[attr-defined]
        self._report(key, value, f"one of {allowed}", str(default))
        return default

    def section(self, key: str) -> FieldReader:
        """Return a reader over the nested mapping at ``key`` (empty if unset)."""
        value = self.payload.get(key)
        nested_path = f"{self.path}.{key}"
        if value is None:
            return FieldReader(nested_path, {}, self.issues)
        if not isinstance(value, cabc.Mapping):
            self._report(key, value, "a mapping", {})
            return FieldReader(nested_path, {}, self.issues)
        return FieldReader(nested_path, value, self.issues)


def merge_raw_configs(
    *layers: cabc.Mapping[str, typ.Any] | None,
) -> dict[str, typ.Any]:
    """Merge several raw plugin configurations, later layers winning.

    Namespaces are merged key-by-key so an override layer that only sets
    ``sidebar-style.title`` keeps the manifest's ``sidebar-style.author``.
    ``None`` layers are skipped; non-mapping namespace values replace earlier
    ones wholesale and are left for the resolver to report.

    Examples
    --------
    >>> merge_raw_configs(
    ...     {"sidebar-style": {"title": "Guide", "author": "Ann"}},
    ...     None,
    ...     {"sidebar-style": {"title": "Manual"}},
    ... )
    {'sidebar-style': {'title': 'Manual', 'author': 'Ann'}}
    """
    merged: dict[str, typ.Any] = {}
    for layer in layers:
        if not layer:
            continue
        for namespace, payload in layer.items():
            current = merged.get(namespace)
            if isinstance(current, cabc.Mapping) and isinstance(payload, cabc.Mapping):
                combined = dict(current)
                combined.update(payload)
                merged[namespace] = combined
            elif isinstance(payload, cabc.Mapping):
                merged[namespace] = dict(payload)
            else:
                merged[namespace] = payload
    return merged


__all__ = ["FieldReader", "merge_raw_configs"]
