"""
DelegatingLayer: the property mapping of a composed object.

A layer holds local properties and falls back to a parent mapping for
anything not set locally. Writes always land in the local dict, so a key
written once shadows the parent for the life of the layer.

Example:
    >>> parent = {"x": 1, "y": 2}
    >>> layer = DelegatingLayer(parent)
    >>> layer["x"] = 99
    >>> layer["x"], layer["y"], parent["x"]
    (99, 2, 1)
"""

from __future__ import annotations

import collections.abc as _abc
import types as _types
import typing as _typing

_EMPTY: _abc.Mapping[str, _typing.Any] = _types.MappingProxyType({})


class DelegatingLayer(_abc.MutableMapping[str, _typing.Any]):
    """
    Mapping with prototype-style fallback to a parent mapping.

    The parent is stored by reference and never modified; later changes to
    it are visible through the layer for keys not shadowed locally. Keys
    cannot be removed, since the structure only ever grows.

    Thread safety: not thread-safe for concurrent writes.
    """

    __slots__ = ("_local", "_parent")

    def __init__(self, parent: _abc.Mapping[str, _typing.Any] | None = None) -> None:
        self._local: dict[str, _typing.Any] = {}
        self._parent: _abc.Mapping[str, _typing.Any] = _EMPTY if parent is None else parent

    @property
    def parent(self) -> _abc.Mapping[str, _typing.Any]:
        """The mapping consulted for keys not set locally."""
        return self._parent

    def owns(self, key: object) -> bool:
        """Check if key is set on this layer itself, not inherited."""
        return key in self._local

    def __getitem__(self, key: str) -> _typing.Any:
        if key in self._local:
            return self._local[key]
        return self._parent[key]

    def __setitem__(self, key: str, value: _typing.Any) -> None:
        if not isinstance(key, str):
            raise TypeError(f"Layer keys must be strings, got {type(key).__name__}")
        self._local[key] = value

    def __delitem__(self, key: str) -> None:
        raise TypeError(f"'{type(self).__name__}' does not support key removal")

    def __contains__(self, key: object) -> bool:
        return key in self._local or key in self._parent

    def __iter__(self) -> _typing.Iterator[str]:
        """Iterate local keys first, then inherited keys not shadowed."""
        yield from self._local
        for key in self._parent:
            if key not in self._local:
                yield key

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        inherited = len(self) - len(self._local)
        return f"DelegatingLayer({self._local!r}, inherited={inherited})"

    def __eq__(self, other: object) -> bool:
        """Compare equal to any Mapping with the same visible content."""
        if isinstance(other, _abc.Mapping):
            return dict(self.items()) == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        raise TypeError(f"unhashable type: '{type(self).__name__}'")
