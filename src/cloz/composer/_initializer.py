"""
Initializer: explicit form of the mapping passed to compose().

A plain mapping marks its lifecycle hooks by carrying the marker or init
hook key among its values. Initializer states them as fields instead:

    >>> init = Initializer(values={"x": 1}, on_init=lambda self: self.set("y", 2))
    >>> sorted(init.as_mapping("_cloz", "__cloz"))
    ['__cloz', 'x']

compose() accepts either form; both are stored as ordinary properties, so
hooks remain inspectable (and inheritable) afterwards.
"""

from __future__ import annotations

import collections.abc as _abc
import dataclasses as _dataclasses
import typing as _typing

import cloz.composer._types as _types


@_dataclasses.dataclass(frozen=True)
class Initializer:
    """
    Initial properties plus optional lifecycle hooks for a composed object.

    Attributes:
        values: Properties set on the new object, in insertion order.
        on_init: Run once right after the values are set.
        completion_marker: Run in place of the inherited completion marker.
    """

    values: _abc.Mapping[str, _typing.Any] = _dataclasses.field(default_factory=dict)
    on_init: _types.Hook | None = None
    completion_marker: _types.Hook | None = None

    def as_mapping(self, marker_name: str, init_hook_name: str) -> dict[str, _typing.Any]:
        """
        Flatten into the plain-mapping form.

        Hooks given as fields override same-named entries in values.

        Args:
            marker_name: Key the completion marker is stored under.
            init_hook_name: Key the init hook is stored under.
        """
        result = dict(self.values)
        if self.on_init is not None:
            result[init_hook_name] = self.on_init
        if self.completion_marker is not None:
            result[marker_name] = self.completion_marker
        return result
