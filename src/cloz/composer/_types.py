"""
Type aliases and protocols for the composer.

This module provides:
- Resolvable: anything exposing get()/gain(), i.e. able to continue delegation
- Hook: a lifecycle hook stored under the marker or init hook key
- Base: what compose() accepts as a base
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing


@_typing.runtime_checkable
class Resolvable(_typing.Protocol):
    """
    Delegation target exposing get() and gain().

    Composed objects satisfy this protocol. Plain dicts do not (they have
    get() but no gain()), so a dict base ends the delegation chain.
    """

    def get(self, name: str, *args: _typing.Any) -> _typing.Any: ...

    def gain(self, name: str, default: _typing.Any = None, *args: _typing.Any) -> _typing.Any: ...


# Hooks receive the composed object they run on
Hook: _typing.TypeAlias = _abc.Callable[..., _typing.Any]

Base: _typing.TypeAlias = _abc.Mapping[str, _typing.Any] | Resolvable | None
