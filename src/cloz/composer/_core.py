"""
Composed objects: prototype-style delegation with call-through methods.

A composed object keeps its own properties in a DelegatingLayer whose parent
is the base's layer, so plain data is inherited directly (tier a). When a
name is still unresolved, lookup is handed to the base itself if it can
resolve names (tier b), which lets foreign Resolvable objects sit anywhere in
the chain.

Read semantics:
- Callables are methods: get()/gain() call them with any extra arguments.
  Functions that can take it also receive the object the lookup started on.
- Everything else (including None) is data and returned as-is.

Thread safety: NOT thread-safe. Serialize access to a shared object
externally.
"""

from __future__ import annotations

import collections.abc as _abc
import inspect as _inspect
import logging as _logging
import types as _pytypes
import typing as _typing

import cloz.composer._initializer as _initializer
import cloz.composer._layer as _layer
import cloz.composer._types as _types
import cloz.config as config
import cloz.errors as errors

_logger = _logging.getLogger(__name__)


class _MissingType:
    """Sentinel type for an unresolved lookup."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<MISSING>"


_MISSING = _MissingType()


def _invoke(
    value: _abc.Callable[..., _typing.Any],
    receiver: Composed,
    args: tuple[_typing.Any, ...],
) -> _typing.Any:
    """
    Call a stored method on behalf of receiver.

    Python functions receive receiver as first argument when their
    signature accepts it alongside args; otherwise they are called with
    args alone, so zero-argument lambdas work. staticmethods are never
    given the receiver. Any other callable (builtins, classes, bound
    methods, functools.partial) is called with args unchanged.
    """
    if isinstance(value, staticmethod):
        return value.__func__(*args)
    if isinstance(value, _pytypes.FunctionType):
        try:
            _inspect.signature(value).bind(receiver, *args)
        except TypeError:
            return value(*args)
        return value(receiver, *args)
    return value(*args)


def _parent_for(base: _typing.Any) -> _abc.Mapping[str, _typing.Any] | None:
    """
    Pick the mapping a new layer falls back to for the given base.

    Raises:
        InvalidArgumentError: If base is neither None, a mapping, nor resolvable.
    """
    if base is None:
        return None
    if isinstance(base, Composed):
        return base.get_all()
    if isinstance(base, _abc.Mapping):
        return base
    if isinstance(base, _types.Resolvable):
        return None
    raise errors.InvalidArgumentError(
        f"Cannot compose over {type(base).__name__}; "
        "expected a mapping, a resolvable object or None"
    )


def _declares(initializer: _abc.Mapping[str, _typing.Any], key: str) -> bool:
    """Check if the initializer declares key itself (not by inheritance)."""
    if isinstance(initializer, _layer.DelegatingLayer):
        return initializer.owns(key)
    return key in initializer


class Composed:
    """
    Object with delegated property lookup over a chain of bases.

    Build instances with compose() rather than directly, so initializers and
    lifecycle hooks are applied.

    Example:
        >>> a = compose(None, {"x": 1})
        >>> b = compose(a, {"y": 2})
        >>> b.get("x"), b.get("y")
        (1, 2)
        >>> b.set("x", 99)
        99
        >>> a.get("x")
        1

    Note:
        The base is stored by reference and never modified. Properties
        added to a base after derivation are visible in derived objects
        unless shadowed there.
    """

    __slots__ = ("_base", "_own", "_settings")

    def __init__(
        self,
        base: _types.Base = None,
        *,
        settings: config.ClozSettings | None = None,
    ) -> None:
        self._settings = settings if settings is not None else config.get_settings()
        self._own = _layer.DelegatingLayer(_parent_for(base))
        self._base = base

    @property
    def base(self) -> _types.Base:
        """The object this one delegates to."""
        return self._base

    @property
    def settings(self) -> config.ClozSettings:
        """Settings this object was composed with."""
        return self._settings

    def get(self, name: str, *args: _typing.Any) -> _typing.Any:
        """
        Resolve a property, calling it if it is a method.

        Args:
            name: Property name.
            *args: Arguments passed when the property is a method.

        Returns:
            The stored value, or the method's return value.

        Raises:
            InvalidArgumentError: If name is not a string.
            PropertyNotFoundError: If name is unresolved along the whole chain.
        """
        errors.require_name("get", name)
        return self._resolve(name, self, args, strict=True, default=None)

    def gain(
        self,
        name: str,
        default: _typing.Any = None,
        *args: _typing.Any,
    ) -> _typing.Any:
        """
        Resolve a property like get(), returning default when it is missing.

        Raises:
            InvalidArgumentError: If name is not a string.
        """
        errors.require_name("gain", name)
        return self._resolve(name, self, args, strict=False, default=default)

    def get_all(self) -> _layer.DelegatingLayer:
        """Return the live property layer (aliased, not copied)."""
        return self._own

    def set(self, name: str, value: _typing.Any) -> _typing.Any:
        """
        Store a property on this object, shadowing any inherited value.

        Returns:
            The stored value.

        Raises:
            InvalidArgumentError: If name is not a string.
        """
        errors.require_name("set", name)
        self._own[name] = value
        return self._own[name]

    def extend(
        self,
        name: str,
        sub_initializer: _abc.Mapping[str, _typing.Any] | _initializer.Initializer | None = None,
    ) -> Composed:
        """
        Replace a property with a composed object derived from its value.

        The current value of name (resolved with get(), so methods are
        called) becomes the base of the new object.

        Returns:
            The new composed object, now stored at name.

        Raises:
            InvalidArgumentError: If name is not a string, or the current
                value cannot serve as a base.
            PropertyNotFoundError: If name is unresolved.
        """
        errors.require_name("extend", name)
        child = compose(self.get(name), sub_initializer, settings=self._settings)
        self.set(name, child)
        return child

    def _resolve(
        self,
        name: str,
        receiver: Composed,
        args: tuple[_typing.Any, ...],
        *,
        strict: bool,
        default: _typing.Any,
    ) -> _typing.Any:
        value = self._own.get(name, _MISSING)
        if value is not _MISSING:
            if callable(value):
                return _invoke(value, receiver, args)
            return value

        base = self._base
        if isinstance(base, Composed):
            # Ancestors bind methods to the object the lookup started on
            return base._resolve(name, receiver, args, strict=strict, default=default)
        if isinstance(base, _types.Resolvable):
            _logger.debug("Delegating %r to %s", name, type(base).__name__)
            if strict:
                return base.get(name, *args)
            return base.gain(name, default, *args)

        if strict:
            raise errors.PropertyNotFoundError(name)
        return default

    def __contains__(self, name: object) -> bool:
        """
        Check if name resolves along the chain.

        Mappings and containers are checked without calling anything. A
        foreign Resolvable without __contains__ is asked through gain(),
        which runs the property if it is a method there.
        """
        if name in self._own:
            return True
        base = self._base
        if isinstance(base, _abc.Mapping):
            return False
        if isinstance(base, _abc.Container):
            return name in base
        if isinstance(base, _types.Resolvable) and isinstance(name, str):
            return base.gain(name, _MISSING) is not _MISSING
        return False

    def __repr__(self) -> str:
        local = [key for key in self._own if self._own.owns(key)]
        return f"Composed(own={local!r}, base={type(self._base).__name__})"


def compose(
    base: _types.Base = None,
    initializer: _abc.Mapping[str, _typing.Any] | _initializer.Initializer | None = None,
    *,
    settings: config.ClozSettings | None = None,
) -> Composed:
    """
    Create a composed object delegating to base.

    Every initializer entry is set on the new object in order. Then the
    lifecycle hooks run:
    1. If the initializer declares the init hook key, it is called.
    2. If it declares the marker key, that is called; otherwise the marker
       is requested with gain(), which runs an inherited marker method if
       an ancestor defines one.

    Args:
        base: Mapping, composed or resolvable object to delegate to.
        initializer: Initial properties, as a mapping or an Initializer.
        settings: Hook names to use. Defaults to get_settings().

    Returns:
        The new composed object.

    Raises:
        InvalidArgumentError: If base cannot be composed over, or an
            initializer key is not a string.
    """
    obj = Composed(base, settings=settings)
    marker = obj.settings.marker_name
    init_hook = obj.settings.init_hook_name

    if isinstance(initializer, _initializer.Initializer):
        initializer = initializer.as_mapping(marker, init_hook)

    if isinstance(initializer, _abc.Mapping):
        for key, value in initializer.items():
            obj.set(key, value)
        if _declares(initializer, init_hook):
            _logger.debug("Running init hook %r", init_hook)
            obj.get(init_hook)
        if _declares(initializer, marker):
            _logger.debug("Running declared completion marker %r", marker)
            obj.get(marker)
        else:
            obj.gain(marker)
    else:
        if initializer is not None:
            _logger.debug(
                "Ignoring non-mapping initializer of type %s",
                type(initializer).__name__,
            )
        obj.gain(marker)

    return obj
