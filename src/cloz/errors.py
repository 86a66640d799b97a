"""
Exceptions raised by composed objects.

- ClozError: base class for everything this package raises
- InvalidArgumentError: a property name is not a string, or a base cannot
  be composed over
- PropertyNotFoundError: get() exhausted the delegation chain
"""

import typing as _typing


class ClozError(Exception):
    """Base class for cloz errors."""

    pass


class InvalidArgumentError(ClozError, TypeError):
    """Raised when an operation receives an argument of the wrong kind."""

    pass


class PropertyNotFoundError(ClozError, LookupError):
    """Raised by get() when a property cannot be resolved anywhere."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Cannot find property "{name}"')


def require_name(operation: str, name: _typing.Any) -> str:
    """
    Validate a property name argument.

    Args:
        operation: Operation name used in the error message (e.g. "get").
        name: The value passed as property name.

    Returns:
        The name, unchanged.

    Raises:
        InvalidArgumentError: If name is not a string.
    """
    if not isinstance(name, str):
        raise InvalidArgumentError(
            f"The first argument of {operation}() must be a string, "
            f"got {type(name).__name__}"
        )
    return name
