"""
cloz - composable objects with prototype-style delegation

Objects built by compose() resolve properties through a chain of bases,
call function-valued properties as methods, fall back to defaults on
request, and can grow nested sub-objects with extend().
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("cloz")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "cloz Contributors"

from cloz.composer import Composed, DelegatingLayer, Initializer, Resolvable, compose  # noqa: E402
from cloz.config import ClozSettings, get_settings  # noqa: E402
from cloz.errors import ClozError, InvalidArgumentError, PropertyNotFoundError  # noqa: E402

__all__ = [
    "__version__",
    "__version_info__",
    "ClozError",
    "ClozSettings",
    "Composed",
    "DelegatingLayer",
    "Initializer",
    "InvalidArgumentError",
    "PropertyNotFoundError",
    "Resolvable",
    "compose",
    "get_settings",
]
