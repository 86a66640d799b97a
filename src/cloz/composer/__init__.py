"""
Composer: build objects with prototype-style delegation.

Example:
    >>> from cloz.composer import compose
    >>> animal = compose(None, {"legs": 4, "describe": lambda self: f"{self.get('legs')} legs"})
    >>> bird = compose(animal, {"legs": 2})
    >>> bird.get("describe")
    '2 legs'
"""

from cloz.composer._core import Composed, compose
from cloz.composer._initializer import Initializer
from cloz.composer._layer import DelegatingLayer
from cloz.composer._types import Resolvable

__all__ = ["Composed", "DelegatingLayer", "Initializer", "Resolvable", "compose"]
