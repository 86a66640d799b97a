"""
Shared fixtures for composer tests.
"""

import pytest as _pytest

import cloz.composer as composer


@_pytest.fixture
def root() -> composer.Composed:
    """Root object with data and a method."""
    return composer.compose(
        None,
        {
            "x": 1,
            "name": "root",
            "describe": lambda self: f"I am {self.get('name')}",
        },
    )


@_pytest.fixture
def child(root: composer.Composed) -> composer.Composed:
    """Object derived from root, overriding name."""
    return composer.compose(root, {"name": "child", "y": 2})


class ForeignResolver:
    """Resolvable that is not a composed object or a mapping."""

    def __init__(self, **values: object) -> None:
        self.values = dict(values)
        self.calls: list[tuple[str, str]] = []

    def get(self, name: str, *args: object) -> object:
        self.calls.append(("get", name))
        if name not in self.values:
            raise KeyError(name)
        return self.values[name]

    def gain(self, name: str, default: object = None, *args: object) -> object:
        self.calls.append(("gain", name))
        return self.values.get(name, default)

    def __contains__(self, name: object) -> bool:
        return name in self.values


@_pytest.fixture
def foreign() -> ForeignResolver:
    """Foreign resolvable holding a single property."""
    return ForeignResolver(remote="far away")


class GainOnlyResolver:
    """Resolvable with get()/gain() but no __contains__."""

    def __init__(self, **values: object) -> None:
        self.values = dict(values)

    def get(self, name: str, *args: object) -> object:
        return self.values[name]

    def gain(self, name: str, default: object = None, *args: object) -> object:
        return self.values.get(name, default)
