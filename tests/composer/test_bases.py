"""Tests for the kinds of base compose() accepts."""

import pytest as _pytest

import cloz.composer as composer
import cloz.errors as errors
import tests.composer.conftest as composer_conftest


class TestMappingBase:
    """Plain mappings act as read-only prototypes."""

    def test_reads_through_to_dict(self) -> None:
        """Keys of a dict base resolve."""
        obj = composer.compose({"x": 1})

        assert obj.get("x") == 1

    def test_dict_base_is_never_modified(self) -> None:
        """Writes land on the composed object only."""
        data = {"x": 1}
        obj = composer.compose(data, {"x": 2, "y": 3})

        assert obj.get("x") == 2
        assert data == {"x": 1}

    def test_dict_base_changes_are_visible(self) -> None:
        """The dict is held by reference, not copied."""
        data = {"x": 1}
        obj = composer.compose(data)
        data["z"] = 3

        assert obj.get("z") == 3

    def test_dict_functions_are_methods(self) -> None:
        """Callables inherited from a dict are bound to the composed object."""
        obj = composer.compose({"who": lambda self: self.get("name")}, {"name": "dict child"})

        assert obj.get("who") == "dict child"

    def test_dict_base_ends_delegation(self) -> None:
        """A dict has get() but no gain(), so misses end at it."""
        obj = composer.compose({"x": 1})

        assert not isinstance({"x": 1}, composer.Resolvable)
        with _pytest.raises(errors.PropertyNotFoundError):
            obj.get("missing")


class TestComposedBase:
    """Composed objects as bases."""

    def test_base_property(self, root: composer.Composed, child: composer.Composed) -> None:
        """base returns the object passed to compose()."""
        assert child.base is root

    def test_composed_is_resolvable(self, root: composer.Composed) -> None:
        """Composed objects satisfy the Resolvable protocol."""
        assert isinstance(root, composer.Resolvable)

    def test_contains_checks_chain(self, child: composer.Composed) -> None:
        """`in` sees local and inherited names without calling methods."""
        assert "y" in child
        assert "x" in child
        assert "describe" in child
        assert "nowhere" not in child


class TestForeignResolvableBase:
    """Objects exposing get()/gain() continue the chain."""

    def test_get_delegates(self, foreign: composer_conftest.ForeignResolver) -> None:
        """Unresolved names are handed to the foreign get()."""
        obj = composer.compose(foreign, {"local": 1})

        assert obj.get("remote") == "far away"
        assert obj.get("local") == 1
        assert ("get", "remote") in foreign.calls

    def test_gain_delegates_with_default(
        self,
        foreign: composer_conftest.ForeignResolver,
    ) -> None:
        """Unresolved names are handed to the foreign gain() with the default."""
        obj = composer.compose(foreign)

        assert obj.gain("nope", "fallback") == "fallback"
        assert ("gain", "nope") in foreign.calls

    def test_marker_is_requested_from_foreign(
        self,
        foreign: composer_conftest.ForeignResolver,
    ) -> None:
        """Composing over a foreign base asks it for the completion marker."""
        composer.compose(foreign)

        assert foreign.calls == [("gain", "_cloz")]

    def test_foreign_errors_propagate(self, foreign: composer_conftest.ForeignResolver) -> None:
        """A miss in the foreign get() surfaces its own exception."""
        obj = composer.compose(foreign)

        with _pytest.raises(KeyError):
            obj.get("nope")

    def test_delegation_through_composed_chain(
        self,
        foreign: composer_conftest.ForeignResolver,
    ) -> None:
        """Composed ancestors pass misses on to a foreign root."""
        middle = composer.compose(foreign, {"a": 1})
        leaf = composer.compose(middle, {"b": 2})

        assert leaf.get("remote") == "far away"
        assert leaf.get("a") == 1
        assert "remote" in leaf

    def test_contains_asks_resolver_without_contains(self) -> None:
        """`in` falls back to gain() on a foreign root lacking __contains__."""
        leaf = composer.compose(composer.compose(composer_conftest.GainOnlyResolver(remote=1)))

        assert leaf.get("remote") == 1
        assert "remote" in leaf
        assert "nowhere" not in leaf
        assert 3 not in leaf


class TestInvalidBase:
    """Values that cannot serve as a base."""

    @_pytest.mark.parametrize("base", [5, "text", 3.5, [1, 2]])
    def test_rejected(self, base: object) -> None:
        """Non-mapping, non-resolvable bases raise InvalidArgumentError."""
        with _pytest.raises(errors.InvalidArgumentError):
            composer.compose(base)  # type: ignore[arg-type]
