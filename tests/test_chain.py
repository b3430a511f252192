"""Tests for the chain operations.

create/child build chains, parent/walk/depth/shadowed inspect them,
and isolate/rebase/flatten derive brand-new scopes from existing ones.
"""

import pytest

from scototype.chain import (
    child,
    create,
    depth,
    flatten,
    isolate,
    parent,
    rebase,
    shadowed,
    walk,
)
from scototype.errors import InvalidScopeError, ScopeError
from scototype.scope import Scope


def _generations() -> tuple[Scope, Scope, Scope]:
    """Build gen1 -> gen2 -> gen3 with one own entry each."""
    gen1 = create()
    gen2 = child(gen1)
    gen3 = child(gen2)
    gen1["foo"] = 1
    gen2["bar"] = 2
    gen3["baz"] = 3
    return gen1, gen2, gen3


# -- Cycle 1: create and child ----------------------------------------------


class TestCreate:
    """Verify root creation."""

    def test_create_returns_empty_root(self) -> None:
        """create() should give a scope with no entries and no parent."""
        scope = create()
        assert isinstance(scope, Scope)
        assert len(scope) == 0
        assert parent(scope) is None

    def test_create_returns_distinct_scopes(self) -> None:
        """Every call should produce a new object."""
        assert create() is not create()


class TestChild:
    """Verify child creation."""

    def test_child_is_a_new_object(self) -> None:
        """A child should never be its parent."""
        root = create()
        assert child(root) is not root

    def test_child_inherits(self) -> None:
        """Entries set on the parent later should still be visible."""
        root = create()
        kid = child(root)
        root["foo"] = 3
        assert kid["foo"] == root["foo"]

    def test_child_has_no_own_entries(self) -> None:
        """A new child starts with no own entries."""
        root = create()
        root["foo"] = 1
        assert child(root).own == {}

    def test_child_of_none_raises(self) -> None:
        """None is not a scope."""
        with pytest.raises(InvalidScopeError):
            child(None)  # type: ignore[arg-type]

    def test_child_of_dict_raises(self) -> None:
        """A plain dict is not a scope either."""
        with pytest.raises(InvalidScopeError, match="dict"):
            child({})  # type: ignore[arg-type]

    def test_invalid_scope_is_scope_error(self) -> None:
        """InvalidScopeError should derive from ScopeError."""
        assert issubclass(InvalidScopeError, ScopeError)


# -- Cycle 2: introspection -------------------------------------------------


class TestParent:
    """Verify parent lookup."""

    def test_parent_returns_the_parent(self) -> None:
        """parent() should return the exact parent object."""
        root = create()
        assert parent(child(root)) is root

    def test_parent_of_root_is_none(self) -> None:
        """A root has no parent."""
        assert parent(create()) is None

    def test_parent_rejects_non_scope(self) -> None:
        """parent() should validate its argument."""
        with pytest.raises(InvalidScopeError):
            parent(42)  # type: ignore[arg-type]


class TestWalk:
    """Verify ancestor walking."""

    def test_walk_root_has_one_element(self) -> None:
        """Walking a root yields just the root."""
        root = create()
        assert walk(root) == [root]

    def test_walk_is_self_to_root(self) -> None:
        """walk() should list the scope first and the root last."""
        gen1, gen2, gen3 = _generations()
        chain = walk(gen3)
        assert [id(s) for s in chain] == [id(gen3), id(gen2), id(gen1)]

    def test_walk_is_reusable(self) -> None:
        """The result should be a list that can be iterated twice."""
        _, _, gen3 = _generations()
        chain = walk(gen3)
        assert isinstance(chain, list)
        assert len(list(chain)) == len(list(chain))


class TestDepth:
    """Verify nesting depth."""

    def test_root_depth_is_zero(self) -> None:
        """A root sits at depth 0."""
        assert depth(create()) == 0

    def test_depth_counts_ancestors(self) -> None:
        """Each generation adds one."""
        _, _, gen3 = _generations()
        expected = 2
        assert depth(gen3) == expected


class TestShadowed:
    """Verify shadowed-key detection."""

    def test_root_shadows_nothing(self) -> None:
        """A root has nothing to shadow."""
        root = create()
        root["a"] = 1
        assert shadowed(root) == []

    def test_reports_only_hiding_keys(self) -> None:
        """Only own keys also visible from an ancestor are reported."""
        gen1, gen2, gen3 = _generations()
        gen3["foo"] = "hidden"
        gen3["bar"] = "hidden"
        assert shadowed(gen3) == ["foo", "bar"]
        assert shadowed(gen2) == []
        assert gen1["foo"] == 1


# -- Cycle 3: isolate -------------------------------------------------------


class TestIsolate:
    """Verify isolation from ancestry."""

    def test_isolate_creates_new_object(self) -> None:
        """The isolated scope should never be the source."""
        kid = child(create())
        assert isolate(kid) is not kid

    def test_isolate_drops_inherited_keys(self) -> None:
        """Keys only seen through the parent should be gone."""
        root = create()
        kid = child(root)
        root["foo"] = 1
        isolated = isolate(kid)
        assert "foo" in kid
        assert "foo" not in isolated
        assert parent(isolated) is None

    def test_isolate_keeps_own_entries(self) -> None:
        """Own entries should be copied, then independent."""
        root = create()
        kid = child(root)
        root["k"] = 1
        kid["j"] = 2
        isolated = isolate(kid)
        assert "k" not in isolated
        expected = 2
        assert isolated["j"] == expected
        kid["j"] = 3
        root["k"] = 5
        assert isolated["j"] == expected
        assert "k" not in isolated

    def test_isolate_root_is_value_equal_copy(self) -> None:
        """Isolating a root gives an equal but distinct scope."""
        root = create()
        root["a"] = 1
        copy = isolate(root)
        assert copy == root
        assert copy is not root

    def test_isolate_is_idempotent_on_content(self) -> None:
        """Isolating twice gives the same own entries as once."""
        root = create()
        kid = child(root)
        root["a"] = 1
        kid["b"] = 2
        once = isolate(kid)
        twice = isolate(once)
        assert twice.own == once.own
        assert twice is not once

    def test_copies_are_shallow(self) -> None:
        """Values themselves are shared, not deep-copied."""
        root = create()
        root["items"] = [1, 2, 3]
        copy = isolate(root)
        assert copy["items"] is root["items"]


# -- Cycle 4: rebase --------------------------------------------------------


class TestRebase:
    """Verify reparenting."""

    def test_rebase_creates_new_object(self) -> None:
        """The rebased scope should never be the source."""
        kid = child(create())
        assert rebase(kid, create()) is not kid

    def test_rebase_points_to_new_parent(self) -> None:
        """The rebased scope should delegate to the new parent."""
        first = create()
        second = create()
        kid = child(first)
        rebased = rebase(kid, second)
        assert parent(rebased) is second
        assert parent(rebased) is not parent(kid)

    def test_rebase_onto_same_parent(self) -> None:
        """Rebasing onto the original parent still gives a new scope."""
        root = create()
        kid = child(root)
        again = rebase(kid, root)
        assert again is not kid
        assert parent(again) is parent(kid)

    def test_rebase_copies_own_entries_only(self) -> None:
        """Inherited keys come from the new parent, not the old one."""
        first = create()
        second = create()
        first["inherited"] = "old"
        second["inherited"] = "new"
        kid = child(first)
        kid["own"] = 1
        rebased = rebase(kid, second)
        assert rebased.own == {"own": 1}
        assert rebased["inherited"] == "new"

    def test_rebase_sees_later_parent_changes(self) -> None:
        """The new parent is shared, so its later writes show through."""
        target = create()
        rebased = rebase(child(create()), target)
        target["late"] = True
        assert rebased["late"] is True

    def test_rebase_onto_none_is_a_root(self) -> None:
        """Rebasing onto None behaves like isolate."""
        root = create()
        kid = child(root)
        root["a"] = 1
        kid["b"] = 2
        rebased = rebase(kid, None)
        assert parent(rebased) is None
        assert rebased.own == isolate(kid).own

    def test_rebase_rejects_bad_parent(self) -> None:
        """A non-scope new parent should be rejected."""
        with pytest.raises(InvalidScopeError, match="new_parent"):
            rebase(create(), "nope")  # type: ignore[arg-type]


# -- Cycle 5: flatten -------------------------------------------------------


class TestFlatten:
    """Verify merging a whole chain into one root."""

    def test_flatten_creates_new_object(self) -> None:
        """The flattened scope should never be the source."""
        kid = child(create())
        assert flatten(kid) is not kid

    def test_flatten_merges_hierarchy(self) -> None:
        """Every generation's entries should be present."""
        _, _, gen3 = _generations()
        flat = flatten(gen3)
        assert flat.own == {"foo": 1, "bar": 2, "baz": 3}
        assert parent(flat) is None

    def test_nearer_scopes_win(self) -> None:
        """A closer own entry should override a farther one."""
        gen1, gen2, gen3 = _generations()
        gen2["foo"] = "middle"
        assert flatten(gen3)["foo"] == "middle"
        gen3["foo"] = "near"
        assert flatten(gen3)["foo"] == "near"
        assert gen1["foo"] == 1

    def test_not_affected_by_original_hierarchy(self) -> None:
        """Later writes to the chain should not reach the flat copy."""
        gen1, gen2, gen3 = _generations()
        flat = flatten(gen3)
        gen1["foo"] = 4
        gen2["bar"] = 5
        gen3["baz"] = 6
        assert flat.own == {"foo": 1, "bar": 2, "baz": 3}

    def test_does_not_affect_original_hierarchy(self) -> None:
        """Writes to the flat copy should not reach the chain."""
        _, _, gen3 = _generations()
        flat = flatten(gen3)
        flat["foo"] = 7
        flat["bar"] = 8
        flat["baz"] = 9
        assert dict(gen3.items()) == {"baz": 3, "bar": 2, "foo": 1}

    def test_flatten_root_equals_isolate(self) -> None:
        """On a root, flatten and isolate agree."""
        root = create()
        root["a"] = 1
        assert flatten(root).own == isolate(root).own

    def test_flatten_rejects_non_scope(self) -> None:
        """flatten() should validate before walking."""
        with pytest.raises(InvalidScopeError):
            flatten(None)  # type: ignore[arg-type]
