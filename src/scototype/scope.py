"""Scopes — shadowable records that delegate to a parent.

A scope behaves like a variable environment in an interpreter.  Each
scope holds its own entries and, optionally, a reference to a single
parent scope.  Reading a key checks the scope's own entries first and
falls back to the parent, then the parent's parent, until a root (a
scope with no parent) is reached.

Key design properties:
    - **Shadowing** — an own entry hides any ancestor entry with the
      same key.  Deleting it makes the ancestor's value visible again.
    - **Mutation locality** — writes always land on the scope written
      to, never on an ancestor, even when the key was inherited.
    - **Non-owning parents** — many scopes may share one parent, and
      changes to the parent are visible to all of them.
    - **No inherited members** — entries are reached only through item
      access, so a key such as ``"keys"`` or ``"parent"`` can never
      collide with a method.
"""

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any


class Scope(MutableMapping[str, Any]):
    """A mapping of own entries plus an optional parent to delegate to.

    The mapping protocol (``[]``, ``in``, iteration, ``len``, ``get``,
    ``items``, equality) reflects the *resolved* view: everything
    visible from this scope, own entries first.  Writes and deletes only
    ever touch own entries.
    """

    __slots__ = ("_entries", "_parent")

    def __init__(
        self,
        parent: "Scope | None" = None,
        entries: Mapping[str, Any] | None = None,
    ) -> None:
        """Create a scope, optionally parented and pre-populated.

        Args:
            parent: The scope to delegate lookups to, or None for a root.
            entries: Starting own entries (copied, not referenced).

        """
        self._parent = parent
        self._entries: dict[str, Any] = dict(entries) if entries else {}

    @property
    def parent(self) -> "Scope | None":
        """Return the parent scope, or None for a root."""
        return self._parent

    @property
    def own(self) -> dict[str, Any]:
        """Return a copy of the entries set directly on this scope."""
        return dict(self._entries)

    def has_own(self, key: str) -> bool:
        """Return True if *key* is set directly on this scope."""
        return key in self._entries

    def __getitem__(self, key: str) -> Any:
        """Resolve *key* through the chain, nearest scope first.

        Raises:
            KeyError: If no scope in the chain defines *key*.

        """
        scope: Scope | None = self
        while scope is not None:
            if key in scope._entries:
                return scope._entries[key]
            scope = scope._parent
        raise KeyError(key)

    def __setitem__(self, key: str, value: Any) -> None:
        """Set an own entry (creates or overwrites, never touches ancestors)."""
        self._entries[key] = value

    def __delitem__(self, key: str) -> None:
        """Remove an own entry, un-shadowing any inherited value.

        Raises:
            KeyError: If *key* is not an own entry of this scope.

        """
        del self._entries[key]

    def __contains__(self, key: object) -> bool:
        """Return True if *key* resolves anywhere in the chain."""
        scope: Scope | None = self
        while scope is not None:
            if key in scope._entries:
                return True
            scope = scope._parent
        return False

    def __iter__(self) -> Iterator[str]:
        """Yield every visible key once, own keys first."""
        seen: set[str] = set()
        scope: Scope | None = self
        while scope is not None:
            for key in scope._entries:
                if key not in seen:
                    seen.add(key)
                    yield key
            scope = scope._parent

    def __len__(self) -> int:
        """Return the number of distinct visible keys."""
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        """Show own entries and whether this scope is a root."""
        kind = "root" if self._parent is None else "child"
        return f"Scope({self._entries!r}, {kind})"
