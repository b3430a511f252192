"""Chain operations — build, inspect, and reshape delegation chains.

A chain is what you get by following ``parent`` references from a scope
up to its root.  These functions manipulate chains without ever
mutating an existing scope:

- **create / child** — start a new root, or hang a new scope off one.
- **parent / walk / depth / shadowed** — read-only introspection.
- **isolate / rebase / flatten** — produce a *new* scope derived from
  an existing one.  The result never shares own-entry storage with its
  source and never has the same identity.

Design choices:
    - **Validate first** — every function checks its scope arguments
      before doing anything, so a failure never leaves a half-built
      result behind.
    - **walk returns a list, not a generator** — chains are short and
      callers (``depth``, ``flatten``) want to iterate more than once.
    - **Copies are shallow** — values are shared, storage is not.
"""

from typing import Any

from scototype.errors import InvalidScopeError
from scototype.scope import Scope


def _require_scope(scope: object, *, argument: str = "scope") -> Scope:
    """Return *scope* unchanged, or raise if it is not a Scope."""
    if not isinstance(scope, Scope):
        msg = f"{argument} must be a Scope, got {type(scope).__name__}"
        raise InvalidScopeError(msg)
    return scope


def create() -> Scope:
    """Return a new root scope with no entries."""
    return Scope()


def child(scope: Scope) -> Scope:
    """Return a new, empty scope that delegates to *scope*.

    Raises:
        InvalidScopeError: If *scope* is not a Scope.

    """
    return Scope(parent=_require_scope(scope))


def parent(scope: Scope) -> Scope | None:
    """Return the parent of *scope*, or None if it is a root."""
    return _require_scope(scope).parent


def walk(scope: Scope) -> list[Scope]:
    """Return *scope* followed by each of its ancestors, ending at the root.

    Useful for spotting shadowed keys or measuring nesting depth.
    """
    chain: list[Scope] = []
    current: Scope | None = _require_scope(scope)
    while current is not None:
        chain.append(current)
        current = current.parent
    return chain


def depth(scope: Scope) -> int:
    """Return how many ancestors *scope* has (0 for a root)."""
    return len(walk(scope)) - 1


def shadowed(scope: Scope) -> list[str]:
    """Return the own keys of *scope* that hide a value from an ancestor."""
    ancestor = _require_scope(scope).parent
    if ancestor is None:
        return []
    return [key for key in scope.own if key in ancestor]


def isolate(scope: Scope) -> Scope:
    """Return a new root holding a copy of *scope*'s own entries only.

    Keys that *scope* only sees through inheritance are dropped.
    """
    return Scope(entries=_require_scope(scope).own)


def rebase(scope: Scope, new_parent: Scope | None) -> Scope:
    """Return a copy of *scope*'s own entries parented to *new_parent*.

    Inherited keys are not copied: they come from the new ancestry.
    Passing None for *new_parent* produces a root, like ``isolate``.

    Raises:
        InvalidScopeError: If *scope* is not a Scope, or *new_parent*
            is neither a Scope nor None.

    """
    source = _require_scope(scope)
    if new_parent is not None:
        _require_scope(new_parent, argument="new_parent")
    return Scope(parent=new_parent, entries=source.own)


def flatten(scope: Scope) -> Scope:
    """Return a new root holding the fully resolved view of *scope*.

    Own entries are overlaid from the root down to *scope*, so nearer
    scopes win.  The result is independent of the chain in both
    directions.
    """
    resolved: dict[str, Any] = {}
    for ancestor in reversed(walk(scope)):
        resolved.update(ancestor.own)
    return Scope(entries=resolved)
