"""The ``Scoto`` facade — every scope operation behind one object.

Most callers can use the functions in ``scototype.chain`` and
``scototype.binder`` directly.  ``Scoto`` bundles them for callers that
want two extras:

- **Auditing** — pass a ``Logger`` and each operation appends an entry:
  DEBUG for work done (tagged with the resulting scope's depth), ERROR
  for a rejected argument, just before the error is re-raised.
- **A default nesting mode** — ``Scoto(nest=True)`` makes ``bind`` and
  ``binder`` create a child context unless told otherwise per call.
"""

from collections.abc import Callable
from typing import Any

from scototype import chain
from scototype.binder import Binder, BoundFunction, bind, binder
from scototype.errors import InvalidScopeError
from scototype.logging import Logger, LogLevel
from scototype.scope import Scope


class Scoto:
    """Configured entry point for building and binding scope chains."""

    def __init__(self, *, logger: Logger | None = None, nest: bool = False) -> None:
        """Create a facade.

        Args:
            logger: Where to record audit entries, or None to skip auditing.
            nest: Default for the ``nest`` flag of ``bind`` and ``binder``.

        """
        self._logger = logger
        self._nest = nest

    @property
    def logger(self) -> Logger | None:
        """Return the audit logger, or None if auditing is off."""
        return self._logger

    @property
    def nest(self) -> bool:
        """Return the default nesting mode."""
        return self._nest

    # -- Auditing ------------------------------------------------------------

    def _log(self, level: LogLevel, message: str, *, source: str, depth: int = 0) -> None:
        if self._logger is not None:
            self._logger.log(level, message, source=source, depth=depth)

    def _checked(self, operation: str, func: Callable[..., Any], *args: Any) -> Any:
        """Run a chain operation, logging and re-raising a rejected argument."""
        try:
            return func(*args)
        except InvalidScopeError as exc:
            self._log(LogLevel.ERROR, f"{operation} rejected: {exc}", source="chain")
            raise

    def _created(self, operation: str, scope: Scope) -> Scope:
        if self._logger is not None:
            self._log(
                LogLevel.DEBUG,
                f"{operation} -> {len(scope.own)} own entries",
                source="chain",
                depth=chain.depth(scope),
            )
        return scope

    # -- Chain operations ----------------------------------------------------

    def create(self) -> Scope:
        """Return a new root scope."""
        return self._created("create", chain.create())

    def child(self, scope: Scope) -> Scope:
        """Return a new child of *scope*."""
        return self._created("child", self._checked("child", chain.child, scope))

    def parent(self, scope: Scope) -> Scope | None:
        """Return the parent of *scope*, or None for a root."""
        return self._checked("parent", chain.parent, scope)

    def walk(self, scope: Scope) -> list[Scope]:
        """Return *scope* and its ancestors, nearest first."""
        return self._checked("walk", chain.walk, scope)

    def depth(self, scope: Scope) -> int:
        """Return the number of ancestors of *scope*."""
        return self._checked("depth", chain.depth, scope)

    def shadowed(self, scope: Scope) -> list[str]:
        """Return the own keys of *scope* that hide an inherited value."""
        return self._checked("shadowed", chain.shadowed, scope)

    def isolate(self, scope: Scope) -> Scope:
        """Return a new root with a copy of *scope*'s own entries."""
        return self._created("isolate", self._checked("isolate", chain.isolate, scope))

    def rebase(self, scope: Scope, new_parent: Scope | None) -> Scope:
        """Return a copy of *scope*'s own entries parented to *new_parent*."""
        return self._created("rebase", self._checked("rebase", chain.rebase, scope, new_parent))

    def flatten(self, scope: Scope) -> Scope:
        """Return a new root holding the resolved view of *scope*."""
        return self._created("flatten", self._checked("flatten", chain.flatten, scope))

    # -- Context binding -----------------------------------------------------

    def bind(
        self,
        func: Callable[..., Any],
        scope: Scope,
        *,
        nest: bool | None = None,
    ) -> BoundFunction:
        """Bind *func* to *scope*, nesting per *nest* or the facade default."""
        nested = self._nest if nest is None else nest
        bound = bind(func, scope, nest=nested)
        self._log_binding(getattr(func, "__name__", repr(func)), bound.context, nested=nested)
        return bound

    def binder(
        self,
        scope: Scope,
        *,
        nest: bool | None = None,
    ) -> Binder:
        """Return a factory binding functions to one shared context."""
        nested = self._nest if nest is None else nest
        apply = binder(scope, nest=nested)
        self._log_binding("binder", apply.context, nested=nested)
        return apply

    def _log_binding(self, name: str, context: Any, *, nested: bool) -> None:
        depth = chain.depth(context) if isinstance(context, Scope) else 0
        mode = "nested" if nested else "direct"
        self._log(LogLevel.DEBUG, f"bound {name} ({mode})", source="binder", depth=depth)
