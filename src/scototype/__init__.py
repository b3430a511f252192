"""Scototype — nestable, testable, isolable scopes built on delegation chains.

Re-exports public symbols so callers can write::

    from scototype import Scope, child, create, flatten, bind
"""

from scototype.binder import Binder, BoundFunction, bind, binder
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
from scototype.errors import ContextBindingError, InvalidScopeError, ScopeError
from scototype.logging import LogEntry, Logger, LogLevel
from scototype.scope import Scope
from scototype.scoto import Scoto

__all__ = [
    "Binder",
    "BoundFunction",
    "ContextBindingError",
    "InvalidScopeError",
    "LogEntry",
    "LogLevel",
    "Logger",
    "Scope",
    "ScopeError",
    "Scoto",
    "bind",
    "binder",
    "child",
    "create",
    "depth",
    "flatten",
    "isolate",
    "parent",
    "rebase",
    "shadowed",
    "walk",
]
