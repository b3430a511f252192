"""Audit log for scope operations.

Reshaping a scope chain is silent by nature: ``isolate`` drops inherited
keys, ``rebase`` swaps an ancestry, and a nested ``bind`` quietly hangs
a fresh child off the scope it was given.  The audit log makes that
visible.  A ``Scoto`` facade configured with a ``Logger`` appends one
entry per scope it produces or binds, and one per argument it rejects.

Entry conventions:
    - **source** names the component: ``"chain"`` for create, child,
      isolate, rebase and flatten; ``"binder"`` for bind and binder.
    - **depth** is the nesting depth of the scope the operation left
      behind: the new scope for chain operations, the context a bound
      function will receive for binder operations.  Rejected arguments
      have no scope and are recorded at depth 0.
    - **level** is DEBUG for work done and ERROR for a rejection.  The
      error itself is still raised to the caller; the log only records it.

The log is an in-memory buffer owned by whoever configured it, never a
process-wide sink, so two facades never see each other's entries.
"""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity of an audit entry; IntEnum so ``min_level`` filtering is a comparison."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """One audited scope operation.

    Attributes:
        level: DEBUG for an operation that produced or bound a scope,
            ERROR for one that rejected its argument.
        message: What happened, e.g. ``"child -> 0 own entries"`` or
            ``"bound greet (nested)"``.
        source: ``"chain"`` or ``"binder"``.
        depth: Ancestors of the scope the operation left behind.

    """

    level: LogLevel
    message: str
    source: str
    depth: int = 0

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message``."""
        return f"[{self.level.name}] {self.source}: {self.message}"


class Logger:
    """Append-only buffer of audit entries, queryable by level, source and depth."""

    def __init__(self) -> None:
        """Create an empty audit log."""
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """Return a copy of every entry, oldest first."""
        return list(self._entries)

    def log(
        self,
        level: LogLevel,
        message: str,
        *,
        source: str,
        depth: int = 0,
    ) -> None:
        """Record one scope operation.

        Args:
            level: DEBUG for work done, ERROR for a rejection.
            message: Description of the operation.
            source: The component that performed it.
            depth: Nesting depth of the resulting scope or context.

        """
        self._entries.append(LogEntry(level=level, message=message, source=source, depth=depth))

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
        depth: int | None = None,
    ) -> list[LogEntry]:
        """Return the entries matching every criterion given.

        Args:
            min_level: Keep entries at or above this level.
            source: Keep entries from this component only.
            depth: Keep entries about scopes at exactly this depth, e.g.
                ``depth=0`` for everything that produced a root.

        """
        return [
            entry
            for entry in self._entries
            if (min_level is None or entry.level >= min_level)
            and (source is None or entry.source == source)
            and (depth is None or entry.depth == depth)
        ]

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._entries)
