"""Exceptions raised by the scope chain and the context binder.

Two failure modes exist, and they surface at different moments:

- **InvalidScopeError** — a chain operation was handed something that
  is not a ``Scope``.  Raised immediately, before any work is done.
- **ContextBindingError** — a bound function was invoked against a
  context that cannot act as one.  Binding itself always succeeds; the
  error is raised only when the bound function is called.
"""


class ScopeError(Exception):
    """Base class for every error raised by scototype."""


class InvalidScopeError(ScopeError):
    """Raised when a non-scope value is passed where a scope is required."""


class ContextBindingError(ScopeError):
    """Raised when a bound function is called with an unusable context."""
