"""Context binder — run ordinary functions against a scope.

Python has no implicit receiver like JavaScript's ``this``, so the
scope is handed to the wrapped function explicitly as its first
positional argument::

    def greet(ctx, name):
        return f"{ctx['greeting']}, {name}"

    hello = bind(greet, scope)
    hello("world")          # greet(scope, "world")

Nesting:
    With ``nest=True`` a fresh child of the scope is created *once*,
    when ``bind`` (or ``binder``) is called, and that child becomes the
    context.  Writes made by the function then stay in the child while
    reads still fall through to the original scope.

Errors:
    Binding never fails.  If the context is not a ``Scope`` the bound
    function raises ``ContextBindingError`` when it is invoked, without
    calling the wrapped function.
"""

import functools
import inspect
from collections.abc import Callable
from typing import Any

from scototype.chain import child
from scototype.errors import ContextBindingError
from scototype.scope import Scope


def _nested(scope: Any) -> Any:
    """Return a new child of *scope*, or *scope* itself if it cannot have one."""
    return child(scope) if isinstance(scope, Scope) else scope


class BoundFunction:
    """A callable that invokes *func* with a fixed scope as its context.

    Attributes:
        func: The wrapped function, called as ``func(context, ...)``.
        context: The scope passed to every call.

    """

    def __init__(self, func: Callable[..., Any], context: Any) -> None:
        """Wrap *func* so each call receives *context* first.

        Metadata is copied before ``func`` and ``context`` are set, since
        ``update_wrapper`` also copies ``func.__dict__`` and would
        otherwise let an inner ``BoundFunction`` overwrite them.  If
        *func* has no introspectable signature, no ``__wrapped__`` or
        ``__signature__`` is kept, so ``inspect.signature`` reports the
        generic ``(*args, **kwargs)`` rather than the context parameter.
        """
        functools.update_wrapper(self, func)
        self.func = func
        self.context = context
        try:
            signature = inspect.signature(func)
        except (TypeError, ValueError):
            vars(self).pop("__wrapped__", None)
            vars(self).pop("__signature__", None)
            return
        params = list(signature.parameters.values())
        if params and params[0].kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            params = params[1:]
        self.__signature__ = signature.replace(parameters=params)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Call the wrapped function with the bound context.

        Raises:
            ContextBindingError: If the context is not a Scope.

        """
        if not isinstance(self.context, Scope):
            msg = f"cannot use {type(self.context).__name__} as an execution context"
            raise ContextBindingError(msg)
        return self.func(self.context, *args, **kwargs)

    def __repr__(self) -> str:
        """Show the wrapped function and its context."""
        name = getattr(self.func, "__qualname__", repr(self.func))
        return f"<BoundFunction {name} context={self.context!r}>"


def bind(func: Callable[..., Any], scope: Scope, *, nest: bool = False) -> BoundFunction:
    """Return *func* bound to *scope*, or to a new child of it if *nest*.

    Args:
        func: The function to wrap; it receives the context first.
        scope: The scope to use as the context.
        nest: If True, bind to a fresh child of *scope* instead.

    Returns:
        A ``BoundFunction``.  Each ``bind(..., nest=True)`` call makes
        its own child.

    """
    return BoundFunction(func, _nested(scope) if nest else scope)


class Binder:
    """A reusable factory binding functions to one shared context.

    Attributes:
        context: The scope (or, when nested, the child created for this
            binder) that every function bound here receives.

    """

    def __init__(self, context: Any) -> None:
        """Remember the shared *context*."""
        self.context = context

    def __call__(self, func: Callable[..., Any]) -> BoundFunction:
        """Return *func* bound to the shared context."""
        return BoundFunction(func, self.context)

    def __repr__(self) -> str:
        """Show the shared context."""
        return f"<Binder context={self.context!r}>"


def binder(scope: Scope, *, nest: bool = False) -> Binder:
    """Return a factory that binds any function to one shared context.

    Every function bound through the returned factory sees the same
    context, so they observe each other's writes.  With *nest* the
    shared context is a single child of *scope*, created now.
    """
    return Binder(_nested(scope) if nest else scope)
