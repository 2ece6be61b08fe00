"""Execution context.

The interpreter keeps all of its mutable state in one
:class:`ExecutionContext`:

* ``current_scope``: the bindings the running statement reads and writes;
* ``scopes``: the frames pushed by enclosing calls, most recent last;
* ``functions``: a stack of function tables, only the top one is consulted;
* ``return_value``: the value set by ``rn``, or ``UNSET`` when nothing is pending.

Name lookup checks the current scope first and then the pushed frames from the
most recently pushed to the least recently pushed, so the nearest calling frame
wins.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass, field

from rnlang.exceptions import UndefinedFunctionError, UndefinedVariableError
from rnlang.values import UNSET


@dataclass
class Function:
    """A user-defined function registered by a ``fn`` declaration."""
    name: str
    params: list
    outputs: list
    body: list

    @property
    def arity(self) -> int:
        """Number of input parameters."""
        return len(self.params)


@dataclass
class ExecutionContext:
    """Scopes, function tables and the pending return value of a run."""
    current_scope: dict = field(default_factory=dict)
    scopes: list = field(default_factory=list)
    functions: list = field(default_factory=lambda: [{}])
    return_value: object = UNSET

    def lookup(self, name: str, line=None, file=None):
        """
        Return the binding for ``name``.

        Raises:
            UndefinedVariableError: If no scope binds the name.
        """
        if name in self.current_scope:
            return self.current_scope[name]
        for scope in reversed(self.scopes):
            if name in scope:
                return scope[name]
        raise UndefinedVariableError(name, line, file)

    def is_bound(self, name: str) -> bool:
        """Return True if any scope binds ``name``."""
        return name in self.current_scope or any(name in scope for scope in self.scopes)

    def bind(self, name: str, binding) -> None:
        """Bind ``name`` in the current scope, replacing any earlier binding there."""
        self.current_scope[name] = binding

    def push_frame(self, scope: dict) -> None:
        """Save the current scope and make ``scope`` current."""
        self.scopes.append(self.current_scope)
        self.current_scope = scope

    def pop_frame(self) -> None:
        """Restore the scope saved by the matching :meth:`push_frame`."""
        self.current_scope = self.scopes.pop()

    def register_function(self, function: Function) -> None:
        """Register ``function`` in the top function table."""
        self.functions[-1][function.name] = function

    def lookup_function(self, name: str, line=None, file=None) -> Function:
        """
        Return the function registered under ``name``.

        Raises:
            UndefinedFunctionError: If the top table has no such function.
        """
        try:
            return self.functions[-1][name]
        except KeyError:
            raise UndefinedFunctionError(name, line, file) from None

    @property
    def returning(self) -> bool:
        """True while an ``rn`` is unwinding to its caller."""
        return self.return_value is not UNSET

    def take_return(self):
        """Return the pending value, or None, and clear it."""
        value = None if self.return_value is UNSET else self.return_value
        self.return_value = UNSET
        return value
