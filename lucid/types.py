"""Runtime value types for Lucid.

Lucid programs only ever compute integers. Functions can be declared and
stored in the environment, but they are never invoked, so a function value
is nothing more than a handle on its declaration. This module also holds
the error value carried by `LucidError` and the explicit result produced by
a `return` statement.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .ast import FuncDecl


@dataclass(frozen=True)
class ErrorVal:
    """Represents a Lucid error.

    `name` is one of the error kinds listed in `lucid.errors` and
    `message` is the human readable detail.
    """
    name: str
    message: str

    def __repr__(self) -> str:
        return f"Error(name={self.name!r}, message={self.message!r})"


@dataclass(frozen=True)
class FunctionValue:
    """A declared function as stored in the environment."""
    decl: FuncDecl

    @property
    def name(self) -> str:
        return self.decl.name

    @property
    def params(self):
        return self.decl.params

    def __repr__(self) -> str:
        return f"<function {self.decl.name}>"


@dataclass(frozen=True)
class ReturnSignal:
    """Result of executing a `return` statement.

    It is handed back to the enclosing statement sequence, which stops
    folding and yields `value` instead of an environment.
    """
    value: Any


def type_name(value: Any) -> str:
    """Return the Lucid type name of a runtime value."""
    if isinstance(value, int):
        return 'Integer'
    if isinstance(value, FunctionValue):
        return 'Function'
    return type(value).__name__


def to_string(value: Any) -> str:
    """Render a stored value for printing.

    Functions print as a fixed marker rather than their structure.
    """
    if isinstance(value, FunctionValue):
        return '<function>'
    return str(value)
