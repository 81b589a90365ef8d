"""Abstract Syntax Tree (AST) definitions for the Lucid language.

Each parsed source line becomes one statement node. Expressions are at
most one binary operation deep, since the parser has no precedence or
grouping. Nodes are frozen and hold tuples rather than lists so that a
tree cannot be modified once the parser has built it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass(frozen=True)
class Number(Node):
    value: int


@dataclass(frozen=True)
class Variable(Node):
    name: str


@dataclass(frozen=True)
class BinaryOp(Node):
    op: str
    left: Node
    right: Node


@dataclass(frozen=True)
class Call(Node):
    callee: str
    args: Tuple[Node, ...] = ()


@dataclass(frozen=True)
class VarDecl(Node):
    name: str
    value: Node


@dataclass(frozen=True)
class FuncDecl(Node):
    name: str
    params: Tuple[str, ...]
    body: Tuple[Node, ...]


@dataclass(frozen=True)
class Return(Node):
    value: Node


@dataclass(frozen=True)
class ExprStmt(Node):
    expr: Node
