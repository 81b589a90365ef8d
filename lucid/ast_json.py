"""JSON serialization/deserialization for Lucid AST.

This module converts between Lucid AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. A parsed program (a list
of statements) is wrapped in a ``Program`` object so that an emitted file
is self-describing.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .ast import (
    Number,
    Variable,
    BinaryOp,
    Call,
    VarDecl,
    FuncDecl,
    Return,
    ExprStmt,
)
from .errors import LucidError, MALFORMED_INPUT
from .types import ErrorVal


def ast_to_obj(node: Any) -> Any:
    # Primitives
    if node is None:
        return None
    if isinstance(node, (int, str, bool)):
        return node

    # Whole program
    if isinstance(node, (list, tuple)):
        return {"type": "Program", "body": [ast_to_obj(n) for n in node]}

    # Node types
    if isinstance(node, Number):
        return {"type": "Number", "value": node.value}
    if isinstance(node, Variable):
        return {"type": "Variable", "name": node.name}
    if isinstance(node, BinaryOp):
        return {"type": "BinaryOp", "op": node.op, "left": ast_to_obj(node.left), "right": ast_to_obj(node.right)}
    if isinstance(node, Call):
        return {"type": "Call", "callee": node.callee, "args": [ast_to_obj(a) for a in node.args]}
    if isinstance(node, VarDecl):
        return {"type": "VarDecl", "name": node.name, "value": ast_to_obj(node.value)}
    if isinstance(node, FuncDecl):
        return {
            "type": "FuncDecl",
            "name": node.name,
            "params": list(node.params),
            "body": [ast_to_obj(s) for s in node.body],
        }
    if isinstance(node, Return):
        return {"type": "Return", "value": ast_to_obj(node.value)}
    if isinstance(node, ExprStmt):
        return {"type": "ExprStmt", "expr": ast_to_obj(node.expr)}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None or isinstance(obj, (int, str, bool)):
        return obj
    if not isinstance(obj, dict):
        raise LucidError(ErrorVal(MALFORMED_INPUT, "invalid AST object"))
    t = obj.get("type")
    try:
        if t == "Program":
            return [ast_from_obj(n) for n in obj["body"]]
        if t == "Number":
            return Number(value=int(obj["value"]))
        if t == "Variable":
            return Variable(name=obj["name"])
        if t == "BinaryOp":
            return BinaryOp(op=obj["op"], left=ast_from_obj(obj["left"]), right=ast_from_obj(obj["right"]))
        if t == "Call":
            return Call(callee=obj["callee"], args=tuple(ast_from_obj(a) for a in obj.get("args", [])))
        if t == "VarDecl":
            return VarDecl(name=obj["name"], value=ast_from_obj(obj["value"]))
        if t == "FuncDecl":
            return FuncDecl(
                name=obj["name"],
                params=tuple(obj.get("params", [])),
                body=tuple(ast_from_obj(s) for s in obj.get("body", [])),
            )
        if t == "Return":
            return Return(value=ast_from_obj(obj["value"]))
        if t == "ExprStmt":
            return ExprStmt(expr=ast_from_obj(obj["expr"]))
    except KeyError as e:
        raise LucidError(ErrorVal(MALFORMED_INPUT, f"AST node {t} is missing field {e}"))
    except (TypeError, ValueError) as e:
        raise LucidError(ErrorVal(MALFORMED_INPUT, f"malformed AST node {t}: {e}"))

    raise LucidError(ErrorVal(MALFORMED_INPUT, f"unknown AST node type: {t}"))


def program_to_obj(statements: List[Any]) -> Dict[str, Any]:
    """Serialize a parsed program to its ``Program`` object."""
    return ast_to_obj(list(statements))
