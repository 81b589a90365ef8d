"""Tree-walking interpreter for the Lucid language.

The interpreter threads an immutable `Environment` through a program one
statement at a time. Declarations hand back a new environment, expression
statements hand back their value, and `return` hands back a
`ReturnSignal` that stops the enclosing sequence. Nothing is raised for
ordinary control flow; only genuine failures become `LucidError`.

Functions are stored when declared but calling one is not supported:
every call site fails with a ``NotImplemented`` error once the callee has
been found.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, TextIO, Union

from .ast import (
    Node, Number, Variable, BinaryOp, Call,
    VarDecl, FuncDecl, Return, ExprStmt,
)
from .environment import Environment
from .errors import (
    LucidError, UNDEFINED_FUNCTION, UNKNOWN_OPERATOR, NOT_IMPLEMENTED,
    MALFORMED_INPUT, DIVISION_BY_ZERO, TYPE_MISMATCH,
)
from .parser import parse_program
from .types import ErrorVal, FunctionValue, ReturnSignal, to_string, type_name


class Interpreter:
    """Core interpreter that executes Lucid AST."""
    def __init__(self, debug_level: int = 0, debug_file: Optional[str] = 'debug.txt'):
        self.debug_level = debug_level
        self.debug_file = debug_file
        self.debug_fp: Optional[TextIO] = None

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    # Public API
    def run(self, statements: Sequence[Node], env: Optional[Environment] = None) -> Union[Environment, Any]:
        if env is None:
            env = Environment()
        if self.debug_level > 0 and self.debug_file:
            self.debug_fp = open(self.debug_file, 'w', encoding='utf-8')
        try:
            self.debug(f"run {len(statements)} statements")
            result = self.execute_block(statements, env)
            if isinstance(result, Environment):
                self.debug(f"finished with {len(result)} bindings")
            else:
                self.debug(f"finished with early return {to_string(result)}")
            return result
        finally:
            if self.debug_fp:
                self.debug_fp.close()
                self.debug_fp = None

    def execute_block(self, statements: Sequence[Node], env: Environment) -> Union[Environment, Any]:
        for stmt in statements:
            result = self.execute(stmt, env)
            if isinstance(result, ReturnSignal):
                if self.debug_level >= 3:
                    self.debug(f"return {to_string(result.value)}")
                return result.value
            if isinstance(result, Environment):
                env = result
            # expression statements leave the environment as it was
        return env

    def execute(self, node: Node, env: Environment) -> Any:
        if isinstance(node, VarDecl):
            value = self.evaluate(node.value, env)
            if self.debug_level >= 2:
                self.debug(f"declare {node.name} = {to_string(value)}")
            return env.bind(node.name, value)
        if isinstance(node, FuncDecl):
            if self.debug_level >= 2:
                self.debug(f"define function {node.name}")
            return env.bind(node.name, FunctionValue(node))
        if isinstance(node, Return):
            return ReturnSignal(self.evaluate(node.value, env))
        if isinstance(node, ExprStmt):
            expr = node.expr
            if isinstance(expr, Variable):
                # a bare name on its own line is a call without arguments
                return self.call_function(expr.name, env)
            return self.evaluate(expr, env)
        raise LucidError(ErrorVal(MALFORMED_INPUT, f'unexpected statement {node!r}'))

    def evaluate(self, node: Node, env: Environment) -> Any:
        if isinstance(node, Number):
            value = node.value
        elif isinstance(node, Variable):
            value = env.lookup(node.name)
        elif isinstance(node, BinaryOp):
            a = self.evaluate(node.left, env)
            b = self.evaluate(node.right, env)
            value = self.apply_binary_op(node.op, a, b)
        elif isinstance(node, Call):
            value = self.call_function(node.callee, env)
        else:
            raise LucidError(ErrorVal(MALFORMED_INPUT, f'unexpected expression {node!r}'))
        if self.debug_level >= 3:
            self.debug(f"evaluate {node!r} -> {to_string(value)}")
        return value

    def call_function(self, name: str, env: Environment) -> Any:
        # arguments are never evaluated; invocation itself is unsupported
        if name not in env:
            raise LucidError(ErrorVal(UNDEFINED_FUNCTION, f'undefined function {name}'))
        raise LucidError(ErrorVal(NOT_IMPLEMENTED, 'function calls are not implemented'))

    def apply_binary_op(self, op: str, a: Any, b: Any) -> Any:
        if op not in ('+', '-', '*', '/'):
            raise LucidError(ErrorVal(UNKNOWN_OPERATOR, f'unknown operator {op}'))
        for operand in (a, b):
            if not isinstance(operand, int):
                raise LucidError(ErrorVal(TYPE_MISMATCH, f'unsupported {op} for {type_name(a)} and {type_name(b)}'))
        if op == '+':
            return a + b
        if op == '-':
            return a - b
        if op == '*':
            return a * b
        if b == 0:
            raise LucidError(ErrorVal(DIVISION_BY_ZERO, 'division by zero'))
        # integer division truncating toward zero
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient


def interpret(source: str, debug_level: int = 0, debug_file: Optional[str] = 'debug.txt') -> Union[Environment, Any]:
    """Tokenize, parse and run a Lucid program, returning its final environment.

    If the top level of the program executes a `return`, the returned
    value is the result instead.
    """
    statements = parse_program(source)
    interpreter = Interpreter(debug_level=debug_level, debug_file=debug_file)
    return interpreter.run(statements)


def run_program(source: str, debug_level: int = 0) -> Union[Environment, Any]:
    """Convenience function to parse and run a Lucid program from a source string."""
    return interpret(source, debug_level=debug_level)
