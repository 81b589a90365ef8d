"""Parser for the Lucid language.

Parsing works on the token lines produced by `lucid.tokenizer`. Each line
is one statement and the first word decides which kind:

- ``let NAME = EXPR`` declares a variable,
- ``func NAME(PARAMS) { STMT }`` declares a function whose body is a
  single statement written on the same line,
- ``return EXPR`` returns early from the enclosing statement sequence,
- anything else is a bare expression statement.

An expression window is one token (a number or a name), three tokens
``a OP b``, or a call ``name(arg, ...)``. There is no operator precedence
and no grouping. Windows of any other shape are rejected with a
``MalformedInput`` error instead of being indexed blindly.

The `parse_program` function is the public entry point and returns the
list of statement nodes for a whole source string.
"""

from __future__ import annotations

import re
from typing import List, Sequence, Tuple

from .ast import (
    Node, Number, Variable, BinaryOp, Call,
    VarDecl, FuncDecl, Return, ExprStmt,
)
from .errors import LucidError, MALFORMED_INPUT
from .tokenizer import tokenize
from .types import ErrorVal


NUMBER_RE = re.compile(r'\d+', re.ASCII)
NAME_RE = re.compile(r'\w+', re.ASCII)
CALL_RE = re.compile(r'(\w+)\s*\(([^()]*)\)', re.ASCII)
FUNC_HEADER_RE = re.compile(r'(\w+)\s*\(([^()]*)\)\s*\{(.*)\}', re.ASCII)


def malformed(message: str) -> LucidError:
    return LucidError(ErrorVal(MALFORMED_INPUT, message))


def parse_expr(first_token: str, tokens: Sequence[str]) -> Node:
    """Parse one expression window.

    `tokens` is the full window starting at `first_token`; an empty
    window means `first_token` stands alone, which is how binary
    operands are parsed.
    """
    window = list(tokens) or [first_token]
    if len(window) == 1:
        if NUMBER_RE.fullmatch(first_token):
            return Number(int(first_token))
        if NAME_RE.fullmatch(first_token):
            return Variable(first_token)
    call = CALL_RE.fullmatch(' '.join(window))
    if call:
        return Call(call.group(1), parse_args(call.group(2)))
    if len(window) == 3:
        a, op, b = window
        return BinaryOp(op=op, left=parse_expr(a, []), right=parse_expr(b, []))
    raise malformed(f"cannot parse expression {' '.join(window)!r}")


def parse_args(text: str) -> Tuple[Node, ...]:
    if not text.strip():
        return ()
    args: List[Node] = []
    for piece in text.split(','):
        words = piece.split()
        if not words:
            raise malformed(f'empty argument in call arguments {text!r}')
        args.append(parse_expr(words[0], words))
    return tuple(args)


def parse_func_decl(tokens: Sequence[str]) -> FuncDecl:
    header = ' '.join(tokens[1:])
    match = FUNC_HEADER_RE.fullmatch(header)
    if match is None:
        if header.endswith('{'):
            raise malformed(f'function body must be written on the declaration line: func {header}')
        raise malformed(f'expected func NAME(PARAMS) {{ BODY }}, got func {header}')
    name, params_text, body_text = match.groups()
    params = tuple(p.strip() for p in params_text.split(',') if p.strip())
    for param in params:
        if not NAME_RE.fullmatch(param):
            raise malformed(f'invalid parameter {param!r} in function {name}')
    body_tokens = body_text.split()
    body = (parse_statement(body_tokens),) if body_tokens else ()
    return FuncDecl(name=name, params=params, body=body)


def parse_statement(tokens: Sequence[str]) -> Node:
    """Parse the tokens of a single line into a statement node."""
    if not tokens:
        raise malformed('empty statement')
    head = tokens[0]
    if head == 'let':
        # let NAME = EXPR; the '=' is not checked
        if len(tokens) < 4:
            raise malformed(f"incomplete declaration: {' '.join(tokens)}")
        return VarDecl(name=tokens[1], value=parse_expr(tokens[3], tokens[3:]))
    if head == 'func':
        return parse_func_decl(tokens)
    if head == 'return':
        if len(tokens) < 2:
            raise malformed('return requires a value')
        return Return(parse_expr(tokens[1], tokens[1:]))
    return ExprStmt(parse_expr(tokens[0], tokens))


def parse(lines: Sequence[Sequence[str]]) -> List[Node]:
    """Parse tokenized lines, one statement per line."""
    return [parse_statement(line) for line in lines]


def parse_program(source: str) -> List[Node]:
    """Tokenize and parse Lucid source code into a list of statements."""
    return parse(tokenize(source))
