import dataclasses

import pytest

from lucid.ast import (
    Number, Variable, BinaryOp, Call, VarDecl, FuncDecl, Return, ExprStmt,
)
from lucid.errors import LucidError
from lucid.parser import parse, parse_expr, parse_program, parse_statement


def assert_malformed(fn, *args):
    with pytest.raises(LucidError) as excinfo:
        fn(*args)
    assert excinfo.value.err.name == 'MalformedInput'


def test_parse_expr_leaves():
    assert parse_expr('10', ['10']) == Number(10)
    assert parse_expr('x', ['x']) == Variable('x')
    # an empty window means the first token stands alone
    assert parse_expr('foo_1', []) == Variable('foo_1')


def test_parse_expr_binary_op():
    assert parse_expr('x', ['x', '+', '5']) == BinaryOp('+', Variable('x'), Number(5))
    # operators are not checked until evaluation
    assert parse_expr('a', ['a', '%', 'b']) == BinaryOp('%', Variable('a'), Variable('b'))


def test_parse_expr_call():
    assert parse_expr('add(x,', ['add(x,', 'y)']) == Call('add', (Variable('x'), Variable('y')))
    assert parse_expr('tick()', ['tick()']) == Call('tick', ())
    assert parse_expr('f(a', ['f(a', '+', '1)']) == Call('f', (BinaryOp('+', Variable('a'), Number(1)),))
    assert parse_expr('f(1)', ['f(1)', '+', 'f(2)']) == BinaryOp(
        '+', Call('f', (Number(1),)), Call('f', (Number(2),))
    )
    assert parse_expr('f(1)', ['f(1)', '*', '3']) == BinaryOp('*', Call('f', (Number(1),)), Number(3))


def test_parse_expr_rejects_wrong_arity():
    assert_malformed(parse_expr, 'a', ['a', '+'])
    assert_malformed(parse_expr, 'a', ['a', '+', 'b', '-', 'c'])
    assert_malformed(parse_expr, '+', ['+'])
    assert_malformed(parse_expr, 'f(a,', ['f(a,', ',b)'])


def test_parse_let():
    assert parse_statement('let y = x + 5'.split()) == VarDecl('y', BinaryOp('+', Variable('x'), Number(5)))
    # the '=' token is not validated
    assert parse_statement('let y := 1'.split()) == VarDecl('y', Number(1))
    assert_malformed(parse_statement, ['let', 'x'])
    assert_malformed(parse_statement, ['let', 'x', '='])


def test_parse_func_single_line_body():
    stmt = parse_statement('func add(a, b) { return a + b }'.split())
    assert stmt == FuncDecl(
        name='add',
        params=('a', 'b'),
        body=(Return(BinaryOp('+', Variable('a'), Variable('b'))),),
    )


def test_parse_func_params_and_empty_body():
    assert parse_statement('func noop() { }'.split()) == FuncDecl('noop', (), ())
    assert parse_statement('func f(a,b) { let c = a }'.split()) == FuncDecl(
        'f', ('a', 'b'), (VarDecl('c', Variable('a')),)
    )


def test_parse_func_multi_line_body_is_rejected():
    assert_malformed(parse_statement, 'func add(a, b) {'.split())
    assert_malformed(parse_statement, 'func add'.split())
    assert_malformed(parse_statement, 'func add(a-b) { return a }'.split())


def test_parse_return_and_expression_statements():
    assert parse_statement(['return', 'x']) == Return(Variable('x'))
    assert parse_statement('return x * 2'.split()) == Return(BinaryOp('*', Variable('x'), Number(2)))
    assert parse_statement(['add']) == ExprStmt(Variable('add'))
    assert parse_statement('a - 1'.split()) == ExprStmt(BinaryOp('-', Variable('a'), Number(1)))
    assert_malformed(parse_statement, ['return'])


def test_parse_is_per_line():
    lines = [['let', 'x', '=', '1'], ['x', '+', '1']]
    assert parse(lines) == [VarDecl('x', Number(1)), ExprStmt(BinaryOp('+', Variable('x'), Number(1)))]


def test_parse_program_sample():
    statements = parse_program("""
        let x = 10
        let y = x + 5
        func add(a, b) { return a + b }
        let result = add(x, y)
    """)
    assert [type(s) for s in statements] == [VarDecl, VarDecl, FuncDecl, VarDecl]
    assert statements[3].value == Call('add', (Variable('x'), Variable('y')))


def test_nodes_are_immutable():
    node = BinaryOp('+', Number(1), Number(2))
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.op = '-'
