import pytest

from monkey.ast import (
    BlockStatement,
    BooleanLiteral,
    CallExpression,
    EmptyExpression,
    ExpressionStatement,
    FunctionLiteral,
    Identifier,
    IfExpression,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    PrefixExpression,
    Program,
    ReturnStatement,
)
from monkey.parser import parse


def test_program_str() -> None:
    program = Program(
        [
            LetStatement("myVar", Identifier("anotherVar")),
            ReturnStatement(InfixExpression(IntegerLiteral(1), "+", IntegerLiteral(2))),
            ExpressionStatement(PrefixExpression("!", BooleanLiteral(False))),
        ]
    )
    assert str(program) == "let myVar = anotherVar;\nreturn (1 + 2);\n(!false)"


@pytest.mark.parametrize(
    "node, expected",
    [
        pytest.param(EmptyExpression(), ""),
        pytest.param(ReturnStatement(), "return;"),
        pytest.param(BlockStatement(), "{ }"),
        pytest.param(
            IfExpression(Identifier("x"), BlockStatement([ExpressionStatement(IntegerLiteral(1))])),
            "if (x) { 1 }",
        ),
        pytest.param(
            IfExpression(
                BooleanLiteral(True),
                BlockStatement([ExpressionStatement(IntegerLiteral(1))]),
                BlockStatement([ReturnStatement(IntegerLiteral(2))]),
            ),
            "if (true) { 1 } else { return 2; }",
        ),
        pytest.param(
            FunctionLiteral(
                [Identifier("a"), Identifier("b")],
                BlockStatement([LetStatement("c", Identifier("a")), ExpressionStatement(Identifier("c"))]),
            ),
            "fn(a, b) { let c = a; c }",
        ),
        pytest.param(
            BlockStatement([ExpressionStatement(Identifier("a")), ExpressionStatement(Identifier("b"))]),
            "{ a; b }",
        ),
        pytest.param(CallExpression(Identifier("f")), "f()"),
    ],
)
def test_node_str(node, expected: str) -> None:
    assert str(node) == expected


@pytest.mark.parametrize(
    "code",
    [
        pytest.param("let five = 5; let ten = 10;"),
        pytest.param("let add = fn(x, y) { x + y; }; let result = add(five, ten);"),
        pytest.param("5 < 10 > 5;"),
        pytest.param("if (5 < 10) { return true; } else { return false; }"),
        pytest.param("10 == 10; 10 != 9;"),
        pytest.param("1; (2)"),
        pytest.param("f; (g)(h)"),
        pytest.param("fn(x) { x }(5)"),
        pytest.param("if (x) { 1 } 2"),
        pytest.param("{ let a = 1; { a } } (3)"),
        pytest.param("let counter = fn(x) { if (x > 100) { return true; } else { counter(x + 1); } }; counter(0);"),
        pytest.param("return; fn() { return; }"),
        pytest.param("-(-(-1)) * !!(a == b) / add(1, fn() { }, if (c) { d })"),
        pytest.param("日本 + 語"),
    ],
)
def test_print_reparse_is_idempotent(code: str) -> None:
    first = parse(code)
    printed = str(first)
    second = parse(printed)
    assert second == first
    assert str(second) == printed
