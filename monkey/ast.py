"""Syntax tree of the Monkey language.

Every node prints back as source text: expressions are fully parenthesised, so
printing a parsed program and parsing the result again yields the same tree.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class EmptyExpression:
    def __str__(self) -> str:
        return ""


@dataclass
class Identifier:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass
class IntegerLiteral:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class BooleanLiteral:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass
class PrefixExpression:
    operator: str
    right: "Expression"

    def __str__(self) -> str:
        return f"({self.operator}{self.right})"


@dataclass
class InfixExpression:
    left: "Expression"
    operator: str
    right: "Expression"

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


@dataclass
class IfExpression:
    condition: "Expression"
    consequence: "BlockStatement"
    alternative: Optional["BlockStatement"] = None

    def __str__(self) -> str:
        result = f"if ({self.condition}) {self.consequence}"
        if self.alternative is not None:
            result += f" else {self.alternative}"
        return result


@dataclass
class FunctionLiteral:
    parameters: list[Identifier]
    body: "BlockStatement"

    def __str__(self) -> str:
        return f"fn({', '.join(str(p) for p in self.parameters)}) {self.body}"


@dataclass
class CallExpression:
    function: "Expression"
    arguments: list["Expression"] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.function}({', '.join(str(a) for a in self.arguments)})"


Expression = (
    EmptyExpression
    | Identifier
    | IntegerLiteral
    | BooleanLiteral
    | PrefixExpression
    | InfixExpression
    | IfExpression
    | FunctionLiteral
    | CallExpression
)


@dataclass
class EmptyStatement:
    def __str__(self) -> str:
        return ""


@dataclass
class LetStatement:
    name: str
    value: Expression

    def __str__(self) -> str:
        return f"let {self.name} = {self.value};"


@dataclass
class ReturnStatement:
    value: Expression = field(default_factory=EmptyExpression)

    def __str__(self) -> str:
        if isinstance(self.value, EmptyExpression):
            return "return;"
        return f"return {self.value};"


@dataclass
class ExpressionStatement:
    expression: Expression

    def __str__(self) -> str:
        return str(self.expression)


@dataclass
class BlockStatement:
    statements: list["Statement"] = field(default_factory=list)

    def __str__(self) -> str:
        if not self.statements:
            return "{ }"
        return "{ " + " ".join(_render_statements(self.statements)) + " }"


Statement = EmptyStatement | LetStatement | ReturnStatement | ExpressionStatement | BlockStatement


@dataclass
class Program:
    statements: list[Statement] = field(default_factory=list)

    def __str__(self) -> str:
        return "\n".join(_render_statements(self.statements))


def _render_statements(statements: list[Statement]) -> list[str]:
    rendered = []
    for i, statement in enumerate(statements):
        text = str(statement)
        # a following "(" would otherwise continue the expression as a call
        if isinstance(statement, ExpressionStatement) and i < len(statements) - 1:
            text += ";"
        rendered.append(text)
    return rendered
