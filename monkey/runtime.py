import sys
from typing import Optional, Type

from monkey.ast import (
    BlockStatement,
    BooleanLiteral,
    CallExpression,
    EmptyExpression,
    EmptyStatement,
    Expression,
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
    Statement,
)
from monkey.environment import Environment
from monkey.errors import MonkeyRuntimeError
from monkey.parser import parse
from monkey.value import (
    FALSE,
    NULL,
    TRUE,
    BinaryOperationImpl,
    Boolean,
    Function,
    Integer,
    Null,
    ReturnValue,
    UnaryOperationImpl,
    Value,
)

DEFAULT_MAX_CALL_DEPTH = 400

# Python frames one language-level call takes in the common case
FRAMES_PER_CALL = 16
MAX_RECURSION_LIMIT = 8000

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Evaluator:
    def __init__(self, max_call_depth: int = DEFAULT_MAX_CALL_DEPTH) -> None:
        self.max_call_depth = max_call_depth
        self.call_depth = 0

    def eval_program(self, program: Program, env: Environment) -> Value:
        recursion_limit = sys.getrecursionlimit()
        sys.setrecursionlimit(
            max(recursion_limit, min(MAX_RECURSION_LIMIT, self.max_call_depth * FRAMES_PER_CALL + 1000))
        )
        try:
            result = self.eval_statements(program.statements, env)
        except RecursionError:
            raise MonkeyRuntimeError("stack overflow: expression is nested too deeply") from None
        finally:
            self.call_depth = 0
            sys.setrecursionlimit(recursion_limit)
        if isinstance(result, ReturnValue):
            return result.value
        return result

    def eval_statements(self, statements: list[Statement], env: Environment) -> Value:
        result: Value = NULL
        for statement in statements:
            result = self.eval_statement(statement, env)
            if isinstance(result, ReturnValue):
                break
        return result

    def eval_statement(self, statement: Statement, env: Environment) -> Value:
        if isinstance(statement, ExpressionStatement):
            return self.eval_expression(statement.expression, env)
        elif isinstance(statement, LetStatement):
            value = self.eval_expression(statement.value, env)
            if isinstance(value, ReturnValue):
                return value
            env.set(statement.name, value)
            return NULL
        elif isinstance(statement, ReturnStatement):
            value = self.eval_expression(statement.value, env)
            if isinstance(value, ReturnValue):
                return value
            return ReturnValue(value)
        elif isinstance(statement, BlockStatement):
            return self.eval_statements(statement.statements, env)
        elif isinstance(statement, EmptyStatement):
            return NULL
        else:
            raise MonkeyRuntimeError(f"Unexpected statement type: {statement}")

    def eval_expression(self, expression: Expression, env: Environment) -> Value:
        if isinstance(expression, IntegerLiteral):
            return Integer(expression.value)
        elif isinstance(expression, BooleanLiteral):
            return TRUE if expression.value else FALSE
        elif isinstance(expression, EmptyExpression):
            return NULL
        elif isinstance(expression, Identifier):
            value = env.get(expression.name)
            if value is None:
                raise MonkeyRuntimeError(f"identifier not found: {expression.name}")
            return value
        elif isinstance(expression, PrefixExpression):
            operand = self.eval_expression(expression.right, env)
            if isinstance(operand, ReturnValue):
                return operand
            return eval_prefix_operation(expression.operator, operand)
        elif isinstance(expression, InfixExpression):
            left = self.eval_expression(expression.left, env)
            if isinstance(left, ReturnValue):
                return left
            right = self.eval_expression(expression.right, env)
            if isinstance(right, ReturnValue):
                return right
            return eval_infix_operation(expression.operator, left, right)
        elif isinstance(expression, IfExpression):
            condition = self.eval_expression(expression.condition, env)
            if isinstance(condition, ReturnValue):
                return condition
            if condition.cast_to_boolean().v:
                return self.eval_statement(expression.consequence, env)
            elif expression.alternative is not None:
                return self.eval_statement(expression.alternative, env)
            else:
                return NULL
        elif isinstance(expression, FunctionLiteral):
            return Function(parameters=expression.parameters, body=expression.body, env=env)
        elif isinstance(expression, CallExpression):
            function = self.eval_expression(expression.function, env)
            if isinstance(function, ReturnValue):
                return function
            arguments: list[Value] = []
            for argument_expression in expression.arguments:
                argument = self.eval_expression(argument_expression, env)
                if isinstance(argument, ReturnValue):
                    return argument
                arguments.append(argument)
            return self.apply_function(function, arguments)
        else:
            raise MonkeyRuntimeError(f"Unexpected expression type: {expression}")

    def apply_function(self, function: Value, arguments: list[Value]) -> Value:
        if not isinstance(function, Function):
            raise MonkeyRuntimeError(f"not a function: {function.type_name()}")
        if len(arguments) != len(function.parameters):
            raise MonkeyRuntimeError(
                f"wrong number of arguments: expected {len(function.parameters)}, got {len(arguments)}"
            )
        if self.call_depth >= self.max_call_depth:
            raise MonkeyRuntimeError(f"stack overflow: maximum call depth of {self.max_call_depth} exceeded")

        # the call scope hangs off the defining scope, not the caller's
        call_env = function.env.enclosed()
        for parameter, argument in zip(function.parameters, arguments):
            call_env.set(parameter.name, argument)

        self.call_depth += 1
        try:
            result = self.eval_statement(function.body, call_env)
        finally:
            self.call_depth -= 1

        if isinstance(result, ReturnValue):
            return result.value
        return result


def eval_program(program: Program, env: Environment, max_call_depth: int = DEFAULT_MAX_CALL_DEPTH) -> Value:
    return Evaluator(max_call_depth=max_call_depth).eval_program(program, env)


def evaluate(
    code: str, env: Optional[Environment] = None, max_call_depth: int = DEFAULT_MAX_CALL_DEPTH
) -> Value:
    if env is None:
        env = Environment()
    return eval_program(parse(code), env, max_call_depth=max_call_depth)


def _int64(v: int) -> Integer:
    if not INT64_MIN <= v <= INT64_MAX:
        raise MonkeyRuntimeError(f"integer overflow: {v} does not fit in 64 bits")
    return Integer(v)


def _divide(a: Integer, b: Integer) -> Integer:
    if b.v == 0:
        raise MonkeyRuntimeError(f"division by zero: {a} / {b}")
    quotient = abs(a.v) // abs(b.v)
    return _int64(quotient if (a.v < 0) == (b.v < 0) else -quotient)


BinaryOperationImplTable = list[tuple[tuple[Type[Value], Type[Value]], BinaryOperationImpl]]

_equality_impls: BinaryOperationImplTable = [
    ((Integer, Integer), lambda a, b: TRUE if a == b else FALSE),
    ((Boolean, Boolean), lambda a, b: TRUE if a == b else FALSE),
    ((Null, Null), lambda a, b: TRUE),
]
_inequality_impls: BinaryOperationImplTable = [
    ((Integer, Integer), lambda a, b: TRUE if a != b else FALSE),
    ((Boolean, Boolean), lambda a, b: TRUE if a != b else FALSE),
    ((Null, Null), lambda a, b: FALSE),
]

INFIX_IMPLS: dict[str, BinaryOperationImplTable] = {
    "+": [((Integer, Integer), lambda a, b: _int64(a.v + b.v))],  # type: ignore
    "-": [((Integer, Integer), lambda a, b: _int64(a.v - b.v))],  # type: ignore
    "*": [((Integer, Integer), lambda a, b: _int64(a.v * b.v))],  # type: ignore
    "/": [((Integer, Integer), _divide)],  # type: ignore
    "<": [((Integer, Integer), lambda a, b: TRUE if a.v < b.v else FALSE)],  # type: ignore
    ">": [((Integer, Integer), lambda a, b: TRUE if a.v > b.v else FALSE)],  # type: ignore
    "==": _equality_impls,
    "!=": _inequality_impls,
}


def eval_infix_operation(operator: str, a: Value, b: Value) -> Value:
    if type(a) is not type(b):
        raise MonkeyRuntimeError(f"type mismatch: {a.type_name()} {operator} {b.type_name()}")
    for (type_a, type_b), impl in INFIX_IMPLS.get(operator, []):
        if isinstance(a, type_a) and isinstance(b, type_b):
            return impl(a, b)
    else:
        raise MonkeyRuntimeError(f"unknown operator: {a.type_name()} {operator} {b.type_name()}")


UnaryOperationImplTable = list[tuple[Type[Value], UnaryOperationImpl]]

PREFIX_IMPLS: dict[str, UnaryOperationImplTable] = {
    "!": [(Value, lambda a: FALSE if a.cast_to_boolean().v else TRUE)],
    "-": [(Integer, lambda a: _int64(-a.v))],  # type: ignore
}


def eval_prefix_operation(operator: str, operand: Value) -> Value:
    if operator not in PREFIX_IMPLS:
        raise MonkeyRuntimeError(f"unknown operator: {operator}{operand.type_name()}")
    for operand_type, impl in PREFIX_IMPLS[operator]:
        if isinstance(operand, operand_type):
            return impl(operand)
    else:
        raise MonkeyRuntimeError(f"cannot use {operator!r} operator on {operand}")
