import abc
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from monkey.ast import BlockStatement, Identifier
from monkey.errors import MonkeyRuntimeError

if TYPE_CHECKING:
    from monkey.environment import Environment


class Value(abc.ABC):
    @classmethod
    @abc.abstractmethod
    def type_name(cls) -> str:
        ...

    def cast_to_boolean(self) -> "Boolean":
        raise MonkeyRuntimeError(f"cannot cast {self} to boolean")


UnaryOperationImpl = Callable[[Value], Value]
BinaryOperationImpl = Callable[[Value, Value], Value]


@dataclass
class Integer(Value):
    v: int

    @classmethod
    def type_name(cls) -> str:
        return "INTEGER"

    def cast_to_boolean(self) -> "Boolean":
        return TRUE if self.v != 0 else FALSE

    def __str__(self) -> str:
        return str(self.v)


@dataclass
class Boolean(Value):
    v: bool

    @classmethod
    def type_name(cls) -> str:
        return "BOOLEAN"

    def cast_to_boolean(self) -> "Boolean":
        return self

    def __str__(self) -> str:
        return "true" if self.v else "false"


@dataclass
class Null(Value):
    @classmethod
    def type_name(cls) -> str:
        return "NULL"

    def cast_to_boolean(self) -> "Boolean":
        return FALSE

    def __str__(self) -> str:
        return "null"


@dataclass
class ReturnValue(Value):
    """Marks a value produced by `return` while it travels up to the enclosing call or program"""

    value: Value

    @classmethod
    def type_name(cls) -> str:
        return "RETURN_VALUE"

    def cast_to_boolean(self) -> "Boolean":
        return self.value.cast_to_boolean()

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class Function(Value):
    parameters: list[Identifier]
    body: BlockStatement
    # defining scope; a closure shares it rather than copying it
    env: "Environment" = field(compare=False, repr=False)

    @classmethod
    def type_name(cls) -> str:
        return "FUNCTION"

    def __str__(self) -> str:
        return f"fn({', '.join(str(p) for p in self.parameters)}) {self.body}"


NULL = Null()
TRUE = Boolean(True)
FALSE = Boolean(False)
