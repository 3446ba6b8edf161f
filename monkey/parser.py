import enum
from dataclasses import dataclass
from typing import Callable

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
from monkey.errors import MonkeyError
from monkey.tokenizer import Lexer, Token, TokenType
from monkey.utils import point_at

INT64_MAX = 2**63 - 1


@dataclass
class ParserError(MonkeyError):
    errmsg: str
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        return "\n".join([f"[Parser error] {self.errmsg}", point_at(self.code, self.error_char_idx)])


class Precedence(enum.IntEnum):
    LOWEST = enum.auto()
    EQUALS = enum.auto()  # ==
    LESSGREATER = enum.auto()  # > or <
    SUM = enum.auto()  # +
    PRODUCT = enum.auto()  # *
    PREFIX = enum.auto()  # -X or !X
    CALL = enum.auto()  # myFunction(X)


PRECEDENCES = {
    TokenType.EQ: Precedence.EQUALS,
    TokenType.NOT_EQ: Precedence.EQUALS,
    TokenType.LT: Precedence.LESSGREATER,
    TokenType.GT: Precedence.LESSGREATER,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.ASTERISK: Precedence.PRODUCT,
    TokenType.SLASH: Precedence.PRODUCT,
    TokenType.LPAREN: Precedence.CALL,
}


PrefixParseFn = Callable[[], Expression]
InfixParseFn = Callable[[Expression], Expression]


class Parser:
    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self.cur_token = lexer.next_token()
        self.peek_token = lexer.next_token()

        self.prefix_parse_fns: dict[TokenType, PrefixParseFn] = {
            TokenType.IDENT: self._parse_identifier,
            TokenType.INT: self._parse_integer_literal,
            TokenType.TRUE: self._parse_boolean,
            TokenType.FALSE: self._parse_boolean,
            TokenType.BANG: self._parse_prefix_expression,
            TokenType.MINUS: self._parse_prefix_expression,
            TokenType.LPAREN: self._parse_grouped_expression,
            TokenType.IF: self._parse_if_expression,
            TokenType.FUNCTION: self._parse_function_literal,
        }
        self.infix_parse_fns: dict[TokenType, InfixParseFn] = {
            TokenType.PLUS: self._parse_infix_expression,
            TokenType.MINUS: self._parse_infix_expression,
            TokenType.ASTERISK: self._parse_infix_expression,
            TokenType.SLASH: self._parse_infix_expression,
            TokenType.EQ: self._parse_infix_expression,
            TokenType.NOT_EQ: self._parse_infix_expression,
            TokenType.LT: self._parse_infix_expression,
            TokenType.GT: self._parse_infix_expression,
            TokenType.LPAREN: self._parse_call_expression,
        }

    def parse_program(self) -> Program:
        program = Program()
        while self.cur_token.type is not TokenType.EOF:
            statement = self._parse_statement()
            if not isinstance(statement, EmptyStatement):
                program.statements.append(statement)
            self._next_token()
        return program

    def parse_expression(self, precedence: Precedence) -> Expression:
        prefix = self.prefix_parse_fns.get(self.cur_token.type)
        if prefix is None:
            raise self._error(f"no prefix parse function for {self.cur_token.type} found", self.cur_token)
        left = prefix()

        while self.peek_token.type is not TokenType.SEMICOLON and precedence < self._peek_precedence():
            infix = self.infix_parse_fns[self.peek_token.type]
            self._next_token()
            left = infix(left)

        return left

    def _next_token(self) -> None:
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def _error(self, errmsg: str, token: Token) -> ParserError:
        return ParserError(errmsg, code=self.lexer.code, error_char_idx=token.start)

    def _expect_peek(self, token_type: TokenType) -> None:
        if self.peek_token.type is not token_type:
            raise self._error(
                f"expected next token to be {token_type}, got {self.peek_token.type} instead", self.peek_token
            )
        self._next_token()

    def _peek_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.peek_token.type, Precedence.LOWEST)

    def _cur_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.cur_token.type, Precedence.LOWEST)

    # statements

    def _parse_statement(self) -> Statement:
        if self.cur_token.type is TokenType.LET:
            return self._parse_let_statement()
        elif self.cur_token.type is TokenType.RETURN:
            return self._parse_return_statement()
        elif self.cur_token.type is TokenType.LBRACE:
            return self._parse_block_statement()
        elif self.cur_token.type is TokenType.SEMICOLON:
            return EmptyStatement()
        else:
            return self._parse_expression_statement()

    def _parse_let_statement(self) -> LetStatement:
        self._expect_peek(TokenType.IDENT)
        name = self.cur_token.lexeme
        self._expect_peek(TokenType.ASSIGN)
        self._next_token()
        value = self.parse_expression(Precedence.LOWEST)
        self._expect_peek(TokenType.SEMICOLON)
        return LetStatement(name=name, value=value)

    def _parse_return_statement(self) -> ReturnStatement:
        if self.peek_token.type is TokenType.SEMICOLON:
            self._next_token()
            return ReturnStatement(EmptyExpression())
        self._next_token()
        value = self.parse_expression(Precedence.LOWEST)
        self._expect_peek(TokenType.SEMICOLON)
        return ReturnStatement(value)

    def _parse_block_statement(self) -> BlockStatement:
        """Expects current token to be the opening brace, leaves it at the closing one"""
        block = BlockStatement()
        self._next_token()
        while self.cur_token.type is not TokenType.RBRACE:
            if self.cur_token.type is TokenType.EOF:
                raise self._error(
                    f"expected next token to be {TokenType.RBRACE}, got {TokenType.EOF} instead", self.cur_token
                )
            statement = self._parse_statement()
            if not isinstance(statement, EmptyStatement):
                block.statements.append(statement)
            self._next_token()
        return block

    def _parse_expression_statement(self) -> ExpressionStatement:
        expression = self.parse_expression(Precedence.LOWEST)
        if self.peek_token.type is TokenType.SEMICOLON:
            self._next_token()
        return ExpressionStatement(expression)

    # prefix parse functions

    def _parse_identifier(self) -> Expression:
        return Identifier(self.cur_token.lexeme)

    def _parse_integer_literal(self) -> Expression:
        digits = self.cur_token.lexeme.lstrip("0") or "0"
        # int() refuses very long digit strings, so reject them by length first
        if len(digits) > len(str(INT64_MAX)) or int(digits) > INT64_MAX:
            raise self._error(f"could not parse {self.cur_token.lexeme!r} as 64-bit integer", self.cur_token)
        return IntegerLiteral(int(digits))

    def _parse_boolean(self) -> Expression:
        return BooleanLiteral(self.cur_token.type is TokenType.TRUE)

    def _parse_prefix_expression(self) -> Expression:
        operator = self.cur_token.lexeme
        self._next_token()
        right = self.parse_expression(Precedence.PREFIX)
        return PrefixExpression(operator=operator, right=right)

    def _parse_grouped_expression(self) -> Expression:
        self._next_token()
        expression = self.parse_expression(Precedence.LOWEST)
        self._expect_peek(TokenType.RPAREN)
        return expression

    def _parse_if_expression(self) -> Expression:
        self._expect_peek(TokenType.LPAREN)
        self._next_token()
        condition = self.parse_expression(Precedence.LOWEST)
        self._expect_peek(TokenType.RPAREN)
        self._expect_peek(TokenType.LBRACE)
        consequence = self._parse_block_statement()

        alternative = None
        if self.peek_token.type is TokenType.ELSE:
            self._next_token()
            self._expect_peek(TokenType.LBRACE)
            alternative = self._parse_block_statement()

        return IfExpression(condition=condition, consequence=consequence, alternative=alternative)

    def _parse_function_literal(self) -> Expression:
        self._expect_peek(TokenType.LPAREN)
        parameters = self._parse_function_parameters()
        self._expect_peek(TokenType.LBRACE)
        body = self._parse_block_statement()
        return FunctionLiteral(parameters=parameters, body=body)

    def _parse_function_parameters(self) -> list[Identifier]:
        parameters: list[Identifier] = []
        if self.peek_token.type is TokenType.RPAREN:
            self._next_token()
            return parameters

        self._expect_peek(TokenType.IDENT)
        parameters.append(Identifier(self.cur_token.lexeme))
        while self.peek_token.type is TokenType.COMMA:
            self._next_token()
            self._expect_peek(TokenType.IDENT)
            parameters.append(Identifier(self.cur_token.lexeme))

        self._expect_peek(TokenType.RPAREN)
        return parameters

    # infix parse functions

    def _parse_infix_expression(self, left: Expression) -> Expression:
        operator = self.cur_token.lexeme
        precedence = self._cur_precedence()
        self._next_token()
        right = self.parse_expression(precedence)
        return InfixExpression(left=left, operator=operator, right=right)

    def _parse_call_expression(self, function: Expression) -> Expression:
        return CallExpression(function=function, arguments=self._parse_call_arguments())

    def _parse_call_arguments(self) -> list[Expression]:
        arguments: list[Expression] = []
        if self.peek_token.type is TokenType.RPAREN:
            self._next_token()
            return arguments

        self._next_token()
        arguments.append(self.parse_expression(Precedence.LOWEST))
        while self.peek_token.type is TokenType.COMMA:
            self._next_token()
            self._next_token()
            arguments.append(self.parse_expression(Precedence.LOWEST))

        self._expect_peek(TokenType.RPAREN)
        return arguments


def parse(code: str) -> Program:
    parser = Parser(Lexer(code))
    try:
        return parser.parse_program()
    except RecursionError:
        raise ParserError(
            "expression is nested too deeply", code=code, error_char_idx=parser.cur_token.start
        ) from None
