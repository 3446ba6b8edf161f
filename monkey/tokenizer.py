import enum
import string
import unicodedata
from dataclasses import dataclass, field
from typing import Iterator

from monkey.utils import PrintableEnum


class TokenType(PrintableEnum):
    EOF = enum.auto()
    ILLEGAL = enum.auto()

    IDENT = enum.auto()
    INT = enum.auto()

    ASSIGN = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    BANG = enum.auto()
    ASTERISK = enum.auto()
    SLASH = enum.auto()
    LT = enum.auto()
    GT = enum.auto()
    EQ = enum.auto()
    NOT_EQ = enum.auto()

    COMMA = enum.auto()
    SEMICOLON = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()
    LBRACE = enum.auto()
    RBRACE = enum.auto()

    FUNCTION = enum.auto()
    LET = enum.auto()
    TRUE = enum.auto()
    FALSE = enum.auto()
    IF = enum.auto()
    ELSE = enum.auto()
    RETURN = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    start: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


KEYWORDS = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}


SINGLE_CHAR_TOKENS = {
    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "!": TokenType.BANG,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LT,
    ">": TokenType.GT,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

# keyed by the first char; the second char must follow immediately
TWO_CHAR_TOKENS = {
    "=": ("=", TokenType.EQ),
    "!": ("=", TokenType.NOT_EQ),
}


def lookup_ident(word: str) -> TokenType:
    return KEYWORDS.get(word, TokenType.IDENT)


def _is_valid_in_number(s: str) -> bool:
    return s in string.digits


def _is_valid_in_identifier(s: str) -> bool:
    return not (
        s in string.digits or s.isspace() or s in string.punctuation or unicodedata.category(s) == "Cc"
    )


class Lexer:
    def __init__(self, code: str) -> None:
        self.code = code
        self.position = 0

    def next_token(self) -> Token:
        code = self.code
        while self.position < len(code) and code[self.position].isspace():
            self.position += 1

        i = self.position
        if i >= len(code):
            return Token(type=TokenType.EOF, lexeme="", start=len(code))

        char = code[i]
        if char in TWO_CHAR_TOKENS and code[i + 1 : i + 2] == TWO_CHAR_TOKENS[char][0]:
            token = Token(type=TWO_CHAR_TOKENS[char][1], lexeme=code[i : i + 2], start=i)
        elif char in SINGLE_CHAR_TOKENS:
            token = Token(type=SINGLE_CHAR_TOKENS[char], lexeme=char, start=i)
        elif _is_valid_in_number(char):
            token = Token(type=TokenType.INT, lexeme=self._read_while(_is_valid_in_number), start=i)
        elif _is_valid_in_identifier(char):
            word = self._read_while(_is_valid_in_identifier)
            token = Token(type=lookup_ident(word), lexeme=word, start=i)
        else:
            token = Token(type=TokenType.ILLEGAL, lexeme=char, start=i)

        self.position = i + len(token.lexeme)
        return token

    def _read_while(self, predicate) -> str:
        end_idx = self.position + 1
        while end_idx < len(self.code) and predicate(self.code[end_idx]):
            end_idx += 1
        return self.code[self.position : end_idx]

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return


def tokenize(code: str) -> list[Token]:
    return list(Lexer(code))
