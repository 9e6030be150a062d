"""Token model for PanLang source text."""

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    NUMBER = auto()      # maximal digit run
    STRING = auto()      # "...", lexeme keeps the quotes
    IDENTIFIER = auto()  # letter/underscore, then alphanumerics/underscores

    ASSIGN = auto()  # =
    PLUS = auto()    # +
    MINUS = auto()   # -
    TIMES = auto()   # *
    DIVIDE = auto()  # /
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    COMMA = auto()   # ,
    COLON = auto()   # :
    NEWLINE = auto()  # statement separator

    PRINT = auto()  # print

    EOF = auto()
    UNKNOWN = auto()  # only ever reported as a warning, never handed to the parser

    def __str__(self):
        return self.name

    __repr__ = __str__


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str
    line: int
    col: int

    def __str__(self):
        return f"<{self.kind}: {repr(self.lexeme)} at {self.line}:{self.col}>"

    __repr__ = __str__


KEYWORDS = {
    "print": TokenKind.PRINT,
}

SYNTAX = {
    "=": TokenKind.ASSIGN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.TIMES,
    "/": TokenKind.DIVIDE,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
}

WHITESPACE = " \t\r\f\v"  # newlines are tokens, not whitespace
