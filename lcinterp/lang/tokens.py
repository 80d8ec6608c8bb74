"""Tokens shared by the lexer, the parser and error reporting."""

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    LPAREN = "("
    RPAREN = ")"
    LAMBDA = "λ"
    DOT = "."
    EQUALS = "="
    PIPE = "|"
    NEWLINE = "<newline>"
    IDENTIFIER = "identifier"
    ENV = "env"
    UNBIND = "unbind"
    HELP = "help"
    ERROR = "error"
    EOF = "<eof>"


@dataclass(frozen=True)
class Token:
    """Token in lc source. line and start are 1-based, start and length are in characters."""
    kind: TokenKind
    lexeme: str
    line: int
    start: int
    length: int

    def __str__(self):
        return f"{self.kind.name}({self.lexeme!r})"
