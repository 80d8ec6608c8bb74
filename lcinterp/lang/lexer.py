"""Lexical analysis for the lc language. Grammar for tokens:

```
<identifier> ::= [a-z0-9]+                 ; "env", "unbind" and "help" are keywords, "lambda" is a λ
<lambda>     ::= "λ" | "\\" | "L" | "lambda"
<punctuation> ::= "(" | ")" | "." | "=" | "|"
<comment>    ::= "#" <char>*               ; runs until end of line
```

Statements are newline-terminated, so newlines are tokens too. An unexpected character is reported through the logger
and lexing goes on, so that every bad character in a batch is reported at once.
"""

import string

from lcinterp.lang.error import Logger
from lcinterp.lang.tokens import Token, TokenKind


class Lexer:
    KEYWORDS = {
        "lambda": TokenKind.LAMBDA,
        "env": TokenKind.ENV,
        "unbind": TokenKind.UNBIND,
        "help": TokenKind.HELP,
    }
    SINGLE_CHARS = {
        "(": TokenKind.LPAREN,
        ")": TokenKind.RPAREN,
        "λ": TokenKind.LAMBDA,
        "\\": TokenKind.LAMBDA,
        "L": TokenKind.LAMBDA,
        ".": TokenKind.DOT,
        "=": TokenKind.EQUALS,
        "|": TokenKind.PIPE,
    }
    IDENTIFIER_CHARS = set(string.ascii_lowercase + string.digits)
    WHITESPACE = {" ", "\t", "\r"}

    def __init__(self, source="", logger=None):
        self.source = source
        self.logger = logger if logger is not None else Logger()

        self.tokens = []
        self.start = 0      # index of first character of current token
        self.current = 0    # index of next character to read
        self.line = 1
        self.line_start = 0

    def lex_tokens(self):
        """Returns list of Tokens in source, always ending with NEWLINE and EOF."""
        while not self.is_at_end():
            self.start = self.current
            self.scan_token()

        self.start = self.current
        if self.tokens and self.tokens[-1].kind is not TokenKind.NEWLINE:
            self.tokens.append(self._make_token(TokenKind.NEWLINE, "<newline>", length=1))
        self.tokens.append(self._make_token(TokenKind.EOF, "", length=0))

        return self.tokens

    def scan_token(self):
        char = self.advance()

        if char in Lexer.SINGLE_CHARS:
            self.add_token(Lexer.SINGLE_CHARS[char])
        elif char in Lexer.WHITESPACE:
            pass
        elif char == "\n":
            self.tokens.append(self._make_token(TokenKind.NEWLINE, "<newline>", length=1))
            self.line += 1
            self.line_start = self.current
        elif char == "#":
            self.comment()
        elif char in Lexer.IDENTIFIER_CHARS:
            self.identifier()
        else:
            self.error(char, f"Unexpected character '{char}'")

    def identifier(self):
        while self.peek() in Lexer.IDENTIFIER_CHARS:
            self.advance()

        lexeme = self.source[self.start:self.current]
        self.add_token(Lexer.KEYWORDS.get(lexeme, TokenKind.IDENTIFIER))

    def comment(self):
        """Skips to end of line. The newline itself is left for scan_token, since it ends the statement."""
        while not self.is_at_end() and self.peek() != "\n":
            self.advance()

    def peek(self):
        return "" if self.is_at_end() else self.source[self.current]

    def advance(self):
        char = self.source[self.current]
        self.current += 1
        return char

    def is_at_end(self):
        return self.current >= len(self.source)

    def add_token(self, kind):
        self.tokens.append(self._make_token(kind, self.source[self.start:self.current]))

    def error(self, char, message):
        """Reports unexpected char as an ERROR token. Lexing continues."""
        self.logger.report_error(self._make_token(TokenKind.ERROR, char), message)

    def _make_token(self, kind, lexeme, length=None):
        if length is None:
            length = self.current - self.start
        return Token(kind, lexeme, self.line, self.start - self.line_start + 1, length)
