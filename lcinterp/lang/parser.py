"""Recursive-descent parser turning lc tokens into statements. Grammar:

```
<program>   ::= <statement>* EOF
<statement> ::= NEWLINE
              | "env" NEWLINE | "help" NEWLINE | "unbind" <name> NEWLINE
              | <name> ("|" <name>)* "=" <λ-term> NEWLINE
              | <λ-term> NEWLINE
<λ-term>    ::= "λ" <name>+ "." <λ-term>     ; "λx y.M" is shorthand for "λx.λy.M"
              | <atom>+ ["λ" ...]            ; application, associating by left; abstraction bodies are greedy
<atom>      ::= <name> | "(" <λ-term> ")"
```

A syntax error is reported and the parser skips to the next statement, so that every syntax error in a batch is
reported at once.
"""

from lcinterp.lang.error import LexError, Logger, ParseError
from lcinterp.lang.lexer import Lexer
from lcinterp.lang.statements import BindingStmt, CommandKind, CommandStmt, TermStmt
from lcinterp.lang.tokens import TokenKind
from lcinterp.pure.term import Abstraction, Application, Variable


class Parser:
    ATOM_STARTS = (TokenKind.IDENTIFIER, TokenKind.LPAREN)

    def __init__(self, tokens, logger=None):
        self.tokens = tokens
        self.logger = logger if logger is not None else Logger()
        self.current = 0

    def parse(self):
        """Returns list of statements. Errors are reported through the logger."""
        statements = []
        while not self.check(TokenKind.EOF):
            try:
                stmt = self.statement()
            except ParseError as error:
                self.logger.report(error)
                self.synchronize()
            else:
                if stmt is not None:
                    statements.append(stmt)
        return statements

    def statement(self):
        token = self.peek()

        if self.match(TokenKind.NEWLINE):
            return None

        if self.match(TokenKind.ENV):
            stmt = CommandStmt(CommandKind.ENV, token=token)
        elif self.match(TokenKind.HELP):
            stmt = CommandStmt(CommandKind.HELP, token=token)
        elif self.match(TokenKind.UNBIND):
            name = self.consume(TokenKind.IDENTIFIER, "Expected a name after 'unbind'")
            stmt = CommandStmt(CommandKind.UNBIND, name.lexeme, token=token)
        elif self.check(TokenKind.IDENTIFIER) and self.check_next((TokenKind.EQUALS, TokenKind.PIPE)):
            stmt = self.binding()
        else:
            stmt = TermStmt(self.term(), token=token)

        self.consume(TokenKind.NEWLINE, "Expected end of statement")
        return stmt

    def binding(self):
        token = self.peek()
        names = [self.advance().lexeme]
        while self.match(TokenKind.PIPE):
            names.append(self.consume(TokenKind.IDENTIFIER, "Expected an alias after '|'").lexeme)
        self.consume(TokenKind.EQUALS, "Expected '=' after binding name")

        return BindingStmt(BindingStmt.ALIAS_SEPARATOR.join(names), self.term(), token=token)

    def term(self):
        if self.check(TokenKind.LAMBDA):
            return self.abstraction()

        term = self.atom()
        while self.check(Parser.ATOM_STARTS) or self.check(TokenKind.LAMBDA):
            argument = self.abstraction() if self.check(TokenKind.LAMBDA) else self.atom()
            term = Application(term, argument)
        return term

    def abstraction(self):
        self.consume(TokenKind.LAMBDA, "Expected 'λ'")
        names = [self.consume(TokenKind.IDENTIFIER, "Expected a parameter name after 'λ'").lexeme]
        while self.check(TokenKind.IDENTIFIER):
            names.append(self.advance().lexeme)
        self.consume(TokenKind.DOT, "Expected '.' after parameter name")

        body = self.term()
        for name in reversed(names):
            body = Abstraction(name, body)
        return body

    def atom(self):
        if self.check(TokenKind.IDENTIFIER):
            return Variable(self.advance().lexeme)

        if self.match(TokenKind.LPAREN):
            term = self.term()
            self.consume(TokenKind.RPAREN, "Expected ')'")
            return term

        raise self.error(self.peek(), "Expected a λ-term")

    def synchronize(self):
        """Skips tokens up to and including the end of the current statement."""
        while not self.check(TokenKind.EOF):
            if self.advance().kind is TokenKind.NEWLINE:
                return

    def check(self, kinds):
        if isinstance(kinds, TokenKind):
            kinds = (kinds,)
        return self.peek().kind in kinds

    def check_next(self, kinds):
        if self.current + 1 >= len(self.tokens):
            return False
        return self.tokens[self.current + 1].kind in kinds

    def match(self, kind):
        if self.check(kind):
            self.advance()
            return True
        return False

    def consume(self, kind, message):
        if self.check(kind):
            return self.advance()
        raise self.error(self.peek(), message)

    def peek(self):
        return self.tokens[self.current]

    def advance(self):
        token = self.tokens[self.current]
        if token.kind is not TokenKind.EOF:
            self.current += 1
        return token

    @staticmethod
    def error(token, message):
        if token.kind is TokenKind.NEWLINE:
            message += ", got end of line"
        elif token.kind is not TokenKind.EOF:
            message += f", got '{token.lexeme}'"
        return ParseError(message, token)


def parse_term(source):
    """Parses a single λ-term from source. Raises the first LexError/ParseError encountered instead of reporting it."""
    tokens = Lexer(source, _RaisingLogger()).lex_tokens()
    parser = Parser(tokens, _RaisingLogger())

    term = parser.term()
    parser.match(TokenKind.NEWLINE)
    if not parser.check(TokenKind.EOF):
        raise Parser.error(parser.peek(), "Expected end of λ-term")
    return term


class _RaisingLogger(Logger):

    def report_error(self, token, message):
        if token is not None and token.kind is TokenKind.ERROR:
            raise LexError(message, token)
        raise ParseError(message, token)
