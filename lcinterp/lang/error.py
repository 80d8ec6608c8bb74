"""Error handling and output for the lc language. Only GenericExceptions should be encountered during interpretation:
lexical and syntax errors abort a whole batch, while resolution, divergence and binding errors only abort the statement
that raised them.
"""

import sys
from enum import IntEnum

from termcolor import colored

from lcinterp.lang.tokens import TokenKind


class Verbosity(IntEnum):
    NONE = 0
    LOW = 1
    HIGH = 2


class GenericException(Exception):
    """Templates an lc error. token is the Token the error should be reported at, if known."""

    def __init__(self, msg, token=None):
        super().__init__(msg)
        self.msg = msg
        self.token = token


class LexError(GenericException):
    """Unexpected character in source."""


class ParseError(GenericException):
    """Malformed statement."""


class ResolutionError(GenericException):
    """Name whose expansion leads back to itself."""


class ReductionDivergence(GenericException):
    """Term that did not reach a normal form within the reduction bound."""


class BindingError(GenericException):
    """Command referring to a name that isn't bound."""


class Logger:
    """Leveled output plus error reporting with source diagnostics. Also a context manager that reports and suppresses
    lc errors, used by the shell so that a bad line doesn't end the session.
    """
    ERROR = "red"

    def __init__(self, verbosity=Verbosity.NONE, output_stream=None, color=True):
        self.verbosity = verbosity
        self.output_stream = output_stream  # None means sys.stdout at time of writing
        self.color = color

        self.had_error = False
        self.source = []

    def set_source(self, source):
        """Registers source text, used to display the offending line of reported errors."""
        self.source = source.split("\n")

    def clear_error(self):
        self.had_error = False

    def log(self, *message):
        self._print(message, Verbosity.NONE)

    def vlog(self, *message):
        self._print(message, Verbosity.LOW)

    def vvlog(self, *message):
        self._print(message, Verbosity.HIGH)

    def enabled(self, verbosity):
        return self.verbosity >= verbosity

    def report(self, error):
        """Reports GenericException error at its token."""
        self.report_error(error.token, error.msg)

    def report_error(self, token, message):
        self.had_error = True

        if token is None:
            where = ""
        elif token.kind is TokenKind.EOF:
            where = " at end of file"
        else:
            where = f" at line {token.line} [{token.start}, {token.start + token.length}]"

        self.log(self._colored(f"error{where}: ", Logger.ERROR) + message)

        if token is not None:
            diagnosis = self.diagnose(token)
            if diagnosis:
                self.log(diagnosis)

    def diagnose(self, token):
        """Returns the source line of token with its span underlined, or "" if the line isn't known."""
        if not 0 < token.line <= len(self.source):
            return ""

        line = self.source[token.line - 1]
        start = token.start - 1
        if token.kind is TokenKind.EOF:
            start = len(line)

        indicator = "^" + "~" * (max(token.length, 1) - 1)
        return f"  {line}\n  {' ' * start}{self._colored(indicator, Logger.ERROR)}"

    def _colored(self, text, color):
        return colored(text, color, attrs=["bold"], no_color=not self.color)

    def _print(self, message, verbosity):
        if self.verbosity < verbosity:
            return
        stream = self.output_stream if self.output_stream is not None else sys.stdout
        stream.write(" ".join(str(part) for part in message) + "\n")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            return False
        elif exc_type is KeyboardInterrupt:
            self.report_error(None, "keyboard interrupt")
        elif exc_type is RecursionError:
            self.report_error(None, "maximum recursion depth exceeded, λ-term is nested too deeply")
        elif issubclass(exc_type, GenericException):
            self.report(exc_val)
        else:
            return False
        return True
