"""Interpreter sessions for the lc language. An Interpreter owns its binding environment for its whole lifetime:
statements run one at a time, each one seeing the bindings made by the statements before it.

Running a source batch goes:
    1. Lexer/Parser: source to statements. Any lexical or syntax error aborts the whole batch before anything runs
    2. Execution, per statement:
        - term: expand bound names, reduce to normal form, report equivalent bindings
        - binding: store the term under each of its aliases
        - command: list the environment, remove a binding, or show help
       An error in a statement is reported and execution goes on with the next one
"""

from dataclasses import dataclass
from typing import Optional, TextIO

from lcinterp.lang.environment import BindingEnvironment
from lcinterp.lang.error import GenericException, Logger, ReductionDivergence, Verbosity
from lcinterp.lang.lexer import Lexer
from lcinterp.lang.numerical import number
from lcinterp.lang.parser import Parser
from lcinterp.lang.prelude import prelude_source
from lcinterp.lang.printer import print_term
from lcinterp.lang.resolver import BindingResolver
from lcinterp.lang.statements import CommandKind, StmtVisitor
from lcinterp.pure.reducer import Reducer
from lcinterp.pure.term import Term

HELP = """Welcome to the lc interpreter!

Lambda calculus is a Turing-complete language created by Alonzo Church. Write an abstraction as '\\x.body' (or 'Lx.body',
'λx.body'), and an application by juxtaposition: 'f a b' is '(f a) b'.

  name = term       binds term to name ('a|b = term' binds several aliases at once)
  term              reduces term to normal form and lists the bindings it is equal to
  env               lists every binding
  unbind name       removes a binding
  # comment         ignored until end of line

Try it out by typing 'and true false'. This will reduce to the same term as 'false', and say so."""


@dataclass
class InterpreterOptions:
    verbosity: Verbosity = Verbosity.NONE
    max_reductions: int = Reducer.MAX_REDUCTIONS
    output_stream: Optional[TextIO] = None
    color: bool = True


@dataclass
class Evaluation:
    """Result of running a term statement."""
    normal_form: Term
    identical: frozenset    # names bound to a term alpha-equivalent to normal_form
    structural: frozenset   # names bound to a term with the same shape as normal_form
    numeral: Optional[int] = None


class Interpreter(StmtVisitor):
    """Governs an lc session: owns the binding environment and runs statements against it."""

    def __init__(self, options=None):
        self.options = options if options is not None else InterpreterOptions()

        self.logger = Logger(self.options.verbosity, self.options.output_stream, self.options.color)
        self.environment = BindingEnvironment()
        self.resolver = BindingResolver(self.environment)
        self.reducer = Reducer(self.options.max_reductions, self.logger)

        self.interpret(prelude_source())

    def interpret(self, source):
        """Runs every statement in source. Returns the Evaluations of its term statements, or [] if source has a
        lexical or syntax error.
        """
        self.logger.clear_error()
        self.logger.set_source(source)
        tokens = Lexer(source, self.logger).lex_tokens()
        statements = Parser(tokens, self.logger).parse()

        if self.logger.had_error:
            return []

        evaluations = []
        for stmt in statements:
            result = self.execute(stmt)
            if isinstance(result, Evaluation):
                evaluations.append(result)
        return evaluations

    def execute(self, stmt):
        """Runs a single statement. Errors are reported, not raised."""
        try:
            return stmt.accept(self)
        except GenericException as error:
            if error.token is None:
                error.token = stmt.token
            self.logger.report(error)
            return None

    def visit_term_stmt(self, stmt):
        self.logger.vlog(f"λ > {print_term(stmt.term)}")

        try:
            normal_form = self.reducer.reduce(self.resolver.resolve(stmt.term))
        except RecursionError:
            raise ReductionDivergence("beta normal form might exist, but maximum recursion depth exceeded") from None

        identical, structural = self.environment.equivalents(normal_form)
        evaluation = Evaluation(normal_form, identical, structural, number(normal_form))

        self.logger.log(f">>> {print_term(normal_form)}")
        if identical:
            self.logger.log(f"    ↳ equal to: {', '.join(sorted(identical))}")
        if structural:
            self.logger.log(f"    ↳ structurally equivalent to: {', '.join(sorted(structural))}")
        if evaluation.numeral is not None:
            self.logger.vlog(f"    ↳ church numeral: {evaluation.numeral}")
        if not identical and not structural:
            self.logger.log("")

        return evaluation

    def visit_binding_stmt(self, stmt):
        self.environment.bind(stmt.name, stmt.term)
        self.logger.vvlog(f"{', '.join(stmt.aliases)} := {print_term(stmt.term)}")

    def visit_command_stmt(self, stmt):
        if stmt.kind is CommandKind.ENV:
            for name, term in self.environment.items():
                self.logger.log(f"{name}:\t{print_term(term)}")
        elif stmt.kind is CommandKind.UNBIND:
            self.environment.unbind(stmt.argument)
        elif stmt.kind is CommandKind.HELP:
            self.logger.log(HELP)
