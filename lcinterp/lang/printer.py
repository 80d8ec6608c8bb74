"""Renders λ-terms back to lc syntax. Output is always re-parsable into the same tree: a func is parenthesized if it is
an Abstraction, and an argument is parenthesized unless it is a Variable.
"""

from lcinterp.pure.term import TermKind, Visitor


class TermPrinter(Visitor):
    LAMBDA = "λ"

    def print(self, term):
        return term.accept(self)

    def visit_variable(self, variable):
        return variable.name

    def visit_abstraction(self, abstraction):
        return f"{TermPrinter.LAMBDA}{abstraction.name}.{abstraction.body.accept(self)}"

    def visit_application(self, application):
        func = application.func.accept(self)
        if application.func.kind is TermKind.ABSTRACTION:
            func = f"({func})"

        argument = application.argument.accept(self)
        if application.argument.kind is not TermKind.VARIABLE:
            argument = f"({argument})"

        return f"{func} {argument}"


def print_term(term):
    return TermPrinter().print(term)
