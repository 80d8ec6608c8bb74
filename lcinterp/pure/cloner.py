"""Deep copies of λ-terms. Any term that is duplicated (substitution, name expansion) goes through here so that no two
owners ever share a subtree.
"""

from lcinterp.pure.term import Abstraction, Application, Variable, Visitor


class TermCloner(Visitor):

    def clone(self, term):
        return term.accept(self)

    def visit_variable(self, variable):
        return Variable(variable.name)

    def visit_abstraction(self, abstraction):
        return Abstraction(abstraction.name, abstraction.body.accept(self))

    def visit_application(self, application):
        return Application(application.func.accept(self), application.argument.accept(self))


def clone(term):
    return TermCloner().clone(term)
