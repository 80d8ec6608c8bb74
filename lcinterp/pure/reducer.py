"""Normal-order beta reduction of λ-terms.

Reduction mutates the tree in place: the body of a contracted redex is reused as the result, with a fresh clone of the
argument spliced in for every occurrence of the parameter. Before splicing, nested binders that would capture a free
variable of the argument are alpha-converted to fresh names.
"""

from lcinterp.lang.error import ReductionDivergence, Verbosity
from lcinterp.lang.printer import print_term
from lcinterp.pure.cloner import TermCloner
from lcinterp.pure.term import Visitor, binding_abstraction


def fresh_name(name, taken):
    """Returns name with the smallest numeric suffix such that the result is not in taken."""
    stem = name.rstrip("0123456789") or name
    suffix = 1
    while f"{stem}{suffix}" in taken:
        suffix += 1
    return f"{stem}{suffix}"


class _Splicer(Visitor):
    """Replaces the Variables whose ids are in targets with independent clones of replacement. Visiting a node returns
    the node that should take its place.
    """

    def __init__(self, targets, replacement):
        self.targets = targets
        self.replacement = replacement
        self.cloner = TermCloner()

    def visit_variable(self, variable):
        if id(variable) in self.targets:
            return self.cloner.clone(self.replacement)
        return variable

    def visit_abstraction(self, abstraction):
        abstraction.body = abstraction.body.accept(self)
        return abstraction

    def visit_application(self, application):
        application.func = application.func.accept(self)
        application.argument = application.argument.accept(self)
        return application


class _LeftmostOutermost(Visitor):
    """Contracts the leftmost outermost redex. Visiting a node returns the node that should take its place, or None if
    the subtree is already in normal form.
    """

    def __init__(self, reducer):
        self.reducer = reducer

    def visit_variable(self, variable):
        return None

    def visit_abstraction(self, abstraction):
        body = abstraction.body.accept(self)
        if body is None:
            return None

        abstraction.body = body
        return abstraction

    def visit_application(self, application):
        if application.is_redex:
            return self.reducer.beta_reduce(application)

        func = application.func.accept(self)
        if func is not None:
            application.func = func
            return application

        argument = application.argument.accept(self)
        if argument is not None:
            application.argument = argument
            return application

        return None


class Reducer:
    """Implements normal-order beta reduction with a bound on the number of contractions."""
    MAX_REDUCTIONS = 10000

    def __init__(self, max_reductions=MAX_REDUCTIONS, logger=None):
        self.max_reductions = max_reductions
        self.logger = logger

    def reduce(self, term):
        """Reduces term to normal form and returns it. term itself may be consumed in the process. Raises
        ReductionDivergence if more than max_reductions contractions are needed.
        """
        stepper = _LeftmostOutermost(self)
        reductions = 0

        while True:
            reduct = term.accept(stepper)
            if reduct is None:
                return term

            reductions += 1
            if reductions > self.max_reductions:
                raise ReductionDivergence(f"no beta normal form found within {self.max_reductions} reductions")

            term = reduct
            if self.logger is not None and self.logger.enabled(Verbosity.HIGH):
                self.logger.vvlog(f"β > {print_term(term)}")

    def beta_reduce(self, redex):
        """Contracts redex (λx.B) A and returns B with A substituted for the free occurrences of x."""
        abstraction, argument = redex.func, redex.argument
        self.avoid_capture(abstraction, argument)

        targets = {id(var) for var in abstraction.own_variables()}
        return abstraction.body.accept(_Splicer(targets, argument))

    @staticmethod
    def avoid_capture(abstraction, argument):
        """Alpha-converts every Abstraction nested in abstraction's body that encloses an occurrence of abstraction's
        parameter and binds a name free in argument. Returns the converted Abstractions.
        """
        free = argument.free_variable_names()
        if not free:
            return []

        conflicts = {}
        for var, scope in abstraction.variables():
            if binding_abstraction(var.name, scope) is not abstraction:
                continue
            for binder in scope[1:]:  # scope[0] is abstraction itself
                if binder.name in free:
                    conflicts[id(binder)] = binder

        taken = abstraction.names() | argument.names()
        for binder in conflicts.values():
            new_name = fresh_name(binder.name, taken)
            taken.add(new_name)
            binder.alpha_convert(new_name)

        return list(conflicts.values())
