"""Expansion of named bindings inside λ-terms.

Every free Variable naming a binding is replaced by a clone of the binding's definition, itself expanded in turn.
Expansion is a walk with an explicit stack of the names currently being expanded: reaching a name that is already on
the stack means the definitions are cyclic. Free variables that name no binding are left as they are, except decimal
literals, which stand for their Church numeral.

An expanded definition keeps its free variables free: an enclosing Abstraction of the expanded name that binds one of
them is alpha-converted to a fresh name first.
"""

from lcinterp.lang.error import ResolutionError
from lcinterp.lang.numerical import cnumber
from lcinterp.pure.cloner import TermCloner
from lcinterp.pure.reducer import fresh_name
from lcinterp.pure.term import Visitor, binding_abstraction


class BindingResolver(Visitor):

    def __init__(self, environment):
        self.environment = environment
        self.cloner = TermCloner()

        self._scope = []      # enclosing Abstractions of the node being visited
        self._expanding = []  # names whose definitions are being expanded, outermost first

    def resolve(self, term):
        """Returns term with every bound name expanded. term itself may be modified."""
        self._scope = []
        self._expanding = []
        return term.accept(self)

    def visit_variable(self, variable):
        if binding_abstraction(variable.name, self._scope) is not None:
            return variable

        definition = self.environment.lookup(variable.name)
        if definition is None:
            if variable.name.isdigit():
                return cnumber(int(variable.name))
            return variable

        if variable.name in self._expanding:
            cycle = self._expanding[self._expanding.index(variable.name):] + [variable.name]
            raise ResolutionError(f"cyclic definition: {' -> '.join(cycle)}")

        # definitions are closed over the environment only, not over the scope they are expanded in
        scope, self._scope = self._scope, []
        self._expanding.append(variable.name)
        try:
            expansion = self.cloner.clone(definition).accept(self)
        finally:
            self._expanding.pop()
            self._scope = scope

        self.avoid_capture(expansion)
        return expansion

    def avoid_capture(self, expansion):
        """Alpha-converts the enclosing Abstractions that would capture a free variable of expansion. Returns the
        converted Abstractions.
        """
        binders = (binding_abstraction(name, self._scope) for name in sorted(expansion.free_variable_names()))
        capturing = [binder for binder in binders if binder is not None]

        for binder in capturing:
            # a new binder name can only clash within binder's subtree
            new_name = fresh_name(binder.name, binder.names() | expansion.names())
            binder.alpha_convert(new_name)

        return capturing

    def visit_abstraction(self, abstraction):
        self._scope.append(abstraction)
        try:
            abstraction.body = abstraction.body.accept(self)
        finally:
            self._scope.pop()
        return abstraction

    def visit_application(self, application):
        application.func = application.func.accept(self)
        application.argument = application.argument.accept(self)
        return application
