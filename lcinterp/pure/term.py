"""Pure lambda calculus syntax tree.

The `pure` directory contains the pure lambda calculus engine: terms, cloning, hashing and reduction. Formally, pure
lambda calculus can be defined as

```
<λ-term> ::= <name>                   ; "variable"
           | "λ" <name> "." <λ-term>  ; "abstraction"
           | <λ-term> <λ-term>        ; "application"
                                      ; - associating by left: abcd = (((a b) c) d)
```

Nodes don't keep references to their parents. Anything that needs to know which Abstraction binds a Variable threads a
scope through the walk instead: a tuple of the enclosing Abstractions, outermost first. A Variable is bound by the
innermost Abstraction in its scope with the same name, and is free if there is none.

Sources: https://plato.stanford.edu/entries/lambda-calculus/#Com,
         http://pages.cs.wisc.edu/~horwitz/CS704-NOTES/1.LAMBDA-CALCULUS.html#NOR
"""

from abc import abstractmethod, ABC
from enum import Enum


class TermKind(Enum):
    VARIABLE = "variable"
    ABSTRACTION = "abstraction"
    APPLICATION = "application"


def binding_abstraction(name, scope):
    """Returns the innermost Abstraction in scope that binds name, or None if name is free in scope."""
    for abstraction in reversed(scope):
        if abstraction.name == name:
            return abstraction
    return None


class Visitor(ABC):
    """Target of Term.accept. Every kind of Term must be handled."""

    @abstractmethod
    def visit_variable(self, variable):
        ...

    @abstractmethod
    def visit_abstraction(self, abstraction):
        ...

    @abstractmethod
    def visit_application(self, application):
        ...


class Term(ABC):
    """Represents a valid λ-term: variable, abstraction, or application."""
    kind = None

    @abstractmethod
    def accept(self, visitor):
        """Calls the visitor method matching this node's kind and returns its result."""

    @abstractmethod
    def rename(self, new_name, root, scope=()):
        """Renames the binder introduced by Abstraction root to new_name, along with exactly the Variables that root
        binds. scope is the tuple of Abstractions enclosing self.
        """

    @abstractmethod
    def variables(self, scope=()):
        """Yields (variable, scope) for every Variable in this subtree, scope being its enclosing Abstractions."""

    @abstractmethod
    def names(self):
        """Set of every variable and binder name in this subtree."""

    @property
    def is_redex(self):
        return False

    def bound_variables(self):
        """Every Variable in this subtree that is bound by an Abstraction in this subtree."""
        return [var for var, scope in self.variables() if binding_abstraction(var.name, scope) is not None]

    def bound_variable_names(self):
        return {var.name for var in self.bound_variables()}

    def free_variable_names(self, scope=()):
        return {var.name for var, var_scope in self.variables(scope) if binding_abstraction(var.name, var_scope) is None}


class Variable(Term):
    """Variable in lambda calculus."""
    kind = TermKind.VARIABLE

    def __init__(self, name):
        self.name = name

    def accept(self, visitor):
        return visitor.visit_variable(self)

    def rename(self, new_name, root, scope=()):
        if binding_abstraction(self.name, scope) is root:
            self.name = new_name

    def variables(self, scope=()):
        yield self, scope

    def names(self):
        return {self.name}

    def __eq__(self, other):
        return isinstance(other, Variable) and self.name == other.name

    def __repr__(self):
        return f"Variable({self.name!r})"


class Abstraction(Term):
    """Abstraction: the basic datatype in lambda calculus."""
    kind = TermKind.ABSTRACTION

    def __init__(self, name, body):
        self.name = name
        self.body = body

    def accept(self, visitor):
        return visitor.visit_abstraction(self)

    def rename(self, new_name, root, scope=()):
        # body first, so that lookups in the body still see the original name
        self.body.rename(new_name, root, scope + (self,))
        if self is root:
            self.name = new_name

    def alpha_convert(self, new_name):
        """In-place alpha conversion of this Abstraction's parameter to new_name."""
        self.rename(new_name, self)

    def variables(self, scope=()):
        yield from self.body.variables(scope + (self,))

    def names(self):
        return self.body.names() | {self.name}

    def own_variables(self):
        """Variables bound by this exact Abstraction: the targets of substitution during beta reduction."""
        return [var for var, scope in self.variables() if binding_abstraction(var.name, scope) is self]

    def __eq__(self, other):
        return isinstance(other, Abstraction) and self.name == other.name and self.body == other.body

    def __repr__(self):
        return f"Abstraction({self.name!r}, {self.body!r})"


class Application(Term):
    """Application of func to argument."""
    kind = TermKind.APPLICATION

    def __init__(self, func, argument):
        self.func = func
        self.argument = argument

    def accept(self, visitor):
        return visitor.visit_application(self)

    def rename(self, new_name, root, scope=()):
        self.func.rename(new_name, root, scope)
        self.argument.rename(new_name, root, scope)

    def variables(self, scope=()):
        yield from self.func.variables(scope)
        yield from self.argument.variables(scope)

    def names(self):
        return self.func.names() | self.argument.names()

    @property
    def is_redex(self):
        """An Application is a redex if its func is an Abstraction."""
        return self.func.kind is TermKind.ABSTRACTION

    def __eq__(self, other):
        return isinstance(other, Application) and self.func == other.func and self.argument == other.argument

    def __repr__(self):
        return f"Application({self.func!r}, {self.argument!r})"
