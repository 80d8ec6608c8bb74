"""Fingerprints of λ-terms used to report equivalence between evaluated terms and named bindings.

A single walk computes two hashes:
- identity: bound variables contribute their de Bruijn index and free variables their name, so two terms hash equal
  (barring collisions) iff they are alpha-equivalent
- structure: same as identity, except that a free variable only contributes the fact that it is free, so terms that
  differ only in the names of their free variables also hash equal

Neither hash is ever used to decide anything during reduction: collisions only produce a wrong equivalence report.
"""

from collections import namedtuple

from lcinterp.pure.term import Visitor

TermHashes = namedtuple("TermHashes", ["identity", "structure"])


class TermHasher(Visitor):

    def __init__(self):
        self._binders = []  # names of enclosing Abstractions, outermost first

    def hash(self, term):
        self._binders = []
        return term.accept(self)

    def _index(self, name):
        """de Bruijn index of name in the current scope, or None if name is free."""
        for index, binder in enumerate(reversed(self._binders)):
            if binder == name:
                return index
        return None

    def visit_variable(self, variable):
        index = self._index(variable.name)
        if index is None:
            return TermHashes(hash(("free", variable.name)), hash(("free",)))

        bound = hash(("bound", index))
        return TermHashes(bound, bound)

    def visit_abstraction(self, abstraction):
        self._binders.append(abstraction.name)
        try:
            body = abstraction.body.accept(self)
        finally:
            self._binders.pop()

        return TermHashes(hash(("abstraction", body.identity)), hash(("abstraction", body.structure)))

    def visit_application(self, application):
        func = application.func.accept(self)
        argument = application.argument.accept(self)

        return TermHashes(
            hash(("application", func.identity, argument.identity)),
            hash(("application", func.structure, argument.structure))
        )


def hash_terms(term):
    return TermHasher().hash(term)


def hash_term(term):
    """Alpha-equivalence fingerprint of term."""
    return hash_terms(term).identity


def hash_term_structure(term):
    """Shape fingerprint of term, blind to the names of free variables."""
    return hash_terms(term).structure
