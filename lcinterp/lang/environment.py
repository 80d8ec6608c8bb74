"""Named bindings of an interpreter session, together with the hash indices used to report which names a term is
equivalent to.
"""

from lcinterp.lang.error import BindingError
from lcinterp.lang.statements import BindingStmt
from lcinterp.pure.hasher import hash_terms


class HashIndex:
    """Maps a term hash to the names bound to terms with that hash. Buckets are never deleted, only emptied."""

    def __init__(self):
        self._buckets = {}

    def add(self, key, name):
        self._buckets.setdefault(key, set()).add(name)

    def discard(self, key, name):
        if key in self._buckets:
            self._buckets[key].discard(name)

    def get(self, key):
        return frozenset(self._buckets.get(key, ()))


class BindingEnvironment:
    """Alias table of name: definition. Aliases bound together share one definition, but are indexed and removed
    independently.
    """

    def __init__(self):
        self._bindings = {}
        self._hashes = {}  # name: TermHashes of its definition, so that unbinding doesn't need to rehash
        self.identity = HashIndex()
        self.structure = HashIndex()

    def bind(self, name, term):
        """Binds term to every alias in name ("a|b" binds both a and b), replacing previous definitions."""
        hashes = hash_terms(term)
        for alias in name.split(BindingStmt.ALIAS_SEPARATOR):
            if alias in self._bindings:
                self._unindex(alias)

            self._bindings[alias] = term
            self._hashes[alias] = hashes
            self.identity.add(hashes.identity, alias)
            self.structure.add(hashes.structure, alias)

    def unbind(self, name):
        if name not in self._bindings:
            raise BindingError(f"'{name}' is not bound")

        self._unindex(name)
        del self._bindings[name]

    def _unindex(self, name):
        hashes = self._hashes.pop(name)
        self.identity.discard(hashes.identity, name)
        self.structure.discard(hashes.structure, name)

    def lookup(self, name):
        """Definition bound to name, or None."""
        return self._bindings.get(name)

    def equivalents(self, term):
        """Returns (names of terms alpha-equivalent to term, names of terms structurally equivalent to term)."""
        hashes = hash_terms(term)
        return self.identity.get(hashes.identity), self.structure.get(hashes.structure)

    def items(self):
        return self._bindings.items()

    def __contains__(self, name):
        return name in self._bindings

    def __iter__(self):
        return iter(self._bindings)

    def __len__(self):
        return len(self._bindings)
