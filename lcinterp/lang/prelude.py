"""Bindings every interpreter session starts with, written in lc itself. Definitions refer to each other by name and are
only expanded when used, so their order doesn't matter.
"""

from lcinterp.lang.numerical import cnumber
from lcinterp.lang.printer import print_term

PRELUDE = r"""
# logic
true = \t.\f.t
false = \t.\f.f
and = \a.\b.a b a
or = \a.\b.a a b
not = \b.b false true
if = \p.\a.\b.p a b

# lists
pair|cons = \x.\y.\f.f x y
first|car = \p.p true
second|cdr = \p.p false
nil|empty = \x.true
null|isempty = \p.p (\x.\y.false)

# trees
tree = \d.\l.\r.pair d (pair l r)
datum = \t.first t
left = \t.first (second t)
right = \t.second (second t)

# arithmetic
incr = \n.\f.\y.f (n f y)
plus = \m.\n.m incr n
times = \m.\n.m (plus n) zero
iszero = \n.n (\y.false) true
"""

NUMERALS = ["zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine"]


def prelude_source():
    """Returns prelude as lc source, including numerals 0-9."""
    numerals = [f"{num}|{name} = {print_term(cnumber(num))}" for num, name in enumerate(NUMERALS)]
    return PRELUDE + "\n# numerals\n" + "\n".join(numerals) + "\n"
