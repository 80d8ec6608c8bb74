"""Natural numbers encoded as Church numerals. Note that operations are not implemented here (see prelude.py) and that
numerals are built as ordinary λ-terms, thus keeping everything as pure as possible.

Source: https://en.wikipedia.org/wiki/Church_encoding#Calculation_with_Church_numerals
"""

from lcinterp.pure.term import Abstraction, Application, TermKind, Variable


def cnumber(num):
    """Returns Church numeral of natural number num (cnum = Church numeral): λf.λx.f (f (... (f x)))."""
    if isinstance(num, bool) or not isinstance(num, int) or num < 0:
        raise ValueError(f"expected natural number, got '{num}'")

    body = Variable("x")
    for __ in range(num):
        body = Application(Variable("f"), body)

    return Abstraction("f", Abstraction("x", body))


def number(cnum):
    """Returns the natural number encoded by cnum, up to alpha-equivalence. If cnum isn't a Church numeral, returns
    None.
    """
    if cnum.kind is not TermKind.ABSTRACTION or cnum.body.kind is not TermKind.ABSTRACTION:
        return None

    func, arg = cnum.name, cnum.body.name
    body = cnum.body.body

    if func == arg:  # λf.λf.M: func is shadowed, so only M == f can be a numeral (zero)
        return 0 if body.kind is TermKind.VARIABLE and body.name == arg else None

    num = 0
    while body.kind is TermKind.APPLICATION:
        if body.func.kind is not TermKind.VARIABLE or body.func.name != func:
            return None
        body = body.argument
        num += 1

    return num if body.kind is TermKind.VARIABLE and body.name == arg else None
