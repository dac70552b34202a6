"""
Domain: Peano arithmetic as a logic program.

Naturals are successor terms: 0, s(0), s(s(0)), ...

    nat(0).
    nat(s(X)) :- nat(X).

    plus(0, Y, Y).
    plus(s(X), Y, s(Z)) :- plus(X, Y, Z).

Default goal: plus(A, B, 2) -- every way to split 2 into two naturals.
Asking nat(N) instead enumerates the naturals forever; run_query's
max_solutions is what stops it.
"""

from ..core.terms import Function, Variable, constant
from ..formulas import Predicate, AndOperator
from ..proof.clauses import HornClause, RuleSet


def numeral(n: int) -> Function:
    """s(s(...s(0)...)) with n successors."""
    if n < 0:
        raise ValueError(f"Peano numerals are non-negative, got {n}")
    term = constant("0")
    for _ in range(n):
        term = Function("s", term)
    return term


def to_int(term) -> int:
    """Inverse of numeral(). Raises ValueError for anything that is not a ground numeral."""
    count = 0
    while isinstance(term, Function) and term.name == "s" and term.arity == 1:
        count += 1
        term = term.args[0]
    if not (isinstance(term, Function) and term.name == "0" and term.is_constant()):
        raise ValueError(f"{term} is not a Peano numeral")
    return count


def make_peano_rules() -> RuleSet:
    X, Y, Z = Variable("X"), Variable("Y"), Variable("Z")
    zero = constant("0")
    return RuleSet(
        HornClause(Predicate("nat", zero)),
        HornClause(
            Predicate("nat", Function("s", X)),
            AndOperator(Predicate("nat", X)),
        ),
        HornClause(Predicate("plus", zero, Y, Y)),
        HornClause(
            Predicate("plus", Function("s", X), Y, Function("s", Z)),
            AndOperator(Predicate("plus", X, Y, Z)),
        ),
    )


def make_peano_goal(total: int = 2) -> Predicate:
    """plus(A, B, total)"""
    return Predicate("plus", Variable("A"), Variable("B"), numeral(total))
