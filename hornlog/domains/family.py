"""
Domain: Family tree.

The classic ancestor program:

    parent(bill, audrey).    parent(maria, bill).
    parent(joe, maria).      parent(charles, joe).

    ancestor(X, Y) :- parent(X, Y).
    ancestor(X, Y) :- parent(X, Z) & ancestor(Z, Y).

Default goal: ancestor(charles, Y) -- four answers, joe, maria, bill, audrey.
"""

from ..core.terms import Variable, constant
from ..formulas import Predicate, AndOperator
from ..proof.clauses import HornClause, RuleSet


PARENTS = [
    ("bill", "audrey"),
    ("maria", "bill"),
    ("joe", "maria"),
    ("charles", "joe"),
]


def make_family_rules(parents=None) -> RuleSet:
    """Parent facts followed by the two ancestor rules."""
    parents = PARENTS if parents is None else parents
    facts = [
        HornClause(Predicate("parent", constant(p), constant(c)))
        for p, c in parents
    ]

    X, Y, Z = Variable("X"), Variable("Y"), Variable("Z")
    rules = [
        HornClause(
            Predicate("ancestor", X, Y),
            AndOperator(Predicate("parent", X, Y)),
        ),
        HornClause(
            Predicate("ancestor", X, Y),
            AndOperator(
                Predicate("parent", X, Z),
                Predicate("ancestor", Z, Y),
            ),
        ),
    ]
    return RuleSet(*facts, *rules)


def make_family_goal(person: str = "charles") -> Predicate:
    """Who is person an ancestor of?"""
    return Predicate("ancestor", constant(person), Variable("Y"))
