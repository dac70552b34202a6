"""
Domain: Reachability in a directed graph.

    edge(a, b).  edge(b, c).  edge(c, d).  edge(a, c).

    path(X, Y) :- edge(X, Y).
    path(X, Y) :- edge(X, Z) & path(Z, Y).

path is right-recursive, so depth-first search terminates on any acyclic
graph. Every distinct route is a distinct proof, so a node reachable two
ways is reported twice.
"""

from ..core.terms import Variable, constant
from ..formulas import Predicate, AndOperator
from ..proof.clauses import HornClause, RuleSet


EDGES = [("a", "b"), ("b", "c"), ("c", "d"), ("a", "c")]


def make_graph_rules(edges=None) -> RuleSet:
    edges = EDGES if edges is None else edges
    X, Y, Z = Variable("X"), Variable("Y"), Variable("Z")
    return RuleSet(
        *[HornClause(Predicate("edge", constant(u), constant(v))) for u, v in edges],
        HornClause(Predicate("path", X, Y), AndOperator(Predicate("edge", X, Y))),
        HornClause(
            Predicate("path", X, Y),
            AndOperator(Predicate("edge", X, Z), Predicate("path", Z, Y)),
        ),
    )


def make_graph_goal(start: str = "a") -> Predicate:
    """Everything reachable from start."""
    return Predicate("path", constant(start), Variable("Y"))
