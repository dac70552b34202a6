"""
Domain registry.

Each domain is a dict describing a sample logic program:
    make_rules:   () -> RuleSet
    make_goal:    () -> Formula
    description:  str
"""

from .family import make_family_rules, make_family_goal
from .peano import make_peano_rules, make_peano_goal
from .graph import make_graph_rules, make_graph_goal


DOMAINS = {
    "family": {
        "make_rules":  make_family_rules,
        "make_goal":   make_family_goal,
        "description": "Family tree: who is charles an ancestor of?",
    },
    "peano": {
        "make_rules":  make_peano_rules,
        "make_goal":   make_peano_goal,
        "description": "Peano arithmetic: every A, B with A + B = 2",
    },
    "graph": {
        "make_rules":  make_graph_rules,
        "make_goal":   make_graph_goal,
        "description": "Graph reachability: every path starting at a",
    },
}
