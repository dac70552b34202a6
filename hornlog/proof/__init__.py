from .clauses import HornClause, RuleSet
from .tree import (
    SolutionNode, PredicateSolutionNode, AndSolutionNode,
    get_solver, UnsupportedGoalError,
)
from .query import solutions, run_query, QueryResult

__all__ = [
    "HornClause", "RuleSet",
    "SolutionNode", "PredicateSolutionNode", "AndSolutionNode",
    "get_solver", "UnsupportedGoalError",
    "solutions", "run_query", "QueryResult",
]
