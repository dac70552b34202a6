"""
hornlog: a first-order Horn clause reasoning core.

Terms, substitutions and Robinson unification with occurs check, plus a
resumable depth-first resolution engine that hands out the solutions to a
query one at a time, on demand.

Usage:
    python -m hornlog --domain family
    python -m hornlog --domain peano
    python -m hornlog --domain graph
"""

from .core.symbols import Symbol, SymbolTable, DEFAULT_SYMBOLS, intern
from .core.substitution import Substitution
from .core.unification import unify, contains_variable
from .core.terms import Unifiable, Term, Variable, Function, constant
from .formulas import (
    Formula, Predicate, AndOperator, OrOperator, NotOperator,
    ImpliesOperator, TruthValue, TRUE, FALSE,
)
from .proof.clauses import HornClause, RuleSet
from .proof.tree import (
    SolutionNode, PredicateSolutionNode, AndSolutionNode,
    get_solver, UnsupportedGoalError,
)
from .proof.query import solutions, run_query, QueryResult

__all__ = [
    "Symbol", "SymbolTable", "DEFAULT_SYMBOLS", "intern",
    "Substitution", "unify", "contains_variable",
    "Unifiable", "Term", "Variable", "Function", "constant",
    "Formula", "Predicate", "AndOperator", "OrOperator", "NotOperator",
    "ImpliesOperator", "TruthValue", "TRUE", "FALSE",
    "HornClause", "RuleSet",
    "SolutionNode", "PredicateSolutionNode", "AndSolutionNode",
    "get_solver", "UnsupportedGoalError",
    "solutions", "run_query", "QueryResult",
]
