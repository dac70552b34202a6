from .symbols import Symbol, SymbolTable, DEFAULT_SYMBOLS, intern
from .substitution import Substitution
from .unification import (
    is_variable, is_compound, unify, contains_variable,
    replace_variables, standardize_apart,
)
from .terms import Unifiable, Term, Variable, Function, constant

__all__ = [
    "Symbol", "SymbolTable", "DEFAULT_SYMBOLS", "intern",
    "Substitution",
    "is_variable", "is_compound", "unify", "contains_variable",
    "replace_variables", "standardize_apart",
    "Unifiable", "Term", "Variable", "Function", "constant",
]
