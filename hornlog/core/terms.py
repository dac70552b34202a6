"""
Terms: the individuals a first-order formula talks about.

    Variable("X")                       -> X
    constant("alice")                   -> alice   (a Function of arity 0)
    Function("s", constant("0"))        -> s(0)
    Function("plus", X, Y)              -> plus(X, Y)

Variables are identified by instance, not by name: two Variable("X")
objects are different variables. Every Variable draws a process-unique id
from a monotonic counter when it is built.

Functions are immutable and compare structurally.
"""

import itertools
from typing import Optional

from .symbols import Symbol, SymbolTable, as_symbol
from .unification import (
    unify, contains_variable, replace_variables, standardize_apart,
)


class Unifiable:
    """Anything that can take part in unification: terms and predicates."""

    is_variable = False
    is_relation = False

    def unify(self, other, substitution=None):
        return unify(self, other, substitution)

    def contains_variable(self, variable, substitution=None) -> bool:
        return contains_variable(self, variable, substitution)

    def replace_variables(self, substitution):
        return replace_variables(self, substitution)

    def standardize_apart(self, new_variables: Optional[dict] = None):
        if new_variables is None:
            new_variables = {}
        return standardize_apart(self, new_variables)


class Term(Unifiable):
    """Base class for Variable and Function."""


_variable_ids = itertools.count()


class Variable(Term):
    is_variable = True

    def __init__(self, name: str):
        if not isinstance(name, str) or not name:
            raise ValueError(f"Variables need a non-empty name, got {name!r}")
        self.name = name
        self.id = next(_variable_ids)

    def fresh(self) -> "Variable":
        """A brand-new variable with the same display name."""
        return Variable(self.name)

    # Equality and hashing are the default identity semantics.

    def __repr__(self):
        return f"Variable({self.name!r}, id={self.id})"

    def __str__(self):
        return self.name


def check_terms(args, owner: str):
    for arg in args:
        if arg is None:
            raise ValueError(f"{owner} arguments cannot be None")
        if not isinstance(arg, Term):
            raise TypeError(f"{owner} arguments must be terms, got {arg!r}")


class Function(Term):
    """A function symbol applied to argument terms. Arity 0 is a constant."""

    def __init__(self, symbol, *args, table: Optional[SymbolTable] = None):
        check_terms(args, "Function")
        self.symbol: Symbol = as_symbol(symbol, table)
        self.args: tuple = tuple(args)

    @property
    def name(self) -> str:
        return self.symbol.name

    @property
    def arity(self) -> int:
        return len(self.args)

    def is_constant(self) -> bool:
        return not self.args

    def rebuild(self, args) -> "Function":
        return Function(self.symbol, *args)

    def __eq__(self, other):
        return (isinstance(other, Function) and
                self.symbol is other.symbol and
                self.args == other.args)

    def __hash__(self):
        return hash((Function, self.symbol, self.args))

    def __repr__(self):
        return f"Function({self})"

    def __str__(self):
        if not self.args:
            return self.symbol.name
        return f"{self.symbol.name}({', '.join(str(a) for a in self.args)})"


def constant(name, table: Optional[SymbolTable] = None) -> Function:
    """An atomic individual: a Function with no arguments."""
    return Function(name, table=table)
