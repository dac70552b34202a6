"""
Robinson unification algorithm with occurs check.

Given two expressions and the substitution currently in effect, find the
most general extension of that substitution that makes them identical --
or report that none exists by returning None. Failure is ordinary control
flow here, never an exception.

Expressions:
    Variable           -> placeholder, is_variable = True
    Function           -> symbol + args; arity 0 is a constant
    Predicate          -> symbol + args, is_relation = True

Functions and predicates only unify with their own kind (or a variable).
Variable-to-variable bindings always point the newer variable at the
older one, so unify(a, b) and unify(b, a) produce the same bindings.
"""

from .substitution import Substitution


def is_variable(expr) -> bool:
    return getattr(expr, "is_variable", False)


def is_compound(expr) -> bool:
    """Functions (constants included) and predicates."""
    return hasattr(expr, "args") and hasattr(expr, "symbol")


def unify(a, b, substitution=None):
    """
    Unify a and b under substitution.

    Returns the extended Substitution, or None if they cannot be unified.
    The input substitution is never modified.
    """
    if a is None or b is None:
        raise ValueError("Cannot unify None")
    if substitution is None:
        substitution = Substitution()

    a = substitution.walk(a)
    b = substitution.walk(b)

    if a is b:
        return substitution

    if is_variable(a) and is_variable(b):
        older, newer = (a, b) if a.id < b.id else (b, a)
        return substitution.extend(newer, older)

    if is_variable(a):
        return _bind(a, b, substitution)

    if is_variable(b):
        return _bind(b, a, substitution)

    if a.is_relation != b.is_relation:
        return None  # a term never unifies with a relation

    if a.symbol is not b.symbol or len(a.args) != len(b.args):
        return None  # different functor or arity

    for arg_a, arg_b in zip(a.args, b.args):
        substitution = unify(arg_a, arg_b, substitution)
        if substitution is None:
            return None
    return substitution


def _bind(variable, value, substitution):
    if contains_variable(value, variable, substitution):
        return None  # occurs check: X unify f(X) is unsound
    return substitution.extend(variable, value)


def contains_variable(expr, variable, substitution=None) -> bool:
    """
    Does variable occur in expr, looking through the bindings in substitution?

    A variable can only contain another variable through its current
    binding, so bound variables are followed rather than compared.
    """
    if expr is variable:
        return True
    if is_variable(expr):
        if substitution is not None and substitution.is_bound(expr):
            return contains_variable(substitution.get_binding(expr), variable, substitution)
        return False
    if is_compound(expr):
        return any(contains_variable(arg, variable, substitution) for arg in expr.args)
    return False


def replace_variables(expr, substitution):
    """
    Apply substitution to a term or predicate. Follows chains.

    A variable bound to a Predicate can only be replaced where it stands
    alone: inside a Function or Predicate argument it would put a relation
    where a term belongs, and rebuilding that expression raises TypeError.
    """
    if is_variable(expr):
        if substitution.is_bound(expr):
            return replace_variables(substitution.get_binding(expr), substitution)
        return expr
    if not expr.args:
        return expr
    return expr.rebuild(tuple(replace_variables(arg, substitution) for arg in expr.args))


def standardize_apart(expr, new_variables: dict):
    """
    Copy expr with every variable replaced by a fresh one.

    new_variables maps original -> fresh and is shared across a whole
    clause, so a variable appearing twice is renamed consistently.
    """
    if is_variable(expr):
        if expr not in new_variables:
            new_variables[expr] = expr.fresh()
        return new_variables[expr]
    if not expr.args:
        return expr
    return expr.rebuild(tuple(standardize_apart(arg, new_variables) for arg in expr.args))
