"""
Formulas built on top of the term model.

    Predicate("parent", bill, audrey)          parent(bill, audrey)
    AndOperator(p, q, r)                       p & q & r
    OrOperator(p, q)                           p | q
    NotOperator(p)                             ~p
    ImpliesOperator(p, q)                      p -> q
    TRUE, FALSE                                constant truth values

Predicates are unifiable relations and are the leaves of every goal.
The connectives carry a truth value computed from their operands when they
are built (a predicate is true by construction), and support variable
replacement and renaming. Only Predicate and AndOperator goals can be
resolved against a rule base; see proof.tree.get_solver.
"""

from typing import Optional

from .core.symbols import Symbol, SymbolTable, as_symbol
from .core.terms import Unifiable, check_terms


class Formula:
    """Base class for predicates and connectives."""

    symbol: Symbol
    value: bool

    def is_literal(self) -> bool:
        raise NotImplementedError

    def is_atomic(self) -> bool:
        raise NotImplementedError

    def replace_variables(self, substitution) -> "Formula":
        raise NotImplementedError

    def standardize_apart(self, new_variables: Optional[dict] = None) -> "Formula":
        raise NotImplementedError

    def predicates(self):
        """Every Predicate in this formula, left to right."""
        raise NotImplementedError


class Predicate(Unifiable, Formula):
    """A named relation over terms. Arity 0 is a propositional atom."""

    is_relation = True

    def __init__(self, symbol, *terms, table: Optional[SymbolTable] = None):
        check_terms(terms, "Predicate")
        self.symbol = as_symbol(symbol, table)
        self.args = tuple(terms)
        self.value = True

    @property
    def name(self) -> str:
        return self.symbol.name

    @property
    def arity(self) -> int:
        return len(self.args)

    def is_propositional(self) -> bool:
        return not self.args

    def is_literal(self) -> bool:
        return True

    def is_atomic(self) -> bool:
        return True

    def rebuild(self, args) -> "Predicate":
        return Predicate(self.symbol, *args)

    def predicates(self):
        return [self]

    def __eq__(self, other):
        return (isinstance(other, Predicate) and
                self.symbol is other.symbol and
                self.args == other.args)

    def __hash__(self):
        return hash((Predicate, self.symbol, self.args))

    def __repr__(self):
        return f"Predicate({self})"

    def __str__(self):
        if not self.args:
            return self.symbol.name
        return f"{self.symbol.name}({', '.join(str(t) for t in self.args)})"


class AbstractOperator(Formula):
    """A connective over one or more operand formulas."""

    connective = ""
    separator = ""

    def __init__(self, *operands: Formula):
        if not operands:
            raise ValueError(f"{type(self).__name__} needs at least one operand")
        for operand in operands:
            if operand is None:
                raise ValueError("Operands cannot be None")
            if not isinstance(operand, Formula):
                raise TypeError(f"Operands must be formulas, got {operand!r}")
        self.symbol = as_symbol(self.connective)
        self.operands = tuple(operands)
        self.value = self._evaluate()

    def _evaluate(self) -> bool:
        raise NotImplementedError

    def is_literal(self) -> bool:
        return False

    def is_atomic(self) -> bool:
        return False

    def replace_variables(self, substitution):
        return type(self)(*(op.replace_variables(substitution) for op in self.operands))

    def standardize_apart(self, new_variables: Optional[dict] = None):
        if new_variables is None:
            new_variables = {}
        return type(self)(*(op.standardize_apart(new_variables) for op in self.operands))

    def predicates(self):
        found = []
        for operand in self.operands:
            found.extend(operand.predicates())
        return found

    def __len__(self):
        return len(self.operands)

    def __eq__(self, other):
        return type(self) is type(other) and self.operands == other.operands

    def __hash__(self):
        return hash((type(self), self.operands))

    def __repr__(self):
        return f"{type(self).__name__}({self})"

    def __str__(self):
        if len(self.operands) == 1:
            return f"{self.connective}({self.operands[0]})"
        return "(" + self.separator.join(str(op) for op in self.operands) + ")"


class AndOperator(AbstractOperator):
    """n-ary conjunction, solved as head & (tail as a smaller conjunction)."""

    connective = "and"
    separator = " & "

    def _evaluate(self) -> bool:
        return all(op.value for op in self.operands)

    def head(self) -> Formula:
        return self.operands[0]

    def tail(self) -> Optional["AndOperator"]:
        """The conjunction of every operand but the first, or None if there is only one."""
        if len(self.operands) == 1:
            return None
        return AndOperator(*self.operands[1:])


class OrOperator(AbstractOperator):
    connective = "or"
    separator = " | "

    def _evaluate(self) -> bool:
        return any(op.value for op in self.operands)


class NotOperator(AbstractOperator):
    connective = "not"

    def __init__(self, operand: Formula):
        super().__init__(operand)

    @property
    def operand(self) -> Formula:
        return self.operands[0]

    def _evaluate(self) -> bool:
        return not self.operand.value

    def is_literal(self) -> bool:
        # a literal is an atom or the negation of one
        return self.operand.is_atomic()

    def __str__(self):
        return f"~{self.operand}"


class ImpliesOperator(AbstractOperator):
    """antecedent -> consequent, false only when a true antecedent has a false consequent."""

    connective = "implies"
    separator = " -> "

    def __init__(self, antecedent: Formula, consequent: Formula):
        super().__init__(antecedent, consequent)

    @property
    def antecedent(self) -> Formula:
        return self.operands[0]

    @property
    def consequent(self) -> Formula:
        return self.operands[1]

    def _evaluate(self) -> bool:
        return not self.antecedent.value or self.consequent.value


class TruthValue(Formula):
    """The constant formulas TRUE and FALSE. Use those, never this class."""

    def __init__(self, value: bool):
        self.symbol = as_symbol("true" if value else "false")
        self.value = value

    def is_literal(self) -> bool:
        return True

    def is_atomic(self) -> bool:
        return True

    def replace_variables(self, substitution):
        return self

    def standardize_apart(self, new_variables: Optional[dict] = None):
        return self

    def predicates(self):
        return []

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __repr__(self):
        return self.symbol.name.upper()

    def __str__(self):
        return self.symbol.name


TRUE = TruthValue(True)
FALSE = TruthValue(False)
