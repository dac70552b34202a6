"""
Horn clauses and rule sets: the logic program a query runs against.

A HornClause has at most one positive literal. Here it is split by which
parts are present:

    HornClause(parent(bill, audrey))                     fact
    HornClause(ancestor(X, Y), AndOperator(parent(X, Y)))  rule
    HornClause(antecedent=AndOperator(p(X), q(X)))        goal clause

A RuleSet is a fixed, ordered tuple of clauses. Every time the search uses
a clause it asks for a copy standardized apart, so the same rule used in
two branches never shares variables.
"""

from typing import Optional

from ..formulas import Formula, Predicate


class HornClause:
    """consequent :- antecedent"""

    def __init__(self, consequent: Optional[Predicate] = None,
                 antecedent: Optional[Formula] = None):
        if consequent is None and antecedent is None:
            raise ValueError("A HornClause needs a consequent, an antecedent, or both")
        if consequent is not None and not isinstance(consequent, Predicate):
            raise TypeError(f"A clause head must be a Predicate, got {consequent!r}")
        if antecedent is not None and not isinstance(antecedent, Formula):
            raise TypeError(f"A clause body must be a Formula, got {antecedent!r}")
        self.consequent = consequent
        self.antecedent = antecedent

    def is_fact(self) -> bool:
        return self.consequent is not None and self.antecedent is None

    def is_definite_clause(self) -> bool:
        return self.consequent is not None and self.antecedent is not None

    def is_goal_clause(self) -> bool:
        return self.consequent is None and self.antecedent is not None

    def replace_variables(self, substitution) -> "HornClause":
        return HornClause(
            self.consequent.replace_variables(substitution) if self.consequent is not None else None,
            self.antecedent.replace_variables(substitution) if self.antecedent is not None else None,
        )

    def standardize_apart(self, new_variables: Optional[dict] = None) -> "HornClause":
        """Copy with fresh variables, renamed consistently across head and body."""
        if new_variables is None:
            new_variables = {}
        return HornClause(
            self.consequent.standardize_apart(new_variables) if self.consequent is not None else None,
            self.antecedent.standardize_apart(new_variables) if self.antecedent is not None else None,
        )

    def __eq__(self, other):
        return (isinstance(other, HornClause) and
                self.consequent == other.consequent and
                self.antecedent == other.antecedent)

    def __hash__(self):
        return hash((self.consequent, self.antecedent))

    def __repr__(self):
        return f"HornClause({self})"

    def __str__(self):
        if self.is_fact():
            return f"{self.consequent}."
        if self.is_goal_clause():
            return f":- {self.antecedent}."
        return f"{self.consequent} :- {self.antecedent}."


class RuleSet:
    """An ordered, read-only sequence of HornClauses."""

    def __init__(self, *rules: HornClause):
        for rule in rules:
            if rule is None:
                raise ValueError("A RuleSet cannot contain None")
            if not isinstance(rule, HornClause):
                raise TypeError(f"RuleSet entries must be HornClauses, got {rule!r}")
        self._rules = tuple(rules)

    def get_rule(self, index: int) -> HornClause:
        return self._rules[index]

    def standardized_apart(self, index: int) -> HornClause:
        """Copy of the clause at index with every variable replaced by a fresh one."""
        return self._rules[index].standardize_apart({})

    @property
    def rule_count(self) -> int:
        return len(self._rules)

    def __len__(self):
        return len(self._rules)

    def __getitem__(self, index):
        return self._rules[index]

    def __iter__(self):
        return iter(self._rules)

    def __repr__(self):
        return f"RuleSet({len(self._rules)} rules)"
