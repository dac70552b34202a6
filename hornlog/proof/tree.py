"""
The resolution search tree.

Each SolutionNode owns one goal and enough state to resume the search for
that goal where it left off: which rule it is trying (rule_cursor), the
substitution in effect when it was created (parent_solution), and any
child node still holding untried alternatives. next_solution() returns the
next substitution that satisfies the goal, or None once the space below
the node is exhausted -- and None forever after.

Search is depth-first, leftmost-first (SLD resolution):

    PredicateSolutionNode   goal p(...): try each clause whose head unifies,
                            descending into the clause body when there is one.
    AndSolutionNode         goal a & b & ...: for each solution of the head,
                            search the tail seeded with it; a failing tail
                            backtracks into the head.

Nodes are plain objects with a next_solution() method, not generators: the
resumable state is exactly the attributes listed on each class.
"""

from typing import Optional

from ..core.substitution import Substitution
from ..formulas import AndOperator, Formula, Predicate
from .clauses import HornClause, RuleSet


class UnsupportedGoalError(TypeError):
    """The solver was asked to resolve a goal shape it has no node type for."""


class SolutionNode:
    """Shared cursor and bookkeeping for every node type."""

    def __init__(self, rules: RuleSet, parent_solution: Substitution):
        self.rule_cursor = 0
        self.rules = rules
        self.parent_solution = parent_solution
        self.current_rule: Optional[HornClause] = None

    def next_solution(self) -> Optional[Substitution]:
        raise NotImplementedError

    def has_next_rule(self) -> bool:
        return self.rule_cursor < len(self.rules)

    def next_rule(self) -> Optional[HornClause]:
        """Advance to the next clause, standardized apart, or None when all have been tried."""
        if self.has_next_rule():
            self.current_rule = self.rules.standardized_apart(self.rule_cursor)
            self.rule_cursor += 1
        else:
            self.current_rule = None
        return self.current_rule

    def reset(self, new_parent_solution: Substitution):
        """Rewind to the first rule under a different parent substitution."""
        self.parent_solution = new_parent_solution
        self.rule_cursor = 0
        self.current_rule = None


class PredicateSolutionNode(SolutionNode):
    """Solves a single predicate goal against every clause in turn."""

    def __init__(self, goal: Predicate, rules: RuleSet, parent_solution: Substitution):
        super().__init__(rules, parent_solution)
        self.goal = goal
        self.child: Optional[SolutionNode] = None

    def next_solution(self) -> Optional[Substitution]:
        # Resume the deepest open branch before trying new clauses.
        if self.child is not None:
            solution = self.child.next_solution()
            if solution is not None:
                return solution

        self.child = None
        while self.has_next_rule():
            rule = self.next_rule()
            if rule.consequent is None:
                continue  # goal clauses have no head to resolve against

            solution = self.goal.unify(rule.consequent, self.parent_solution)
            if solution is None:
                continue

            if rule.is_fact():
                return solution

            self.child = get_solver(rule.antecedent, self.rules, solution)
            child_solution = self.child.next_solution()
            if child_solution is not None:
                return child_solution
            # head matched but the body has no solution: next clause

        return None

    def reset(self, new_parent_solution: Substitution):
        super().reset(new_parent_solution)
        self.child = None


class AndSolutionNode(SolutionNode):
    """Solves a conjunction as head & (tail), backtracking into the head."""

    def __init__(self, goal: AndOperator, rules: RuleSet, parent_solution: Substitution):
        super().__init__(rules, parent_solution)
        self.goal = goal
        self.head_node = get_solver(goal.head(), rules, parent_solution)
        self.operator_tail = goal.tail()
        self.tail_node: Optional[SolutionNode] = None

    def next_solution(self) -> Optional[Substitution]:
        # More combinations for the current head solution?
        if self.tail_node is not None:
            solution = self.tail_node.next_solution()
            if solution is not None:
                return solution

        while True:
            solution = self.head_node.next_solution()
            if solution is None:
                self.tail_node = None
                return None

            if self.operator_tail is None:
                return solution

            self.tail_node = get_solver(self.operator_tail, self.rules, solution)
            tail_solution = self.tail_node.next_solution()
            if tail_solution is not None:
                return tail_solution
            # the tail failed under this head choice: backtrack into the head

    def reset(self, new_parent_solution: Substitution):
        super().reset(new_parent_solution)
        self.head_node = get_solver(self.goal.head(), self.rules, new_parent_solution)
        self.tail_node = None


def get_solver(goal: Formula, rules: RuleSet, parent_solution: Substitution) -> SolutionNode:
    """
    Build the search node for goal.

    Predicate -> PredicateSolutionNode
    AndOperator -> AndSolutionNode
    Anything else (disjunction, negation, ...) raises UnsupportedGoalError:
    returning no solutions would be indistinguishable from a failed proof.
    """
    if goal is None:
        raise ValueError("Cannot solve a None goal")
    if rules is None:
        raise ValueError("Cannot solve without a RuleSet")
    if not isinstance(rules, RuleSet):
        raise TypeError(f"rules must be a RuleSet, got {rules!r}")
    if not isinstance(parent_solution, Substitution):
        raise TypeError(f"parent_solution must be a Substitution, got {parent_solution!r}")

    if isinstance(goal, Predicate):
        return PredicateSolutionNode(goal, rules, parent_solution)
    if isinstance(goal, AndOperator):
        return AndSolutionNode(goal, rules, parent_solution)

    raise UnsupportedGoalError(f"Goal {goal} is of unrecognized type for the solver")
