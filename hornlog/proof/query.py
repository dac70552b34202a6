"""
Query driver: pose a goal against a RuleSet and collect answers.

The search tree in tree.py hands out one solution per next_solution()
call. These helpers drive a root node the way the Otter loop drives its
set of support -- step by step, with a safety valve for search spaces that
never run dry, and optional progress printing.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..core.substitution import Substitution
from ..formulas import Formula
from .clauses import RuleSet
from .tree import get_solver


def solutions(goal: Formula, rules: RuleSet, substitution: Optional[Substitution] = None):
    """
    Yield every solution substitution for goal, lazily.

    Each item is produced by exactly one next_solution() call on the root
    node, so stopping early and resuming later never skips or repeats a
    solution.
    """
    if substitution is None:
        substitution = Substitution()
    root = get_solver(goal, rules, substitution)
    while True:
        solution = root.next_solution()
        if solution is None:
            return
        yield solution


@dataclass
class QueryResult:
    """What a query found, and why it stopped."""
    goal: Formula
    solutions: list = field(default_factory=list)
    exhausted: bool = False
    halt_reason: str = ""

    @property
    def answers(self) -> list:
        """The goal with each solution applied."""
        return [self.goal.replace_variables(s) for s in self.solutions]

    def bindings(self, variables) -> list:
        """
        One {variable: resolved value} dict per solution.

        Keyed by the Variable itself: two variables that share a display
        name are still different variables.
        """
        return [s.restrict(variables) for s in self.solutions]

    def __len__(self):
        return len(self.solutions)


def run_query(
    goal: Formula,
    rules: RuleSet,
    substitution: Optional[Substitution] = None,
    max_solutions: int = 50,
    verbose: bool = True,
) -> QueryResult:
    """
    Collect solutions for goal until the search is exhausted or max_solutions is reached.

    Args:
        goal:           a Predicate or AndOperator
        rules:          the rule base to resolve against
        substitution:   bindings already in effect (default: none)
        max_solutions:  safety valve for infinite search spaces
        verbose:        print each answer as it is found

    The search is not resumed after the last collected solution: if exactly
    max_solutions answers exist, the result still reports
    halt_reason "max_solutions reached" and exhausted=False. Asking for
    one more could run forever in an infinite search space.
    """
    if max_solutions < 1:
        raise ValueError(f"max_solutions must be at least 1, got {max_solutions}")
    if substitution is None:
        substitution = Substitution()

    result = QueryResult(goal=goal)
    root = get_solver(goal, rules, substitution)

    if verbose:
        print(f"\n--- Query: {goal} ({len(rules)} rules) ---")

    while True:
        solution = root.next_solution()
        if solution is None:
            result.exhausted = True
            result.halt_reason = "search space exhausted"
            if verbose:
                print(f"  [exhausted] {len(result.solutions)} solution(s)")
            break

        result.solutions.append(solution)
        if verbose:
            print(f"  [solution {len(result.solutions)}] {goal.replace_variables(solution)}")

        if len(result.solutions) >= max_solutions:
            result.halt_reason = "max_solutions reached"
            if verbose:
                print(f"  [safety valve] max_solutions={max_solutions} reached")
            break

    return result
