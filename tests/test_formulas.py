"""
Tests for predicates and connectives.

    - Predicates are true by construction; connectives combine operand values
    - AndOperator splits into head and tail for the solver
    - Renaming is consistent across every operand of a formula
"""

import pytest

from hornlog.core.substitution import Substitution
from hornlog.core.terms import Variable, Function, constant
from hornlog.formulas import (
    Formula, Predicate, AndOperator, OrOperator, NotOperator,
    ImpliesOperator, TruthValue, TRUE, FALSE,
)


def variables_in(formula):
    found = set()

    def walk(term):
        if isinstance(term, Variable):
            found.add(term)
        elif isinstance(term, Function):
            for arg in term.args:
                walk(arg)

    for pred in formula.predicates():
        for arg in pred.args:
            walk(arg)
    return found


class TestPredicate:
    def test_true_by_construction(self):
        assert Predicate("human", constant("socrates")).value is True

    def test_arity_and_propositional(self):
        assert Predicate("rain").is_propositional()
        assert Predicate("rain").arity == 0
        assert Predicate("knows", constant("a"), constant("b")).arity == 2

    def test_literal_and_atomic(self):
        p = Predicate("p")
        assert p.is_literal() and p.is_atomic()
        assert isinstance(p, Formula)

    def test_str(self):
        x = Variable("X")
        assert str(Predicate("parent", constant("bill"), x)) == "parent(bill, X)"
        assert str(Predicate("rain")) == "rain"

    def test_equality(self):
        x = Variable("X")
        assert Predicate("p", x) == Predicate("p", x)
        assert Predicate("p", x) != Predicate("q", x)
        assert Predicate("p", constant("a")) != Function("p", constant("a"))

    def test_non_term_argument_rejected(self):
        with pytest.raises(TypeError):
            Predicate("p", Predicate("q"))

    def test_none_argument_rejected(self):
        with pytest.raises(ValueError):
            Predicate("p", None)

    def test_standardize_apart(self):
        x = Variable("X")
        renamed = Predicate("p", x, Function("f", x)).standardize_apart()
        fresh = renamed.args[0]
        assert fresh is not x
        assert renamed.args[1] == Function("f", fresh)


class TestConnectives:
    def setup_method(self):
        self.p = Predicate("p")
        self.q = Predicate("q")

    def test_and_value(self):
        assert AndOperator(self.p, self.q).value is True
        assert AndOperator(self.p, NotOperator(self.q)).value is False

    def test_or_value(self):
        assert OrOperator(NotOperator(self.p), self.q).value is True
        assert OrOperator(NotOperator(self.p), NotOperator(self.q)).value is False

    def test_not_value(self):
        assert NotOperator(self.p).value is False
        assert NotOperator(NotOperator(self.p)).value is True

    def test_not_is_literal_only_over_atoms(self):
        assert NotOperator(self.p).is_literal()
        assert not NotOperator(AndOperator(self.p, self.q)).is_literal()
        assert not AndOperator(self.p).is_literal()
        assert not OrOperator(self.p).is_atomic()

    def test_operands_required(self):
        with pytest.raises(ValueError):
            AndOperator()
        with pytest.raises(ValueError):
            OrOperator()

    def test_not_takes_one_operand(self):
        with pytest.raises(TypeError):
            NotOperator(self.p, self.q)

    def test_non_formula_operand_rejected(self):
        with pytest.raises(TypeError):
            AndOperator(self.p, constant("a"))

    def test_none_operand_rejected(self):
        with pytest.raises(ValueError):
            AndOperator(self.p, None)

    def test_str(self):
        assert str(AndOperator(self.p, self.q)) == "(p & q)"
        assert str(OrOperator(self.p, self.q)) == "(p | q)"
        assert str(NotOperator(self.p)) == "~p"
        assert str(AndOperator(self.p)) == "and(p)"

    def test_connective_symbols_are_interned(self):
        assert AndOperator(self.p).symbol is AndOperator(self.q).symbol


class TestImpliesOperator:
    def setup_method(self):
        self.p = Predicate("p")
        self.not_p = NotOperator(Predicate("p"))

    def test_value_table(self):
        assert ImpliesOperator(self.p, self.p).value is True
        assert ImpliesOperator(self.p, self.not_p).value is False
        assert ImpliesOperator(self.not_p, self.p).value is True
        assert ImpliesOperator(self.not_p, self.not_p).value is True

    def test_sides(self):
        q = Predicate("q")
        implication = ImpliesOperator(self.p, q)
        assert implication.antecedent is self.p
        assert implication.consequent is q
        assert str(implication) == "(p -> q)"
        assert not implication.is_literal()

    def test_takes_exactly_two_operands(self):
        with pytest.raises(TypeError):
            ImpliesOperator(self.p)
        with pytest.raises(ValueError):
            ImpliesOperator(self.p, None)

    def test_replace_variables(self):
        x = Variable("X")
        implication = ImpliesOperator(Predicate("human", x), Predicate("mortal", x))
        theta = Substitution({x: constant("socrates")})
        assert implication.replace_variables(theta) == ImpliesOperator(
            Predicate("human", constant("socrates")),
            Predicate("mortal", constant("socrates")),
        )


class TestTruthValues:
    def test_values(self):
        assert TRUE.value is True
        assert FALSE.value is False
        assert str(TRUE) == "true"
        assert str(FALSE) == "false"

    def test_atomic_and_literal(self):
        assert TRUE.is_atomic() and TRUE.is_literal()
        assert NotOperator(FALSE).is_literal()
        assert NotOperator(FALSE).value is True

    def test_unchanged_by_substitution_and_renaming(self):
        theta = Substitution({Variable("X"): constant("a")})
        assert TRUE.replace_variables(theta) is TRUE
        assert FALSE.standardize_apart() is FALSE
        assert TRUE.predicates() == []

    def test_combine_with_connectives(self):
        assert AndOperator(TRUE, Predicate("p")).value is True
        assert OrOperator(FALSE, FALSE).value is False
        assert ImpliesOperator(FALSE, FALSE).value is True

    def test_constants_are_formulas(self):
        assert isinstance(TRUE, TruthValue)
        assert isinstance(FALSE, Formula)


class TestAndOperator:
    def test_head_and_tail(self):
        p, q, r = Predicate("p"), Predicate("q"), Predicate("r")
        conj = AndOperator(p, q, r)
        assert conj.head() is p
        assert conj.tail() == AndOperator(q, r)
        assert conj.tail().tail() == AndOperator(r)

    def test_single_operand_has_no_tail(self):
        assert AndOperator(Predicate("p")).tail() is None

    def test_len(self):
        assert len(AndOperator(Predicate("p"), Predicate("q"))) == 2

    def test_replace_variables(self):
        x = Variable("X")
        conj = AndOperator(Predicate("human", x), Predicate("mortal", x))
        theta = Substitution({x: constant("socrates")})
        assert conj.replace_variables(theta) == AndOperator(
            Predicate("human", constant("socrates")),
            Predicate("mortal", constant("socrates")),
        )

    def test_standardize_apart_consistent_across_operands(self):
        x, y = Variable("X"), Variable("Y")
        conj = AndOperator(Predicate("parent", x, y), Predicate("ancestor", y, x))
        renamed = conj.standardize_apart()
        first, second = renamed.operands
        assert first.args[0] is second.args[1]
        assert first.args[1] is second.args[0]
        assert variables_in(renamed).isdisjoint({x, y})

    def test_predicates_left_to_right(self):
        p, q, r = Predicate("p"), Predicate("q"), Predicate("r")
        assert AndOperator(p, OrOperator(q, NotOperator(r))).predicates() == [p, q, r]
