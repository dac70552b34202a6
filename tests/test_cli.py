"""
Tests for the command line entry point and the reporting helpers.
"""

import pytest

from hornlog.__main__ import main
from hornlog.domains.family import make_family_rules
from hornlog.visualization import dependency_edges, export_dot, print_rules


class TestMain:
    def test_family_domain(self, capsys):
        main(["--domain", "family", "--quiet"])
        out = capsys.readouterr().out
        assert "Domain: family" in out
        assert "ancestor(charles, audrey)" in out
        assert "search space exhausted" in out

    def test_limit(self, capsys):
        main(["--domain", "family", "--quiet", "--limit", "2"])
        out = capsys.readouterr().out
        assert "ancestor(charles, maria)" in out
        assert "ancestor(charles, audrey)" not in out
        assert "max_solutions reached" in out

    def test_verbose_prints_rules(self, capsys):
        main(["--domain", "peano"])
        out = capsys.readouterr().out
        assert "Rules (4):" in out
        assert "[solution 1]" in out

    def test_invalid_limit(self):
        with pytest.raises(SystemExit):
            main(["--limit", "0"])

    def test_unknown_domain(self):
        with pytest.raises(SystemExit):
            main(["--domain", "nope"])

    def test_dot_export(self, tmp_path, capsys):
        path = tmp_path / "rules.dot"
        main(["--domain", "family", "--quiet", "--dot", str(path)])
        text = path.read_text()
        assert text.startswith("digraph rules {")
        assert '"parent" -> "ancestor";' in text
        assert '"ancestor" -> "ancestor";' in text


class TestVisualization:
    def test_dependency_edges(self):
        assert dependency_edges(make_family_rules()) == [
            ("ancestor", "parent"),
            ("ancestor", "ancestor"),
        ]

    def test_facts_drawn_gray(self, tmp_path, capsys):
        path = tmp_path / "family.dot"
        export_dot(make_family_rules(), str(path))
        text = path.read_text()
        assert '"parent" [fillcolor=lightgray, style=filled];' in text
        assert '"ancestor" [fillcolor=lightblue, style=filled];' in text
        assert "Graph exported to" in capsys.readouterr().out

    def test_print_rules_numbers_clauses(self, capsys):
        print_rules(make_family_rules())
        out = capsys.readouterr().out
        assert "  0. parent(bill, audrey)." in out
        assert "Rules (6):" in out
