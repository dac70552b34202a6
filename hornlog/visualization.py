"""
Visualization and reporting utilities.
"""

from .proof.clauses import RuleSet
from .proof.query import QueryResult


def print_rules(rules: RuleSet):
    """Print every clause in the rule base, numbered in search order."""
    print(f"\n{'='*60}")
    print(f"Rules ({len(rules)}):")
    for i, rule in enumerate(rules):
        print(f"  {i}. {rule}")
    print(f"{'='*60}")


def print_result(result: QueryResult):
    """Print the answers a query found and why it stopped."""
    print(f"\n{'='*60}")
    print(f"Query: {result.goal}")
    print(f"{'='*60}")
    if not result.solutions:
        print("  No solutions.")
    for i, (answer, solution) in enumerate(zip(result.answers, result.solutions)):
        print(f"  {i+1}. {answer}    {solution}")
    print(f"  Stopped: {result.halt_reason}")


def dependency_edges(rules: RuleSet) -> list:
    """(head predicate, body predicate) name pairs, one per body literal, deduplicated."""
    edges = []
    for rule in rules:
        if rule.consequent is None or rule.antecedent is None:
            continue
        for body in rule.antecedent.predicates():
            edge = (rule.consequent.name, body.name)
            if edge not in edges:
                edges.append(edge)
    return edges


def export_dot(rules: RuleSet, path="hornlog_rules.dot"):
    """Export the predicate dependency graph as a DOT file for Graphviz visualization."""
    facts = {rule.consequent.name for rule in rules if rule.is_fact()}
    with open(path, "w") as f:
        f.write("digraph rules {\n")
        f.write("  rankdir=BT;\n")
        f.write("  node [shape=box, style=rounded];\n")

        names = []
        for rule in rules:
            for pred in ([rule.consequent] if rule.consequent is not None else []) + \
                    (rule.antecedent.predicates() if rule.antecedent is not None else []):
                if pred.name not in names:
                    names.append(pred.name)
        for name in names:
            label = name.replace('"', '\\"')
            color = "lightgray" if name in facts else "lightblue"
            f.write(f'  "{label}" [fillcolor={color}, style=filled];\n')

        for head, body in dependency_edges(rules):
            head_label = head.replace('"', '\\"')
            body_label = body.replace('"', '\\"')
            f.write(f'  "{body_label}" -> "{head_label}";\n')
        f.write("}\n")
    print(f"Graph exported to {path}")
