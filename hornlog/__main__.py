"""
CLI entry point. Run as: python -m hornlog --domain <name>
"""

import argparse

from .domains import DOMAINS
from .proof.query import run_query
from .visualization import print_rules, print_result, export_dot


def main(argv=None):
    parser = argparse.ArgumentParser(description="Horn clause resolution")
    parser.add_argument(
        "--domain",
        choices=list(DOMAINS.keys()),
        default="family",
        help="Which sample rule base to query",
    )
    parser.add_argument("--limit", type=int, default=50,  help="Max solutions")
    parser.add_argument("--dot",   type=str, default=None, help="Export rule dependency graph to file")
    parser.add_argument("--quiet", action="store_true",    help="Less output")
    args = parser.parse_args(argv)

    if args.limit < 1:
        parser.error("--limit must be at least 1")

    domain = DOMAINS[args.domain]
    rules = domain["make_rules"]()
    goal = domain["make_goal"]()

    print(f"Domain: {args.domain} -- {domain['description']}")
    if not args.quiet:
        print_rules(rules)

    try:
        result = run_query(goal, rules, max_solutions=args.limit, verbose=not args.quiet)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return

    print_result(result)

    if args.dot:
        export_dot(rules, args.dot)


if __name__ == "__main__":
    main()
