#!/usr/bin/env python3

import argparse as arg
import logging
import sys

from treecalc.solver import parse, evaluate
from treecalc.middle_end.tree import format_tree

logger = logging.getLogger(__name__)

PROMPT = "Please write me the expression you want to solve:"
PARSE_FAILURE = "The input line has some problems. Failed to read the input expression"
COMPUTE_FAILURE = "The computation failed with the following error:"

def format_result(value: float) -> str:
    ret = repr(value)
    if value.is_integer() and abs(value) < 1e15 and ret.endswith('.0'):
        return ret[:-2] # 14.0 -> 14, -0.0 -> -0
    return ret

def report_failure(err: Exception):
    logger.debug("Computation failed", exc_info=err)
    print(f"{COMPUTE_FAILURE}\n{err}", file=sys.stderr)

def run(src: str, show_tree=False) -> int:
    """Solves one expression and prints the outcome. Returns the exit code."""
    try:
        tree = parse(src)
    except Exception as e: # TreeBuildError, or resources exhausted on huge inputs
        report_failure(e)
        return 1
    if tree is None:
        print(PARSE_FAILURE)
        return 1

    try:
        if show_tree:
            print(format_tree(tree), end='')
        result = evaluate(tree)
    except Exception as e:
        report_failure(e)
        return 0

    print(f"The result of the expression is : {format_result(result)}")
    return 0

def interactive(show_tree=False):
    try:
        import readline # Line editing where the platform has it
    except ImportError:
        pass
    try:
        while (src := input("expr: ")):
            run(src, show_tree)
    except EOFError:
        pass

def main(argv=None) -> int:
    parser = arg.ArgumentParser(
        prog='treecalc',
        description='Evaluates an arithmetic expression with + - * / : ^ and () [] {} brackets',
        epilog='Expressions starting with "-" must follow a "--" separator')

    parser.add_argument('expression', nargs='?', default=None)
    parser.add_argument('-i', '--interactive', dest='interactive', action='store_true', default=False)
    parser.add_argument('-t', '--tree', dest='tree', action='store_true', default=False)
    parser.add_argument('-v', '--verbose', dest='verbose', action='store_true', default=False)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.interactive:
        interactive(args.tree)
        return 0

    src = args.expression
    if src is None:
        print(PROMPT)
        try:
            src = input()
        except EOFError:
            src = ''
    return run(src, args.tree)

if __name__ == '__main__':
    sys.exit(main())
