from __future__ import annotations
import logging

from treecalc.frontend.tokenizer import tokenize
from treecalc.middle_end.tree import Node
from treecalc.middle_end.tree_builder import build
from treecalc.backend import evaluator

logger = logging.getLogger(__name__)

def parse(src: str) -> Node|None:
    """
    Turns an expression into a tree ready for evaluation, or None if the
    expression is malformed. Raises TreeBuildError on internal inconsistency.
    """
    tokens = tokenize(src)
    if tokens is None:
        return None
    numbers, operators = tokens
    return build(numbers, operators)

def evaluate(tree: Node) -> float:
    return evaluator.evaluate(tree)

def solve(src: str) -> float|None:
    tree = parse(src)
    if tree is None:
        return None
    result = evaluate(tree)
    logger.debug("%r = %r", src, result)
    return result
