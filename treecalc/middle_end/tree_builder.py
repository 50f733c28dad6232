from __future__ import annotations
from typing import List
import logging

from treecalc.frontend.operators import Operator
from treecalc.middle_end.tree import Leaf, Internal, Node, format_tree

logger = logging.getLogger(__name__)

class TreeBuildError(Exception):
    """The numbers and operators handed to the builder do not form an expression."""

def place_operators(operators: List[Operator]) -> Internal:
    """
    Inserts the operators loosest-first into a binary tree keyed on their
    source position, so that the root is the operator applied last and an
    in-order walk gives back the source order.
    """
    ordered = sorted(operators, key=Operator.sort_key)
    logger.debug("Placement order: %s", ordered)
    root = Internal(ordered[0])

    for op in ordered[1:]:
        node = root
        while True:
            if op.index < node.operator.index:
                if node.left is None:
                    node.left = Internal(op)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = Internal(op)
                    break
                node = node.right
    return root

def fill_leaves(node: Internal, numbers: List[float]):
    """Fills empty slots right to left, consuming numbers from the back."""
    for side in ('right', 'left'):
        child = getattr(node, side)
        if child is None:
            if not numbers:
                raise TreeBuildError('ran out of numbers while filling the tree')
            setattr(node, side, Leaf(numbers.pop()))
        else:
            fill_leaves(child, numbers)

def build(numbers: List[float], operators: List[Operator]) -> Node:
    if not operators:
        if len(numbers) != 1:
            raise TreeBuildError(f'expected a single number, got {len(numbers)}')
        return Leaf(numbers[0])

    root = place_operators(operators)
    remaining = list(numbers)
    fill_leaves(root, remaining)
    if remaining:
        raise TreeBuildError(f'{len(remaining)} number(s) left over after filling the tree')

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Built tree:\n%s", format_tree(root))
    return root
