from __future__ import annotations
from dataclasses import dataclass
from typing import List, Union

from treecalc.frontend.operators import Operator

@dataclass
class Leaf:
    value: float

@dataclass
class Internal:
    operator: Operator
    left: Node|None = None # Empty only while the tree is being built
    right: Node|None = None

Node = Union[Leaf, Internal]

def format_tree(node: Node, level=0) -> str:
    """Renders a tree one node per line, children indented below their parent."""
    if isinstance(node, Leaf):
        return "\t" * level + repr(node.value) + "\n"
    ret = "\t" * level + node.operator.symbol + "\n"
    for child in (node.left, node.right):
        ret += format_tree(child, level + 1)
    return ret

def operators_in_order(node: Node) -> List[Operator]:
    if isinstance(node, Leaf):
        return []
    return operators_in_order(node.left) + [node.operator] + operators_in_order(node.right)
