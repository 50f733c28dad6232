from __future__ import annotations
import logging
import math

from treecalc.frontend.operators import OpKind
from treecalc.middle_end.tree import Leaf, Node

logger = logging.getLogger(__name__)

def divide(lhs: float, rhs: float) -> float:
    """IEEE division: dividing by zero gives a signed infinity or NaN."""
    if rhs != 0:
        return lhs / rhs
    if lhs == 0 or math.isnan(lhs):
        return math.nan
    return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)

def compute_power(base: float, exp: int) -> float:
    """Square-and-multiply, exp >= 0."""
    result = 1.0
    while True:
        if exp % 2 == 1:
            result *= base
        exp //= 2
        if exp == 0:
            break
        base *= base
    return result

def power(lhs: float, rhs: float) -> float:
    # Only the integer part of the exponent counts: 2^2.9 == 4
    if not math.isfinite(rhs):
        logger.debug("Exponent %r has no integer part, result is nan", rhs)
        return math.nan
    if rhs >= 0:
        return compute_power(lhs, int(rhs))
    return compute_power(divide(1.0, lhs), -int(rhs))

op_map = {
    OpKind.ADD: lambda x, y: x + y,
    OpKind.SUB: lambda x, y: x - y,
    OpKind.MUL: lambda x, y: x * y,
    OpKind.DIV: divide,
    OpKind.POW: power,
}

def evaluate(tree: Node) -> float:
    if isinstance(tree, Leaf):
        return tree.value
    lhs = evaluate(tree.left)
    rhs = evaluate(tree.right)
    return op_map[tree.operator.kind](lhs, rhs)
