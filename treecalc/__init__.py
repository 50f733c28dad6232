"""Arithmetic expression solver: tokenizer, tree builder and evaluator."""
from .solver import parse, evaluate, solve
from .middle_end.tree import Leaf, Internal, Node
from .middle_end.tree_builder import TreeBuildError

__all__ = [
    'parse', 'evaluate', 'solve',
    'Leaf', 'Internal', 'Node', 'TreeBuildError'
]
