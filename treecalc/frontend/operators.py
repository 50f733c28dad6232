from __future__ import annotations
from enum import Enum, auto

class OpKind(Enum):
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    POW = auto()

# Maps an operator symbol to the operation it performs
kind_map = {
    '+': OpKind.ADD,
    '-': OpKind.SUB,
    '*': OpKind.MUL,
    '/': OpKind.DIV,
    ':': OpKind.DIV,
    '^': OpKind.POW,
}

# Precedence inside one bracket level. '/' and ':' divide alike but bind
# differently, e.g. 8:2/2 is 8:(2/2) while 8/2:2 is (8/2):2.
base_precedence = {
    '+': 0,
    '-': 0,
    '*': 1,
    ':': 1,
    '/': 2,
    '^': 3,
}

PRECEDENCE_LEVELS = 4

operator_symbols = set(kind_map)

class Operator:
    def __init__(self, symbol: str, depth: int, index: int) -> None:
        self.symbol = symbol
        self.kind = kind_map[symbol]
        self.priority = depth * PRECEDENCE_LEVELS + base_precedence[symbol]
        self.index = index

    def sort_key(self) -> tuple:
        # Loosest operators first; among equals the rightmost goes first so
        # that it ends up closest to the root (left associativity).
        return (self.priority, -self.index)

    def __repr__(self) -> str:
        return f'Operator({self.symbol!r}, priority={self.priority}, index={self.index})'

    def __str__(self) -> str:
        return self.symbol
