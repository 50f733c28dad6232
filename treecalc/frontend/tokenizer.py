from __future__ import annotations
from enum import Enum, auto
from typing import List, Tuple
import logging

from treecalc.frontend.operators import Operator, operator_symbols

logger = logging.getLogger(__name__)

class CharClass(Enum):
    START = auto()
    OPEN = auto()
    CLOSE = auto()
    DIGIT = auto()
    POINT = auto()
    OPERATOR = auto()

bracket_pairs = {'(': ')', '[': ']', '{': '}'}
closing_brackets = set(bracket_pairs.values())
decimal_separators = {'.', ','}

# Classes that may not directly precede a given kind of character
forbidden_before_open = {CharClass.CLOSE, CharClass.DIGIT, CharClass.POINT}
forbidden_before_close = {CharClass.OPEN, CharClass.POINT, CharClass.OPERATOR}
forbidden_before_operator = {CharClass.OPEN, CharClass.POINT, CharClass.OPERATOR}
unary_minus_after = {CharClass.START, CharClass.OPEN}

Tokens = Tuple[List[float], List[Operator]]

class ScanState:
    """Everything the scanner knows after accepting a prefix of the input."""

    def __init__(self) -> None:
        self.last = CharClass.START
        self.brackets: List[str] = []
        self.number_active = False
        self.fractional = False
        self.value = 0.0
        self.scale = 1.0
        self.sign = 1
        self.numbers: List[float] = []
        self.operators: List[Operator] = []

    def finish_number(self) -> None:
        self.numbers.append(self.value * self.sign)
        self.value = 0.0
        self.sign = 1
        self.number_active = False
        self.fractional = False

    def after_exponent(self) -> bool:
        return self.last == CharClass.OPERATOR and self.operators[-1].symbol == '^'

    def is_unary_minus(self, c: str) -> bool:
        return c == '-' and (self.last in unary_minus_after or self.after_exponent())

def scan_char(state: ScanState, c: str) -> str|None:
    """Feeds one character to the scanner. Returns why it is illegal, or None."""
    if c in bracket_pairs:
        if state.number_active or state.last in forbidden_before_open:
            return 'opening bracket after a number'
        state.brackets.append(c)
        state.last = CharClass.OPEN
    elif c in closing_brackets:
        if not state.brackets:
            return 'unmatched closing bracket'
        if bracket_pairs[state.brackets[-1]] != c:
            return f'{c} closes {state.brackets[-1]}'
        if state.last in forbidden_before_close:
            return 'empty group or dangling operator before closing bracket'
        state.brackets.pop()
        state.last = CharClass.CLOSE
    elif '0' <= c <= '9':
        if state.last == CharClass.CLOSE:
            return 'digit after closing bracket'
        digit = int(c)
        if not state.number_active:
            state.number_active = True
            state.value = float(digit)
        elif not state.fractional:
            state.value = state.value * 10 + digit
        else:
            state.scale *= 0.1
            state.value += digit * state.scale
        state.last = CharClass.DIGIT
    elif c in decimal_separators:
        if state.fractional or not state.number_active or state.last != CharClass.DIGIT:
            return 'misplaced decimal separator'
        state.fractional = True
        state.scale = 1.0
        state.last = CharClass.POINT
    elif state.is_unary_minus(c):
        if state.sign != 1:
            return 'repeated sign'
        state.sign = -1
        state.last = CharClass.DIGIT # Only a digit may follow
    elif c in operator_symbols:
        if not state.number_active or state.last in forbidden_before_operator:
            return 'operator without a left operand'
        state.finish_number()
        state.operators.append(Operator(c, len(state.brackets), len(state.operators)))
        state.last = CharClass.OPERATOR
    elif c.isspace():
        pass
    else:
        return 'unknown character'
    return None

def tokenize(src: str) -> Tokens|None:
    """
    Splits an expression into its numbers and its operators, in source order.
    Returns None if the expression is malformed.
    """
    state = ScanState()
    for column, c in enumerate(src):
        reason = scan_char(state, c)
        if reason:
            logger.debug("Rejected %r at column %d (%r): %s", src, column, c, reason)
            return None

    if state.brackets:
        logger.debug("Rejected %r: unclosed %s", src, ''.join(state.brackets))
        return None
    if not state.number_active:
        logger.debug("Rejected %r: expression does not end with a number", src)
        return None
    state.finish_number()

    logger.debug("Tokenized %r: numbers=%s operators=%s", src, state.numbers, state.operators)
    return state.numbers, state.operators
