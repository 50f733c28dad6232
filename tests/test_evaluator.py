import math
import unittest
from treecalc.frontend.operators import Operator
from treecalc.middle_end.tree import Leaf, Internal
from treecalc.backend.evaluator import *

def node(symbol, lhs, rhs, index=0):
    return Internal(Operator(symbol, 0, index), Leaf(lhs), Leaf(rhs))

class TestComputePower(unittest.TestCase):
    def test_small_exponents(self):
        self.assertEqual(compute_power(2.0, 0), 1.0)
        self.assertEqual(compute_power(2.0, 1), 2.0)
        self.assertEqual(compute_power(2.0, 10), 1024.0)
        self.assertEqual(compute_power(-3.0, 3), -27.0)

    def test_overflow_saturates(self):
        self.assertEqual(compute_power(10.0, 400), math.inf)

class TestPower(unittest.TestCase):
    def test_negative_exponent(self):
        self.assertEqual(power(2.0, -2.0), 0.25)
        self.assertEqual(power(-2.0, -3.0), -0.125)

    def test_exponent_truncated(self):
        self.assertEqual(power(2.0, 2.9), 4.0)
        self.assertEqual(power(2.0, -1.5), 0.5)
        self.assertEqual(power(9.0, 0.5), 1.0)
        self.assertEqual(power(9.0, -0.5), 1.0)

    def test_zero_base(self):
        self.assertEqual(power(0.0, 0.0), 1.0)
        self.assertEqual(power(0.0, -1.0), math.inf)

    def test_non_finite_exponent(self):
        self.assertTrue(math.isnan(power(2.0, math.inf)))
        self.assertTrue(math.isnan(power(2.0, math.nan)))

    def test_non_finite_exponent_logged(self):
        with self.assertLogs('treecalc.backend.evaluator', level='DEBUG') as logs:
            power(2.0, -math.inf)
        self.assertIn('no integer part', logs.output[0])

class TestDivide(unittest.TestCase):
    def test_regular(self):
        self.assertEqual(divide(1.0, 4.0), 0.25)

    def test_by_zero(self):
        self.assertEqual(divide(5.0, 0.0), math.inf)
        self.assertEqual(divide(-5.0, 0.0), -math.inf)
        self.assertEqual(divide(5.0, -0.0), -math.inf)
        self.assertTrue(math.isnan(divide(0.0, 0.0)))

class TestEvaluate(unittest.TestCase):
    def test_leaf(self):
        self.assertEqual(evaluate(Leaf(3.5)), 3.5)

    def test_operators(self):
        self.assertEqual(evaluate(node('+', 2.0, 3.0)), 5.0)
        self.assertEqual(evaluate(node('-', 2.0, 3.0)), -1.0)
        self.assertEqual(evaluate(node('*', 2.0, 3.0)), 6.0)
        self.assertEqual(evaluate(node('/', 3.0, 2.0)), 1.5)
        self.assertEqual(evaluate(node(':', 3.0, 2.0)), 1.5)
        self.assertEqual(evaluate(node('^', 3.0, 2.0)), 9.0)

    def test_nested(self):
        tree = Internal(Operator('-', 0, 1), node('-', 8.0, 3.0), Leaf(2.0))
        self.assertEqual(evaluate(tree), 3.0)

    def test_tree_unchanged(self):
        tree = node('*', 2.0, 4.0)
        evaluate(tree)
        self.assertEqual(tree.left, Leaf(2.0))
        self.assertEqual(tree.right, Leaf(4.0))

if __name__ == '__main__':
    unittest.main()
