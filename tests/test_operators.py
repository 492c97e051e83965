import unittest
from conscalc.operators import *

class TestOperationOf(unittest.TestCase):
    def test_known_characters(self):
        self.assertEqual(operation_of('+'), Operation.ADD)
        self.assertEqual(operation_of('-'), Operation.SUBTRACT)
        self.assertEqual(operation_of('*'), Operation.MULTIPLY)
        self.assertEqual(operation_of('/'), Operation.DIVIDE)
        self.assertEqual(operation_of('^'), Operation.POWER)

    def test_other_characters(self):
        for character in ['1', '.', '(', ')', 'e', 'x', ' ', '', '**', '%']:
            self.assertEqual(operation_of(character), Operation.NONE)

class TestPrecedenceOf(unittest.TestCase):
    def test_groups(self):
        self.assertEqual(precedence_of(Operation.ADD), 1)
        self.assertEqual(precedence_of(Operation.SUBTRACT), 1)
        self.assertEqual(precedence_of(Operation.MULTIPLY), 2)
        self.assertEqual(precedence_of(Operation.DIVIDE), 2)
        self.assertEqual(precedence_of(Operation.POWER), 3)

    def test_none(self):
        self.assertEqual(precedence_of(Operation.NONE), 0)

    def test_range(self):
        for operation in Operation:
            if operation == Operation.NONE:
                continue
            self.assertTrue(MIN_PRECEDENCE <= precedence_of(operation) <= MAX_PRECEDENCE)

class TestSymbolOf(unittest.TestCase):
    def test_inverse_of_operation_of(self):
        for character in '+-*/^':
            self.assertEqual(symbol_of(operation_of(character)), character)

if __name__ == '__main__':
    unittest.main()
