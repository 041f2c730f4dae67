'''
Operators a calculator holds pending until the next "=".

Binary operators combine the stored operand with the displayed one, unary
operators only look at the displayed one. NONE does nothing at all.

Operator functions signal their guarded failures (division by zero, square
root of a negative, logarithm of a non-positive) by raising ArithmeticError
or ValueError. It is up to the machine to decide what to show.
'''

import math
import operator


class Operator:
    '''
    Something that can be pending on a calculator.
    '''
    arity = None

    def __init__(self, name, function=None):
        self.name = name
        self.function = function

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self.name)

    def apply(self, left, right):
        '''
        Apply to the stored (left) and displayed (right) operands.

        Return None if there is nothing to apply.
        '''
        raise NotImplementedError


class BinaryOperator(Operator):
    arity = 2

    def apply(self, left, right):
        return self.function(left, right)


class UnaryOperator(Operator):
    arity = 1

    def apply(self, left, right):
        # The stored operand plays no part.
        return self.function(right)


class NullOperator(Operator):
    arity = 0

    def apply(self, left, right):
        return None


def truncdiv(left, right):
    '''
    Integer division rounding toward zero, unlike //.
    '''
    if right == 0:
        raise ZeroDivisionError('integer division by zero')
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


def square(n):
    return n * n


def log10(n):
    '''
    Base-10 logarithm, a float even for exact powers of ten.
    '''
    if n <= 0:
        raise ValueError('math domain error')
    return math.log10(n)


ADD = BinaryOperator('add', operator.__add__)
SUBTRACT = BinaryOperator('subtract', operator.__sub__)
MULTIPLY = BinaryOperator('multiply', operator.__mul__)
DIVIDE = BinaryOperator('divide', truncdiv)

SQUARE = UnaryOperator('square', square)
# isqrt raises ValueError on negatives
SQUARE_ROOT = UnaryOperator('square root', math.isqrt)
LOG = UnaryOperator('log', log10)

NONE = NullOperator('none')

OPERATORS = {
    op.name: op
    for op
    in (ADD, SUBTRACT, MULTIPLY, DIVIDE, SQUARE, SQUARE_ROOT, LOG, NONE)
}
